"""
Logging setup for reportgen runs.

Handlers are installed on the ``reportgen`` logger only; the root logger and
other libraries' logging are left alone.  ``setup_logging`` may be called any
number of times: it replaces the handlers it installed before instead of
stacking new ones, and ``reset_logging`` hands control back to the host
application when a run is over.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "reportgen"

# Marks handlers owned by setup_logging so they can be swapped out later
_OWNED_ATTR = "_reportgen_owned"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def reset_logging() -> None:
    """Remove the handlers installed by ``setup_logging`` and restore propagation."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route reportgen logging to a rich console handler (and optionally a file).

    Args:
        verbose: Enable DEBUG level logging (per-class progress lines)
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to append logs to

    Returns:
        The configured ``reportgen`` logger, suitable for injecting into
        ``ReportPipeline``
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    reset_logging()
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _OWNED_ATTR, True)
        handler.setLevel(level)
        logger.addHandler(handler)

    logger.setLevel(level)
    # Our handlers already print everything; a root handler would print it twice
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger namespaced under ``reportgen``.

    Args:
        name: Module name (e.g., 'reportgen.pipeline'); None gives the package logger
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
