"""reportgen command line: the typer app and its subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="reportgen",
    help="reportgen - turn parsed coverage data into reports",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"reportgen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Generate coverage reports with pluggable renderers."""


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
