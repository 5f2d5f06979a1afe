"""Exception hierarchy for reportgen."""

from .base import ReportGenError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidFilterError,
    InvalidPathError,
    MissingCollaboratorError,
)
from .parsing import ModelFormatError, ParserError

__all__ = [
    "ReportGenError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidFilterError",
    "InvalidPathError",
    "MissingCollaboratorError",
    "ParserError",
    "ModelFormatError",
]
