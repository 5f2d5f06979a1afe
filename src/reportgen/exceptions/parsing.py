"""Errors raised while loading a coverage model."""

from pathlib import Path

from .base import ReportGenError


class ParserError(ReportGenError):
    """Base class for coverage model loading errors."""
    pass


class ModelFormatError(ParserError):
    """Raised when a coverage model document is malformed."""

    def __init__(self, source: Path, reason: str):
        super().__init__(
            f"Malformed coverage model: {source}",
            details={"source": str(source), "reason": reason},
        )
        self.source = source
        self.reason = reason
