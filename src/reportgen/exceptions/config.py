"""Configuration exceptions: paths, settings, missing collaborators."""

from pathlib import Path
from typing import Any

from .base import ReportGenError


class ConfigurationError(ReportGenError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class MissingCollaboratorError(ConfigurationError):
    """Raised when the pipeline is built without a required collaborator."""

    def __init__(self, name: str):
        super().__init__(f"Missing required collaborator: {name}", details={"name": name})
        self.name = name


class InvalidFilterError(ConfigurationError):
    """Raised when an inclusion filter pattern cannot be used."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            f"Invalid filter pattern: {pattern!r}",
            details={"pattern": pattern, "reason": reason},
        )
        self.pattern = pattern
        self.reason = reason
