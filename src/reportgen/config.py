"""Configuration loading for reportgen.

Configuration sources are merged in priority order (lowest to highest):
    1. Defaults (defined in ReportConfig)
    2. Project config (./reportgen.toml)
    3. Explicit config file
    4. Environment variables (REPORTGEN_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(report_types=["Json"], verbose=True)
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, ReportGenError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one report generation run.

    Attributes:
        target_dir: Directory the file-based renderers write into
        report_types: Renderer report types, in the order they are invoked
        assembly_filters: +/- wildcard patterns for assembly names
        class_filters: +/- wildcard patterns for class names
        add_historic_coverage: Append a historic coverage point to every class
        verbosity: Logging verbosity level
        log_file: Optional log file in addition to the console
    """

    target_dir: str = "coverage-report"
    report_types: List[str] = field(default_factory=lambda: ["Json", "TextSummary"])
    assembly_filters: List[str] = field(default_factory=lambda: ["+*"])
    class_filters: List[str] = field(default_factory=lambda: ["+*"])
    add_historic_coverage: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.target_dir:
            raise InvalidConfigError("target_dir", self.target_dir, "must not be empty")
        if not self.report_types:
            raise InvalidConfigError("report_types", self.report_types, "at least one report type is required")
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError("verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITIES)}")


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values are ignored

    Returns:
        Validated ReportConfig instance

    Raises:
        ReportGenError: If a config file is invalid or missing
    """
    merged: dict = {}

    project_config = Path.cwd() / "reportgen.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ReportGenError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ReportGenError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ReportGenError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    for key in ("report_types", "assembly_filters", "class_filters"):
        if isinstance(merged.get(key), str):
            merged[key] = _split_list(merged[key])

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        raise ReportGenError(f"Invalid configuration: {e}")


def _split_list(value: str) -> List[str]:
    return [part.strip() for part in value.replace(",", ";").split(";") if part.strip()]


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from REPORTGEN_* environment variables.

    List fields (report types, filters) accept ``;`` or ``,`` separated values.
    """
    type_hints = get_type_hints(ReportConfig)
    result: dict[str, Any] = {}

    for field_name in ReportConfig.__dataclass_fields__:
        env_key = f"REPORTGEN_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ReportGenError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if getattr(type_hint, "__origin__", None) is list:
        return _split_list(value)

    return value


def _load_toml_file(path: Path) -> dict:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)
    # Both a bare document and a [reportgen] table are accepted
    return data.get("reportgen", data)
