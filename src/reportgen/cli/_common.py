"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console

from ..config import ReportConfig, load_config
from ..filters import PatternFilter
from ..renderers import BaseRenderer, get_renderer

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    target_dir: Optional[Path] = None,
    report_types: Optional[str] = None,
    assembly_filters: Optional[str] = None,
    class_filters: Optional[str] = None,
    history: Optional[bool] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> ReportConfig:
    """Build the run configuration from CLI options."""
    return load_config(
        config_file=config,
        target_dir=str(target_dir) if target_dir is not None else None,
        report_types=report_types,
        assembly_filters=assembly_filters,
        class_filters=class_filters,
        add_historic_coverage=history,
        verbose=verbose,
        quiet=quiet,
    )


def build_renderers(config: ReportConfig) -> List[BaseRenderer]:
    return [get_renderer(name, config.target_dir) for name in config.report_types]


def build_filters(config: ReportConfig) -> Tuple[PatternFilter, PatternFilter]:
    return PatternFilter(config.assembly_filters), PatternFilter(config.class_filters)
