"""Report renderers for reportgen."""

from pathlib import Path
from typing import List, Union

from ..exceptions import InvalidConfigError
from .base import BaseRenderer
from .json_renderer import JsonRenderer
from .rich_renderer import RichSummaryRenderer
from .text_renderer import TextSummaryRenderer

_RENDERERS = {
    "json": JsonRenderer,
    "textsummary": TextSummaryRenderer,
    "console": RichSummaryRenderer,
}


def available_renderers() -> List[str]:
    return sorted(cls.report_type for cls in _RENDERERS.values())


def get_renderer(name: str, target_dir: Union[str, Path] = ".") -> BaseRenderer:
    """Get a renderer instance by report type.

    Args:
        name: One of "Json", "TextSummary", "Console" (case-insensitive)
        target_dir: Output directory for file-based renderers

    Returns:
        Renderer instance

    Raises:
        InvalidConfigError: If name is not recognized
    """
    cls = _RENDERERS.get(name.strip().lower())
    if cls is None:
        raise InvalidConfigError(
            "report_types", name, f"choose from: {', '.join(available_renderers())}"
        )
    if cls is RichSummaryRenderer:
        return cls()
    return cls(target_dir)


__all__ = [
    "BaseRenderer",
    "JsonRenderer",
    "TextSummaryRenderer",
    "RichSummaryRenderer",
    "available_renderers",
    "get_renderer",
]
