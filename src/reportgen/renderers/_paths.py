"""Output file naming shared by the file-based renderers."""

import re
from pathlib import Path
from typing import Union

from ..models import CoverageClass

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def ensure_dir(target_dir: Union[str, Path]) -> Path:
    path = Path(target_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def class_file_stem(coverage_class: CoverageClass) -> str:
    """``<assembly short name>_<class name>`` with unsafe characters replaced."""
    assembly = coverage_class.assembly.short_name if coverage_class.assembly else ""
    stem = f"{assembly}_{coverage_class.name}" if assembly else coverage_class.name
    return _UNSAFE.sub("_", stem)
