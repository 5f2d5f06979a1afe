"""Load a coverage model from a JSON document.

Expected layout::

    {
      "parser": "OpenCoverParser",
      "assemblies": [
        {"name": "MyApp.Core", "classes": [
          {"name": "MyApp.Core.Service", "files": [
            {"path": "src/Service.cs",
             "coverage": [-1, 3, 0, 2],
             "branches": {"4": [1, 0]}}
          ]}
        ]}
      ]
    }

``coverage[i]`` is the hit count of line ``i + 1`` and ``-1`` marks a line
that is not coverable.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from ..exceptions import InvalidPathError, ModelFormatError
from ..logging_config import get_logger
from ..models import Assembly, CodeFile, CoverageClass
from .base import Parser

logger = get_logger(__name__)


def _is_count(value: Any, minimum: int) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool) and value >= minimum


class JsonModelParser(Parser):
    """Parser reading the JSON coverage model format above."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.is_file():
            raise InvalidPathError(self.path, "coverage model file does not exist")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ModelFormatError(self.path, str(e))

        if not isinstance(data, dict):
            raise ModelFormatError(self.path, "top-level value must be an object")

        self.source_name = str(data.get("parser") or "JsonModelParser")
        self._assemblies = [self._parse_assembly(a) for a in self._list(data, "assemblies")]
        logger.info(
            f"Loaded {len(self._assemblies)} assemblies from {self.path} ({self.source_name})"
        )

    @property
    def assemblies(self) -> Sequence[Assembly]:
        return self._assemblies

    def __str__(self) -> str:
        return self.source_name

    def _list(self, obj: Dict[str, Any], key: str) -> List[Any]:
        value = obj.get(key, [])
        if not isinstance(value, list):
            raise ModelFormatError(self.path, f"'{key}' must be a list")
        return value

    def _name(self, obj: Any, kind: str) -> str:
        if not isinstance(obj, dict):
            raise ModelFormatError(self.path, f"{kind} entry must be an object")
        name = obj.get("name") if kind != "file" else obj.get("path")
        if not isinstance(name, str) or not name:
            raise ModelFormatError(self.path, f"{kind} entry is missing its name")
        return name

    def _parse_assembly(self, obj: Any) -> Assembly:
        assembly = Assembly(self._name(obj, "assembly"))
        for class_obj in self._list(obj, "classes"):
            coverage_class = CoverageClass(self._name(class_obj, "class"))
            for file_obj in self._list(class_obj, "files"):
                coverage_class.add_file(self._parse_file(file_obj))
            assembly.add_class(coverage_class)
        return assembly

    def _parse_file(self, obj: Any) -> CodeFile:
        path = self._name(obj, "file")
        coverage = self._list(obj, "coverage")
        if not all(_is_count(v, -1) for v in coverage):
            raise ModelFormatError(self.path, f"coverage of '{path}' must hold integers >= -1")

        branches_obj = obj.get("branches", {})
        if not isinstance(branches_obj, dict):
            raise ModelFormatError(self.path, f"branches of '{path}' must be an object")
        branches: Dict[int, List[int]] = {}
        for line, hits in branches_obj.items():
            try:
                line_number = int(line)
            except ValueError:
                raise ModelFormatError(self.path, f"branch line '{line}' in '{path}' is not a number")
            if not isinstance(hits, list) or not all(_is_count(h, 0) for h in hits):
                raise ModelFormatError(self.path, f"branch hits of '{path}:{line}' must be non-negative integers")
            branches[line_number] = list(hits)

        return CodeFile(path=path, line_coverage=list(coverage), branches_by_line=branches)
