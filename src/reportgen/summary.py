"""Run-level aggregate handed to every renderer once per run."""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .models import Assembly, coverage_quota


@dataclass(frozen=True)
class SummaryResult:
    """Totals over the filtered assemblies plus the parser's identity."""

    assemblies: Tuple[Assembly, ...]
    parser_name: str

    @classmethod
    def build(cls, assemblies: Iterable[Assembly], parser_name: str) -> "SummaryResult":
        return cls(assemblies=tuple(assemblies), parser_name=parser_name)

    @property
    def classes(self) -> Sequence:
        return [c for a in self.assemblies for c in a.classes]

    @property
    def assembly_count(self) -> int:
        """Assemblies with at least one reported class."""
        return sum(1 for a in self.assemblies if a.classes)

    @property
    def class_count(self) -> int:
        return sum(len(a.classes) for a in self.assemblies)

    @property
    def file_count(self) -> int:
        return len({f.path for c in self.classes for f in c.files})

    @property
    def covered_lines(self) -> int:
        return sum(a.covered_lines for a in self.assemblies)

    @property
    def coverable_lines(self) -> int:
        return sum(a.coverable_lines for a in self.assemblies)

    @property
    def total_lines(self) -> int:
        return sum(a.total_lines for a in self.assemblies)

    @property
    def covered_branches(self) -> int:
        return sum(a.covered_branches for a in self.assemblies)

    @property
    def total_branches(self) -> int:
        return sum(a.total_branches for a in self.assemblies)

    @property
    def coverage_quota(self) -> Optional[float]:
        return coverage_quota(self.covered_lines, self.coverable_lines)

    @property
    def branch_coverage_quota(self) -> Optional[float]:
        return coverage_quota(self.covered_branches, self.total_branches)

    def to_dict(self) -> dict:
        return {
            "parser": self.parser_name,
            "assemblies": self.assembly_count,
            "classes": self.class_count,
            "files": self.file_count,
            "covered_lines": self.covered_lines,
            "coverable_lines": self.coverable_lines,
            "total_lines": self.total_lines,
            "coverage_quota": self.coverage_quota,
            "covered_branches": self.covered_branches,
            "total_branches": self.total_branches,
            "branch_coverage_quota": self.branch_coverage_quota,
        }
