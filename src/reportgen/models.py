"""Coverage model for reportgen.

The parser produces assemblies → classes → files.  Everything the pipeline
needs (line/branch totals, quotas, per-file analysis) is derived from the
per-line hit counts carried by ``CodeFile``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .logging_config import get_logger

logger = get_logger(__name__)

# Hit count marking a line that carries no executable code
NOT_COVERABLE = -1


class LineVisitStatus(Enum):
    """Coverage state of a single source line."""

    NOT_COVERABLE = "not_coverable"
    NOT_COVERED = "not_covered"
    PARTIALLY_COVERED = "partially_covered"
    COVERED = "covered"


def coverage_quota(covered: int, total: int) -> Optional[float]:
    """Percentage of ``covered`` over ``total``, or None if nothing is measurable."""
    if total <= 0:
        return None
    return round(100.0 * covered / total, 1)


@dataclass(frozen=True)
class LineAnalysis:
    """One analysed source line."""

    line_number: int
    content: str
    visits: int
    status: LineVisitStatus
    covered_branches: int = 0
    total_branches: int = 0


@dataclass(frozen=True)
class FileAnalysis:
    """Read-only, per-run breakdown of a file's line coverage.

    ``error`` is set (and ``lines`` empty) when the source could not be read.
    """

    path: str
    lines: Tuple[LineAnalysis, ...] = ()
    error: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return self.error is not None


@dataclass(eq=False)
class CodeFile:
    """A source file belonging to a class.

    ``line_coverage[i]`` is the hit count of line ``i + 1``; ``NOT_COVERABLE``
    marks lines without executable code.  ``branches_by_line`` maps a line
    number to the hit count of each branch on that line.
    """

    path: str
    line_coverage: List[int] = field(default_factory=list)
    branches_by_line: Dict[int, List[int]] = field(default_factory=dict)

    @property
    def coverable_lines(self) -> int:
        return sum(1 for hits in self.line_coverage if hits != NOT_COVERABLE)

    @property
    def covered_lines(self) -> int:
        return sum(1 for hits in self.line_coverage if hits > 0)

    @property
    def total_lines(self) -> int:
        return len(self.line_coverage)

    @property
    def total_branches(self) -> int:
        return sum(len(branches) for branches in self.branches_by_line.values())

    @property
    def covered_branches(self) -> int:
        return sum(
            sum(1 for hits in branches if hits > 0)
            for branches in self.branches_by_line.values()
        )

    def visits(self, line_number: int) -> int:
        index = line_number - 1
        if 0 <= index < len(self.line_coverage):
            return self.line_coverage[index]
        return NOT_COVERABLE

    def visit_status(self, line_number: int) -> LineVisitStatus:
        hits = self.visits(line_number)
        if hits == NOT_COVERABLE:
            return LineVisitStatus.NOT_COVERABLE
        if hits == 0:
            return LineVisitStatus.NOT_COVERED
        branches = self.branches_by_line.get(line_number, [])
        if any(b == 0 for b in branches):
            return LineVisitStatus.PARTIALLY_COVERED
        return LineVisitStatus.COVERED

    def analyze_file(self) -> FileAnalysis:
        """Read the source and pair every line with its coverage state.

        A new analysis is built on every call.  An unreadable source file is
        reported through ``FileAnalysis.error`` instead of raising.
        """
        try:
            with open(self.path, encoding="utf-8", errors="replace") as f:
                source_lines = f.read().splitlines()
        except OSError as e:
            logger.debug(f"Cannot read source file {self.path}: {e}")
            return FileAnalysis(path=self.path, error=f"File '{self.path}' cannot be read: {e.strerror or e}")

        lines = []
        for index, content in enumerate(source_lines):
            line_number = index + 1
            branches = self.branches_by_line.get(line_number, [])
            lines.append(
                LineAnalysis(
                    line_number=line_number,
                    content=content,
                    visits=self.visits(line_number),
                    status=self.visit_status(line_number),
                    covered_branches=sum(1 for b in branches if b > 0),
                    total_branches=len(branches),
                )
            )
        return FileAnalysis(path=self.path, lines=tuple(lines))


class _CoverageTotals:
    """Aggregated line/branch metrics over ``_coverage_parts()``."""

    def _coverage_parts(self) -> Iterable:
        raise NotImplementedError

    @property
    def covered_lines(self) -> int:
        return sum(p.covered_lines for p in self._coverage_parts())

    @property
    def coverable_lines(self) -> int:
        return sum(p.coverable_lines for p in self._coverage_parts())

    @property
    def total_lines(self) -> int:
        return sum(p.total_lines for p in self._coverage_parts())

    @property
    def covered_branches(self) -> int:
        return sum(p.covered_branches for p in self._coverage_parts())

    @property
    def total_branches(self) -> int:
        return sum(p.total_branches for p in self._coverage_parts())

    @property
    def coverage_quota(self) -> Optional[float]:
        return coverage_quota(self.covered_lines, self.coverable_lines)

    @property
    def branch_coverage_quota(self) -> Optional[float]:
        return coverage_quota(self.covered_branches, self.total_branches)


@dataclass(eq=False)
class CoverageClass(_CoverageTotals):
    """A class and the source files it spans.

    ``assembly`` is a back-reference to the owning assembly.  Historic
    coverage records can only be appended.
    """

    name: str
    assembly: Optional["Assembly"] = field(default=None, repr=False)
    files: List[CodeFile] = field(default_factory=list)
    _historic: List["HistoricCoverage"] = field(default_factory=list, init=False, repr=False)

    def _coverage_parts(self) -> Iterable:
        return self.files

    @property
    def historic_coverages(self) -> Tuple["HistoricCoverage", ...]:
        return tuple(self._historic)

    def add_file(self, code_file: CodeFile) -> None:
        self.files.append(code_file)

    def add_historic_coverage(self, record: "HistoricCoverage") -> None:
        self._historic.append(record)


@dataclass(eq=False)
class Assembly(_CoverageTotals):
    """A named group of classes, in discovery order."""

    name: str
    classes: List[CoverageClass] = field(default_factory=list)

    def _coverage_parts(self) -> Iterable:
        return self.classes

    @property
    def short_name(self) -> str:
        short = self.name.replace("\\", "/").rsplit("/", 1)[-1]
        for ext in (".dll", ".exe"):
            if short.lower().endswith(ext):
                return short[: -len(ext)]
        return short

    def add_class(self, coverage_class: CoverageClass) -> None:
        """Append a class; claims ownership only if the class has no assembly yet."""
        if coverage_class.assembly is None:
            coverage_class.assembly = self
        self.classes.append(coverage_class)


@dataclass(frozen=True)
class HistoricCoverage:
    """Coverage metrics of a class at one execution time."""

    execution_time: datetime
    covered_lines: int
    coverable_lines: int
    total_lines: int
    covered_branches: int
    total_branches: int

    @classmethod
    def from_class(cls, coverage_class: CoverageClass, execution_time: datetime) -> "HistoricCoverage":
        return cls(
            execution_time=execution_time,
            covered_lines=coverage_class.covered_lines,
            coverable_lines=coverage_class.coverable_lines,
            total_lines=coverage_class.total_lines,
            covered_branches=coverage_class.covered_branches,
            total_branches=coverage_class.total_branches,
        )

    @property
    def coverage_quota(self) -> Optional[float]:
        return coverage_quota(self.covered_lines, self.coverable_lines)
