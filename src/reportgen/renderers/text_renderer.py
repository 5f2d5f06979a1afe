"""Plain-text summary renderer (Summary.txt)."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..models import CoverageClass, FileAnalysis
from ..summary import SummaryResult
from ._paths import ensure_dir
from .base import BaseRenderer


def _quota(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.1f}%"


class TextSummaryRenderer(BaseRenderer):
    """Writes only the summary; class reports are ignored."""

    report_type = "TextSummary"

    def __init__(self, target_dir: Union[str, Path]):
        self.target_dir = Path(target_dir)

    def create_class_report(
        self, coverage_class: CoverageClass, file_analyses: Sequence[FileAnalysis]
    ) -> None:
        pass

    def create_summary_report(self, summary: SummaryResult) -> None:
        out = ensure_dir(self.target_dir) / "Summary.txt"
        out.write_text(self.format(summary), encoding="utf-8")

    def format(self, summary: SummaryResult) -> str:
        lines: List[str] = [
            "Summary",
            f"  Parser:          {summary.parser_name}",
            f"  Assemblies:      {summary.assembly_count}",
            f"  Classes:         {summary.class_count}",
            f"  Files:           {summary.file_count}",
            f"  Covered lines:   {summary.covered_lines}",
            f"  Coverable lines: {summary.coverable_lines}",
            f"  Total lines:     {summary.total_lines}",
            f"  Line coverage:   {_quota(summary.coverage_quota)}",
            f"  Branch coverage: {_quota(summary.branch_coverage_quota)}",
        ]
        for assembly in summary.assemblies:
            if not assembly.classes:
                continue
            lines.append("")
            lines.append(f"{assembly.name:<60} {_quota(assembly.coverage_quota)}")
            for coverage_class in assembly.classes:
                lines.append(f"  {coverage_class.name:<58} {_quota(coverage_class.coverage_quota)}")
        return "\n".join(lines) + "\n"
