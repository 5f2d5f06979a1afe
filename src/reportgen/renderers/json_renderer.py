"""JSON renderer: one document per class plus summary.json."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Sequence, Union

from ..models import CoverageClass, FileAnalysis
from ..summary import SummaryResult
from ._paths import class_file_stem, ensure_dir
from .base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Write class and summary reports as JSON files."""

    report_type = "Json"

    def __init__(self, target_dir: Union[str, Path]):
        self.target_dir = Path(target_dir)

    def create_class_report(
        self, coverage_class: CoverageClass, file_analyses: Sequence[FileAnalysis]
    ) -> None:
        out = ensure_dir(self.target_dir) / f"{class_file_stem(coverage_class)}.json"
        out.write_text(json.dumps(self.format_class(coverage_class, file_analyses), indent=2), encoding="utf-8")

    def create_summary_report(self, summary: SummaryResult) -> None:
        out = ensure_dir(self.target_dir) / "summary.json"
        out.write_text(json.dumps(self.format_summary(summary), indent=2), encoding="utf-8")

    def format_class(
        self, coverage_class: CoverageClass, file_analyses: Sequence[FileAnalysis]
    ) -> dict:
        return {
            "name": coverage_class.name,
            "assembly": coverage_class.assembly.name if coverage_class.assembly else None,
            "covered_lines": coverage_class.covered_lines,
            "coverable_lines": coverage_class.coverable_lines,
            "coverage_quota": coverage_class.coverage_quota,
            "covered_branches": coverage_class.covered_branches,
            "total_branches": coverage_class.total_branches,
            "history": [
                {**asdict(h), "execution_time": h.execution_time.isoformat()}
                for h in coverage_class.historic_coverages
            ],
            "files": [
                {
                    "path": fa.path,
                    "error": fa.error,
                    "lines": [
                        {
                            "line": la.line_number,
                            "visits": la.visits,
                            "status": la.status.value,
                            "covered_branches": la.covered_branches,
                            "total_branches": la.total_branches,
                        }
                        for la in fa.lines
                    ],
                }
                for fa in file_analyses
            ],
        }

    def format_summary(self, summary: SummaryResult) -> dict:
        data = summary.to_dict()
        data["assembly_count"] = summary.assembly_count
        data["assemblies"] = [
            {
                "name": a.name,
                "classes": [c.name for c in a.classes],
                "coverage_quota": a.coverage_quota,
            }
            for a in summary.assemblies
        ]
        return data
