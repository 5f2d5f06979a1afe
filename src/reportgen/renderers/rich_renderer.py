"""Console summary table rendered with rich."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import CoverageClass, FileAnalysis
from ..summary import SummaryResult
from .base import BaseRenderer


def _quota(value: Optional[float]) -> str:
    if value is None:
        return "[dim]n/a[/dim]"
    if value >= 80.0:
        return f"[green]{value:.1f}%[/green]"
    if value >= 50.0:
        return f"[yellow]{value:.1f}%[/yellow]"
    return f"[red]{value:.1f}%[/red]"


class RichSummaryRenderer(BaseRenderer):
    """Prints a per-assembly coverage table when the summary is rendered."""

    report_type = "Console"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_class_report(
        self, coverage_class: CoverageClass, file_analyses: Sequence[FileAnalysis]
    ) -> None:
        pass

    def create_summary_report(self, summary: SummaryResult) -> None:
        table = Table(title=f"Coverage summary ({escape(summary.parser_name)})")
        table.add_column("Assembly", style="cyan")
        table.add_column("Classes", justify="right")
        table.add_column("Covered", justify="right")
        table.add_column("Coverable", justify="right")
        table.add_column("Line coverage", justify="right")
        table.add_column("Branch coverage", justify="right")

        for assembly in summary.assemblies:
            if not assembly.classes:
                continue
            table.add_row(
                escape(assembly.name),
                str(len(assembly.classes)),
                str(assembly.covered_lines),
                str(assembly.coverable_lines),
                _quota(assembly.coverage_quota),
                _quota(assembly.branch_coverage_quota),
            )

        table.add_section()
        table.add_row(
            "[bold]Total[/bold]",
            str(summary.class_count),
            str(summary.covered_lines),
            str(summary.coverable_lines),
            _quota(summary.coverage_quota),
            _quota(summary.branch_coverage_quota),
        )
        self.console.print(table)
