"""Base renderer interface for reportgen output backends."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import CoverageClass, FileAnalysis
from ..summary import SummaryResult


class BaseRenderer(ABC):
    """Abstract base class for report renderers.

    ``report_type`` identifies the renderer in log messages.
    """

    report_type: str = "Base"

    @abstractmethod
    def create_class_report(
        self, coverage_class: CoverageClass, file_analyses: Sequence[FileAnalysis]
    ) -> None:
        """Render the report section of one class."""

    @abstractmethod
    def create_summary_report(self, summary: SummaryResult) -> None:
        """Render the run-level summary."""
