"""Report generation pipeline.

Filters the parsed model, walks every surviving class and hands it to each
renderer, then builds the summary and hands that to each renderer.  A failing
renderer is logged and skipped for that one call: it never aborts the run,
never keeps other renderers from a class, and gets the next class as usual.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional

from .exceptions import MissingCollaboratorError
from .filters import AssemblyFilter, ClassFilter
from .history import HistoricCoverageMerger
from .logging_config import get_logger
from .parsers.base import Parser
from .renderers.base import BaseRenderer
from .summary import SummaryResult
from .view import build_filtered_view, count_classes

_module_logger = get_logger(__name__)

SUMMARY_TARGET = "summary"


@dataclass(frozen=True)
class RenderFailure:
    """One contained renderer failure."""

    report_type: str
    target: str  # class name, or SUMMARY_TARGET
    message: str


@dataclass
class ReportRunResult:
    """Outcome of one ``generate_report`` call."""

    class_count: int
    summary: SummaryResult
    failures: List[RenderFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


def _report_type(renderer: BaseRenderer) -> str:
    try:
        return str(getattr(renderer, "report_type", type(renderer).__name__))
    except Exception:
        return type(renderer).__name__


class ReportPipeline:
    """Drives class and summary rendering over a filtered coverage model.

    The pipeline borrows the parser's model and the renderers; it owns only
    the filtered view built at the start of each run.
    """

    def __init__(
        self,
        parser: Parser,
        assembly_filter: AssemblyFilter,
        class_filter: ClassFilter,
        renderers: Iterable[BaseRenderer],
        logger: Optional[logging.Logger] = None,
        merger: Optional[HistoricCoverageMerger] = None,
    ):
        for name, value in (
            ("parser", parser),
            ("assembly_filter", assembly_filter),
            ("class_filter", class_filter),
            ("renderers", renderers),
        ):
            if value is None:
                raise MissingCollaboratorError(name)

        self.parser = parser
        self.assembly_filter = assembly_filter
        self.class_filter = class_filter
        self.renderers: List[BaseRenderer] = list(renderers)
        self.logger = logger or _module_logger
        self.merger = merger or HistoricCoverageMerger()

    def generate_report(
        self, add_historic_coverage: bool = False, execution_time: Optional[datetime] = None
    ) -> ReportRunResult:
        """Render every included class with every renderer, then the summary.

        When ``add_historic_coverage`` is set, each class gets exactly one new
        historic record (stamped ``execution_time``) before any renderer sees it.

        File analyses are rebuilt for each renderer call and sit outside the
        renderer fault boundary: an analyzer exception propagates.
        """
        if execution_time is None:
            execution_time = datetime.now()

        assemblies = build_filtered_view(
            self.parser.assemblies, self.assembly_filter, self.class_filter
        )
        total = count_classes(assemblies)
        self.logger.info(f"Analyzing {total} classes")

        failures: List[RenderFailure] = []
        counter = 0

        for assembly in assemblies:
            for coverage_class in assembly.classes:
                counter += 1
                self.logger.debug(
                    f" Creating report {counter}/{total} "
                    f"(Assembly: {assembly.short_name}, Class: {coverage_class.name})"
                )

                if add_historic_coverage:
                    self.merger.merge(coverage_class, execution_time)

                for renderer in self.renderers:
                    file_analyses = [f.analyze_file() for f in coverage_class.files]
                    self._isolated(
                        renderer,
                        coverage_class.name,
                        failures,
                        renderer.create_class_report,
                        coverage_class,
                        file_analyses,
                    )

        self.logger.debug(" Creating summary")
        summary = SummaryResult.build(assemblies, str(self.parser))

        for renderer in self.renderers:
            self._isolated(
                renderer,
                None,
                failures,
                renderer.create_summary_report,
                summary,
            )

        return ReportRunResult(class_count=total, summary=summary, failures=failures)

    def _isolated(
        self,
        renderer: BaseRenderer,
        class_name: Optional[str],
        failures: List[RenderFailure],
        call: Callable[..., None],
        *args: Any,
    ) -> None:
        try:
            call(*args)
        except Exception as e:
            report_type = _report_type(renderer)
            if class_name is None:
                self.logger.error(
                    f"  Error during rendering summary report (Report type: '{report_type}'): {e}"
                )
            else:
                self.logger.error(
                    f"  Error during rendering report for class '{class_name}' "
                    f"(Report type: '{report_type}'): {e}"
                )
            failures.append(
                RenderFailure(
                    report_type=report_type,
                    target=SUMMARY_TARGET if class_name is None else class_name,
                    message=str(e),
                )
            )
