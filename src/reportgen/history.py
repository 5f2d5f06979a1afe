"""Attach point-in-time coverage snapshots to classes."""

from datetime import datetime

from .logging_config import get_logger
from .models import CoverageClass, HistoricCoverage

logger = get_logger(__name__)


class HistoricCoverageMerger:
    """Appends a ``HistoricCoverage`` record built from a class's current metrics.

    Existing records are never touched; each call adds exactly one entry.
    """

    def merge(self, coverage_class: CoverageClass, execution_time: datetime) -> HistoricCoverage:
        record = HistoricCoverage.from_class(coverage_class, execution_time)
        coverage_class.add_historic_coverage(record)
        logger.debug(
            f"Recorded historic coverage for {coverage_class.name} at "
            f"{execution_time.isoformat()} ({len(coverage_class.historic_coverages)} points)"
        )
        return record
