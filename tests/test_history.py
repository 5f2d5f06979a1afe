"""Tests for the historic coverage merger."""

from datetime import datetime

from reportgen.history import HistoricCoverageMerger
from reportgen.models import CodeFile, CoverageClass


def _make_class():
    return CoverageClass("C", files=[CodeFile("a.cs", [1, 0, -1])])


class TestHistoricCoverageMerger:
    def test_appends_one_record(self):
        c = _make_class()
        when = datetime(2024, 3, 1)
        record = HistoricCoverageMerger().merge(c, when)
        assert c.historic_coverages == (record,)
        assert record.execution_time == when
        assert record.covered_lines == 1
        assert record.coverable_lines == 2

    def test_prior_records_unchanged_and_ordered(self):
        c = _make_class()
        merger = HistoricCoverageMerger()
        first = merger.merge(c, datetime(2024, 1, 1))
        c.files[0].line_coverage[1] = 4
        second = merger.merge(c, datetime(2024, 2, 1))

        assert c.historic_coverages == (first, second)
        assert first.covered_lines == 1
        assert second.covered_lines == 2
