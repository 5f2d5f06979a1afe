"""Tests for the bundled renderers and the renderer registry."""

import json
from datetime import datetime
from io import StringIO

import pytest
from rich.console import Console

from reportgen.exceptions import InvalidConfigError
from reportgen.history import HistoricCoverageMerger
from reportgen.models import Assembly, CodeFile, CoverageClass
from reportgen.renderers import (
    JsonRenderer,
    RichSummaryRenderer,
    TextSummaryRenderer,
    available_renderers,
    get_renderer,
)
from reportgen.summary import SummaryResult


def _summary(model):
    return SummaryResult.build(model, "TestParser")


class TestGetRenderer:
    def test_known_renderers(self, tmp_path):
        for name in ("Json", "textsummary", "CONSOLE"):
            assert get_renderer(name, tmp_path) is not None

    def test_target_dir_is_passed(self, tmp_path):
        renderer = get_renderer("Json", tmp_path)
        assert isinstance(renderer, JsonRenderer)
        assert renderer.target_dir == tmp_path

    def test_unknown_renderer(self):
        with pytest.raises(InvalidConfigError, match="Xml"):
            get_renderer("Xml")

    def test_available_renderers(self):
        assert available_renderers() == ["Console", "Json", "TextSummary"]


class TestJsonRenderer:
    def test_class_report(self, tmp_path, two_assembly_model):
        x = two_assembly_model[0].classes[0]
        HistoricCoverageMerger().merge(x, datetime(2024, 1, 2, 3, 4))
        renderer = JsonRenderer(tmp_path / "out")
        renderer.create_class_report(x, [f.analyze_file() for f in x.files])

        data = json.loads((tmp_path / "out" / "A1_X.json").read_text(encoding="utf-8"))
        assert data["name"] == "X"
        assert data["assembly"] == "A1"
        assert data["coverage_quota"] == 66.7
        assert data["history"][0]["execution_time"] == "2024-01-02T03:04:00"
        lines = data["files"][0]["lines"]
        assert [l["status"] for l in lines] == [
            "not_coverable",
            "covered",
            "partially_covered",
            "not_covered",
        ]

    def test_summary_report(self, tmp_path, two_assembly_model):
        JsonRenderer(tmp_path).create_summary_report(_summary(two_assembly_model))
        data = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
        assert data["parser"] == "TestParser"
        assert data["classes"] == 3
        assert data["files"] == 1
        assert [a["name"] for a in data["assemblies"]] == ["A1", "A2"]


class TestTextSummaryRenderer:
    def test_writes_summary(self, tmp_path, two_assembly_model):
        renderer = TextSummaryRenderer(tmp_path)
        renderer.create_summary_report(_summary(two_assembly_model))
        text = (tmp_path / "Summary.txt").read_text(encoding="utf-8")
        assert "Parser:          TestParser" in text
        assert "Classes:         3" in text
        assert "Line coverage:   66.7%" in text
        assert "Branch coverage: 50.0%" in text

    def test_class_report_writes_nothing(self, tmp_path, two_assembly_model):
        x = two_assembly_model[0].classes[0]
        TextSummaryRenderer(tmp_path).create_class_report(x, [])
        assert list(tmp_path.iterdir()) == [tmp_path / "Service.cs"]


class TestRichSummaryRenderer:
    def test_prints_table(self, two_assembly_model):
        buf = StringIO()
        renderer = RichSummaryRenderer(Console(file=buf, width=120))
        renderer.create_summary_report(_summary(two_assembly_model))
        out = buf.getvalue()
        assert "Coverage summary (TestParser)" in out
        assert "A1" in out
        assert "Total" in out
        assert "66.7%" in out

    def test_names_are_not_treated_as_markup(self):
        assembly = Assembly("Foo[/x]")
        assembly.add_class(CoverageClass("C", files=[CodeFile("c.cs", [1])]))
        buf = StringIO()
        RichSummaryRenderer(Console(file=buf, width=120)).create_summary_report(
            SummaryResult.build([assembly], "Parser[bold]")
        )
        out = buf.getvalue()
        assert "Foo[/x]" in out
        assert "Parser[bold]" in out
