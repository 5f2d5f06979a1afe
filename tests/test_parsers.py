"""Tests for coverage model parsers."""

import json

import pytest

from reportgen.exceptions import InvalidPathError, ModelFormatError
from reportgen.parsers import JsonModelParser, StaticParser
from reportgen.models import Assembly


def _write(tmp_path, data):
    path = tmp_path / "coverage.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _model_doc():
    return {
        "parser": "OpenCoverParser",
        "assemblies": [
            {
                "name": "MyApp.Core",
                "classes": [
                    {
                        "name": "MyApp.Core.Service",
                        "files": [
                            {"path": "src/Service.cs", "coverage": [-1, 3, 0], "branches": {"2": [1, 0]}}
                        ],
                    },
                    {"name": "MyApp.Core.Empty", "files": []},
                ],
            },
            {"name": "MyApp.Web", "classes": []},
        ],
    }


class TestStaticParser:
    def test_serves_assemblies_and_name(self):
        a = Assembly("A")
        parser = StaticParser([a], name="Fixture")
        assert list(parser.assemblies) == [a]
        assert str(parser) == "Fixture"


class TestJsonModelParser:
    def test_loads_model(self, tmp_path):
        parser = JsonModelParser(_write(tmp_path, _model_doc()))

        assert str(parser) == "OpenCoverParser"
        assert [a.name for a in parser.assemblies] == ["MyApp.Core", "MyApp.Web"]
        core = parser.assemblies[0]
        assert [c.name for c in core.classes] == ["MyApp.Core.Service", "MyApp.Core.Empty"]
        service = core.classes[0]
        assert service.assembly is core
        assert service.files[0].line_coverage == [-1, 3, 0]
        assert service.files[0].branches_by_line == {2: [1, 0]}
        assert service.covered_lines == 1

    def test_default_identity(self, tmp_path):
        parser = JsonModelParser(_write(tmp_path, {"assemblies": []}))
        assert str(parser) == "JsonModelParser"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidPathError):
            JsonModelParser(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "coverage.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ModelFormatError):
            JsonModelParser(path)

    @pytest.mark.parametrize(
        "doc",
        [
            [],
            {"assemblies": {}},
            {"assemblies": [{"classes": []}]},
            {"assemblies": [{"name": "A", "classes": [{"name": "C", "files": [{"path": "f", "coverage": ["x"]}]}]}]},
            {"assemblies": [{"name": "A", "classes": [{"name": "C", "files": [{"path": "f", "coverage": [-2]}]}]}]},
            {"assemblies": [{"name": "A", "classes": [{"name": "C", "files": [{"path": "f", "branches": {"a": [1]}}]}]}]},
            {"assemblies": [{"name": "A", "classes": [{"name": "C", "files": [{"path": "f", "branches": {"1": [-1]}}]}]}]},
            {"assemblies": [{"name": "A", "classes": [{"name": "C", "files": [{"path": "f", "coverage": [True, 0]}]}]}]},
            {"assemblies": [{"name": "A", "classes": [{"name": "C", "files": [{"path": "f", "branches": {"1": [False]}}]}]}]},
        ],
    )
    def test_malformed_documents(self, tmp_path, doc):
        with pytest.raises(ModelFormatError):
            JsonModelParser(_write(tmp_path, doc))
