"""Shared fixtures for reportgen tests."""

import pytest

from reportgen.logging_config import reset_logging
from reportgen.models import Assembly, CodeFile, CoverageClass


@pytest.fixture
def source_file(tmp_path):
    """A four-line source file on disk."""
    path = tmp_path / "Service.cs"
    path.write_text(
        "public class Service {\n"
        "    public int Run(bool flag) {\n"
        "        if (flag) { return 1; }\n"
        "        return 0;\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def two_assembly_model(source_file):
    """A1 holds classes X and Y, A2 holds class Z."""
    assemblies = []
    for assembly_name, class_names in (("A1", ["X", "Y"]), ("A2", ["Z"])):
        assembly = Assembly(assembly_name)
        for class_name in class_names:
            coverage_class = CoverageClass(class_name)
            coverage_class.add_file(
                CodeFile(
                    path=str(source_file),
                    line_coverage=[-1, 2, 2, 0],
                    branches_by_line={3: [1, 0]},
                )
            )
            assembly.add_class(coverage_class)
        assemblies.append(assembly)
    return assemblies


@pytest.fixture(autouse=True)
def _restore_reportgen_logging():
    yield
    reset_logging()
