"""
reportgen - coverage report generation pipeline

Turns a parsed coverage model (assemblies, classes, files with line and branch
hit counts) into reports produced by pluggable renderers.  A failing renderer
is logged and skipped; it never stops the others.
"""

__version__ = "0.3.0"

from .filters import AssemblyFilter, ClassFilter, PatternFilter
from .history import HistoricCoverageMerger
from .models import (
    Assembly,
    CodeFile,
    CoverageClass,
    FileAnalysis,
    HistoricCoverage,
    LineAnalysis,
    LineVisitStatus,
)
from .parsers import JsonModelParser, Parser, StaticParser
from .pipeline import RenderFailure, ReportPipeline, ReportRunResult
from .renderers import BaseRenderer, get_renderer
from .summary import SummaryResult
from .view import build_filtered_view

__all__ = [
    "ReportPipeline",  # Main entry point
    "ReportRunResult",
    "RenderFailure",
    "Assembly",
    "CoverageClass",
    "CodeFile",
    "FileAnalysis",
    "LineAnalysis",
    "LineVisitStatus",
    "HistoricCoverage",
    "HistoricCoverageMerger",
    "SummaryResult",
    "AssemblyFilter",
    "ClassFilter",
    "PatternFilter",
    "Parser",
    "StaticParser",
    "JsonModelParser",
    "BaseRenderer",
    "get_renderer",
    "build_filtered_view",
]
