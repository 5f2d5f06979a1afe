#!/usr/bin/env python3
"""
Example: Basic usage of reportgen as a Python library
"""

from datetime import datetime

from reportgen import PatternFilter, ReportPipeline, StaticParser
from reportgen.models import Assembly, CodeFile, CoverageClass
from reportgen.renderers import JsonRenderer, RichSummaryRenderer

# Build a coverage model (normally produced by a parser)
assembly = Assembly("MyApp.Core")
service = CoverageClass("MyApp.Core.Service")
service.add_file(CodeFile("src/Service.cs", line_coverage=[-1, 4, 4, 0], branches_by_line={3: [2, 0]}))
assembly.add_class(service)

pipeline = ReportPipeline(
    StaticParser([assembly], name="ExampleParser"),
    PatternFilter(["+MyApp.*"]),
    PatternFilter(["-*Tests"]),
    [JsonRenderer("coverage-report"), RichSummaryRenderer()],
)
result = pipeline.generate_report(add_historic_coverage=True, execution_time=datetime.now())

for failure in result.failures:
    print(f"{failure.report_type} failed on {failure.target}: {failure.message}")

print(f"Report complete: {result.class_count} class(es), "
      f"line coverage {result.summary.coverage_quota}%")
