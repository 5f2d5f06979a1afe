"""Report CLI command -- render a coverage model with the configured renderers."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from ..exceptions import ReportGenError
from ..logging_config import reset_logging, setup_logging
from ..parsers import JsonModelParser
from ..pipeline import ReportPipeline
from . import app
from ._common import build_filters, build_renderers, console, resolve_config


@app.command()
def report(
    model: Path = typer.Argument(
        ...,
        help="Coverage model file (JSON)",
        dir_okay=False,
    ),
    target_dir: Optional[Path] = typer.Option(
        None,
        "--target-dir",
        "-t",
        help="Directory the reports are written to",
        file_okay=False,
    ),
    report_types: Optional[str] = typer.Option(
        None,
        "--report-types",
        "-r",
        help="Renderers to run, e.g. 'Json;TextSummary;Console'",
    ),
    assembly_filters: Optional[str] = typer.Option(
        None,
        "--assembly-filters",
        help="Assembly filter patterns, e.g. '+MyApp.*;-*.Tests'",
    ),
    class_filters: Optional[str] = typer.Option(
        None,
        "--class-filters",
        help="Class filter patterns, e.g. '-*.Generated*'",
    ),
    history: Optional[bool] = typer.Option(
        None,
        "--history/--no-history",
        help="Append a historic coverage point to every reported class",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show per-class progress",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Generate reports for a coverage model.

    Every included class is handed to every renderer; a renderer that fails
    is logged and the run carries on.

    [bold cyan]Examples:[/bold cyan]

      reportgen report coverage.json

      reportgen report coverage.json -t out -r "Json;Console" --class-filters "-*Tests*"
    """
    try:
        settings = resolve_config(
            config=config,
            target_dir=target_dir,
            report_types=report_types,
            assembly_filters=assembly_filters,
            class_filters=class_filters,
            history=history,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=settings.log_file,
        )

        parser = JsonModelParser(model)
        assembly_filter, class_filter = build_filters(settings)
        pipeline = ReportPipeline(
            parser,
            assembly_filter,
            class_filter,
            build_renderers(settings),
            logger=logger,
        )
        result = pipeline.generate_report(settings.add_historic_coverage, datetime.now())
    except ReportGenError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    finally:
        reset_logging()

    if result.failures:
        console.print(
            f"[yellow]Report generated for {result.class_count} classes "
            f"with {len(result.failures)} renderer failure(s)[/yellow]"
        )
    else:
        console.print(f"[green]Report generated for {result.class_count} classes[/green]")
