"""Fetch and cleanup commands, meant to be run from a scheduler."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..db import SettingsManager
from ..db.settings import validate_retention_days
from ..pipeline import BatchOrchestrator, RetentionSweeper
from .common import open_database

console = Console()


def fetch_command(
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Fetch all active RSS sources and store new articles."""
    with open_database() as (config, conn):
        orchestrator = BatchOrchestrator(conn, config.ingestion)

        if json_output:
            batch = orchestrator.fetch_all()
            typer.echo(json.dumps({"success": True, **batch.model_dump(mode="json")}, indent=2))
            return

        with console.status("[bold]Fetching RSS sources...[/bold]"):
            batch = orchestrator.fetch_all(
                on_source_done=lambda source, result: console.print(
                    f"  {source.name}: {result.created} new, {result.skipped} skipped"
                )
            )

    table = Table(title=f"RSS Fetch Summary ({batch.total_sources} sources)")
    table.add_column("Source", style="cyan")
    table.add_column("Created", style="green", justify="right")
    table.add_column("Skipped", style="yellow", justify="right")
    table.add_column("Errors", style="red", justify="right")

    for result in batch.results:
        table.add_row(
            result.source_name,
            str(result.created),
            str(result.skipped),
            str(len(result.errors)),
        )

    console.print(table)


def cleanup_command(
    days: Optional[int] = typer.Option(
        None,
        "--days",
        "-d",
        help="Retention window in days. Default: stored setting",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Delete articles older than the retention window, keeping favorites."""
    with open_database() as (config, conn):
        if days is None:
            settings = SettingsManager(config.ingestion.default_retention_days).get_settings(conn)
            days = settings.article_retention_days

        try:
            days = validate_retention_days(days)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

        result = RetentionSweeper(conn).sweep(days)

    if json_output:
        typer.echo(json.dumps({"success": True, **result.model_dump(mode="json")}, indent=2))
        return

    console.print(
        f"[green]✅ Deleted {result.deleted_count} articles older than {result.retention_days} days[/green]"
    )
