"""Sources management commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..db import SourceManager
from ..ingestion import FeedFetchError, RSSFetcher
from .common import open_database

console = Console()
sources_app = typer.Typer(help="Manage RSS sources")


@sources_app.command("list")
def sources_list() -> None:
    """List all registered sources."""
    with open_database() as (config, conn):
        manager = SourceManager(config.ingestion.max_sources)
        sources = manager.get_sources(conn)

    if not sources:
        console.print("[yellow]No sources registered.[/yellow]")
        return

    table = Table(title=f"Sources ({len(sources)}/{config.ingestion.max_sources})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Active", style="yellow")
    table.add_column("URL", style="blue")

    for source in sources:
        table.add_row(
            str(source.id),
            source.name,
            "✓" if source.is_active else "✗",
            source.url,
        )

    console.print(table)


@sources_app.command("add")
def sources_add(
    name: str = typer.Option(..., "--name", "-n", help="Source name"),
    url: str = typer.Option(..., "--url", "-u", help="RSS feed URL"),
) -> None:
    """Register a new RSS source."""
    with open_database() as (config, conn):
        manager = SourceManager(config.ingestion.max_sources)
        try:
            source = manager.create_source(conn, name, url)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Added source #{source.id}: {source.name}[/green]")


@sources_app.command("remove")
def sources_remove(
    source_id: int = typer.Argument(..., help="Source ID to remove"),
) -> None:
    """Remove a source and all of its articles."""
    with open_database() as (config, conn):
        try:
            SourceManager(config.ingestion.max_sources).delete_source(conn, source_id)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Removed source #{source_id}[/green]")


def _set_active(source_id: int, is_active: bool) -> None:
    with open_database() as (config, conn):
        try:
            source = SourceManager(config.ingestion.max_sources).set_source_active(
                conn, source_id, is_active
            )
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    state = "enabled" if source.is_active else "disabled"
    console.print(f"[green]✅ {source.name} {state}[/green]")


@sources_app.command("enable")
def sources_enable(source_id: int = typer.Argument(..., help="Source ID")) -> None:
    """Include a source in fetch runs."""
    _set_active(source_id, True)


@sources_app.command("disable")
def sources_disable(source_id: int = typer.Argument(..., help="Source ID")) -> None:
    """Exclude a source from fetch runs."""
    _set_active(source_id, False)


@sources_app.command("test")
def sources_test(
    source_id: Optional[int] = typer.Argument(None, help="Source ID to test (or test all)"),
) -> None:
    """Test RSS feed connectivity without storing anything."""
    with open_database() as (config, conn):
        sources = SourceManager(config.ingestion.max_sources).get_sources(conn)

    if source_id is not None:
        sources = [s for s in sources if s.id == source_id]
        if not sources:
            console.print(f"[red]Source {source_id} not found.[/red]")
            raise typer.Exit(1)

    fetcher = RSSFetcher(
        timeout=config.ingestion.fetch_timeout,
        user_agent=config.ingestion.user_agent,
    )
    for source in sources:
        if not source.is_active:
            console.print(f"[yellow]⚠️  {source.name}: Disabled[/yellow]")
            continue

        try:
            items = fetcher.fetch_feed(source.url)
            console.print(f"[green]✅ {source.name}: OK ({len(items)} items)[/green]")
        except FeedFetchError as e:
            console.print(f"[red]❌ {source.name}: Failed - {e}[/red]")
