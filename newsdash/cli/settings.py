"""Settings commands."""

import typer
from rich.console import Console

from ..db import SettingsManager
from .common import open_database

console = Console()
settings_app = typer.Typer(help="Show or change settings")


@settings_app.command("show")
def settings_show() -> None:
    """Show current settings."""
    with open_database() as (config, conn):
        settings = SettingsManager(config.ingestion.default_retention_days).get_settings(conn)

    console.print(f"Article retention: [bold]{settings.article_retention_days}[/bold] days")
    console.print(f"Maximum sources: [bold]{config.ingestion.max_sources}[/bold]")


@settings_app.command("set")
def settings_set(
    retention_days: str = typer.Option(..., "--retention-days", "-r", help="Days to keep articles (1-365)"),
) -> None:
    """Change the article retention window."""
    with open_database() as (config, conn):
        try:
            settings = SettingsManager(config.ingestion.default_retention_days).update_settings(
                conn, retention_days
            )
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Retention set to {settings.article_retention_days} days[/green]")
