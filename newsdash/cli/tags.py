"""Tag management commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..db import TagManager
from ..db.tags import parse_keywords
from .common import open_database

console = Console()
tags_app = typer.Typer(help="Manage interest tags")


@tags_app.command("list")
def tags_list() -> None:
    """List tags and their keywords."""
    with open_database() as (config, conn):
        tags = TagManager().get_tags(conn)

    if not tags:
        console.print("[yellow]No tags defined.[/yellow]")
        return

    table = Table(title="Tags")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Active", style="yellow")
    table.add_column("Keywords", style="green")

    for tag in tags:
        table.add_row(
            str(tag.id),
            tag.name,
            "✓" if tag.is_active else "✗",
            ", ".join(kw.keyword for kw in tag.keywords) or "-",
        )

    console.print(table)


@tags_app.command("add")
def tags_add(
    name: str = typer.Option(..., "--name", "-n", help="Tag name"),
    keywords: str = typer.Option("", "--keywords", "-k", help="Comma-separated keywords"),
) -> None:
    """Create a tag."""
    with open_database() as (config, conn):
        try:
            tag = TagManager().create_tag(conn, name, parse_keywords(keywords))
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Added tag #{tag.id}: {tag.name} ({len(tag.keywords)} keywords)[/green]")


@tags_app.command("keywords")
def tags_keywords(
    tag_id: int = typer.Argument(..., help="Tag ID"),
    keywords: str = typer.Argument(..., help="Comma-separated keywords replacing the current set"),
) -> None:
    """Replace the keywords of a tag. Already stored articles keep their tags."""
    with open_database() as (config, conn):
        try:
            updated = TagManager().update_tag_keywords(conn, tag_id, parse_keywords(keywords))
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Tag #{tag_id} now has {len(updated)} keywords[/green]")


@tags_app.command("remove")
def tags_remove(tag_id: int = typer.Argument(..., help="Tag ID")) -> None:
    """Delete a tag."""
    with open_database() as (config, conn):
        try:
            TagManager().delete_tag(conn, tag_id)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Removed tag #{tag_id}[/green]")


@tags_app.command("enable")
def tags_enable(tag_id: int = typer.Argument(..., help="Tag ID")) -> None:
    """Include a tag in matching."""
    _set_active(tag_id, True)


@tags_app.command("disable")
def tags_disable(tag_id: int = typer.Argument(..., help="Tag ID")) -> None:
    """Exclude a tag from matching."""
    _set_active(tag_id, False)


def _set_active(tag_id: int, is_active: bool) -> None:
    with open_database() as (config, conn):
        try:
            TagManager().set_tag_active(conn, tag_id, is_active)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Tag #{tag_id} {'enabled' if is_active else 'disabled'}[/green]")
