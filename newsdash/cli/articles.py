"""Article browsing and curation commands."""

import math
from typing import Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from ..db import ArticleStorage
from ..models import ArticleStatus
from .common import open_database

console = Console()
articles_app = typer.Typer(help="Browse and curate articles")


def _format_date(value) -> str:
    if not value:
        return "-"
    return pendulum.instance(value).format("MMM DD, YYYY")


@articles_app.command("list")
def articles_list(
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
    limit: int = typer.Option(20, "--limit", "-l", min=1, max=100, help="Articles per page"),
    excluded: bool = typer.Option(False, "--excluded", help="Show excluded articles"),
    tag_id: Optional[int] = typer.Option(None, "--tag", "-t", help="Only articles with this tag ID"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Search title and description"),
    favorites: bool = typer.Option(False, "--favorites", "-f", help="Only favorited articles"),
) -> None:
    """List articles, newest first."""
    status = ArticleStatus.EXCLUDED if excluded else ArticleStatus.VISIBLE

    with open_database() as (config, conn):
        articles, total = ArticleStorage().get_articles(
            conn,
            page=page,
            limit=limit,
            status=status,
            tag_id=tag_id,
            search=search,
            favorites_only=favorites,
        )

    if not articles:
        console.print("[yellow]No articles found.[/yellow]")
        return

    pages = max(1, math.ceil(total / limit))
    table = Table(title=f"{status.value.title()} articles (page {page}/{pages}, {total} total)")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("★", style="yellow")
    table.add_column("Title", style="cyan")
    table.add_column("Source", style="magenta")
    table.add_column("Tags", style="green")
    table.add_column("Published", style="dim")

    for article in articles:
        table.add_row(
            str(article.id),
            "★" if article.is_favorite else "",
            f"[link={article.link}]{article.title or '(untitled)'}[/link]",
            article.source_name or "-",
            ", ".join(article.tags) or "-",
            _format_date(article.published_at),
        )

    console.print(table)


def _set_status(article_id: int, status: ArticleStatus) -> None:
    with open_database() as (config, conn):
        try:
            article = ArticleStorage().update_article_status(conn, article_id, status)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Article #{article.id} is now {article.status.value}[/green]")


@articles_app.command("exclude")
def articles_exclude(article_id: int = typer.Argument(..., help="Article ID")) -> None:
    """Hide an article from the visible list."""
    _set_status(article_id, ArticleStatus.EXCLUDED)


@articles_app.command("restore")
def articles_restore(article_id: int = typer.Argument(..., help="Article ID")) -> None:
    """Move an excluded article back to the visible list."""
    _set_status(article_id, ArticleStatus.VISIBLE)


@articles_app.command("favorite")
def articles_favorite(article_id: int = typer.Argument(..., help="Article ID")) -> None:
    """Toggle the favorite flag. Favorites are never removed by cleanup."""
    with open_database() as (config, conn):
        try:
            favorited = ArticleStorage().toggle_favorite(conn, article_id)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    if favorited:
        console.print(f"[green]★ Article #{article_id} added to favorites[/green]")
    else:
        console.print(f"[yellow]Article #{article_id} removed from favorites[/yellow]")
