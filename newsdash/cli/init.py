"""Init command implementation."""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_PATH, ConfigModel, save_config
from ..db import SourceManager, TagManager, get_connection, init_database, validate_connection

console = Console()


def create_default_sources() -> List[Tuple[str, str]]:
    """Default tech news feeds as (name, url) pairs."""
    return [
        ("Hacker News", "https://hnrss.org/frontpage"),
        ("Hugging Face Blog", "https://huggingface.co/blog/feed.xml"),
        ("The GitHub Blog", "https://github.blog/feed/"),
        ("Ars Technica", "https://feeds.arstechnica.com/arstechnica/index"),
        ("MIT News - AI", "https://news.mit.edu/rss/topic/artificial-intelligence2"),
    ]


def create_default_tags() -> List[Tuple[str, List[str]]]:
    """Starter interest tags as (name, keywords) pairs."""
    return [
        ("AI", ["machine learning", "llm", "gpt", "neural network"]),
        ("Python", ["python", "pypi", "django", "fastapi"]),
        ("Security", ["vulnerability", "cve", "exploit", "ransomware"]),
    ]


def init_command(
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Configuration file to write",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("newsdash", "--db-name", help="Database name"),
    db_user: str = typer.Option("newsdash_user", "--db-user", help="Database user"),
    max_sources: int = typer.Option(10, "--max-sources", help="Maximum number of sources", min=1),
    seed: bool = typer.Option(
        True,
        "--seed/--no-seed",
        help="Seed default sources and tags",
    ),
) -> None:
    """Initialize newsdash configuration and database."""
    console.print(Panel.fit("newsdash - Initialization", style="bold blue"))

    config = ConfigModel(
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": "NEWSDASH_DB_PASSWORD",
        },
        ingestion={"max_sources": max_sources},
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    console.print("\n[bold]Testing database connection...[/bold]")
    db_config = config.postgres.model_dump()

    if not validate_connection(db_config):
        console.print(
            "[red]❌ Database connection failed![/red]\n"
            "Please ensure Postgres is running and credentials are correct.\n"
            "Set the password via environment variable: [bold]export NEWSDASH_DB_PASSWORD=your_password[/bold]"
        )
        raise typer.Exit(1)

    console.print("✅ Database connection successful")

    console.print("\n[bold]Initializing database schema...[/bold]")
    try:
        init_database(db_config)
        console.print("✅ Database schema initialized")
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    if seed:
        with get_connection(db_config) as conn:
            source_manager = SourceManager(max_sources)
            seeded_sources = 0
            for name, url in create_default_sources():
                try:
                    source_manager.create_source(conn, name, url)
                    seeded_sources += 1
                except ValueError as e:
                    console.print(f"[yellow]Skipped source {name}: {e}[/yellow]")

            tag_manager = TagManager()
            seeded_tags = 0
            for name, keywords in create_default_tags():
                try:
                    tag_manager.create_tag(conn, name, keywords)
                    seeded_tags += 1
                except ValueError as e:
                    console.print(f"[yellow]Skipped tag {name}: {e}[/yellow]")

        console.print(f"✅ Seeded {seeded_sources} sources and {seeded_tags} tags")

    console.print(
        Panel(
            f"[green]✅ newsdash initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set database password: [bold]export NEWSDASH_DB_PASSWORD=your_password[/bold]\n"
            f"2. Fetch articles: [bold]newsdash fetch[/bold]\n"
            f"3. Schedule [bold]newsdash fetch[/bold] and [bold]newsdash cleanup[/bold] with cron",
            style="green",
        )
    )
