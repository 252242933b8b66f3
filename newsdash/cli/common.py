"""Helpers shared by CLI commands."""

from contextlib import contextmanager
from typing import Generator, Tuple

import psycopg
import typer
from rich.console import Console

from ..config import Config
from ..db import get_connection

console = Console()


def load_config() -> Config:
    """Load configuration or exit with a hint to run init."""
    config = Config()
    try:
        _ = config.config
    except FileNotFoundError:
        console.print(
            f"[red]Config file not found: {config.config_path}. Run 'newsdash init' first.[/red]"
        )
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return config


@contextmanager
def open_database() -> Generator[Tuple[Config, psycopg.Connection], None, None]:
    """Yield the loaded config and a pooled connection."""
    config = load_config()
    try:
        with get_connection(config.get_db_config()) as conn:
            yield config, conn
    except psycopg.OperationalError as e:
        console.print(f"[red]Database error: {e}[/red]")
        raise typer.Exit(1)
