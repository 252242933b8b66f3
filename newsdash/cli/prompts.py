"""Prompt template commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..db import PromptManager
from ..generation.post import TEMPLATE_VARIABLES
from .common import open_database

console = Console()
prompts_app = typer.Typer(help="Manage share-draft prompts")


@prompts_app.command("list")
def prompts_list() -> None:
    """List prompt templates."""
    with open_database() as (config, conn):
        prompts = PromptManager().get_prompts(conn)

    if not prompts:
        console.print("[yellow]No prompts defined.[/yellow]")
        return

    table = Table(title="Prompts")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Default", style="yellow")
    table.add_column("Template", style="dim", overflow="ellipsis", max_width=60)

    for prompt in prompts:
        table.add_row(
            str(prompt.id),
            prompt.name,
            "✓" if prompt.is_default else "",
            prompt.template.replace("\n", " "),
        )

    console.print(table)


@prompts_app.command("show")
def prompts_show(prompt_id: int = typer.Argument(..., help="Prompt ID")) -> None:
    """Print a prompt template."""
    with open_database() as (config, conn):
        prompt = PromptManager().get_prompt(conn, prompt_id)

    if prompt is None:
        console.print(f"[red]Prompt {prompt_id} not found.[/red]")
        raise typer.Exit(1)

    console.print(Panel(prompt.template, title=prompt.name))


@prompts_app.command("add")
def prompts_add(
    name: str = typer.Option(..., "--name", "-n", help="Prompt name"),
    template: Optional[str] = typer.Option(None, "--template", "-t", help="Template text"),
    template_file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read the template from a file", exists=True, dir_okay=False
    ),
    is_default: bool = typer.Option(False, "--default", help="Make this the default prompt"),
) -> None:
    """
    Create a prompt template.

    Available placeholders: {{title}}, {{description}}, {{link}},
    {{publishedAt}}, {{matchedTags}}.
    """
    if template_file is not None:
        template = template_file.read_text(encoding="utf-8")
    if not template:
        console.print("[red]Provide --template or --file.[/red]")
        raise typer.Exit(1)

    with open_database() as (config, conn):
        try:
            prompt = PromptManager().create_prompt(conn, name, template, is_default)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    used = [v for v in TEMPLATE_VARIABLES if "{{" + v + "}}" in template]
    console.print(
        f"[green]✅ Added prompt #{prompt.id}: {prompt.name}[/green] "
        f"[dim](placeholders used: {', '.join(used) or 'none'})[/dim]"
    )


@prompts_app.command("default")
def prompts_default(prompt_id: int = typer.Argument(..., help="Prompt ID")) -> None:
    """Make a prompt the default one."""
    with open_database() as (config, conn):
        try:
            prompt = PromptManager().update_prompt(conn, prompt_id, is_default=True)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ {prompt.name} is now the default prompt[/green]")


@prompts_app.command("remove")
def prompts_remove(prompt_id: int = typer.Argument(..., help="Prompt ID")) -> None:
    """Delete a prompt."""
    with open_database() as (config, conn):
        try:
            PromptManager().delete_prompt(conn, prompt_id)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]✅ Removed prompt #{prompt_id}[/green]")
