"""Share-draft command."""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..db import ArticleStorage, PromptManager
from ..generation import GeneratePostInput, PostGenerator, article_context, get_llm_provider
from .common import open_database

console = Console()


def draft_command(
    article_id: int = typer.Argument(..., help="Article ID to share"),
    prompt_id: Optional[int] = typer.Option(
        None,
        "--prompt",
        "-p",
        help="Prompt ID. Default: the default prompt",
    ),
) -> None:
    """Generate a Slack-style share draft for an article."""
    with open_database() as (config, conn):
        article = ArticleStorage().get_article(conn, article_id)
        if article is None:
            console.print(f"[red]Article {article_id} not found.[/red]")
            raise typer.Exit(1)

        prompts = PromptManager()
        prompt = prompts.get_prompt(conn, prompt_id) if prompt_id is not None else prompts.get_default_prompt(conn)
        if prompt is None:
            console.print("[red]No prompt found. Create one with 'newsdash prompts add --default'.[/red]")
            raise typer.Exit(1)

    generator = PostGenerator(get_llm_provider(config.get_llm_config()))
    try:
        with console.status("[bold]Generating draft...[/bold]"):
            post = generator.generate_post(
                GeneratePostInput(template=prompt.template, article=article_context(article))
            )
    except Exception as e:
        console.print(f"[red]Failed to generate post: {e}[/red]")
        raise typer.Exit(1)

    console.print(Panel(post.text, title=f"{article.title} · {prompt.name}", subtitle=post.provider))
    console.print(f"[dim]Model: {post.model or post.provider} · Tokens used: {post.tokens_used:,}[/dim]")
