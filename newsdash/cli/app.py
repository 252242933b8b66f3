"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_app
from .draft import draft_command
from .fetch import cleanup_command, fetch_command
from .init import init_command
from .prompts import prompts_app
from .settings import settings_app
from .sources import sources_app
from .tags import tags_app

app = typer.Typer(
    name="newsdash",
    help="newsdash - Personal RSS news dashboard",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("fetch")(fetch_command)
app.command("cleanup")(cleanup_command)
app.command("draft")(draft_command)
app.add_typer(sources_app, name="sources", help="Manage RSS sources")
app.add_typer(tags_app, name="tags", help="Manage interest tags")
app.add_typer(articles_app, name="articles", help="Browse and curate articles")
app.add_typer(settings_app, name="settings", help="Show or change settings")
app.add_typer(prompts_app, name="prompts", help="Manage share-draft prompts")


if __name__ == "__main__":
    app()
