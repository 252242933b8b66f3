"""Retention sweep of old, non-favorited articles."""

from datetime import datetime
from typing import Callable, Optional

import pendulum
from psycopg import Connection
from pydantic import BaseModel, Field
from rich.console import Console

from ..db.articles import ArticleStorage
from ..db.settings import validate_retention_days

console = Console()


class SweepResult(BaseModel):
    """Outcome of a retention sweep."""

    deleted_count: int = Field(0, description="Number of articles deleted")
    retention_days: int = Field(..., description="Retention window applied")
    cutoff: datetime = Field(..., description="Articles created before this were eligible")


class RetentionSweeper:
    """Delete articles older than the retention window, sparing favorites."""

    def __init__(
        self,
        conn: Connection,
        storage: Optional[ArticleStorage] = None,
        now: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.conn = conn
        self.storage = storage or ArticleStorage()
        self.now = now or (lambda: pendulum.now("UTC"))

    def sweep(self, retention_days: int) -> SweepResult:
        """Delete expired articles and report how many went."""
        retention_days = validate_retention_days(retention_days)
        cutoff = pendulum.instance(self.now()).subtract(days=retention_days)

        favorited = self.storage.get_favorited_article_ids(self.conn)
        deleted = self.storage.delete_articles_older_than(
            self.conn,
            cutoff,
            exclude_ids=favorited,
        )

        console.print(
            f"[dim]Cleanup completed: {deleted} articles deleted "
            f"(retention: {retention_days} days, {len(favorited)} favorites exempt)[/dim]"
        )
        return SweepResult(deleted_count=deleted, retention_days=retention_days, cutoff=cutoff)
