"""Per-source ingestion: fetch, deduplicate, tag and store feed items."""

from enum import Enum
from typing import Optional, Sequence

import psycopg
from psycopg import Connection
from psycopg.errors import UniqueViolation
from rich.console import Console

from ..db.articles import ArticleStorage
from ..models import ArticleStatus, Source, Tag
from .models import FeedItem, FetchResult
from .normalizer import normalize_url
from .rss_fetcher import RSSFetcher
from .tag_matcher import match_tags

console = Console()


class ItemOutcome(str, Enum):
    """What happened to a single feed item."""

    CREATED = "created"
    SKIPPED = "skipped"
    IGNORED = "ignored"


class SourceFetcher:
    """Ingest the items of one RSS source."""

    def __init__(
        self,
        conn: Connection,
        storage: Optional[ArticleStorage] = None,
        rss_fetcher: Optional[RSSFetcher] = None,
    ) -> None:
        """
        Initialize source fetcher.

        Args:
            conn: Database connection used for all writes
            storage: Article storage (default: a new ArticleStorage)
            rss_fetcher: Feed retriever (default: RSSFetcher with its default timeout)
        """
        self.conn = conn
        self.storage = storage or ArticleStorage()
        self.rss_fetcher = rss_fetcher or RSSFetcher()

    def fetch_one(self, source: Source, tags: Sequence[Tag]) -> FetchResult:
        """
        Fetch a source and store its new items.

        Failures are recorded in the result instead of being raised: a
        feed that cannot be retrieved yields a single error, a failing item
        yields one error and processing moves on to the next item.
        """
        result = FetchResult(source_id=source.id, source_name=source.name)

        try:
            items = self.rss_fetcher.fetch_feed(source.url)
        except Exception as e:
            console.print(f"[red]{source.name}: {e}[/red]")
            result.errors.append(str(e))
            return result

        for item in items:
            try:
                outcome = self._process_item(source, item, tags)
            except Exception as e:
                self._rollback()
                result.errors.append(f'Item "{item.title or "unknown"}": {e}')
                continue

            if outcome is ItemOutcome.CREATED:
                result.created += 1
            elif outcome is ItemOutcome.SKIPPED:
                result.skipped += 1

        return result

    def _process_item(self, source: Source, item: FeedItem, tags: Sequence[Tag]) -> ItemOutcome:
        if not item.link:
            return ItemOutcome.IGNORED

        canonical_url = normalize_url(item.link)
        if self.storage.article_exists_by_canonical_url(self.conn, canonical_url):
            return ItemOutcome.SKIPPED

        matched = match_tags(item.title, item.description, tags)
        status = ArticleStatus.VISIBLE if matched else ArticleStatus.EXCLUDED

        try:
            article = self.storage.create_article(
                self.conn,
                title=item.title,
                description=item.description,
                link=item.link,
                canonical_url=canonical_url,
                published_at=item.published,
                source_id=source.id,
                status=status,
            )
        except UniqueViolation:
            # Another run stored the same canonical URL after our check
            self._rollback()
            return ItemOutcome.SKIPPED

        if matched:
            try:
                self.storage.attach_tags(self.conn, article.id, [t.id for t in matched])
            except Exception:
                # Never leave an article stored without its tags
                self._rollback()
                try:
                    self.storage.delete_article(self.conn, article.id)
                except Exception as delete_error:
                    self._rollback()
                    console.print(
                        f"[red]Failed to remove article {article.id} after tag error: {delete_error}[/red]"
                    )
                raise

        return ItemOutcome.CREATED

    def _rollback(self) -> None:
        try:
            self.conn.rollback()
        except psycopg.Error as e:
            console.print(f"[red]Rollback failed: {e}[/red]")
