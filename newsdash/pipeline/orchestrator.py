"""Batch ingestion over all active sources."""

from typing import Callable, Optional

from psycopg import Connection
from rich.console import Console

from ..config import IngestionConfig
from ..db.articles import ArticleStorage
from ..db.sources import SourceManager
from ..db.tags import TagManager
from ..ingestion import BatchFetchResult, FetchResult, RSSFetcher, SourceFetcher
from ..models import Source

console = Console()


class BatchOrchestrator:
    """Run the source fetcher over every active source, one after another."""

    def __init__(
        self,
        conn: Connection,
        config: Optional[IngestionConfig] = None,
        source_manager: Optional[SourceManager] = None,
        tag_manager: Optional[TagManager] = None,
        source_fetcher: Optional[SourceFetcher] = None,
    ) -> None:
        """
        Initialize batch orchestrator.

        Args:
            conn: Database connection
            config: Ingestion settings (timeouts, user agent, source cap)
            source_manager: Source loader (default built from config)
            tag_manager: Tag loader
            source_fetcher: Per-source ingester (default built from config)
        """
        self.conn = conn
        self.config = config or IngestionConfig()
        self.source_manager = source_manager or SourceManager(self.config.max_sources)
        self.tag_manager = tag_manager or TagManager()
        self.source_fetcher = source_fetcher or SourceFetcher(
            conn,
            storage=ArticleStorage(),
            rss_fetcher=RSSFetcher(
                timeout=self.config.fetch_timeout,
                user_agent=self.config.user_agent,
            ),
        )

    def fetch_all(
        self,
        on_source_done: Optional[Callable[[Source, FetchResult], None]] = None,
    ) -> BatchFetchResult:
        """
        Ingest every active source.

        Tags are loaded once and shared by all sources of the run. A
        source that fails entirely still contributes a result.
        """
        sources = [s for s in self.source_manager.get_sources(self.conn) if s.is_active]
        tags = self.tag_manager.get_tags(self.conn)

        batch = BatchFetchResult(total_sources=len(sources))
        for source in sources:
            result = self.source_fetcher.fetch_one(source, tags)
            batch.results.append(result)
            if on_source_done is not None:
                on_source_done(source, result)

        console.print(
            f"[dim]Fetch completed: {batch.total_sources} sources, "
            f"{batch.total_created} created, {batch.total_skipped} skipped, "
            f"{batch.total_errors} errors[/dim]"
        )
        for result in batch.results:
            if result.errors:
                console.print(f"[yellow]Errors for {result.source_name}:[/yellow]")
                for error in result.errors:
                    console.print(f"  - {error}")

        return batch
