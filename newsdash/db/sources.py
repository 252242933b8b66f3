"""Source management in database."""

from typing import List, Optional
from urllib.parse import urlsplit

from psycopg import Connection
from psycopg.errors import UniqueViolation

from ..models import Source
from .errors import NotFoundError, SourceLimitError

DEFAULT_MAX_SOURCES = 10
MAX_NAME_LENGTH = 100


def validate_feed_url(url: str) -> str:
    """Return the stripped URL or raise ValueError if it is not absolute http(s)."""
    url = (url or "").strip()
    if not url:
        raise ValueError("URL is required")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError("Invalid URL format")
    return url


class SourceManager:
    """Manage sources in database."""

    def __init__(self, max_sources: int = DEFAULT_MAX_SOURCES) -> None:
        """Initialize with the maximum number of sources allowed."""
        self.max_sources = max_sources

    def get_sources(self, conn: Connection) -> List[Source]:
        """Get all sources, newest first."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM sources ORDER BY created_at DESC, id DESC")
            return [Source(**row) for row in cur.fetchall()]

    def get_source(self, conn: Connection, source_id: int) -> Optional[Source]:
        """Get a source by ID."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM sources WHERE id = %s", (source_id,))
            row = cur.fetchone()
            return Source(**row) if row else None

    def get_source_count(self, conn: Connection) -> int:
        """Count registered sources, active or not."""
        with conn.cursor() as cur:
            cur.execute("SELECT COUNT(*) AS count FROM sources")
            return cur.fetchone()["count"]

    def create_source(self, conn: Connection, name: str, url: str) -> Source:
        """
        Register a new source.

        Raises:
            ValueError: invalid name or URL, or the URL is already registered
            SourceLimitError: the maximum number of sources is reached
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Source name is required")
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(f"Source name must be at most {MAX_NAME_LENGTH} characters")
        url = validate_feed_url(url)

        if self.get_source_count(conn) >= self.max_sources:
            raise SourceLimitError(f"Maximum sources limit ({self.max_sources}) reached")

        try:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO sources (name, url)
                    VALUES (%s, %s)
                    RETURNING *
                    """,
                    (name, url),
                )
                row = cur.fetchone()
        except UniqueViolation:
            conn.rollback()
            raise ValueError("A source with this URL already exists")

        conn.commit()
        return Source(**row)

    def delete_source(self, conn: Connection, source_id: int) -> None:
        """Delete a source; its articles are removed by cascade."""
        with conn.cursor() as cur:
            cur.execute("DELETE FROM sources WHERE id = %s", (source_id,))
            deleted = cur.rowcount
        conn.commit()
        if not deleted:
            raise NotFoundError(f"Source {source_id} not found")

    def set_source_active(self, conn: Connection, source_id: int, is_active: bool) -> Source:
        """Enable or disable polling of a source."""
        with conn.cursor() as cur:
            cur.execute(
                "UPDATE sources SET is_active = %s WHERE id = %s RETURNING *",
                (is_active, source_id),
            )
            row = cur.fetchone()
        conn.commit()
        if row is None:
            raise NotFoundError(f"Source {source_id} not found")
        return Source(**row)
