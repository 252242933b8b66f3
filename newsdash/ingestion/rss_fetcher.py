"""RSS feed retrieval and parsing."""

import calendar
from datetime import datetime, timezone
from typing import Any, List, Optional

import feedparser
import httpx
from bs4 import BeautifulSoup

from .models import FeedItem


class FeedFetchError(Exception):
    """Raised when a feed cannot be retrieved or parsed."""


def _to_datetime(parsed: Any) -> Optional[datetime]:
    # feedparser normalizes dates to UTC struct_time
    if not parsed:
        return None
    try:
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None


def _to_snippet(markup: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")

    # Remove non-content elements
    for element in soup(["script", "style"]):
        element.decompose()

    # get_text skips comments
    return " ".join(soup.get_text(" ", strip=True).split())


def parse_entry(entry: Any) -> FeedItem:
    """Build a FeedItem from a feedparser entry."""
    description = None
    summary = entry.get("summary")
    if summary:
        description = _to_snippet(summary) or None
    if description is None:
        content = entry.get("content") or []
        if content and content[0].get("value"):
            description = content[0]["value"]

    published = _to_datetime(entry.get("published_parsed")) or _to_datetime(
        entry.get("updated_parsed")
    )

    return FeedItem(
        title=entry.get("title") or "",
        link=(entry.get("link") or "").strip(),
        published=published,
        description=description,
    )


class RSSFetcher:
    """Fetch and parse RSS feeds."""

    def __init__(
        self,
        timeout: float = 20.0,
        user_agent: str = "newsdash/1.0 (+RSS reader)",
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize RSS fetcher."""
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    def fetch_feed(self, url: str) -> List[FeedItem]:
        """
        Fetch a feed and return its items.

        Raises:
            FeedFetchError: on HTTP failure, timeout or an unparseable document
        """
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/rss+xml, application/atom+xml, application/xml;q=0.9, */*;q=0.8",
        }
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers=headers,
                transport=self.transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException:
            raise FeedFetchError(f"Request timed out after {self.timeout:g}s")
        except httpx.HTTPStatusError as e:
            raise FeedFetchError(f"HTTP {e.response.status_code} fetching {url}")
        except httpx.HTTPError as e:
            raise FeedFetchError(f"HTTP error: {e}")

        feed = feedparser.parse(response.content)

        # Tolerate minor markup problems as long as entries came through
        if feed.bozo and not feed.entries:
            raise FeedFetchError(f"Invalid RSS feed: {feed.bozo_exception}")

        return [parse_entry(entry) for entry in feed.entries]
