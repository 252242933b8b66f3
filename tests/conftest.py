"""Shared fixtures for newsdash tests."""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest

from newsdash.ingestion import FeedItem
from newsdash.models import Article, ArticleStatus, Source, Tag, TagKeyword

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def make_tag(tag_id: int, name: str, keywords: List[str], is_active: bool = True) -> Tag:
    """Build a Tag with keywords the way TagManager returns it."""
    return Tag(
        id=tag_id,
        name=name,
        is_active=is_active,
        created_at=NOW,
        keywords=[
            TagKeyword(id=tag_id * 100 + i, tag_id=tag_id, keyword=kw)
            for i, kw in enumerate(keywords)
        ],
    )


def make_source(source_id: int, name: str, is_active: bool = True) -> Source:
    return Source(
        id=source_id,
        name=name,
        url=f"https://feeds.example.com/{source_id}.xml",
        is_active=is_active,
        created_at=NOW,
    )


class InMemoryArticleStorage:
    """ArticleStorage stand-in backed by dicts."""

    def __init__(self) -> None:
        self.articles: Dict[int, Article] = {}
        self.article_tags: List[Tuple[int, int]] = []
        self.favorites: set = set()
        self.attach_error: Optional[Exception] = None
        self.create_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None
        self.deleted_ids: List[int] = []
        self._next_id = 1

    def add(self, created_at: datetime = NOW, favorite: bool = False, **fields) -> Article:
        fields.setdefault("title", f"Article {self._next_id}")
        fields.setdefault("link", f"https://example.com/{self._next_id}")
        fields.setdefault("canonical_url", fields["link"])
        fields.setdefault("source_id", 1)
        article = Article(id=self._next_id, created_at=created_at, **fields)
        self.articles[article.id] = article
        if favorite:
            self.favorites.add(article.id)
        self._next_id += 1
        return article

    def article_exists_by_canonical_url(self, conn, canonical_url: str) -> bool:
        return any(a.canonical_url == canonical_url for a in self.articles.values())

    def create_article(self, conn, **fields) -> Article:
        if self.create_error is not None:
            raise self.create_error
        return self.add(**fields)

    def attach_tags(self, conn, article_id: int, tag_ids: List[int]) -> None:
        if self.attach_error is not None:
            raise self.attach_error
        self.article_tags.extend((article_id, tag_id) for tag_id in tag_ids)

    def delete_article(self, conn, article_id: int) -> None:
        if self.delete_error is not None:
            raise self.delete_error
        self.deleted_ids.append(article_id)
        self.articles.pop(article_id, None)

    def get_favorited_article_ids(self, conn) -> set:
        return set(self.favorites)

    def delete_articles_older_than(self, conn, cutoff: datetime, exclude_ids: Iterable[int] = ()) -> int:
        excluded = set(exclude_ids)
        doomed = [
            a.id for a in self.articles.values()
            if a.created_at < cutoff and a.id not in excluded
        ]
        for article_id in doomed:
            del self.articles[article_id]
        return len(doomed)

    def statuses(self) -> Dict[str, ArticleStatus]:
        return {a.title: a.status for a in self.articles.values()}


@pytest.fixture
def storage() -> InMemoryArticleStorage:
    """Empty in-memory article storage."""
    return InMemoryArticleStorage()


@pytest.fixture
def mock_conn() -> MagicMock:
    """psycopg connection double; ``mock_conn.cur`` is the cursor used in ``with``."""
    conn = MagicMock()
    cur = MagicMock()
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    cur.rowcount = 0
    conn.cursor.return_value.__enter__.return_value = cur
    conn.cur = cur
    return conn


@pytest.fixture
def ai_tags() -> List[Tag]:
    return [
        make_tag(1, "AI", ["machine learning", "GPT"]),
        make_tag(2, "Cloud", ["AWS"]),
    ]


@pytest.fixture
def feed_items() -> List[FeedItem]:
    return [
        FeedItem(
            title="Intro to Machine Learning",
            link="https://blog.example.com/ml/?utm_source=rss",
            published=NOW,
            description="A gentle start",
        ),
        FeedItem(
            title="Gardening tips",
            link="https://blog.example.com/garden",
            description="Tomatoes in autumn",
        ),
    ]
