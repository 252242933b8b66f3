"""Tests for per-source ingestion."""

from unittest.mock import MagicMock

import psycopg
import pytest
from psycopg.errors import UniqueViolation

from newsdash.ingestion import FeedFetchError, FeedItem, SourceFetcher
from newsdash.models import ArticleStatus

from .conftest import make_source


@pytest.fixture
def rss_fetcher(feed_items):
    fetcher = MagicMock()
    fetcher.fetch_feed.return_value = feed_items
    return fetcher


@pytest.fixture
def source_fetcher(mock_conn, storage, rss_fetcher):
    return SourceFetcher(mock_conn, storage=storage, rss_fetcher=rss_fetcher)


@pytest.fixture
def source():
    return make_source(7, "Example Blog")


class TestFetchOne:
    def test_creates_new_and_skips_known(self, source_fetcher, storage, source, ai_tags):
        storage.add(link="https://blog.example.com/garden", title="Gardening tips")

        result = source_fetcher.fetch_one(source, ai_tags)

        assert result.source_id == 7
        assert result.source_name == "Example Blog"
        assert result.created == 1
        assert result.skipped == 1
        assert result.errors == []

    def test_stores_canonical_url_and_status(self, source_fetcher, storage, source, ai_tags):
        source_fetcher.fetch_one(source, ai_tags)

        by_title = {a.title: a for a in storage.articles.values()}
        ml = by_title["Intro to Machine Learning"]
        assert ml.canonical_url == "https://blog.example.com/ml"
        assert ml.link == "https://blog.example.com/ml/?utm_source=rss"
        assert ml.source_id == 7
        assert ml.status is ArticleStatus.VISIBLE
        assert by_title["Gardening tips"].status is ArticleStatus.EXCLUDED
        assert storage.article_tags == [(ml.id, 1)]

    def test_second_run_skips_everything(self, source_fetcher, source, ai_tags):
        source_fetcher.fetch_one(source, ai_tags)

        result = source_fetcher.fetch_one(source, ai_tags)

        assert (result.created, result.skipped) == (0, 2)

    def test_tracking_variant_is_duplicate(self, source_fetcher, rss_fetcher, source, ai_tags):
        rss_fetcher.fetch_feed.return_value = [
            FeedItem(title="A", link="https://example.com/x?utm_source=a"),
            FeedItem(title="A again", link="https://example.com/x/?fbclid=zzz"),
        ]

        result = source_fetcher.fetch_one(source, ai_tags)

        assert (result.created, result.skipped) == (1, 1)

    def test_item_without_link_is_ignored(self, source_fetcher, rss_fetcher, storage, source, ai_tags):
        rss_fetcher.fetch_feed.return_value = [FeedItem(title="No link", link="")]

        result = source_fetcher.fetch_one(source, ai_tags)

        assert (result.created, result.skipped, result.errors) == (0, 0, [])
        assert storage.articles == {}

    def test_feed_failure_yields_single_error(self, source_fetcher, rss_fetcher, storage, source, ai_tags):
        rss_fetcher.fetch_feed.side_effect = FeedFetchError("HTTP 500 fetching feed")

        result = source_fetcher.fetch_one(source, ai_tags)

        assert result.created == 0
        assert result.skipped == 0
        assert result.errors == ["HTTP 500 fetching feed"]
        assert storage.articles == {}

    def test_tag_attach_failure_removes_article(
        self, source_fetcher, rss_fetcher, mock_conn, storage, source, ai_tags, feed_items
    ):
        rss_fetcher.fetch_feed.return_value = feed_items[:1]
        storage.attach_error = psycopg.OperationalError("connection lost")

        result = source_fetcher.fetch_one(source, ai_tags)

        assert result.created == 0
        assert result.skipped == 0
        assert len(result.errors) == 1
        assert result.errors[0] == 'Item "Intro to Machine Learning": connection lost'
        assert len(storage.deleted_ids) == 1
        assert storage.articles == {}
        mock_conn.rollback.assert_called()

    def test_concurrent_insert_counts_as_skipped(self, source_fetcher, mock_conn, storage, source):
        storage.create_error = UniqueViolation("duplicate key value")

        result = source_fetcher.fetch_one(source, [])

        assert (result.created, result.skipped, result.errors) == (0, 2, [])
        assert mock_conn.rollback.call_count == 2

    def test_untitled_item_error_uses_placeholder(self, source_fetcher, rss_fetcher, storage, source):
        storage.create_error = RuntimeError("boom")
        rss_fetcher.fetch_feed.return_value = [FeedItem(title="", link="https://example.com/1")]

        result = source_fetcher.fetch_one(source, [])

        assert result.errors == ['Item "unknown": boom']

    def test_failed_cleanup_keeps_attach_error(
        self, source_fetcher, rss_fetcher, mock_conn, storage, source, ai_tags, feed_items
    ):
        rss_fetcher.fetch_feed.return_value = feed_items[:1]
        storage.attach_error = psycopg.OperationalError("tag insert failed")
        storage.delete_error = psycopg.OperationalError("delete failed")

        result = source_fetcher.fetch_one(source, ai_tags)

        assert result.created == 0
        assert result.errors == ['Item "Intro to Machine Learning": tag insert failed']
        assert mock_conn.rollback.call_count >= 2
