"""RSS ingestion: feed retrieval, URL normalization and tag matching."""

from .models import BatchFetchResult, FeedItem, FetchResult, MatchedTag
from .normalizer import normalize_url
from .rss_fetcher import FeedFetchError, RSSFetcher
from .source_fetcher import SourceFetcher
from .tag_matcher import match_tags

__all__ = [
    "BatchFetchResult",
    "FeedFetchError",
    "FeedItem",
    "FetchResult",
    "MatchedTag",
    "RSSFetcher",
    "SourceFetcher",
    "match_tags",
    "normalize_url",
]
