"""Tests for RSS retrieval and entry parsing."""

from datetime import datetime, timezone

import feedparser
import httpx
import pytest

from newsdash.ingestion import FeedFetchError, RSSFetcher, match_tags
from newsdash.ingestion.rss_fetcher import parse_entry

from .conftest import make_tag

FEED_URL = "https://feeds.example.com/rss.xml"

RSS_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
  <channel>
    <title>Example Feed</title>
    <link>https://example.com</link>
    <description>Example</description>
    <item>
      <title>First post</title>
      <link>https://example.com/first?utm_source=rss</link>
      <description>&lt;p&gt;Hello &lt;b&gt;world&lt;/b&gt; &amp;amp; friends&lt;/p&gt;</description>
      <pubDate>Tue, 10 Jun 2025 04:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/second</link>
    </item>
  </channel>
</rss>
"""


def _fetcher(handler) -> RSSFetcher:
    return RSSFetcher(timeout=5.0, transport=httpx.MockTransport(handler))


class TestFetchFeed:
    def test_parses_items(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, content=RSS_DOCUMENT))

        items = fetcher.fetch_feed(FEED_URL)

        assert [i.title for i in items] == ["First post", "Second post"]
        first, second = items
        assert first.link == "https://example.com/first?utm_source=rss"
        assert first.description == "Hello world & friends"
        assert first.published == datetime(2025, 6, 10, 4, 0, tzinfo=timezone.utc)
        assert second.description is None
        assert second.published is None

    def test_sends_user_agent(self):
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["user-agent"]
            return httpx.Response(200, content=RSS_DOCUMENT)

        RSSFetcher(user_agent="tester/2.0", transport=httpx.MockTransport(handler)).fetch_feed(FEED_URL)

        assert seen["ua"] == "tester/2.0"

    def test_http_error_status(self):
        fetcher = _fetcher(lambda request: httpx.Response(503))

        with pytest.raises(FeedFetchError, match="HTTP 503"):
            fetcher.fetch_feed(FEED_URL)

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(FeedFetchError, match="timed out"):
            _fetcher(handler).fetch_feed(FEED_URL)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(FeedFetchError, match="HTTP error"):
            _fetcher(handler).fetch_feed(FEED_URL)

    def test_unparseable_document(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, content=b"this is not a feed at all"))

        with pytest.raises(FeedFetchError, match="Invalid RSS feed"):
            fetcher.fetch_feed(FEED_URL)

    def test_html_comment_is_not_description_text(self):
        doc = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example Feed</title>
    <link>https://example.com</link>
    <description>Example</description>
    <item>
      <title>Cloud notes</title>
      <link>https://example.com/cloud</link>
      <description><![CDATA[<p>Hi<!-- aws > gcp --> there</p>]]></description>
    </item>
  </channel>
</rss>
"""
        fetcher = _fetcher(lambda request: httpx.Response(200, content=doc))

        [item] = fetcher.fetch_feed(FEED_URL)

        assert item.description == "Hi there"
        assert match_tags(item.title, item.description, [make_tag(9, "GCP", ["gcp"])]) == []


class TestParseEntry:
    def test_atom_entry_uses_content_and_updated_date(self):
        doc = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Atom</title>
  <id>urn:feed</id>
  <updated>2025-06-11T08:30:00Z</updated>
  <entry>
    <title>Atom entry</title>
    <id>urn:entry</id>
    <link href="https://example.com/atom-entry"/>
    <updated>2025-06-11T08:30:00Z</updated>
    <content type="text">Full body text</content>
  </entry>
</feed>
"""
        entry = feedparser.parse(doc).entries[0]

        item = parse_entry(entry)

        assert item.title == "Atom entry"
        assert item.link == "https://example.com/atom-entry"
        assert item.description == "Full body text"
        assert item.published == datetime(2025, 6, 11, 8, 30, tzinfo=timezone.utc)

    def test_missing_fields(self):
        item = parse_entry({})

        assert item.title == ""
        assert item.link == ""
        assert item.description is None
        assert item.published is None

    @pytest.mark.parametrize(
        "summary,expected",
        [
            ("<p>Hi<!-- aws > gcp --> there</p>", "Hi there"),
            ("<p>Fast &amp; small</p><script>var x = 1 > 0;</script>", "Fast & small"),
            ("<ul>\n  <li>one</li>\n  <li>two</li>\n</ul>", "one two"),
            ("Plain   text\n with breaks", "Plain text with breaks"),
            ("<br/>", None),
        ],
    )
    def test_summary_markup_becomes_text(self, summary, expected):
        assert parse_entry({"summary": summary}).description == expected
