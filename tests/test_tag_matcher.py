"""Tests for keyword tag matching."""

from newsdash.ingestion import MatchedTag, match_tags

from .conftest import make_tag


def test_matches_keyword_case_insensitively(ai_tags):
    matched = match_tags("New gpt release", None, ai_tags)

    assert matched == [MatchedTag(id=1, name="AI")]


def test_matches_in_description():
    tags = [make_tag(3, "Python", ["python"])]

    assert match_tags("Weekly notes", "Tips for Python developers", tags) == [
        MatchedTag(id=3, name="Python")
    ]


def test_substring_matching_is_loose():
    tags = [make_tag(4, "React", ["React"])]

    assert [t.name for t in match_tags("ReactJS turns ten", None, tags)] == ["React"]


def test_inactive_tags_never_match():
    tags = [make_tag(1, "AI", ["GPT"], is_active=False)]

    assert match_tags("GPT everywhere", "GPT", tags) == []


def test_empty_text_matches_nothing(ai_tags):
    assert match_tags("", None, ai_tags) == []
    assert match_tags("   ", "  ", ai_tags) == []


def test_tag_without_keywords_matches_nothing():
    assert match_tags("Anything at all", "really", [make_tag(5, "Empty", [])]) == []


def test_each_tag_reported_once(ai_tags):
    matched = match_tags("GPT and machine learning", "more machine learning", ai_tags)

    assert [t.id for t in matched] == [1]


def test_multiple_tags_keep_input_order(ai_tags):
    matched = match_tags("Running GPT on AWS", None, ai_tags)

    assert [t.name for t in matched] == ["AI", "Cloud"]
