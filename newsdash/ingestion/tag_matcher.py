"""Keyword matching of articles against interest tags."""

from typing import List, Optional, Sequence

from ..models import Tag
from .models import MatchedTag


def match_tags(
    title: str,
    description: Optional[str],
    tags: Sequence[Tag],
) -> List[MatchedTag]:
    """
    Return the active tags whose keywords occur in the title or description.

    Matching is a case-insensitive substring test, so "React" matches
    "ReactJS" and "AI" matches "said". Order follows ``tags``.
    """
    haystack = f"{title or ''} {description or ''}".lower()
    if not haystack.strip():
        return []

    matched: List[MatchedTag] = []
    seen = set()
    for tag in tags:
        if not tag.is_active or tag.id in seen:
            continue
        if any(kw.keyword and kw.keyword.lower() in haystack for kw in tag.keywords):
            matched.append(MatchedTag(id=tag.id, name=tag.name))
            seen.add(tag.id)

    return matched
