"""Data models for newsdash."""

from .article import Article, ArticleListItem, ArticleStatus, ArticleTag, Favorite
from .prompt import Prompt
from .settings import SettingsRecord
from .source import Source
from .tag import Tag, TagKeyword

__all__ = [
    "Article",
    "ArticleListItem",
    "ArticleStatus",
    "ArticleTag",
    "Favorite",
    "Prompt",
    "SettingsRecord",
    "Source",
    "Tag",
    "TagKeyword",
]
