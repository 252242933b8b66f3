"""Database management for newsdash."""

from .articles import ArticleStorage
from .connection import get_connection, get_connection_pool
from .errors import NotFoundError, SourceLimitError
from .init import init_database, validate_connection
from .prompts import PromptManager
from .settings import SettingsManager
from .sources import SourceManager
from .tags import TagManager

__all__ = [
    "ArticleStorage",
    "NotFoundError",
    "PromptManager",
    "SettingsManager",
    "SourceLimitError",
    "SourceManager",
    "TagManager",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
