"""Article model for storing ingested feed items."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .base import DBModel


class ArticleStatus(str, Enum):
    """Visibility of an article in the dashboard."""

    VISIBLE = "visible"
    EXCLUDED = "excluded"


class Article(DBModel):
    """Article model."""

    title: str = Field(..., description="Article title")
    description: Optional[str] = Field(None, description="Summary or content snippet")
    link: str = Field(..., description="Article URL as published in the feed")
    canonical_url: Optional[str] = Field(None, description="Normalized URL used for deduplication")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp")
    source_id: int = Field(..., description="Foreign key to sources table")
    status: ArticleStatus = Field(ArticleStatus.VISIBLE, description="Visible or excluded")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class ArticleTag(BaseModel):
    """Link between an article and a tag matched at ingestion time."""

    article_id: int = Field(..., description="Foreign key to articles table")
    tag_id: int = Field(..., description="Foreign key to tags table")


class Favorite(DBModel):
    """Favorite flag; at most one per article."""

    article_id: int = Field(..., description="Foreign key to articles table")


class ArticleListItem(Article):
    """Article row enriched for listing."""

    source_name: Optional[str] = Field(None, description="Name of the source")
    tags: List[str] = Field(default_factory=list, description="Names of matched tags")
    is_favorite: bool = Field(False, description="Whether the article is favorited")
