"""Interest tags and their keywords."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .base import DBModel


class TagKeyword(BaseModel):
    """A keyword owned by a tag."""

    id: Optional[int] = Field(None, description="Primary key")
    tag_id: Optional[int] = Field(None, description="Foreign key to tags table")
    keyword: str = Field(..., description="Keyword matched against article text")


class Tag(DBModel):
    """Interest tag model."""

    name: str = Field(..., description="Tag name")
    is_active: bool = Field(True, description="Whether the tag takes part in matching")
    keywords: List[TagKeyword] = Field(default_factory=list, description="Keywords of this tag")
