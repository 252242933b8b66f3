"""Data models for ingestion."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class FeedItem(BaseModel):
    """Parsed RSS feed item."""

    title: str = Field("", description="Article title")
    link: str = Field("", description="Article URL")
    published: Optional[datetime] = Field(None, description="Publication date")
    description: Optional[str] = Field(None, description="Article description/summary")


class MatchedTag(BaseModel):
    """Tag whose keyword was found in an article."""

    id: int = Field(..., description="Tag database ID")
    name: str = Field(..., description="Tag name")


class FetchResult(BaseModel):
    """Outcome of ingesting one source."""

    source_id: int = Field(..., description="Source database ID")
    source_name: str = Field(..., description="Source name")
    created: int = Field(0, description="Articles created")
    skipped: int = Field(0, description="Items already stored")
    errors: List[str] = Field(default_factory=list, description="Per-source or per-item errors")


class BatchFetchResult(BaseModel):
    """Outcome of ingesting all active sources."""

    total_sources: int = Field(0, description="Number of active sources attempted")
    results: List[FetchResult] = Field(default_factory=list, description="Per-source results")

    @property
    def total_created(self) -> int:
        return sum(r.created for r in self.results)

    @property
    def total_skipped(self) -> int:
        return sum(r.skipped for r in self.results)

    @property
    def total_errors(self) -> int:
        return sum(len(r.errors) for r in self.results)
