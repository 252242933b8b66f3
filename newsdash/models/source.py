"""Source model for RSS feed sources."""

from pydantic import Field

from .base import DBModel


class Source(DBModel):
    """RSS feed source model."""

    name: str = Field(..., description="Source name")
    url: str = Field(..., description="RSS feed URL")
    is_active: bool = Field(True, description="Whether the source is polled")
