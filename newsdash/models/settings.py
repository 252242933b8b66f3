"""Application settings stored in the database."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DBModel


class SettingsRecord(DBModel):
    """The single settings row."""

    article_retention_days: int = Field(7, description="Days to keep non-favorited articles", ge=1, le=365)
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
