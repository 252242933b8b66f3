"""Prompt templates for share drafts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DBModel


class Prompt(DBModel):
    """Share-draft prompt template."""

    name: str = Field(..., description="Prompt name")
    template: str = Field(..., description="Template text with {{placeholders}}")
    is_default: bool = Field(False, description="Whether this is the default prompt")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
