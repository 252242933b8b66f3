"""Data models for share-draft generation."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ArticleContext(BaseModel):
    """Article fields available to prompt templates."""

    title: str = Field(..., description="Article title")
    description: Optional[str] = Field(None, description="Article description")
    link: str = Field(..., description="Article URL")
    published_at: Optional[str] = Field(None, description="Publication date (formatted)")
    matched_tags: Optional[List[str]] = Field(None, description="Names of matched tags")


class GeneratePostInput(BaseModel):
    """Template plus the article it is applied to."""

    template: str = Field(..., description="Prompt template")
    article: ArticleContext = Field(..., description="Article information")


class GeneratedPost(BaseModel):
    """Generated share draft."""

    text: str = Field(..., description="Draft post text")
    provider: str = Field(..., description="LLM provider that produced the text")
    model: Optional[str] = Field(None, description="Model name")
    tokens_used: int = Field(0, description="Tokens used by the provider so far")
