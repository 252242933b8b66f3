"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("newsdash", description="Database name")
    user: str = Field("newsdash_user", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")


class IngestionConfig(BaseModel):
    """Feed ingestion and retention parameters."""

    max_sources: int = Field(10, description="Maximum number of registered sources", ge=1)
    fetch_timeout: float = Field(20.0, description="Per-feed request timeout in seconds", gt=0)
    user_agent: str = Field("newsdash/1.0 (+RSS reader)", description="User-Agent for feed requests")
    default_retention_days: int = Field(
        7, description="Retention window used before settings exist", ge=1, le=365
    )


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai, anthropic)")
    model: Optional[str] = Field(None, description="Model name (provider default when empty)")
    api_key_env: Optional[str] = Field(None, description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(None, description="Base URL for API (e.g., for a proxy)")


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
