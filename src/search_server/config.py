"""Centralized configuration for search-server using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``SEARCH_SERVER_*`` environment variables.

    The engine limits live here rather than as module constants so each
    ``SearchServer`` instance owns its own values.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    stop_words: str = Field(default="", description="Space-separated stop words applied to documents and queries")

    # Ranking
    max_result_document_count: int = Field(default=5, ge=1, description="Maximum documents returned per query")
    relevance_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        description="Relevance differences below this are ties, broken by rating",
    )

    # Request tracking
    request_window_size: int = Field(
        default=1440,
        ge=1,
        description="Number of most recent requests kept when counting empty results",
    )

    # Console output
    page_size: int = Field(default=2, ge=1, description="Results per page in console output")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    # Tracing
    tracing_enabled: bool = Field(default=True, description="Wrap engine operations in OpenTelemetry spans")
