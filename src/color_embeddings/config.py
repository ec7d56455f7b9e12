"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Embedding provider
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_base_url: str = Field(
        default="",
        description=(
            "Base URL for an OpenAI-compatible embeddings API. "
            "Leave empty to use OpenAI cloud."
        ),
    )
    embedding_model: str = "text-embedding-3-small"
    embedding_dimensions: int = 1536

    # Vector store
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "colors"
    distance_metric: str = Field(default="cosine", description="cosine | l2 | ip")

    # Input
    colors_csv_path: str = "data/colornames.csv"
    row_delimiter: str = ","
    good_name_marker: str = "x"

    # Throttling
    pause_every_rows: int = 10
    pause_seconds: float = 0.2

    # Search
    search_match_count: int = 10

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import `settings` wherever needed.
settings = Settings()
