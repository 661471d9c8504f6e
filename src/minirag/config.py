"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Embedding backend
    embedding_backend: Literal["openai", "simple"] = Field(
        default="openai",
        description="Embedding provider: OpenAI-compatible API or local deterministic",
    )
    embedding_api_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI-compatible embedding API URL",
    )
    embedding_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("embedding_api_key", "openai_api_key"),
        description="Embedding API key",
    )
    embedding_model: str = Field(
        default="text-embedding-3-small",
        description="Embedding model name",
    )

    # Retrieval and ingestion policy
    top_k: int = Field(default=3, ge=1, description="Candidates returned by the store per query")
    min_score: float = Field(default=0.4, description="Minimum similarity score returned to clients")
    max_chunks: int = Field(default=5, ge=1, description="Maximum chunks accepted per document")
    max_sentences_per_chunk: int = Field(default=3, ge=1, description="Sentences grouped per chunk")
    max_upload_bytes: int = Field(default=10 << 20, description="Maximum PDF upload size in bytes")

    # HTTP
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    cors_origins: str = Field(default="", description="Comma-separated allowed CORS origins")
    static_dir: str = Field(default="", description="Directory with a static frontend served at /")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
