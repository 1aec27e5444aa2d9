"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: INTEGRAUM_
    """

    model_config = SettingsConfigDict(
        env_prefix="INTEGRAUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # CSV loading
    csv_delimiter: str = Field(
        default=";",
        description="Field delimiter of source CSV files",
    )
    csv_quote: str = Field(
        default='"',
        description="Quote character of source CSV files",
    )
    csv_header: bool = Field(
        default=True,
        description="Whether the first CSV line holds the attribute names",
    )

    # UCC discovery
    ucc_max_size: int = Field(
        default=0,
        ge=0,
        description="Largest column combination to explore (0 = all columns)",
    )
    ucc_max_workers: int = Field(
        default=1,
        ge=1,
        description="Threads used to validate the candidates of one lattice level",
    )
    ucc_strategy: Literal["partition", "hash"] = Field(
        default="partition",
        description="Candidate validation strategy",
    )

    # Duplicate detection
    duplicate_window_size: int = Field(
        default=20,
        ge=2,
        description="Sorted neighbourhood window size",
    )
    duplicate_short_value_length: int = Field(
        default=10,
        description="Average value length below which edit distance is used",
    )
    duplicate_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Record similarity at or above which two records are duplicates",
    )

    # Similarity primitives
    tokenizer_size: int = Field(default=4, ge=1)
    tokenizer_padding: bool = Field(default=True)
    minhash_functions: int = Field(default=16, ge=1)
    minhash_seed: int = Field(default=42)

    # Schema matching
    match_min_similarity: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Correspondences below this similarity are dropped",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
