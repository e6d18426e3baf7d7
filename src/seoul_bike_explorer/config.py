"""
Application settings.

Values come from environment variables prefixed with ``SBE_`` (or a local
``.env`` file), e.g. ``SBE_DATA_DIR=/tmp/bikes``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path  # noqa: TC003
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_URL = (
    "https://archive.ics.uci.edu/ml/machine-learning-databases/00560/SeoulBikeData.csv"
)


class Settings(BaseSettings):
    """Runtime configuration for the CLI and flows."""

    model_config = SettingsConfigDict(
        env_prefix="SBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "seoul-bike-explorer"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    data_dir: Path = Field(default=Path("data"), description="Root of the tiered data store")
    dataset_url: str = DEFAULT_DATASET_URL
    dataset_ttl_days: int = Field(default=90, ge=1)

    # Screen ranges of the daily scatter; selection rectangles live in this space.
    chart_width: float = Field(default=800.0, gt=0)
    chart_height: float = Field(default=130.0, gt=0)

    invalid_policy: Literal["propagate", "skip"] = "propagate"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
