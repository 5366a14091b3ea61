"""Application configuration loaded from environment variables."""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "sat-rarity"
    debug: bool = False
    log_level: str = "INFO"

    # JSON snapshot served by InMemorySatIndex; empty index when unset
    index_path: Optional[str] = None

    # Build the curated range tables at startup instead of on first query
    eager_range_tables: bool = False

    model_config = {"env_prefix": "SAT_RARITY_"}


settings = Settings()
