"""Global configuration helpers for SeedForge."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_seed_dir() -> Path:
    return Path.home() / ".cache" / "seedforge"


class SeedForgeSettings(BaseSettings):
    """Runtime configuration resolved from environment variables."""

    model_config = SettingsConfigDict(env_prefix="SEEDFORGE_", env_file=".env", extra="ignore")

    seed_dir: Path = Field(default_factory=_default_seed_dir)
    stop_on_failure: bool = False
    log_level: str = "INFO"
    algorithm: str = Field(default="current", pattern="^(current|legacy)$")


settings = SeedForgeSettings()
