"""Environment-driven settings for the configuration service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class TrainingConfigSettings(BaseSettings):
    data_dir: Path = Path("var/training")
    log_level: str = "INFO"
    json_logs: bool = False
    # Write the default configuration when none is stored yet.
    bootstrap_defaults: bool = True

    model_config = SettingsConfigDict(env_prefix="TRAINING_CONFIG_", env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> TrainingConfigSettings:
    return TrainingConfigSettings()
