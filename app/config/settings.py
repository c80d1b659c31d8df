# app/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PARTITION_KEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "partition-key-service"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"

    # --- API ---
    max_batch_size: int = Field(1000, ge=1)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
