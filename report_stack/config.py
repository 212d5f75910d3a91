"""
Configuration settings for report_stack.

Uses Pydantic Settings to load environment variables for logging, seed data
generation and the delivery collaborator's retry policy.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Seed data for the base reports
    report_seed: Optional[int] = Field(None, alias="REPORT_SEED")
    sales_record_count: int = Field(12, alias="SALES_RECORD_COUNT", ge=0)
    sales_days_back: int = Field(90, alias="SALES_DAYS_BACK", ge=1)
    user_record_count: int = Field(10, alias="USER_RECORD_COUNT", ge=0)
    user_days_back: int = Field(100, alias="USER_DAYS_BACK", ge=1)

    # Delivery adapters
    delivery_retry_attempts: int = Field(3, alias="DELIVERY_RETRY_ATTEMPTS", ge=1)
    delivery_retry_backoff_seconds: float = Field(
        0.2, alias="DELIVERY_RETRY_BACKOFF_SECONDS", ge=0
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
