"""Configuration management using Pydantic Settings"""

from datetime import date
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "impact-gateway"
    log_level: str = "INFO"
    request_id_header: str = "X-Request-ID"

    # Analysis
    default_report_date: Optional[date] = None  # Used when a report omits its issue date


settings = Settings()
