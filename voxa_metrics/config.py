"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "voxa-metrics"
    log_level: str = "INFO"

    # Golden window
    golden_window_seconds: float = 60
    missing_response_time_sec: float = 9999  # Substituted for calls without a response time

    # Analytics series
    series_weeks: int = 8
    series_months: int = 6


settings = Settings()
