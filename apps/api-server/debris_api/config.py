"""Configuration for the debris API service loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings

from debris.analytics import AnalyticsConfig


class Settings(BaseSettings):
    """API server configuration.

    All fields are loaded from environment variables and have defaults
    suitable for local development.  Space-Track credentials are optional;
    the catalogue ingestion endpoint answers 503 without them.
    """

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 5000
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    SPACETRACK_USERNAME: str = ""
    SPACETRACK_PASSWORD: str = ""
    SPACETRACK_BASE_URL: str = "https://www.space-track.org"

    HOTSPOT_THRESHOLD: float = 0.7
    ANOMALY_ALERT_SCORE: float = 0.8
    MAX_RETURNED_BATCHES: int = 100  # most recent ingested batches returned by /debris-data

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def analytics_config(self) -> AnalyticsConfig:
        """Analytics policy with the service-level overrides applied."""
        return AnalyticsConfig(hotspot_threshold=self.HOTSPOT_THRESHOLD)


def get_settings() -> Settings:
    """Return a Settings instance."""
    return Settings()
