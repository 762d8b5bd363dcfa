"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Inputs: local paths or http(s) URLs
    programme_source: str = "programacio.html"
    tickets_source: str | None = "koobin.html"
    tickets_base_url: str | None = None

    # Output artifact read by the browsing API
    output_path: Path = Path("data.json")

    # Listings are published in local time
    timezone: str = "Europe/Madrid"

    # Day tokens are published in Catalan, displayed in Spanish
    translate_days: bool = True

    # Month rollover windows for day-of-month tokens
    rollover_past_days: int = 15
    rollover_future_days: int = 20

    # Minimum rapidfuzz ratio for a ticket title to count as a match
    ticket_match_threshold: int = 90

    # Scraping settings
    scrape_timeout: int = 30

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000


# Global settings instance
settings = Settings()
