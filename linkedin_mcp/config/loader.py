"""Configuration loading from environment and .env files."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Apify scraping backend
    apify_token: str = ""
    apify_base_url: str = "https://api.apify.com/v2/"
    apify_actor: str = "dev_fusion~Linkedin-Profile-Scraper"

    # When false, a missing token is reported per tools/call instead of at startup
    require_token: bool = True

    # Scraping is slow, so the fetch timeout is in minutes rather than seconds
    fetch_timeout: int = 300

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # Server info
    server_name: str = "linkedin-mcp"
    server_version: str = "1.0.0"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def token_configured(self) -> bool:
        """Check if the Apify token is present."""
        return bool(self.apify_token.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
