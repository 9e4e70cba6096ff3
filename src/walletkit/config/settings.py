"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """walletkit configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WALLETKIT_",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="walletkit", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Extension pages (compared against location pathname as /<page>)
    tab_page: str = Field(default="index.html", description="Full-tab page filename")
    popup_page: str = Field(default="popup.html", description="Popup page filename")
    notification_page: str = Field(
        default="notification.html", description="Notification window page filename"
    )

    @field_validator("tab_page", "popup_page", "notification_page")
    @classmethod
    def validate_page_filename(cls, v: str) -> str:
        """Validate extension page filename format."""
        if "/" in v or not v.endswith(".html"):
            raise ValueError("Page filename must be a bare name ending in .html")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
