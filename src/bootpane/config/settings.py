"""Pydantic-based settings for bootpane."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for bootpane."""

    model_config = SettingsConfigDict(
        env_prefix="BOOTPANE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8006, description="Server port")
    reload: bool = Field(default=False, description="Enable auto-reload in development")
    log_level: str = Field(default="INFO", description="Logging level")

    # Widget settings
    widget_id_prefix: str = Field(default="w", description="Prefix for auto-generated widget ids")
    responsive: bool = Field(default=False, description="Use the responsive Bootstrap stylesheet")

    # Asset locations
    jquery_url: str = Field(
        default="https://code.jquery.com/jquery-1.10.2.min.js",
        description="jQuery script URL",
    )
    bootstrap_css_url: str = Field(
        default="https://netdna.bootstrapcdn.com/twitter-bootstrap/2.3.2/css/bootstrap-combined.min.css",
        description="Bootstrap stylesheet URL",
    )
    bootstrap_responsive_css_url: str = Field(
        default="https://netdna.bootstrapcdn.com/twitter-bootstrap/2.3.2/css/bootstrap-responsive.min.css",
        description="Bootstrap responsive stylesheet URL",
    )
    bootstrap_js_url: str = Field(
        default="https://netdna.bootstrapcdn.com/twitter-bootstrap/2.3.2/js/bootstrap.min.js",
        description="Bootstrap plugins script URL",
    )

    # Derived properties
    @property
    def log_format(self) -> str:
        """Log message format."""
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
