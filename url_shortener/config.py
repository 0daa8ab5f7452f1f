"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration.

    Every setting has a default, so the service starts without any
    environment variables. Overrides must carry the URL_SHORTENER_ prefix;
    no .env file is read. Short codes are always six characters and are
    not configurable.
    """

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        description="Port to listen on"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL for short links when the request carries no Host header"
    )

    request_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Deadline applied to store calls made while serving a request"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    # Only URL_SHORTENER_* variables are read; there is no config file
    model_config = {
        "env_prefix": "URL_SHORTENER_",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
