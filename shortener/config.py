"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""
    
    # Slug settings
    slug_length: int = Field(
        default=8,
        ge=1,
        description="Length of generated slugs"
    )
    
    # URL validation settings
    validate_urls: bool = Field(
        default=False,
        description="Reject malformed URLs with InvalidUrl (off keeps URLs opaque)"
    )
    
    max_url_length: int = Field(
        default=2048,
        ge=1,
        description="Maximum URL length when validation is enabled"
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
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
