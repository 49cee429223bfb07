"""Common utilities for URL shortener."""

from .validators import url_error
from .logging_config import setup_logging, JsonFormatter

__all__ = [
    "url_error",
    "setup_logging",
    "JsonFormatter",
]
