"""Validation utilities for URL shortener."""

from typing import Optional
from urllib.parse import urlsplit

MAX_URL_LENGTH = 2048
ALLOWED_SCHEMES = ("http", "https")


def url_error(url: str, max_length: int = MAX_URL_LENGTH) -> Optional[str]:
    """Explain why a URL cannot be shortened.
    
    Args:
        url: Destination URL
        max_length: Maximum accepted URL length
        
    Returns:
        Error message, or None when the URL is acceptable
    """
    if not url:
        return "URL is required"
    
    if len(url) > max_length:
        return f"URL is too long (max {max_length} characters)"
    
    if any(c.isspace() or not c.isprintable() for c in url):
        return "URL must not contain whitespace or control characters"
    
    try:
        parts = urlsplit(url)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        return f"Invalid URL format: {e}"
    
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return "URL must use http or https protocol"
    
    if not parts.hostname:
        return "URL must have a valid domain"
    
    return None
