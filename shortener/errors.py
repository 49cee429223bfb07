"""Errors raised by the URL shortener service."""

from typing import Optional


class ShortenerError(ValueError):
    """Base class for all recoverable URL shortener errors."""
    
    # Suggested status code for a transport layer mapping this error
    http_status = 400
    default_message = "URL shortener error"
    
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidUrl(ShortenerError):
    """The URL provided for shortening failed validation."""
    
    http_status = 400
    default_message = "Invalid URL"


class SlugAlreadyInUse(ShortenerError):
    """The requested slug already maps to an existing short link."""
    
    http_status = 409
    default_message = "Slug already in use"


class SlugNotFound(ShortenerError):
    """The slug does not map to any existing short link."""
    
    http_status = 404
    default_message = "Slug not found"
