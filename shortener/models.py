"""Data models for URL shortener."""

from dataclasses import dataclass
from typing import NewType

# A unique alias representing the shortened version of a URL
Slug = NewType("Slug", str)

# The original URL a short link points to
Url = NewType("Url", str)


@dataclass(frozen=True)
class ShortLink:
    """Current mapping of a slug to its destination URL."""
    
    slug: Slug
    url: Url
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "slug": self.slug,
            "url": self.url,
        }


@dataclass(frozen=True)
class Stats:
    """Redirect statistics of a short link."""
    
    link: ShortLink
    redirects: int = 0
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            **self.link.to_dict(),
            "redirects": self.redirects,
        }
