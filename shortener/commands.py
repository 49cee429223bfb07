"""Command side of the URL shortener."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import ShortLink, Slug, Url


class CommandHandler(ABC):
    """Operations that mutate state and record events."""
    
    @abstractmethod
    def handle_create_short_link(self, url: Url, slug: Optional[Slug] = None) -> ShortLink:
        """Create a new short link.
        
        Args:
            url: The original long URL
            slug: Optional custom slug (generated when omitted)
            
        Returns:
            The newly created short link
            
        Raises:
            SlugAlreadyInUse: If the custom slug already maps to a link
            InvalidUrl: If URL validation is enabled and the URL fails it
        """
        pass
    
    @abstractmethod
    def handle_redirect(self, slug: Slug) -> ShortLink:
        """Record a redirect through a short link.
        
        Args:
            slug: Slug being visited
            
        Returns:
            The short link with its current URL
            
        Raises:
            SlugNotFound: If the slug maps to no link
        """
        pass
    
    @abstractmethod
    def handle_change_short_link(self, slug: Slug, new_url: Url) -> ShortLink:
        """Point an existing short link at a new URL.
        
        Args:
            slug: Slug of the link to change
            new_url: New destination URL
            
        Returns:
            The updated short link
            
        Raises:
            SlugNotFound: If the slug maps to no link
            InvalidUrl: If URL validation is enabled and the URL fails it
        """
        pass
