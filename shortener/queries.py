"""Query side of the URL shortener."""

from abc import ABC, abstractmethod

from .models import Slug, Stats


class QueryHandler(ABC):
    """Read-only operations over current read-state."""
    
    @abstractmethod
    def get_stats(self, slug: Slug) -> Stats:
        """Get redirect statistics for a short link.
        
        Args:
            slug: Slug to look up
            
        Returns:
            Stats pairing the current link with its redirect count
            
        Raises:
            SlugNotFound: If the slug maps to no link
        """
        pass
