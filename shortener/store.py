"""In-memory read-state for URL shortener."""

from typing import Dict, KeysView, Optional

from .events import Event, LinkCreated, LinkRedirected
from .models import ShortLink, Slug, Url


class ReadStateStore:
    """Link table and click counters kept in step with the event log.
    
    The service applies every event here right after appending it, so the
    store always reflects the log without replaying it.
    """
    
    def __init__(self):
        self._links: Dict[Slug, Url] = {}
        self._click_counts: Dict[Slug, int] = {}
    
    def apply(self, event: Event) -> None:
        """Update read-state for a freshly appended event.
        
        Args:
            event: Event that was just appended to the log
        """
        if isinstance(event, LinkCreated):
            self._links[event.slug] = event.url
        elif isinstance(event, LinkRedirected):
            self._click_counts[event.slug] = self._click_counts.get(event.slug, 0) + 1
        else:
            raise TypeError(f"Unsupported event type: {type(event).__name__}")
    
    def slugs(self) -> KeysView[Slug]:
        """Live view of all active slugs."""
        return self._links.keys()

    def get_link(self, slug: Slug) -> Optional[ShortLink]:
        """Get the current short link for a slug, or None if unknown."""
        url = self._links.get(slug)
        if url is None:
            return None
        return ShortLink(slug=slug, url=url)
    
    def slug_exists(self, slug: Slug) -> bool:
        return slug in self._links
    
    def click_count(self, slug: Slug) -> int:
        """Redirect count for a slug (zero when never redirected)."""
        return self._click_counts.get(slug, 0)
    
    def link_count(self) -> int:
        return len(self._links)
