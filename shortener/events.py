"""Domain events and the append-only event log."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Tuple, Union

from .models import Slug, Url


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LinkCreated:
    """A short link was created, or its URL was reassigned."""
    
    slug: Slug
    url: Url
    sequence: int = 0
    occurred_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class LinkRedirected:
    """A redirect through a short link occurred."""
    
    slug: Slug
    sequence: int = 0
    occurred_at: datetime = field(default_factory=_utcnow)


Event = Union[LinkCreated, LinkRedirected]


class EventLog:
    """Ordered, append-only sequence of domain events.
    
    Appended events get their 1-based position in the log as ``sequence``.
    Events are never modified or removed once appended.
    """
    
    def __init__(self):
        self._events: List[Event] = []
    
    def record_link_created(self, slug: Slug, url: Url) -> LinkCreated:
        """Append a LinkCreated event.
        
        Args:
            slug: Slug of the created (or reassigned) link
            url: Destination URL
            
        Returns:
            The appended event
        """
        event = LinkCreated(slug=slug, url=url, sequence=self._next_sequence())
        self._events.append(event)
        return event
    
    def record_link_redirected(self, slug: Slug) -> LinkRedirected:
        """Append a LinkRedirected event.
        
        Args:
            slug: Slug that was redirected through
            
        Returns:
            The appended event
        """
        event = LinkRedirected(slug=slug, sequence=self._next_sequence())
        self._events.append(event)
        return event
    
    def snapshot(self) -> Tuple[Event, ...]:
        """Return all events in order of occurrence."""
        return tuple(self._events)
    
    def _next_sequence(self) -> int:
        return len(self._events) + 1
