"""Event-sourced URL shortener core."""

from .models import ShortLink, Slug, Stats, Url
from .errors import InvalidUrl, ShortenerError, SlugAlreadyInUse, SlugNotFound
from .events import Event, EventLog, LinkCreated, LinkRedirected
from .store import ReadStateStore
from .slug import SlugGenerator
from .commands import CommandHandler
from .queries import QueryHandler
from .service import UrlShortenerService

__all__ = [
    "ShortLink",
    "Slug",
    "Stats",
    "Url",
    "InvalidUrl",
    "ShortenerError",
    "SlugAlreadyInUse",
    "SlugNotFound",
    "Event",
    "EventLog",
    "LinkCreated",
    "LinkRedirected",
    "ReadStateStore",
    "SlugGenerator",
    "CommandHandler",
    "QueryHandler",
    "UrlShortenerService",
]
