"""Event-sourced URL shortener service."""

import logging
from typing import Optional, Tuple

from .commands import CommandHandler
from .queries import QueryHandler
from .config import Config
from .errors import InvalidUrl, SlugAlreadyInUse, SlugNotFound
from .events import Event, EventLog
from .models import ShortLink, Slug, Stats, Url
from .slug import SlugGenerator
from .store import ReadStateStore
from .common.validators import url_error, MAX_URL_LENGTH
from .common.logging_config import setup_logging


class UrlShortenerService(CommandHandler, QueryHandler):
    """CQRS and event sourcing based URL shortener.
    
    Every command validates against read-state first, then appends its event
    to the log and applies it to read-state. A failed command leaves both
    untouched. Queries only read.
    
    The service holds no locks; callers must serialize access.
    """
    
    def __init__(
        self,
        slug_generator: Optional[SlugGenerator] = None,
        logger: Optional[logging.Logger] = None,
        validate_urls: bool = False,
        max_url_length: int = MAX_URL_LENGTH,
    ):
        """Initialize URL shortener service.
        
        Args:
            slug_generator: Optional slug generator
            logger: Optional logger
            validate_urls: Whether to reject malformed URLs with InvalidUrl
            max_url_length: Maximum URL length when validating
        """
        self.generator = slug_generator or SlugGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.validate_urls = validate_urls
        self.max_url_length = max_url_length
        self._events = EventLog()
        self._state = ReadStateStore()
    
    @classmethod
    def from_config(cls, config: Config) -> "UrlShortenerService":
        """Build a service from configuration.
        
        Args:
            config: Application configuration
            
        Returns:
            Configured service
        """
        package_logger = setup_logging(
            level=config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
        )
        return cls(
            slug_generator=SlugGenerator(default_length=config.slug_length),
            logger=package_logger.getChild("service"),
            validate_urls=config.validate_urls,
            max_url_length=config.max_url_length,
        )
    
    @property
    def events(self) -> Tuple[Event, ...]:
        """All recorded events in order of occurrence."""
        return self._events.snapshot()
    
    def handle_create_short_link(self, url: Url, slug: Optional[Slug] = None) -> ShortLink:
        self._check_url(url)
        
        if slug is not None:
            if self._state.slug_exists(slug):
                self.logger.warning(f"Slug already in use: {slug}", extra={"slug": slug})
                raise SlugAlreadyInUse(f"Slug '{slug}' is already in use")
        else:
            slug = Slug(self.generator.generate_unique(self._state.slugs()))
        
        event = self._events.record_link_created(slug, url)
        self._state.apply(event)
        
        self.logger.info(
            f"Created short link: {slug} -> {url}",
            extra={"event": type(event).__name__, "slug": slug, "url": url},
        )
        return ShortLink(slug=slug, url=url)
    
    def handle_redirect(self, slug: Slug) -> ShortLink:
        link = self._require_link(slug)
        
        event = self._events.record_link_redirected(slug)
        self._state.apply(event)
        
        self.logger.debug(
            f"Redirected: {slug} -> {link.url}",
            extra={"event": type(event).__name__, "slug": slug, "url": link.url},
        )
        return link
    
    def handle_change_short_link(self, slug: Slug, new_url: Url) -> ShortLink:
        self._require_link(slug)
        self._check_url(new_url)
        
        # Reassignment is recorded with the creation event kind
        event = self._events.record_link_created(slug, new_url)
        self._state.apply(event)
        
        self.logger.info(
            f"Changed short link: {slug} -> {new_url}",
            extra={"event": type(event).__name__, "slug": slug, "url": new_url},
        )
        return ShortLink(slug=slug, url=new_url)
    
    def get_stats(self, slug: Slug) -> Stats:
        link = self._require_link(slug)
        return Stats(link=link, redirects=self._state.click_count(slug))
    
    def _require_link(self, slug: Slug) -> ShortLink:
        link = self._state.get_link(slug)
        if link is None:
            self.logger.warning(f"Slug not found: {slug}", extra={"slug": slug})
            raise SlugNotFound(f"Slug '{slug}' not found")
        return link
    
    def _check_url(self, url: Url) -> None:
        if not self.validate_urls:
            return
        error = url_error(url, max_length=self.max_url_length)
        if error:
            self.logger.warning(f"Rejected URL {url!r}: {error}", extra={"url": url})
            raise InvalidUrl(f"Invalid URL: {error}")
    
    def __len__(self) -> int:
        return self._state.link_count()
    
    def __contains__(self, slug: object) -> bool:
        return isinstance(slug, str) and self._state.slug_exists(Slug(slug))
