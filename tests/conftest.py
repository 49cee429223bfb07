"""Pytest configuration and fixtures."""

import random

import pytest

from shortener.service import UrlShortenerService
from shortener.slug import SlugGenerator
from shortener.common.logging_config import setup_logging


class SequenceSlugGenerator(SlugGenerator):
    """Slug generator that hands out a fixed sequence of candidates."""
    
    def __init__(self, candidates):
        super().__init__(default_length=8)
        self._candidates = iter(candidates)
        self.drawn = []
    
    def generate_random(self, length=None):
        slug = next(self._candidates)
        self.drawn.append(slug)
        return slug


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def slug_generator():
    """Create seeded slug generator."""
    return SlugGenerator(default_length=8, rng=random.Random(1234))


@pytest.fixture
def service(slug_generator, logger) -> UrlShortenerService:
    """Create service instance."""
    return UrlShortenerService(
        slug_generator=slug_generator,
        logger=logger,
    )


@pytest.fixture
def validating_service(slug_generator, logger) -> UrlShortenerService:
    """Create service instance that rejects malformed URLs."""
    return UrlShortenerService(
        slug_generator=slug_generator,
        logger=logger,
        validate_urls=True,
    )


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://www.amazon.com/Redragon-S101-Keyboard-Ergonomic-Programmable/dp/B00NLZUM36/ref=sr_1_1?_encoding=UTF8",
        "https://www.amazon.com/Redragon-Keyboard-Wireless-Independent-Multimedia/dp/B0CTMMN857/ref=pd_ci_mcx_pspc_dp_2_i_2?pd_rd_w=J8fu0",
        "https://example.com/a",
    ]
