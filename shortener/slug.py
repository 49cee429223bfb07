"""Slug generation utilities."""

import random
import string
from typing import Collection, Optional


class SlugGenerator:
    """Generate random slugs for short links."""
    
    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9
    
    def __init__(
        self,
        default_length: int = 8,
        rng: Optional[random.Random] = None,
        alphabet: Optional[str] = None,
    ):
        """Initialize slug generator.
        
        Args:
            default_length: Default length for generated slugs
            rng: Optional random source (seed one for reproducible slugs)
            alphabet: Optional alphabet override (defaults to base62)
        """
        if default_length < 1:
            raise ValueError("Slug length must be at least 1")
        self.default_length = default_length
        self.rng = rng or random.Random()
        self.alphabet = alphabet or self.BASE62_CHARS
    
    @property
    def capacity(self) -> int:
        """Number of distinct slugs of the default length."""
        return len(self.alphabet) ** self.default_length
    
    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random slug.
        
        Args:
            length: Length of the slug (uses default if not specified)
            
        Returns:
            Random slug
        """
        length = length or self.default_length
        return ''.join(self.rng.choices(self.alphabet, k=length))
    
    def generate_unique(self, taken: Collection[str]) -> str:
        """Generate a slug that is not currently taken.
        
        Retries on collision until a free slug comes up. Only slugs this
        generator could itself produce count towards exhaustion, so custom
        slugs of other shapes never block generation.
        
        Args:
            taken: Slugs currently in use
            
        Returns:
            Unused slug
            
        Raises:
            RuntimeError: If every slug of the default length is in use
        """
        if sum(1 for slug in taken if self.is_valid_format(slug)) >= self.capacity:
            raise RuntimeError(
                f"Slug space exhausted ({self.capacity} slugs of length {self.default_length})"
            )
        
        slug = self.generate_random()
        while slug in taken:
            slug = self.generate_random()
        return slug
    
    def is_valid_format(self, slug: str) -> bool:
        """Check if slug is one this generator could produce.
        
        Args:
            slug: Slug to check
            
        Returns:
            True if slug has the default length and uses only the alphabet
        """
        return len(slug) == self.default_length and all(c in self.alphabet for c in slug)
