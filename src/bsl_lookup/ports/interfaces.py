"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
A test double or another dictionary site implements IPageFetcher.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from bsl_lookup.domain.models import FetchResult, VideoRef, Word


class IPageFetcher(ABC):
    """Retrieves the dictionary page for one word. Never raises for transport errors."""

    @abstractmethod
    def url_for(self, word: Word) -> str:
        """Build the page URL for a word."""
        pass

    @abstractmethod
    def fetch(self, word: Word, timeout: Optional[float] = None) -> FetchResult:
        """
        Fetch the page; return FetchSuccess with markup or FetchFailure with status/cause.
        timeout, when given, caps the adapter's own per-word timeout (seconds).
        """
        pass


class IExtractionStrategy(ABC):
    """One self-contained rule for locating video references in a page."""

    name = "strategy"

    @abstractmethod
    def candidates(self, word: Word, markup: str) -> List[VideoRef]:
        """All matches for this rule, in document order. Pure function of the markup."""
        pass

    def extract(self, word: Word, markup: str) -> Optional[VideoRef]:
        """First match only; a word maps to exactly one clip."""
        found = self.candidates(word, markup)
        return found[0] if found else None
