"""Protocol definitions for PaperTrend components."""

from typing import Protocol, runtime_checkable

from .models import ListedPaper


@runtime_checkable
class PageSource(Protocol):
    """Anything that can return the HTML of a URL."""

    def fetch(self, url: str) -> str:
        """Return page text, raising on network or HTTP errors."""
        ...


@runtime_checkable
class ListingParser(Protocol):
    """Turns raw listing markup into candidate paper records."""

    def parse(self, html: str) -> list[ListedPaper]:
        """Return zero or more listed papers in document order."""
        ...


__all__ = [
    "PageSource",
    "ListingParser",
]
