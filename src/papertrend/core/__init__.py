"""Core domain models and interfaces."""

from .models import (
    NO_DESCRIPTION,
    FETCH_FAILED,
    NOT_AVAILABLE,
    ListedPaper,
    PaperDetail,
)
from .protocols import (
    PageSource,
    ListingParser,
)
from .exceptions import (
    PaperTrendError,
    ConfigurationError,
    ListingFetchError,
)

__all__ = [
    # Models
    "NO_DESCRIPTION",
    "FETCH_FAILED",
    "NOT_AVAILABLE",
    "ListedPaper",
    "PaperDetail",
    # Protocols
    "PageSource",
    "ListingParser",
    # Exceptions
    "PaperTrendError",
    "ConfigurationError",
    "ListingFetchError",
]
