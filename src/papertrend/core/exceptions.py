"""Exception hierarchy for PaperTrend."""


class PaperTrendError(Exception):
    """Base class for all PaperTrend errors."""


class ConfigurationError(PaperTrendError):
    """Settings are missing or invalid."""


class ListingFetchError(PaperTrendError):
    """The listing page could not be fetched."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch listing {url}: {reason}")


__all__ = [
    "PaperTrendError",
    "ConfigurationError",
    "ListingFetchError",
]
