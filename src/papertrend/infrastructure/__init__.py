"""Infrastructure adapters: HTTP access and page enrichment."""

from .http import PageFetcher

__all__ = ["PageFetcher"]
