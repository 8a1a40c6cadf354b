"""Paper detail enrichment."""

from .detail_extractors import DetailExtractor, extract_links
from .detail_scraper import DetailScraper

__all__ = [
    "DetailExtractor",
    "DetailScraper",
    "extract_links",
]
