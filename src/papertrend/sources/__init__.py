"""Listing page sources."""

from .base import Period, build_listing_url
from .listing import RegexListingParser, extract_paper_list

__all__ = [
    "Period",
    "build_listing_url",
    "RegexListingParser",
    "extract_paper_list",
]
