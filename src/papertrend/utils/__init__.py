"""Shared utilities."""

from .logging import setup_logging
from .datetime import utc_now, utc_today, iso_week_label, month_label
from .text import strip_tags, clean_title, json_dumps

__all__ = [
    "setup_logging",
    "utc_now",
    "utc_today",
    "iso_week_label",
    "month_label",
    "strip_tags",
    "clean_title",
    "json_dumps",
]
