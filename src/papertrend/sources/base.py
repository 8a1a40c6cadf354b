"""Listing periods and listing URL construction."""

import logging
from datetime import date
from enum import Enum

from papertrend.config.settings import Settings
from papertrend.utils.datetime import iso_week_label, month_label, utc_today

logger = logging.getLogger(__name__)


class Period(str, Enum):
    """Time window selecting which listing page to scrape."""

    TRENDING = "trending"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: str | None) -> "Period":
        """Parse a query value, falling back to trending when absent or unknown.

        Only exact lowercase names match; ``Daily`` is unknown.
        """
        if not value:
            return cls.TRENDING
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown period %r, using trending", value)
            return cls.TRENDING


def build_listing_url(period: Period, settings: Settings, today: date | None = None) -> str:
    """Return the listing page URL for ``period``.

    Args:
        period: Requested time window.
        settings: Application settings providing the site layout.
        today: Reference date; defaults to the current UTC date.

    Returns:
        Absolute listing URL.
    """
    base = settings.listing_base
    if period is Period.TRENDING:
        return f"{base}/trending"

    day = today or utc_today()
    if period is Period.DAILY:
        return f"{base}/date/{day.isoformat()}"
    if period is Period.WEEKLY:
        return f"{base}/week/{iso_week_label(day)}"
    return f"{base}/month/{month_label(day)}"


__all__ = ["Period", "build_listing_url"]
