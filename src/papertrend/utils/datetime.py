"""Date utilities for PaperTrend."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Get today's calendar date in UTC."""
    return utc_now().date()


def iso_week_label(day: date) -> str:
    """Format the ISO week containing ``day`` as ``YYYY-Wn``.

    The year is the ISO week-based year, so 2024-12-30 belongs to ``2025-W1``.
    The week number is not zero-padded.
    """
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week}"


def month_label(day: date) -> str:
    """Format the month containing ``day`` as ``YYYY-MM``."""
    return f"{day.year}-{day.month:02d}"


__all__ = [
    "utc_now",
    "utc_today",
    "iso_week_label",
    "month_label",
]
