"""Tests for period parsing and listing URL construction."""

from datetime import date

import pytest

from papertrend.sources.base import Period, build_listing_url
from papertrend.utils.datetime import iso_week_label, month_label

FIXED_DAY = date(2024, 3, 15)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Period.TRENDING),
        ("", Period.TRENDING),
        ("daily", Period.DAILY),
        ("weekly", Period.WEEKLY),
        ("monthly", Period.MONTHLY),
        ("Daily", Period.TRENDING),
        (" weekly ", Period.TRENDING),
        ("yearly", Period.TRENDING),
    ],
)
def test_parse_period(value, expected):
    assert Period.parse(value) is expected


def test_trending_url_ignores_date(settings):
    assert build_listing_url(Period.TRENDING, settings, FIXED_DAY) == "https://huggingface.co/papers/trending"


def test_daily_url(settings):
    assert build_listing_url(Period.DAILY, settings, FIXED_DAY) == "https://huggingface.co/papers/date/2024-03-15"


def test_weekly_url(settings):
    assert build_listing_url(Period.WEEKLY, settings, FIXED_DAY) == "https://huggingface.co/papers/week/2024-W11"


def test_monthly_url_zero_pads(settings):
    assert build_listing_url(Period.MONTHLY, settings, FIXED_DAY) == "https://huggingface.co/papers/month/2024-03"


def test_dated_url_defaults_to_utc_today(settings, monkeypatch):
    monkeypatch.setattr("papertrend.sources.base.utc_today", lambda: FIXED_DAY)

    assert build_listing_url(Period.DAILY, settings).endswith("/date/2024-03-15")


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 1, 1), "2024-W1"),
        (date(2024, 12, 30), "2025-W1"),
        (date(2021, 1, 3), "2020-W53"),
        (date(2024, 3, 15), "2024-W11"),
    ],
)
def test_iso_week_label(day, expected):
    assert iso_week_label(day) == expected


def test_month_label():
    assert month_label(date(2025, 1, 31)) == "2025-01"
    assert month_label(date(2025, 11, 1)) == "2025-11"
