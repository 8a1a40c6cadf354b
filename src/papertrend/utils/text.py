"""Text processing utilities for PaperTrend."""

import json
import re
from typing import Any

_TAG_RE = re.compile(r"</?[^>]+(>|$)")


def strip_tags(value: str | None) -> str:
    """Remove HTML tags and surrounding whitespace.

    Entities are left untouched.
    """
    if not value:
        return ""
    return _TAG_RE.sub("", value).strip()


def clean_title(value: str | None) -> str:
    """Clean and normalize title string."""
    if not value:
        return ""
    return value.strip()


def json_dumps(data: Any, *, indent: int | None = None) -> str:
    """Serialize data to JSON string, keeping key order."""
    return json.dumps(data, ensure_ascii=False, indent=indent)


__all__ = [
    "strip_tags",
    "clean_title",
    "json_dumps",
]
