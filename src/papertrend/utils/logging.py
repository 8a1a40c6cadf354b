"""Logging configuration for PaperTrend."""

import logging


def setup_logging(level: int | str = logging.INFO, verbose: bool = False) -> None:
    """Configure root logger with a sensible default format."""
    if verbose:
        level = logging.DEBUG
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


__all__ = ["setup_logging"]
