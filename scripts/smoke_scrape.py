#!/usr/bin/env python3
"""Live smoke check against huggingface.co.

Checks:
1. Listing URL construction for every period
2. Listing page parsing for each period
3. Detail extraction for the first few trending papers

Hits the real site; not part of the test suite.
"""

import asyncio
import logging
import sys
import time

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("smoke_scrape")


def check_listings(settings, fetcher) -> dict[str, int]:
    """Fetch and parse the listing page of every period."""
    from papertrend.sources import Period, RegexListingParser, build_listing_url

    parser = RegexListingParser.from_settings(settings)
    counts: dict[str, int] = {}

    for period in Period:
        url = build_listing_url(period, settings)
        try:
            papers = parser.parse(fetcher.fetch(url))
        except Exception as e:
            logger.error("[%s] %s failed: %s", period.value, url, e)
            counts[period.value] = -1
            continue
        counts[period.value] = len(papers)
        logger.info("[%s] %s -> %d papers", period.value, url, len(papers))
        for paper in papers[:3]:
            logger.info("    %s (%s)", paper.title, paper.paper_url)

    return counts


def check_details(settings, fetcher) -> int:
    """Run the full trending pipeline and report field coverage."""
    from papertrend.core.models import FETCH_FAILED, NO_DESCRIPTION, NOT_AVAILABLE
    from papertrend.pipeline import PaperPipeline
    from papertrend.sources import Period

    pipeline = PaperPipeline(settings, fetcher=fetcher)

    start_time = time.time()
    results = asyncio.run(pipeline.run(Period.TRENDING))
    elapsed = time.time() - start_time

    described = sum(1 for r in results if r.description not in (NO_DESCRIPTION, FETCH_FAILED))
    with_code = sum(1 for r in results if r.github_url != NOT_AVAILABLE)
    with_arxiv = sum(1 for r in results if r.arxiv_url != NOT_AVAILABLE)

    logger.info("Pipeline complete: %d papers in %.1fs", len(results), elapsed)
    logger.info("  descriptions: %d, github: %d, arxiv: %d", described, with_code, with_arxiv)
    for r in results[:3]:
        logger.info("  %s: %s...", r.title, r.description[:120])

    return described


def main():
    from papertrend.config import get_settings
    from papertrend.infrastructure.http import PageFetcher

    settings = get_settings()
    fetcher = PageFetcher.from_settings(settings)

    try:
        counts = check_listings(settings, fetcher)
        logger.info("")
        described = check_details(settings, fetcher)
    finally:
        fetcher.close()

    logger.info("=" * 60)
    logger.info("Listings: %s", ", ".join(f"{k}={v}" for k, v in counts.items()))
    logger.info("Trending papers with descriptions: %d", described)
    logger.info("=" * 60)

    return 0 if counts.get("trending", 0) > 0 and described > 0 else 1


if __name__ == "__main__":
    sys.exit(main())
