"""Two-stage paper fetching pipeline: listing page, then detail pages."""

import asyncio
import logging
from datetime import date

import requests

from papertrend.config.settings import Settings
from papertrend.core.exceptions import ListingFetchError
from papertrend.core.models import PaperDetail
from papertrend.core.protocols import ListingParser, PageSource
from papertrend.infrastructure.enrichment.detail_extractors import DetailExtractor
from papertrend.infrastructure.enrichment.detail_scraper import DetailScraper
from papertrend.infrastructure.http import PageFetcher
from papertrend.sources.base import Period, build_listing_url
from papertrend.sources.listing import RegexListingParser

logger = logging.getLogger(__name__)


class PaperPipeline:
    """Fetches a listing page and enriches every listed paper.

    Uses a two-stage strategy:
    1. Fetch the listing page for the period and parse paper entries
    2. Fetch every paper's detail page concurrently
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: PageSource | None = None,
        parser: ListingParser | None = None,
        extractor: DetailExtractor | None = None,
    ):
        """Initialize the pipeline.

        Args:
            settings: Application settings.
            fetcher: Page source for all outbound requests (for testing).
            parser: Listing parser; regex-based by default.
            extractor: Detail extractor; configured for the site domain by default.
        """
        self.settings = settings
        self.fetcher = fetcher or PageFetcher.from_settings(settings)
        self.parser = parser or RegexListingParser.from_settings(settings)
        self.scraper = DetailScraper(
            self.fetcher,
            extractor or DetailExtractor(site_domain=settings.site_domain),
        )

    def _fetch_listing(self, url: str) -> str:
        try:
            return self.fetcher.fetch(url)
        except requests.RequestException as exc:
            raise ListingFetchError(url, str(exc)) from exc

    async def run(self, period: Period = Period.TRENDING, today: date | None = None) -> list[PaperDetail]:
        """Run the pipeline for one period.

        Args:
            period: Listing period to scrape.
            today: Reference date for dated listings; defaults to UTC today.

        Returns:
            One PaperDetail per listed paper, in listing order.

        Raises:
            ListingFetchError: If the listing page cannot be fetched.
        """
        url = build_listing_url(period, self.settings, today)
        logger.info("Fetching %s listing from %s", period.value, url)

        html = await asyncio.to_thread(self._fetch_listing, url)
        papers = self.parser.parse(html)
        logger.info("Found %d papers on listing page", len(papers))

        return await self.scraper.fetch_batch(papers)


__all__ = ["PaperPipeline"]
