"""Detail page scraper with per-paper failure isolation.

Flow: ListedPaper -> GET paper page -> rule extraction -> PaperDetail

``fetch_details`` never raises. Any failure while fetching or parsing a page
turns into a degraded record so one broken paper cannot sink a batch.
"""

import asyncio
import logging
from collections.abc import Sequence

from papertrend.core.models import FETCH_FAILED, ListedPaper, PaperDetail
from papertrend.core.protocols import PageSource

from .detail_extractors import DetailExtractor

logger = logging.getLogger(__name__)


class DetailScraper:
    """Fetches paper detail pages and extracts their summaries."""

    def __init__(self, fetcher: PageSource, extractor: DetailExtractor | None = None):
        """Initialize the scraper.

        Args:
            fetcher: Page source used for detail pages.
            extractor: Detail extractor; a default one is built when omitted.
        """
        self.fetcher = fetcher
        self.extractor = extractor or DetailExtractor()

    def fetch_details(self, paper: ListedPaper) -> PaperDetail:
        """Fetch and extract a single paper, degrading on any failure."""
        try:
            html = self.fetcher.fetch(paper.paper_url)
            return self.extractor.extract(html, paper)
        except Exception as exc:
            logger.warning("Failed to fetch details for %s: %s", paper.paper_url, exc)
            return PaperDetail.degraded(paper)

    async def fetch_batch(self, papers: Sequence[ListedPaper]) -> list[PaperDetail]:
        """Fetch all papers concurrently, preserving input order.

        Each fetch runs in a worker thread; results are joined once every
        paper has resolved.
        """
        if not papers:
            return []

        logger.info("Fetching details for %d papers", len(papers))
        results = await asyncio.gather(*(asyncio.to_thread(self.fetch_details, paper) for paper in papers))

        degraded = sum(1 for detail in results if detail.description == FETCH_FAILED)
        if degraded:
            logger.info("Details complete: %d/%d degraded", degraded, len(papers))
        return list(results)


__all__ = ["DetailScraper"]
