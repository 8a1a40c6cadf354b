"""Regex-based extraction of paper entries from a listing page.

The listing markup is not parsed as a tree. Paper boundaries are
approximated by two repeating container shapes:

- a self-contained ``<article>...</article>``
- a ``flex flex-col`` div followed by one or two ``flex sm:flex-row`` divs

Inside each block the first anchor pointing under the paper path prefix
gives the relative URL and the title.
"""

import logging
import re

from papertrend.config.settings import Settings
from papertrend.core.models import ListedPaper
from papertrend.utils.text import clean_title

logger = logging.getLogger(__name__)

_BLOCK_RE = re.compile(
    r"<article[^>]*>.*?</article>"
    r"|<div[^>]*class=\"[^\"]*flex[^\"]*flex-col[^\"]*\"[^>]*>.*?"
    r"(?:<div[^>]*class=\"[^\"]*flex[^\"]*sm:flex-row[^\"]*\"[^>]*>.*?</div>){1,2}",
    re.DOTALL,
)


def _anchor_pattern(path_prefix: str) -> re.Pattern[str]:
    return re.compile(r"<a[^>]*href=\"(" + re.escape(path_prefix) + r"[^\"]*)\"[^>]*>([^<]+)</a>")


class RegexListingParser:
    """Listing parser matching container blocks with regular expressions."""

    def __init__(
        self,
        origin: str = "https://huggingface.co",
        path_prefix: str = "/papers/",
        max_entries: int = 10,
    ):
        """Initialize the parser.

        Args:
            origin: Site origin prepended to relative paper paths.
            path_prefix: Path prefix identifying paper links.
            max_entries: Maximum number of blocks inspected.
        """
        self.origin = origin.rstrip("/")
        self.path_prefix = path_prefix
        self.max_entries = max_entries
        self._anchor_re = _anchor_pattern(path_prefix)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegexListingParser":
        return cls(
            origin=settings.site_origin,
            path_prefix=settings.paper_path_prefix,
            max_entries=settings.max_papers,
        )

    def parse(self, html: str) -> list[ListedPaper]:
        """Extract listed papers in document order.

        The first ``max_entries`` blocks are taken before filtering, so blocks
        without a paper anchor shrink the result.
        """
        if not html:
            return []

        blocks = [m.group(0) for m in _BLOCK_RE.finditer(html)][: self.max_entries]
        papers: list[ListedPaper] = []
        skipped = 0

        for block in blocks:
            match = self._anchor_re.search(block)
            if not match:
                skipped += 1
                continue
            papers.append(
                ListedPaper(
                    title=clean_title(match.group(2)),
                    paper_url=f"{self.origin}{match.group(1)}",
                )
            )

        logger.debug("Matched %d listing blocks, %d without a paper link", len(blocks), skipped)
        return papers


def extract_paper_list(html: str, settings: Settings) -> list[ListedPaper]:
    """Convenience function to parse a listing page with configured settings."""
    return RegexListingParser.from_settings(settings).parse(html)


__all__ = ["RegexListingParser", "extract_paper_list"]
