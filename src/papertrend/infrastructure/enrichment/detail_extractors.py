"""Rule-based extraction of paper details from a Hugging Face paper page.

Each rule takes raw HTML and returns a value or None. Rules are tried in
order and the first non-empty value wins.
"""

import logging
import re
from collections.abc import Callable, Sequence

from papertrend.core.models import NO_DESCRIPTION, NOT_AVAILABLE, ListedPaper, PaperDetail
from papertrend.utils.text import strip_tags

logger = logging.getLogger(__name__)

# (html) -> text or None
DescriptionRule = Callable[[str], str | None]
# (links) -> url or None
LinkRule = Callable[[Sequence[str]], str | None]

# AI-generated summary box
_SUMMARY_RE = re.compile(
    r"<div[^>]*class=\"[^\"]*bg-blue-500[^\"]*\"[^>]*>.*?<p[^>]*>(.*?)</p>",
    re.IGNORECASE | re.DOTALL,
)
_ABSTRACT_RE = re.compile(
    r"<h2[^>]*class=\"[^\"]*font-semibold[^\"]*\"[^>]*>Abstract</h2>\s*"
    r"<div[^>]*class=\"[^\"]*flex flex-col[^\"]*\"[^>]*>\s*"
    r"<p[^>]*class=\"[^\"]*text-gray-600[^\"]*\"[^>]*>(.*?)</p>",
    re.IGNORECASE | re.DOTALL,
)
_META_DESCRIPTION_RE = re.compile(
    r"<meta[^>]*name=\"description\"[^>]*content=\"([^\"]*)\"[^>]*>",
    re.IGNORECASE,
)
_ABSOLUTE_HREF_RE = re.compile(r"href=\"(https?://[^\"]+)\"")


def summary_block(html: str) -> str | None:
    """Paragraph text of the highlighted summary box."""
    match = _SUMMARY_RE.search(html)
    if not match or not match.group(1).strip():
        return None
    return strip_tags(match.group(1)) or None


def abstract_section(html: str) -> str | None:
    """Paragraph following the ``Abstract`` heading."""
    match = _ABSTRACT_RE.search(html)
    if not match or not match.group(1).strip():
        return None
    return strip_tags(match.group(1)) or None


def meta_description(html: str) -> str | None:
    """Content attribute of the page's description meta tag."""
    match = _META_DESCRIPTION_RE.search(html)
    if not match:
        return None
    return match.group(1).strip() or None


DESCRIPTION_RULES: tuple[tuple[str, DescriptionRule], ...] = (
    ("summary", summary_block),
    ("abstract", abstract_section),
    ("meta", meta_description),
)


def extract_links(html: str) -> list[str]:
    """All absolute link targets in document order."""
    return _ABSOLUTE_HREF_RE.findall(html)


def github_link(site_domain: str) -> LinkRule:
    """Rule picking the first GitHub link that is not hosted on ``site_domain``."""

    def rule(links: Sequence[str]) -> str | None:
        return next((link for link in links if "github.com" in link and site_domain not in link), None)

    return rule


def arxiv_link(links: Sequence[str]) -> str | None:
    """First link pointing at arxiv.org."""
    return next((link for link in links if "arxiv.org" in link), None)


def first_match(html: str, rules: Sequence[tuple[str, DescriptionRule]]) -> tuple[str, str] | None:
    """Run rules in order, returning ``(rule_name, value)`` for the first hit."""
    for name, rule in rules:
        value = rule(html)
        if value:
            return name, value
    return None


class DetailExtractor:
    """Extracts description and external links from a paper page."""

    def __init__(
        self,
        site_domain: str = "huggingface.co",
        description_rules: Sequence[tuple[str, DescriptionRule]] = DESCRIPTION_RULES,
    ):
        """Initialize the extractor.

        Args:
            site_domain: Domain of the listing site; its own links are not
                reported as code repositories.
            description_rules: Ordered ``(name, rule)`` pairs for the description.
        """
        self.site_domain = site_domain
        self.description_rules = tuple(description_rules)
        self._github_rule = github_link(site_domain)

    def extract_description(self, html: str) -> str:
        hit = first_match(html, self.description_rules)
        if hit is None:
            logger.debug("No description rule matched")
            return NO_DESCRIPTION
        name, value = hit
        logger.debug("Description taken from %s rule (%d chars)", name, len(value))
        return value

    def extract(self, html: str, paper: ListedPaper) -> PaperDetail:
        """Build the detail record for ``paper`` from its page HTML."""
        links = extract_links(html)
        return PaperDetail(
            title=paper.title,
            description=self.extract_description(html),
            github_url=self._github_rule(links) or NOT_AVAILABLE,
            arxiv_url=arxiv_link(links) or NOT_AVAILABLE,
            paper_url=paper.paper_url,
        )


__all__ = [
    "DescriptionRule",
    "LinkRule",
    "DESCRIPTION_RULES",
    "summary_block",
    "abstract_section",
    "meta_description",
    "extract_links",
    "github_link",
    "arxiv_link",
    "first_match",
    "DetailExtractor",
]
