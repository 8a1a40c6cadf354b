"""Blocking HTTP page fetcher built on requests."""

import logging

import requests

from papertrend.config.settings import Settings

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches page HTML over a shared requests session.

    No retries. Network failures raise; an error status still returns the body,
    so a not-yet-published listing page parses to nothing.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds.
            user_agent: Optional User-Agent header value.
            session: Optional pre-configured session (for testing).
        """
        self.timeout = timeout
        self._session = session or requests.Session()
        if user_agent:
            self._session.headers["User-Agent"] = user_agent

    @classmethod
    def from_settings(cls, settings: Settings) -> "PageFetcher":
        """Create fetcher from application settings."""
        return cls(timeout=settings.request_timeout, user_agent=settings.user_agent)

    def fetch(self, url: str) -> str:
        """Return the body of ``url`` as text.

        Raises:
            requests.RequestException: On network errors or timeouts.
        """
        logger.debug("GET %s", url)
        response = self._session.get(url, timeout=self.timeout)
        if response.status_code >= 400:
            logger.warning("GET %s returned HTTP %d, using body as is", url, response.status_code)
        return response.text

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()


__all__ = ["PageFetcher"]
