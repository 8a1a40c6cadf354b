"""Application settings loaded from environment variables.

Every field can be overridden with a ``PAPERTREND_`` prefixed variable, e.g.
``PAPERTREND_REQUEST_TIMEOUT=10``, or from a local ``.env`` file.
"""

from functools import lru_cache
from urllib.parse import urlparse

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from papertrend import __version__
from papertrend.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Main configuration class."""

    model_config = SettingsConfigDict(
        env_prefix="PAPERTREND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hugging Face site layout
    site_origin: str = Field(default="https://huggingface.co")
    listing_path: str = Field(default="/papers")
    paper_path_prefix: str = Field(default="/papers/")
    max_papers: int = Field(default=10, ge=1, le=10)

    # Outbound HTTP
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default=f"papertrend/{__version__}")

    # Server
    log_level: str = Field(default="INFO")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)

    @field_validator("site_origin")
    @classmethod
    def normalize_site_origin(cls, value: str) -> str:
        if not urlparse(value).netloc:
            raise ValueError(f"site_origin must be an absolute URL, got {value!r}")
        return value.rstrip("/")

    @property
    def site_domain(self) -> str:
        """Bare host of the listing site, used to skip its own links."""
        return urlparse(self.site_origin).netloc

    @property
    def listing_base(self) -> str:
        """Absolute base URL that period paths are appended to."""
        return f"{self.site_origin}{self.listing_path}"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


__all__ = ["Settings", "get_settings"]
