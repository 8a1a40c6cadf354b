"""
FastAPI application exposing the paper pipeline.

Run:
    uvicorn papertrend.api.app:app
    python -m papertrend
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from papertrend import __version__
from papertrend.config.settings import Settings, get_settings
from papertrend.infrastructure.http import PageFetcher
from papertrend.pipeline.fetch import PaperPipeline
from papertrend.sources.base import Period
from papertrend.utils.logging import setup_logging
from papertrend.utils.text import json_dumps

logger = logging.getLogger(__name__)

ERROR_PAYLOAD = {"error": "Failed to fetch papers"}


class PrettyJSONResponse(JSONResponse):
    """JSON response indented by two spaces, non-ASCII kept as is."""

    def render(self, content: Any) -> bytes:
        return json_dumps(content, indent=2).encode("utf-8")


def create_app(settings: Settings | None = None, pipeline: PaperPipeline | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Application settings; loaded from the environment when omitted.
        pipeline: Pre-built pipeline (for testing).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.log_level)
        logger.info("Starting PaperTrend %s (site %s)", __version__, settings.site_origin)
        yield
        fetcher = app.state.pipeline.fetcher
        if isinstance(fetcher, PageFetcher):
            fetcher.close()

    app = FastAPI(
        title="PaperTrend API",
        description="Trending research papers from Hugging Face with abstracts and code links",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.pipeline = pipeline or PaperPipeline(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/", response_class=PrettyJSONResponse)
    @app.get("/papers", response_class=PrettyJSONResponse)
    async def list_papers(request: Request, period: str | None = Query(default=None, alias="type")):
        """Papers for the requested period with description, GitHub and arXiv links."""
        selected = Period.parse(period)
        try:
            papers = await request.app.state.pipeline.run(selected)
        except Exception:
            logger.exception("Failed to fetch %s papers", selected.value)
            return JSONResponse(ERROR_PAYLOAD, status_code=500)

        return PrettyJSONResponse(
            [paper.to_json_dict() for paper in papers],
            headers={"Access-Control-Allow-Origin": "*"},
        )

    return app


app = create_app()

__all__ = ["app", "create_app", "PrettyJSONResponse", "ERROR_PAYLOAD"]
