"""Start the PaperTrend API server.

Usage:
    python -m papertrend
    python -m papertrend --port 8080 --reload
"""

import argparse
import os

import uvicorn

from papertrend.config.settings import get_settings


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="PaperTrend API server")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to bind (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["debug", "info", "warning", "error"],
        help="Log level",
    )
    args = parser.parse_args()

    # The app reads its own log level from settings
    os.environ["PAPERTREND_LOG_LEVEL"] = args.log_level.upper()
    get_settings.cache_clear()

    uvicorn.run(
        "papertrend.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
