"""Entry point for the Feature Flag Service.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``) and can be overridden on the command line.

Usage:
    python run.py [--host HOST] [--port PORT]
"""
import argparse
import asyncio
import logging
from typing import List, Optional

from uvicorn import Config, Server

from feature_flag_api.app.core.config import settings
from feature_flag_api.app.main import DOCS_URL, app

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Feature Flag Service")
    parser.add_argument("--host", default=settings.host, help="address to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="port to listen on (default: %(default)s)")
    return parser.parse_args(argv)


async def serve(host: str, port: int) -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Feature flag service running at http://localhost:%d/", port)
    logger.info("Swagger UI available at http://localhost:%d%s", port, DOCS_URL)
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    asyncio.run(serve(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
