"""Process entry point for the DigitalOcean MCP server.

Usage:
    digitalocean-mcp            # console script
    python server.py            # equivalent
"""

import logging

import uvicorn
from dotenv import load_dotenv

from do_mcp import SERVER_NAME, SERVER_VERSION
from do_mcp.api import create_app
from do_mcp.config import get_settings
from do_mcp.telemetry import setup_telemetry

logger = logging.getLogger(__name__)


def main() -> None:
    """Load configuration, set up logging, and serve over HTTP."""
    load_dotenv()
    setup_telemetry()

    settings = get_settings()
    app = create_app(settings)

    logger.info(
        f"🚀 Starting {SERVER_NAME} v{SERVER_VERSION} on http://{settings.host}:{settings.port}"
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
