"""DigitalOcean MCP application factory.

This module creates the FastAPI application, mounts the stateless MCP
transport, and wires middleware and routers.
"""

import contextlib
import logging
from collections.abc import AsyncIterator

from fastapi import FastAPI

from .. import SERVER_NAME, SERVER_VERSION
from ..config import Settings, get_settings
from ..mcp_server import create_mcp_server
from .middleware import configure_middleware
from .routers import health_router, info_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Process settings; defaults to ``get_settings()``.

    Returns:
        Configured FastAPI application serving ``/mcp``, ``/health`` and ``/``.
    """
    settings = settings or get_settings()
    mcp = create_mcp_server(settings)
    mcp_app = mcp.streamable_http_app()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with mcp.session_manager.run():
            logger.info(f"🚀 {SERVER_NAME} v{SERVER_VERSION} ready")
            yield
        logger.info(f"🛑 {SERVER_NAME} shutting down")

    app = FastAPI(title=SERVER_NAME, version=SERVER_VERSION, lifespan=lifespan)
    app.state.mcp = mcp

    configure_middleware(app)

    app.include_router(health_router)
    app.include_router(info_router)

    # Mounted last so the routers above take precedence
    app.mount("/", mcp_app)

    return app
