"""Middleware configuration for the MCP HTTP surface."""

import logging
import time
import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..auth import (
    MISSING_TOKEN_MESSAGE,
    TOKEN_HEADER,
    parse_tenant_credentials,
    reset_current_credentials,
    set_current_credentials,
)
from ..mcp_server import MCP_PATH
from ..telemetry import set_span_attribute

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Only the first healthy /health call is logged until a failure resets it
_HEALTH_SUCCESS_LOGGED = False


def _is_mcp_path(path: str) -> bool:
    return path == MCP_PATH or path.startswith(MCP_PATH + "/")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global handler for unhandled exceptions."""
    logger.error(f"🔥 Global exception handler caught: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": "Unexpected server error"},
    )


async def request_logging_middleware(request: Request, call_next: Any) -> Any:
    """Log each request and propagate an X-Request-ID correlation header."""
    global _HEALTH_SUCCESS_LOGGED

    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id
    set_span_attribute("http.request_id", request_id)
    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as e:
        duration = (time.time() - start_time) * 1000
        logger.error(
            f"🌐 Request Failed: {request.method} {request.url.path} - {e} "
            f"({duration:.2f}ms) [Request-ID: {request_id}]"
        )
        raise

    duration = (time.time() - start_time) * 1000
    should_log = True
    if request.url.path == "/health":
        if response.status_code < 400:
            should_log = not _HEALTH_SUCCESS_LOGGED
            _HEALTH_SUCCESS_LOGGED = True
        else:
            _HEALTH_SUCCESS_LOGGED = False

    if should_log:
        logger.info(
            f"🌐 Request End: {request.method} {request.url.path} - {response.status_code} "
            f"({duration:.2f}ms) [Request-ID: {request_id}]"
        )

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def tenant_auth_middleware(request: Request, call_next: Any) -> Any:
    """Bind the caller's DigitalOcean credentials for the duration of an MCP request.

    Requests to the MCP endpoint without a token are rejected with 401 before
    they reach the MCP layer. Other paths pass through untouched.
    """
    if not _is_mcp_path(request.url.path):
        return await call_next(request)

    credentials = parse_tenant_credentials(request.headers)
    if credentials is None:
        logger.warning(f"🔒 Rejected MCP request without {TOKEN_HEADER} header")
        return JSONResponse(
            status_code=401,
            content={
                "error": "Unauthorized",
                "message": MISSING_TOKEN_MESSAGE,
                "required_headers": [TOKEN_HEADER],
            },
        )

    context_token = set_current_credentials(credentials)
    try:
        return await call_next(request)
    finally:
        # Clear credentials after request to prevent leakage between requests
        reset_current_credentials(context_token)


def configure_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application."""
    app.add_exception_handler(Exception, global_exception_handler)

    app.middleware("http")(tenant_auth_middleware)

    # Registered last so it runs first (outermost)
    app.middleware("http")(request_logging_middleware)
