"""Server description endpoint."""

from typing import Any

from fastapi import APIRouter

from ... import SERVER_NAME, SERVER_VERSION
from ...auth import BASE_URL_HEADER, TOKEN_HEADER
from ...mcp_server import MCP_PATH
from ...tools import ALL_TOOLS

router = APIRouter(tags=["info"])


@router.get("/")
async def server_info() -> dict[str, Any]:
    """Describe the server, its endpoints, and how to authenticate."""
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": "Multi-tenant MCP server for the DigitalOcean API",
        "endpoints": {
            "mcp": f"POST {MCP_PATH}",
            "health": "GET /health",
        },
        "authentication": {
            "required_headers": {TOKEN_HEADER: "DigitalOcean API token"},
            "optional_headers": {BASE_URL_HEADER: "Override the API base URL"},
        },
        "tools": [tool.__name__ for tool in ALL_TOOLS],
    }
