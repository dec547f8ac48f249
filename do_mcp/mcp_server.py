"""FastMCP server factory.

The server runs the Streamable HTTP transport in stateless mode with JSON
responses: every POST to ``/mcp`` is self-contained, so any replica can serve
any request and no session state outlives a request.
"""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from . import SERVER_NAME
from .config import Settings, get_settings
from .tools import ALL_TOOLS

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"

INSTRUCTIONS = (
    "Manage DigitalOcean infrastructure: droplets, volumes, networking, "
    "Kubernetes, databases, App Platform, and more. Every request must carry "
    "the caller's API token in the X-DigitalOcean-Token header."
)


def _transport_security(settings: Settings) -> TransportSecuritySettings:
    if not settings.allowed_hosts:
        return TransportSecuritySettings(enable_dns_rebinding_protection=False)
    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=list(settings.allowed_hosts),
    )


def create_mcp_server(settings: Settings | None = None) -> FastMCP:
    """Create the MCP server with every DigitalOcean tool registered.

    Args:
        settings: Process settings; defaults to ``get_settings()``.

    Returns:
        A FastMCP instance. Call ``streamable_http_app()`` to obtain its ASGI app.
    """
    settings = settings or get_settings()
    mcp = FastMCP(
        SERVER_NAME,
        instructions=INSTRUCTIONS,
        stateless_http=True,
        json_response=True,
        streamable_http_path=MCP_PATH,
        transport_security=_transport_security(settings),
    )
    for tool in ALL_TOOLS:
        mcp.add_tool(tool, structured_output=False)
    logger.info(f"🔧 Registered {len(ALL_TOOLS)} DigitalOcean tools")
    return mcp
