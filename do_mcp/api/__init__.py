"""HTTP surface of the DigitalOcean MCP server."""

from .app import create_app

__all__ = ["create_app"]
