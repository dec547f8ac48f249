"""DigitalOcean MCP Server.

Multi-tenant adapter exposing the DigitalOcean API v2 as Model Context
Protocol tools. Tenant credentials arrive per request in HTTP headers; no
credential or client state is shared between requests.
"""

SERVER_NAME = "digitalocean-mcp"
SERVER_VERSION = "1.0.0"

__version__ = SERVER_VERSION
