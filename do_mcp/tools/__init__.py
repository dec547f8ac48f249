"""DigitalOcean MCP tools, one module per resource family.

Each module exposes a ``TOOLS`` list; ``ALL_TOOLS`` is the registration order
used by the MCP server.
"""

from . import (
    account,
    apps,
    certificates,
    databases,
    domains,
    droplets,
    firewalls,
    functions,
    images,
    kubernetes,
    load_balancers,
    monitoring,
    projects,
    registry,
    reserved_ips,
    ssh_keys,
    volumes,
    vpcs,
)

TOOL_MODULES = [
    account,
    droplets,
    images,
    ssh_keys,
    volumes,
    domains,
    firewalls,
    load_balancers,
    vpcs,
    reserved_ips,
    certificates,
    kubernetes,
    databases,
    apps,
    functions,
    registry,
    monitoring,
    projects,
]

ALL_TOOLS = [tool for module in TOOL_MODULES for tool in module.TOOLS]

__all__ = ["ALL_TOOLS", "TOOL_MODULES"]
