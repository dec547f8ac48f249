"""Reserved IP tools."""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

ReservedIp = Annotated[str, Field(description="Reserved IPv4 address")]


@do_tool
async def digitalocean_list_reserved_ips(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List reserved IPs."""
    result = await get_client().list_reserved_ips(**page_params(per_page, page))
    return format_response(result, format, "reserved_ips")


@do_tool
async def digitalocean_get_reserved_ip(ip: ReservedIp, format: Format = "json") -> CallToolResult:
    """Get details of a reserved IP."""
    reserved_ip = await get_client().get_reserved_ip(ip)
    return format_response(reserved_ip, format, "reserved_ips")


@do_tool
async def digitalocean_create_reserved_ip(
    region: Annotated[
        str | None, Field(description="Region to reserve the IP in (omit when assigning to a droplet)")
    ] = None,
    droplet_id: Annotated[int | None, Field(description="Droplet to assign the IP to")] = None,
    project_id: Annotated[str | None, Field(description="Project to place the IP in")] = None,
) -> CallToolResult:
    """Reserve a new IP, either in a region or directly assigned to a droplet."""
    if region is None and droplet_id is None:
        raise ValueError("Either region or droplet_id is required")
    reserved_ip = await get_client().create_reserved_ip(region, droplet_id, project_id)
    return success_response("Reserved IP created", reserved_ip=reserved_ip)


@do_tool
async def digitalocean_delete_reserved_ip(ip: ReservedIp) -> CallToolResult:
    """Release a reserved IP."""
    await get_client().delete_reserved_ip(ip)
    return success_response(f"Reserved IP {ip} deleted")


@do_tool
async def digitalocean_assign_reserved_ip(
    ip: ReservedIp,
    droplet_id: Annotated[int, Field(description="Droplet to assign the IP to")],
) -> CallToolResult:
    """Assign a reserved IP to a droplet."""
    action = await get_client().perform_reserved_ip_action(ip, "assign", droplet_id)
    return success_response(f"Reserved IP {ip} assigned to droplet {droplet_id}", action=action)


@do_tool
async def digitalocean_unassign_reserved_ip(ip: ReservedIp) -> CallToolResult:
    """Unassign a reserved IP from its droplet."""
    action = await get_client().perform_reserved_ip_action(ip, "unassign")
    return success_response(f"Reserved IP {ip} unassigned", action=action)


TOOLS = [
    digitalocean_list_reserved_ips,
    digitalocean_get_reserved_ip,
    digitalocean_create_reserved_ip,
    digitalocean_delete_reserved_ip,
    digitalocean_assign_reserved_ip,
    digitalocean_unassign_reserved_ip,
]
