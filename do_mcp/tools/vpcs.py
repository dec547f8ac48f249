"""VPC tools."""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

VpcId = Annotated[str, Field(description="VPC UUID")]


@do_tool
async def digitalocean_list_vpcs(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List VPC networks."""
    result = await get_client().list_vpcs(**page_params(per_page, page))
    return format_response(result, format, "vpcs")


@do_tool
async def digitalocean_get_vpc(vpc_id: VpcId, format: Format = "json") -> CallToolResult:
    """Get details of a VPC."""
    vpc = await get_client().get_vpc(vpc_id)
    return format_response(vpc, format, "vpcs")


@do_tool
async def digitalocean_create_vpc(
    name: Annotated[str, Field(description="VPC name")],
    region: Annotated[str, Field(description="Region slug")],
    description: str | None = None,
    ip_range: Annotated[
        str | None, Field(description="IP range in CIDR notation, e.g. 10.10.10.0/24")
    ] = None,
) -> CallToolResult:
    """Create a VPC network."""
    vpc = await get_client().create_vpc(
        {"name": name, "region": region, "description": description, "ip_range": ip_range}
    )
    return success_response("VPC created", vpc=vpc)


@do_tool
async def digitalocean_update_vpc(
    vpc_id: VpcId,
    name: Annotated[str, Field(description="New VPC name")],
    description: str | None = None,
) -> CallToolResult:
    """Rename a VPC or change its description."""
    vpc = await get_client().update_vpc(vpc_id, name, description)
    return success_response("VPC updated", vpc=vpc)


@do_tool
async def digitalocean_delete_vpc(vpc_id: VpcId) -> CallToolResult:
    """Delete a VPC. It must have no members."""
    await get_client().delete_vpc(vpc_id)
    return success_response(f"VPC {vpc_id} deleted")


@do_tool
async def digitalocean_list_vpc_members(
    vpc_id: VpcId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List resources placed in a VPC."""
    result = await get_client().list_vpc_members(vpc_id, **page_params(per_page, page))
    return format_response(result, format, "members")


TOOLS = [
    digitalocean_list_vpcs,
    digitalocean_get_vpc,
    digitalocean_create_vpc,
    digitalocean_update_vpc,
    digitalocean_delete_vpc,
    digitalocean_list_vpc_members,
]
