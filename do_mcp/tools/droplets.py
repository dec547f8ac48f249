"""Droplet tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

DropletId = Annotated[int, Field(description="Droplet ID")]
ImageRef = Annotated[str | int, Field(description="Image slug or ID")]

DropletActionType = Literal[
    "power_on",
    "power_off",
    "shutdown",
    "reboot",
    "power_cycle",
    "enable_ipv6",
    "enable_backups",
    "disable_backups",
    "snapshot",
    "restore",
    "password_reset",
    "resize",
    "rebuild",
    "rename",
]

TagActionType = Literal[
    "power_on",
    "power_off",
    "shutdown",
    "power_cycle",
    "enable_ipv6",
    "enable_backups",
    "disable_backups",
    "snapshot",
]


def _action_params(**params: object) -> dict[str, object]:
    return {k: v for k, v in params.items() if v is not None and v != ""}


@do_tool
async def digitalocean_list_droplets(
    per_page: PerPage = None,
    page: PageNumber = 1,
    tag_name: Annotated[str | None, Field(description="Filter droplets by tag")] = None,
    format: Format = "json",
) -> CallToolResult:
    """List all droplets in the DigitalOcean account.

    Args:
        per_page: Number of droplets per page (1-200, default: 20)
        page: Page number
        tag_name: Filter by tag name
        format: Response format ('json' or 'markdown')
    """
    client = get_client()
    result = await client.list_droplets(tag_name=tag_name, **page_params(per_page, page))
    return format_response(result, format, "droplets")


@do_tool
async def digitalocean_get_droplet(
    droplet_id: DropletId, format: Format = "json"
) -> CallToolResult:
    """Get details of a specific droplet."""
    droplet = await get_client().get_droplet(droplet_id)
    return format_response(droplet, format, "droplets")


@do_tool
async def digitalocean_create_droplet(
    name: Annotated[str, Field(description="Droplet name")],
    region: Annotated[str, Field(description="Region slug (e.g. 'nyc1', 'sfo3', 'ams3')")],
    size: Annotated[str, Field(description="Size slug (e.g. 's-1vcpu-1gb')")],
    image: ImageRef,
    ssh_keys: Annotated[
        list[str | int] | None, Field(description="SSH key IDs or fingerprints")
    ] = None,
    backups: Annotated[bool | None, Field(description="Enable automatic backups")] = None,
    ipv6: Annotated[bool | None, Field(description="Enable IPv6")] = None,
    monitoring: Annotated[bool | None, Field(description="Enable monitoring")] = None,
    vpc_uuid: Annotated[str | None, Field(description="VPC UUID")] = None,
    user_data: Annotated[str | None, Field(description="cloud-init user data")] = None,
    tags: Annotated[list[str] | None, Field(description="Tags to apply")] = None,
) -> CallToolResult:
    """Create a new droplet."""
    droplet = await get_client().create_droplet(
        {
            "name": name,
            "region": region,
            "size": size,
            "image": image,
            "ssh_keys": ssh_keys,
            "backups": backups,
            "ipv6": ipv6,
            "monitoring": monitoring,
            "vpc_uuid": vpc_uuid,
            "user_data": user_data,
            "tags": tags,
        }
    )
    return success_response("Droplet created", droplet=droplet)


@do_tool
async def digitalocean_delete_droplet(droplet_id: DropletId) -> CallToolResult:
    """Delete a droplet."""
    await get_client().delete_droplet(droplet_id)
    return success_response(f"Droplet {droplet_id} deleted")


@do_tool
async def digitalocean_delete_droplets_by_tag(
    tag_name: Annotated[str, Field(description="Tag name")],
) -> CallToolResult:
    """Delete all droplets with a specific tag."""
    await get_client().delete_droplets_by_tag(tag_name)
    return success_response(f"Droplets with tag '{tag_name}' deleted")


@do_tool
async def digitalocean_droplet_action(
    droplet_id: DropletId,
    action: Annotated[DropletActionType, Field(description="Action type")],
    name: Annotated[str | None, Field(description="New name (rename/snapshot)")] = None,
    image: Annotated[
        str | int | None, Field(description="Image (rebuild/restore)")
    ] = None,
    size: Annotated[str | None, Field(description="Size slug (resize)")] = None,
    disk: Annotated[bool | None, Field(description="Resize disk too (resize)")] = None,
) -> CallToolResult:
    """Perform an action on a droplet.

    Actions: power_on, power_off, shutdown, reboot, power_cycle, enable_ipv6,
    enable_backups, disable_backups, snapshot, restore, password_reset,
    resize, rebuild, rename. Extra arguments apply to the matching action.
    """
    result = await get_client().perform_droplet_action(
        droplet_id, action, _action_params(name=name, image=image, size=size, disk=disk)
    )
    return success_response(f"Action '{action}' initiated", action=result)


@do_tool
async def digitalocean_droplet_action_by_tag(
    tag_name: Annotated[str, Field(description="Tag name")],
    action: Annotated[TagActionType, Field(description="Action type")],
    name: Annotated[str | None, Field(description="Snapshot name (snapshot)")] = None,
) -> CallToolResult:
    """Perform an action on all droplets carrying a tag."""
    actions = await get_client().perform_droplet_action_by_tag(
        tag_name, action, _action_params(name=name)
    )
    return success_response(
        f"Action '{action}' initiated on droplets tagged '{tag_name}'", actions=actions
    )


@do_tool
async def digitalocean_list_droplet_actions(
    droplet_id: DropletId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List the action history of a droplet."""
    result = await get_client().list_droplet_actions(
        droplet_id, **page_params(per_page, page)
    )
    return format_response(result, format, "actions")


@do_tool
async def digitalocean_list_droplet_snapshots(
    droplet_id: DropletId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List snapshots of a droplet."""
    result = await get_client().list_droplet_snapshots(
        droplet_id, **page_params(per_page, page)
    )
    return format_response(result, format, "snapshots")


@do_tool
async def digitalocean_list_droplet_backups(
    droplet_id: DropletId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List backups of a droplet."""
    result = await get_client().list_droplet_backups(
        droplet_id, **page_params(per_page, page)
    )
    return format_response(result, format, "backups")


@do_tool
async def digitalocean_list_droplet_firewalls(
    droplet_id: DropletId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List firewalls applied to a droplet."""
    result = await get_client().list_droplet_firewalls(
        droplet_id, **page_params(per_page, page)
    )
    return format_response(result, format, "firewalls")


@do_tool
async def digitalocean_list_droplet_neighbors(
    droplet_id: DropletId, format: Format = "json"
) -> CallToolResult:
    """List droplets running on the same physical host."""
    droplets = await get_client().list_droplet_neighbors(droplet_id)
    return format_response(droplets, format, "droplets")


TOOLS = [
    digitalocean_list_droplets,
    digitalocean_get_droplet,
    digitalocean_create_droplet,
    digitalocean_delete_droplet,
    digitalocean_delete_droplets_by_tag,
    digitalocean_droplet_action,
    digitalocean_droplet_action_by_tag,
    digitalocean_list_droplet_actions,
    digitalocean_list_droplet_snapshots,
    digitalocean_list_droplet_backups,
    digitalocean_list_droplet_firewalls,
    digitalocean_list_droplet_neighbors,
]
