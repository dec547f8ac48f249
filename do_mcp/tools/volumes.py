"""Block storage volume tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

VolumeId = Annotated[str, Field(description="Volume UUID")]
RegionSlug = Annotated[str | None, Field(description="Region slug")]


@do_tool
async def digitalocean_list_volumes(
    per_page: PerPage = None,
    page: PageNumber = 1,
    name: Annotated[str | None, Field(description="Filter by volume name")] = None,
    region: Annotated[str | None, Field(description="Filter by region")] = None,
    format: Format = "json",
) -> CallToolResult:
    """List block storage volumes."""
    result = await get_client().list_volumes(
        name=name, region=region, **page_params(per_page, page)
    )
    return format_response(result, format, "volumes")


@do_tool
async def digitalocean_get_volume(volume_id: VolumeId, format: Format = "json") -> CallToolResult:
    """Get details of a volume."""
    volume = await get_client().get_volume(volume_id)
    return format_response(volume, format, "volumes")


@do_tool
async def digitalocean_create_volume(
    name: Annotated[str, Field(description="Volume name")],
    size_gigabytes: Annotated[int, Field(ge=1, description="Size in GB")],
    region: Annotated[str, Field(description="Region slug")],
    description: str | None = None,
    snapshot_id: Annotated[str | None, Field(description="Create from snapshot")] = None,
    filesystem_type: Literal["ext4", "xfs"] | None = None,
    filesystem_label: str | None = None,
    tags: list[str] | None = None,
) -> CallToolResult:
    """Create a block storage volume, optionally from a snapshot."""
    volume = await get_client().create_volume(
        {
            "name": name,
            "size_gigabytes": size_gigabytes,
            "region": region,
            "description": description,
            "snapshot_id": snapshot_id,
            "filesystem_type": filesystem_type,
            "filesystem_label": filesystem_label,
            "tags": tags,
        }
    )
    return success_response("Volume created", volume=volume)


@do_tool
async def digitalocean_delete_volume(volume_id: VolumeId) -> CallToolResult:
    """Delete a volume. It must be detached first."""
    await get_client().delete_volume(volume_id)
    return success_response(f"Volume {volume_id} deleted")


@do_tool
async def digitalocean_delete_volume_by_name(
    name: Annotated[str, Field(description="Volume name")],
    region: Annotated[str, Field(description="Region slug")],
) -> CallToolResult:
    """Delete a volume identified by name and region."""
    await get_client().delete_volume_by_name(name, region)
    return success_response(f"Volume '{name}' in {region} deleted")


@do_tool
async def digitalocean_attach_volume(
    volume_id: VolumeId,
    droplet_id: Annotated[int, Field(description="Droplet ID")],
    region: RegionSlug = None,
) -> CallToolResult:
    """Attach a volume to a droplet."""
    action = await get_client().perform_volume_action(
        volume_id, "attach", {"droplet_id": droplet_id, "region": region}
    )
    return success_response("Volume attach initiated", action=action)


@do_tool
async def digitalocean_detach_volume(
    volume_id: VolumeId,
    droplet_id: Annotated[int, Field(description="Droplet ID")],
    region: RegionSlug = None,
) -> CallToolResult:
    """Detach a volume from a droplet."""
    action = await get_client().perform_volume_action(
        volume_id, "detach", {"droplet_id": droplet_id, "region": region}
    )
    return success_response("Volume detach initiated", action=action)


@do_tool
async def digitalocean_resize_volume(
    volume_id: VolumeId,
    size_gigabytes: Annotated[int, Field(ge=1, description="New size in GB")],
    region: RegionSlug = None,
) -> CallToolResult:
    """Grow a volume. Volumes cannot shrink."""
    action = await get_client().perform_volume_action(
        volume_id, "resize", {"size_gigabytes": size_gigabytes, "region": region}
    )
    return success_response("Volume resize initiated", action=action)


@do_tool
async def digitalocean_list_volume_snapshots(
    volume_id: VolumeId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List snapshots of a volume."""
    result = await get_client().list_volume_snapshots(
        volume_id, **page_params(per_page, page)
    )
    return format_response(result, format, "snapshots")


@do_tool
async def digitalocean_create_volume_snapshot(
    volume_id: VolumeId,
    name: Annotated[str, Field(description="Snapshot name")],
    tags: list[str] | None = None,
) -> CallToolResult:
    """Snapshot a volume."""
    snapshot = await get_client().create_volume_snapshot(volume_id, name, tags)
    return success_response("Volume snapshot created", snapshot=snapshot)


@do_tool
async def digitalocean_list_volume_actions(
    volume_id: VolumeId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List actions performed on a volume."""
    result = await get_client().list_volume_actions(
        volume_id, **page_params(per_page, page)
    )
    return format_response(result, format, "actions")


TOOLS = [
    digitalocean_list_volumes,
    digitalocean_get_volume,
    digitalocean_create_volume,
    digitalocean_delete_volume,
    digitalocean_delete_volume_by_name,
    digitalocean_attach_volume,
    digitalocean_detach_volume,
    digitalocean_resize_volume,
    digitalocean_list_volume_snapshots,
    digitalocean_create_volume_snapshot,
    digitalocean_list_volume_actions,
]
