"""Image and snapshot tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

ImageId = Annotated[int, Field(description="Image ID")]
SnapshotId = Annotated[str, Field(description="Snapshot ID")]


@do_tool
async def digitalocean_list_images(
    per_page: PerPage = None,
    page: PageNumber = 1,
    type: Annotated[
        Literal["distribution", "application", "snapshot", "backup"] | None,
        Field(description="Filter by image type"),
    ] = None,
    private: Annotated[bool | None, Field(description="Only private images")] = None,
    format: Format = "json",
) -> CallToolResult:
    """List images (distributions, one-click applications, snapshots, backups)."""
    result = await get_client().list_images(
        type=type, private=private, **page_params(per_page, page)
    )
    return format_response(result, format, "images")


@do_tool
async def digitalocean_get_image(
    image_id: Annotated[int | str, Field(description="Image ID or slug")],
    format: Format = "json",
) -> CallToolResult:
    """Get details of an image by ID or slug."""
    image = await get_client().get_image(image_id)
    return format_response(image, format, "images")


@do_tool
async def digitalocean_update_image(
    image_id: ImageId,
    name: Annotated[str, Field(description="New image name")],
    description: str | None = None,
    distribution: str | None = None,
) -> CallToolResult:
    """Rename an image or change its description and distribution."""
    image = await get_client().update_image(
        image_id,
        {"name": name, "description": description, "distribution": distribution},
    )
    return success_response("Image updated", image=image)


@do_tool
async def digitalocean_delete_image(image_id: ImageId) -> CallToolResult:
    """Delete a private image."""
    await get_client().delete_image(image_id)
    return success_response(f"Image {image_id} deleted")


@do_tool
async def digitalocean_transfer_image(
    image_id: ImageId,
    region: Annotated[str, Field(description="Target region slug")],
) -> CallToolResult:
    """Transfer an image to another region."""
    action = await get_client().perform_image_action(
        image_id, "transfer", {"region": region}
    )
    return success_response(f"Image transfer to {region} initiated", action=action)


@do_tool
async def digitalocean_convert_image_to_snapshot(image_id: ImageId) -> CallToolResult:
    """Convert a backup image into a snapshot."""
    action = await get_client().perform_image_action(image_id, "convert")
    return success_response("Image conversion initiated", action=action)


@do_tool
async def digitalocean_list_image_actions(
    image_id: ImageId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List actions performed on an image."""
    result = await get_client().list_image_actions(
        image_id, **page_params(per_page, page)
    )
    return format_response(result, format, "actions")


@do_tool
async def digitalocean_list_snapshots(
    per_page: PerPage = None,
    page: PageNumber = 1,
    resource_type: Annotated[
        Literal["droplet", "volume"] | None,
        Field(description="Only snapshots of this resource type"),
    ] = None,
    format: Format = "json",
) -> CallToolResult:
    """List droplet and volume snapshots."""
    result = await get_client().list_snapshots(
        resource_type=resource_type, **page_params(per_page, page)
    )
    return format_response(result, format, "snapshots")


@do_tool
async def digitalocean_get_snapshot(
    snapshot_id: SnapshotId, format: Format = "json"
) -> CallToolResult:
    """Get details of a snapshot."""
    snapshot = await get_client().get_snapshot(snapshot_id)
    return format_response(snapshot, format, "snapshots")


@do_tool
async def digitalocean_delete_snapshot(snapshot_id: SnapshotId) -> CallToolResult:
    """Delete a snapshot."""
    await get_client().delete_snapshot(snapshot_id)
    return success_response(f"Snapshot {snapshot_id} deleted")


TOOLS = [
    digitalocean_list_images,
    digitalocean_get_image,
    digitalocean_update_image,
    digitalocean_delete_image,
    digitalocean_transfer_image,
    digitalocean_convert_image_to_snapshot,
    digitalocean_list_image_actions,
    digitalocean_list_snapshots,
    digitalocean_get_snapshot,
    digitalocean_delete_snapshot,
]
