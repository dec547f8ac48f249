"""Cloud firewall tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from ..formatters import format_response, success_response
from .common import (
    Format,
    PageNumber,
    PerPage,
    do_tool,
    dump_models,
    get_client,
    page_params,
)

FirewallId = Annotated[str, Field(description="Firewall UUID")]


class FirewallTargets(BaseModel):
    """Traffic sources or destinations of a firewall rule."""

    addresses: list[str] | None = None
    droplet_ids: list[int] | None = None
    load_balancer_uids: list[str] | None = None
    kubernetes_ids: list[str] | None = None
    tags: list[str] | None = None


class FirewallRule(BaseModel):
    """Inbound rules use ``sources``; outbound rules use ``destinations``."""

    protocol: Literal["tcp", "udp", "icmp"]
    ports: str = Field(description='Port range, e.g. "22", "80-443", "all"')
    sources: FirewallTargets | None = None
    destinations: FirewallTargets | None = None


Rules = Annotated[list[FirewallRule] | None, Field(description="Firewall rules")]


@do_tool
async def digitalocean_list_firewalls(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List cloud firewalls."""
    result = await get_client().list_firewalls(**page_params(per_page, page))
    return format_response(result, format, "firewalls")


@do_tool
async def digitalocean_get_firewall(firewall_id: FirewallId, format: Format = "json") -> CallToolResult:
    """Get details of a firewall."""
    firewall = await get_client().get_firewall(firewall_id)
    return format_response(firewall, format, "firewalls")


@do_tool
async def digitalocean_create_firewall(
    name: Annotated[str, Field(description="Firewall name")],
    inbound_rules: Rules = None,
    outbound_rules: Rules = None,
    droplet_ids: Annotated[list[int] | None, Field(description="Droplets to protect")] = None,
    tags: Annotated[list[str] | None, Field(description="Tags to apply the firewall to")] = None,
) -> CallToolResult:
    """Create a cloud firewall."""
    firewall = await get_client().create_firewall(
        {
            "name": name,
            "inbound_rules": dump_models(inbound_rules),
            "outbound_rules": dump_models(outbound_rules),
            "droplet_ids": droplet_ids,
            "tags": tags,
        }
    )
    return success_response("Firewall created", firewall=firewall)


@do_tool
async def digitalocean_update_firewall(
    firewall_id: FirewallId,
    name: Annotated[str, Field(description="Firewall name")],
    inbound_rules: Rules = None,
    outbound_rules: Rules = None,
    droplet_ids: list[int] | None = None,
    tags: list[str] | None = None,
) -> CallToolResult:
    """Replace a firewall's configuration. Omitted rule sets are cleared by the API."""
    firewall = await get_client().update_firewall(
        firewall_id,
        {
            "name": name,
            "inbound_rules": dump_models(inbound_rules),
            "outbound_rules": dump_models(outbound_rules),
            "droplet_ids": droplet_ids,
            "tags": tags,
        },
    )
    return success_response("Firewall updated", firewall=firewall)


@do_tool
async def digitalocean_delete_firewall(firewall_id: FirewallId) -> CallToolResult:
    """Delete a firewall."""
    await get_client().delete_firewall(firewall_id)
    return success_response(f"Firewall {firewall_id} deleted")


@do_tool
async def digitalocean_add_droplets_to_firewall(
    firewall_id: FirewallId,
    droplet_ids: Annotated[list[int], Field(description="Droplet IDs to add")],
) -> CallToolResult:
    """Apply a firewall to droplets."""
    await get_client().add_droplets_to_firewall(firewall_id, droplet_ids)
    return success_response(f"Added {len(droplet_ids)} droplet(s) to firewall")


@do_tool
async def digitalocean_remove_droplets_from_firewall(
    firewall_id: FirewallId,
    droplet_ids: Annotated[list[int], Field(description="Droplet IDs to remove")],
) -> CallToolResult:
    """Remove droplets from a firewall."""
    await get_client().remove_droplets_from_firewall(firewall_id, droplet_ids)
    return success_response(f"Removed {len(droplet_ids)} droplet(s) from firewall")


@do_tool
async def digitalocean_add_tags_to_firewall(
    firewall_id: FirewallId,
    tags: Annotated[list[str], Field(description="Tags to add")],
) -> CallToolResult:
    """Apply a firewall to every droplet carrying the given tags."""
    await get_client().add_tags_to_firewall(firewall_id, tags)
    return success_response(f"Added tags to firewall: {', '.join(tags)}")


@do_tool
async def digitalocean_remove_tags_from_firewall(
    firewall_id: FirewallId,
    tags: Annotated[list[str], Field(description="Tags to remove")],
) -> CallToolResult:
    """Remove tags from a firewall."""
    await get_client().remove_tags_from_firewall(firewall_id, tags)
    return success_response(f"Removed tags from firewall: {', '.join(tags)}")


@do_tool
async def digitalocean_add_rules_to_firewall(
    firewall_id: FirewallId,
    inbound_rules: Rules = None,
    outbound_rules: Rules = None,
) -> CallToolResult:
    """Add inbound and/or outbound rules to a firewall."""
    await get_client().add_rules_to_firewall(
        firewall_id, dump_models(inbound_rules), dump_models(outbound_rules)
    )
    return success_response("Rules added to firewall")


@do_tool
async def digitalocean_remove_rules_from_firewall(
    firewall_id: FirewallId,
    inbound_rules: Rules = None,
    outbound_rules: Rules = None,
) -> CallToolResult:
    """Remove inbound and/or outbound rules from a firewall."""
    await get_client().remove_rules_from_firewall(
        firewall_id, dump_models(inbound_rules), dump_models(outbound_rules)
    )
    return success_response("Rules removed from firewall")


TOOLS = [
    digitalocean_list_firewalls,
    digitalocean_get_firewall,
    digitalocean_create_firewall,
    digitalocean_update_firewall,
    digitalocean_delete_firewall,
    digitalocean_add_droplets_to_firewall,
    digitalocean_remove_droplets_from_firewall,
    digitalocean_add_tags_to_firewall,
    digitalocean_remove_tags_from_firewall,
    digitalocean_add_rules_to_firewall,
    digitalocean_remove_rules_from_firewall,
]
