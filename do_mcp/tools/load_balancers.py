"""Load balancer tools."""

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

LoadBalancerId = Annotated[str, Field(description="Load balancer UUID")]
LoadBalancerSize = Literal["lb-small", "lb-medium", "lb-large"]


class ForwardingRule(BaseModel):
    entry_protocol: Literal["http", "https", "http2", "http3", "tcp", "udp"]
    entry_port: int
    target_protocol: Literal["http", "https", "http2", "tcp", "udp"]
    target_port: int
    certificate_id: str | None = None
    tls_passthrough: bool | None = None


class HealthCheck(BaseModel):
    protocol: Literal["http", "https", "tcp"]
    port: int
    path: str | None = None
    check_interval_seconds: int | None = None
    response_timeout_seconds: int | None = None
    unhealthy_threshold: int | None = None
    healthy_threshold: int | None = None


class StickySessions(BaseModel):
    type: Literal["none", "cookies"]
    cookie_name: str | None = None
    cookie_ttl_seconds: int | None = None


def _lb_body(**fields: object) -> dict[str, object]:
    return {key: dump_models(value) for key, value in fields.items()}


@do_tool
async def digitalocean_list_load_balancers(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List load balancers."""
    result = await get_client().list_load_balancers(**page_params(per_page, page))
    return format_response(result, format, "load_balancers")


@do_tool
async def digitalocean_get_load_balancer(
    lb_id: LoadBalancerId, format: Format = "json"
) -> CallToolResult:
    """Get details of a load balancer."""
    lb = await get_client().get_load_balancer(lb_id)
    return format_response(lb, format, "load_balancers")


@do_tool
async def digitalocean_create_load_balancer(
    name: Annotated[str, Field(description="Load balancer name")],
    region: Annotated[str, Field(description="Region slug")],
    forwarding_rules: Annotated[list[ForwardingRule], Field(description="Forwarding rules")],
    size: LoadBalancerSize | None = None,
    health_check: HealthCheck | None = None,
    sticky_sessions: StickySessions | None = None,
    droplet_ids: list[int] | None = None,
    tag: Annotated[str | None, Field(description="Tag for automatic droplet assignment")] = None,
    redirect_http_to_https: bool | None = None,
    enable_proxy_protocol: bool | None = None,
    enable_backend_keepalive: bool | None = None,
    vpc_uuid: str | None = None,
    project_id: str | None = None,
    http_idle_timeout_seconds: int | None = None,
) -> CallToolResult:
    """Create a load balancer.

    Target droplets are given either by ``droplet_ids`` or by ``tag``, not both.
    """
    lb = await get_client().create_load_balancer(
        _lb_body(
            name=name,
            region=region,
            size=size,
            forwarding_rules=forwarding_rules,
            health_check=health_check,
            sticky_sessions=sticky_sessions,
            droplet_ids=droplet_ids,
            tag=tag,
            redirect_http_to_https=redirect_http_to_https,
            enable_proxy_protocol=enable_proxy_protocol,
            enable_backend_keepalive=enable_backend_keepalive,
            vpc_uuid=vpc_uuid,
            project_id=project_id,
            http_idle_timeout_seconds=http_idle_timeout_seconds,
        )
    )
    return success_response("Load balancer created", load_balancer=lb)


@do_tool
async def digitalocean_update_load_balancer(
    lb_id: LoadBalancerId,
    name: str | None = None,
    size: LoadBalancerSize | None = None,
    forwarding_rules: list[ForwardingRule] | None = None,
    health_check: HealthCheck | None = None,
    sticky_sessions: StickySessions | None = None,
    droplet_ids: list[int] | None = None,
    tag: str | None = None,
    redirect_http_to_https: bool | None = None,
    enable_proxy_protocol: bool | None = None,
    enable_backend_keepalive: bool | None = None,
    http_idle_timeout_seconds: int | None = None,
) -> CallToolResult:
    """Update a load balancer's configuration."""
    lb = await get_client().update_load_balancer(
        lb_id,
        _lb_body(
            name=name,
            size=size,
            forwarding_rules=forwarding_rules,
            health_check=health_check,
            sticky_sessions=sticky_sessions,
            droplet_ids=droplet_ids,
            tag=tag,
            redirect_http_to_https=redirect_http_to_https,
            enable_proxy_protocol=enable_proxy_protocol,
            enable_backend_keepalive=enable_backend_keepalive,
            http_idle_timeout_seconds=http_idle_timeout_seconds,
        ),
    )
    return success_response("Load balancer updated", load_balancer=lb)


@do_tool
async def digitalocean_delete_load_balancer(lb_id: LoadBalancerId) -> CallToolResult:
    """Delete a load balancer."""
    await get_client().delete_load_balancer(lb_id)
    return success_response(f"Load balancer {lb_id} deleted")


@do_tool
async def digitalocean_add_droplets_to_load_balancer(
    lb_id: LoadBalancerId,
    droplet_ids: Annotated[list[int], Field(description="Droplet IDs to add")],
) -> CallToolResult:
    """Add droplets to a load balancer's backend pool."""
    await get_client().add_droplets_to_load_balancer(lb_id, droplet_ids)
    return success_response(f"Added {len(droplet_ids)} droplet(s) to load balancer")


@do_tool
async def digitalocean_remove_droplets_from_load_balancer(
    lb_id: LoadBalancerId,
    droplet_ids: Annotated[list[int], Field(description="Droplet IDs to remove")],
) -> CallToolResult:
    """Remove droplets from a load balancer's backend pool."""
    await get_client().remove_droplets_from_load_balancer(lb_id, droplet_ids)
    return success_response(f"Removed {len(droplet_ids)} droplet(s) from load balancer")


TOOLS = [
    digitalocean_list_load_balancers,
    digitalocean_get_load_balancer,
    digitalocean_create_load_balancer,
    digitalocean_update_load_balancer,
    digitalocean_delete_load_balancer,
    digitalocean_add_droplets_to_load_balancer,
    digitalocean_remove_droplets_from_load_balancer,
]
