"""Kubernetes (DOKS) tools."""

from typing import Annotated, Any

from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from ..formatters import format_response, success_response, text_result
from .common import (
    Format,
    PageNumber,
    PerPage,
    do_tool,
    dump_models,
    get_client,
    page_params,
)

ClusterId = Annotated[str, Field(description="Kubernetes cluster UUID")]
NodePoolId = Annotated[str, Field(description="Node pool UUID")]


class NodePool(BaseModel):
    """Node pool definition used when creating a cluster."""

    name: str
    size: str = Field(description="Droplet size slug for the nodes")
    count: int = Field(ge=1)
    tags: list[str] | None = None
    labels: dict[str, str] | None = None
    auto_scale: bool | None = None
    min_nodes: int | None = None
    max_nodes: int | None = None


class MaintenancePolicy(BaseModel):
    start_time: str = Field(description="UTC start time, e.g. '03:00'")
    day: str = Field(description="'any', 'monday' ... 'sunday'")


@do_tool
async def digitalocean_list_kubernetes_clusters(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List Kubernetes clusters."""
    result = await get_client().list_kubernetes_clusters(**page_params(per_page, page))
    return format_response(result, format, "kubernetes_clusters")


@do_tool
async def digitalocean_get_kubernetes_cluster(
    cluster_id: ClusterId, format: Format = "json"
) -> CallToolResult:
    """Get details of a Kubernetes cluster."""
    cluster = await get_client().get_kubernetes_cluster(cluster_id)
    return format_response(cluster, format, "kubernetes_clusters")


@do_tool
async def digitalocean_create_kubernetes_cluster(
    name: Annotated[str, Field(description="Cluster name")],
    region: Annotated[str, Field(description="Region slug")],
    version: Annotated[str, Field(description="Kubernetes version slug, or 'latest'")],
    node_pools: Annotated[list[NodePool], Field(description="At least one node pool")],
    vpc_uuid: str | None = None,
    tags: list[str] | None = None,
    auto_upgrade: bool | None = None,
    surge_upgrade: bool | None = None,
    ha: Annotated[bool | None, Field(description="Highly available control plane")] = None,
    maintenance_policy: MaintenancePolicy | None = None,
) -> CallToolResult:
    """Create a Kubernetes cluster."""
    cluster = await get_client().create_kubernetes_cluster(
        {
            "name": name,
            "region": region,
            "version": version,
            "node_pools": dump_models(node_pools),
            "vpc_uuid": vpc_uuid,
            "tags": tags,
            "auto_upgrade": auto_upgrade,
            "surge_upgrade": surge_upgrade,
            "ha": ha,
            "maintenance_policy": dump_models(maintenance_policy),
        }
    )
    return success_response("Kubernetes cluster creation initiated", kubernetes_cluster=cluster)


@do_tool
async def digitalocean_update_kubernetes_cluster(
    cluster_id: ClusterId,
    name: Annotated[str, Field(description="Cluster name")],
    auto_upgrade: bool | None = None,
    maintenance_policy: MaintenancePolicy | None = None,
) -> CallToolResult:
    """Update a cluster's name, auto-upgrade flag, or maintenance window."""
    cluster = await get_client().update_kubernetes_cluster(
        cluster_id, name, auto_upgrade, dump_models(maintenance_policy)
    )
    return success_response("Kubernetes cluster updated", kubernetes_cluster=cluster)


@do_tool
async def digitalocean_delete_kubernetes_cluster(cluster_id: ClusterId) -> CallToolResult:
    """Delete a Kubernetes cluster."""
    await get_client().delete_kubernetes_cluster(cluster_id)
    return success_response(f"Kubernetes cluster {cluster_id} deleted")


@do_tool
async def digitalocean_get_kubeconfig(cluster_id: ClusterId) -> CallToolResult:
    """Get the kubeconfig YAML for a cluster."""
    kubeconfig = await get_client().get_kubernetes_kubeconfig(cluster_id)
    return text_result(kubeconfig)


@do_tool
async def digitalocean_get_kubernetes_credentials(cluster_id: ClusterId) -> CallToolResult:
    """Get short-lived API server credentials for a cluster."""
    credentials = await get_client().get_kubernetes_credentials(cluster_id)
    return format_response(credentials)


@do_tool
async def digitalocean_list_kubernetes_node_pools(
    cluster_id: ClusterId, format: Format = "json"
) -> CallToolResult:
    """List the node pools of a cluster."""
    node_pools = await get_client().list_kubernetes_node_pools(cluster_id)
    return format_response(node_pools, format, "node_pools")


@do_tool
async def digitalocean_get_kubernetes_node_pool(
    cluster_id: ClusterId, node_pool_id: NodePoolId, format: Format = "json"
) -> CallToolResult:
    """Get details of a node pool."""
    node_pool = await get_client().get_kubernetes_node_pool(cluster_id, node_pool_id)
    return format_response(node_pool, format, "node_pools")


@do_tool
async def digitalocean_add_kubernetes_node_pool(
    cluster_id: ClusterId,
    name: Annotated[str, Field(description="Node pool name")],
    size: Annotated[str, Field(description="Droplet size slug")],
    count: Annotated[int, Field(ge=1, description="Number of nodes")],
    tags: list[str] | None = None,
    labels: dict[str, str] | None = None,
    auto_scale: bool | None = None,
    min_nodes: int | None = None,
    max_nodes: int | None = None,
) -> CallToolResult:
    """Add a node pool to a cluster."""
    node_pool = await get_client().add_kubernetes_node_pool(
        cluster_id,
        {
            "name": name,
            "size": size,
            "count": count,
            "tags": tags,
            "labels": labels,
            "auto_scale": auto_scale,
            "min_nodes": min_nodes,
            "max_nodes": max_nodes,
        },
    )
    return success_response("Node pool added", node_pool=node_pool)


@do_tool
async def digitalocean_update_kubernetes_node_pool(
    cluster_id: ClusterId,
    node_pool_id: NodePoolId,
    name: Annotated[str, Field(description="Node pool name")],
    count: Annotated[int | None, Field(ge=1, description="Number of nodes")] = None,
    tags: list[str] | None = None,
    labels: dict[str, str] | None = None,
    auto_scale: bool | None = None,
    min_nodes: int | None = None,
    max_nodes: int | None = None,
) -> CallToolResult:
    """Update a node pool (name, size of the pool, autoscaling)."""
    body: dict[str, Any] = {
        "name": name,
        "count": count,
        "tags": tags,
        "labels": labels,
        "auto_scale": auto_scale,
        "min_nodes": min_nodes,
        "max_nodes": max_nodes,
    }
    node_pool = await get_client().update_kubernetes_node_pool(cluster_id, node_pool_id, body)
    return success_response("Node pool updated", node_pool=node_pool)


@do_tool
async def digitalocean_delete_kubernetes_node_pool(
    cluster_id: ClusterId, node_pool_id: NodePoolId
) -> CallToolResult:
    """Delete a node pool and all of its nodes."""
    await get_client().delete_kubernetes_node_pool(cluster_id, node_pool_id)
    return success_response(f"Node pool {node_pool_id} deleted")


@do_tool
async def digitalocean_delete_kubernetes_node(
    cluster_id: ClusterId,
    node_pool_id: NodePoolId,
    node_id: Annotated[str, Field(description="Node UUID")],
    replace: Annotated[bool | None, Field(description="Replace the node with a new one")] = None,
    skip_drain: Annotated[bool | None, Field(description="Skip draining the node first")] = None,
) -> CallToolResult:
    """Delete (or replace) a single node of a node pool."""
    await get_client().delete_kubernetes_node(
        cluster_id, node_pool_id, node_id, replace=replace, skip_drain=skip_drain
    )
    verb = "replaced" if replace else "deleted"
    return success_response(f"Node {node_id} {verb}")


@do_tool
async def digitalocean_upgrade_kubernetes_cluster(
    cluster_id: ClusterId,
    version: Annotated[str, Field(description="Target Kubernetes version slug")],
) -> CallToolResult:
    """Upgrade a cluster to a newer Kubernetes version."""
    await get_client().upgrade_kubernetes_cluster(cluster_id, version)
    return success_response(f"Upgrade to {version} initiated")


@do_tool
async def digitalocean_list_kubernetes_upgrades(
    cluster_id: ClusterId, format: Format = "json"
) -> CallToolResult:
    """List versions a cluster can be upgraded to."""
    upgrades = await get_client().list_kubernetes_available_upgrades(cluster_id)
    return format_response(upgrades, format, "available_upgrade_versions")


@do_tool
async def digitalocean_get_kubernetes_options(format: Format = "json") -> CallToolResult:
    """List available Kubernetes versions, regions, and node sizes."""
    options = await get_client().get_kubernetes_options()
    return format_response(options, format, "options")


TOOLS = [
    digitalocean_list_kubernetes_clusters,
    digitalocean_get_kubernetes_cluster,
    digitalocean_create_kubernetes_cluster,
    digitalocean_update_kubernetes_cluster,
    digitalocean_delete_kubernetes_cluster,
    digitalocean_get_kubeconfig,
    digitalocean_get_kubernetes_credentials,
    digitalocean_list_kubernetes_node_pools,
    digitalocean_get_kubernetes_node_pool,
    digitalocean_add_kubernetes_node_pool,
    digitalocean_update_kubernetes_node_pool,
    digitalocean_delete_kubernetes_node_pool,
    digitalocean_delete_kubernetes_node,
    digitalocean_upgrade_kubernetes_cluster,
    digitalocean_list_kubernetes_upgrades,
    digitalocean_get_kubernetes_options,
]
