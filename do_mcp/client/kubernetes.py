"""DigitalOcean Kubernetes (DOKS) endpoints."""

from typing import Any

from ..schema import Page
from .base import BaseClient


class KubernetesClient(BaseClient):
    """Kubernetes cluster and node pool endpoints."""

    async def list_kubernetes_clusters(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            "/kubernetes/clusters", "kubernetes_clusters", page, per_page
        )

    async def get_kubernetes_cluster(self, cluster_id: str) -> dict[str, Any]:
        data = await self.request(f"/kubernetes/clusters/{cluster_id}")
        return self.unwrap(data, "kubernetes_cluster")

    async def create_kubernetes_cluster(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/kubernetes/clusters", method="POST", body=body)
        return self.unwrap(data, "kubernetes_cluster")

    async def update_kubernetes_cluster(
        self,
        cluster_id: str,
        name: str,
        auto_upgrade: bool | None = None,
        maintenance_policy: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        data = await self.request(
            f"/kubernetes/clusters/{cluster_id}",
            method="PUT",
            body={
                "name": name,
                "auto_upgrade": auto_upgrade,
                "maintenance_policy": maintenance_policy,
            },
        )
        return self.unwrap(data, "kubernetes_cluster")

    async def delete_kubernetes_cluster(self, cluster_id: str) -> None:
        await self.request(f"/kubernetes/clusters/{cluster_id}", method="DELETE")

    async def get_kubernetes_kubeconfig(self, cluster_id: str) -> str:
        """Return the cluster kubeconfig as YAML text."""
        data = await self.request(f"/kubernetes/clusters/{cluster_id}/kubeconfig")
        return data if isinstance(data, str) else str(data)

    async def get_kubernetes_credentials(self, cluster_id: str) -> Any:
        return await self.request(f"/kubernetes/clusters/{cluster_id}/credentials")

    async def list_kubernetes_node_pools(self, cluster_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/kubernetes/clusters/{cluster_id}/node_pools")
        return self.unwrap(data, "node_pools")

    async def get_kubernetes_node_pool(
        self, cluster_id: str, node_pool_id: str
    ) -> dict[str, Any]:
        data = await self.request(
            f"/kubernetes/clusters/{cluster_id}/node_pools/{node_pool_id}"
        )
        return self.unwrap(data, "node_pool")

    async def add_kubernetes_node_pool(
        self, cluster_id: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        data = await self.request(
            f"/kubernetes/clusters/{cluster_id}/node_pools", method="POST", body=body
        )
        return self.unwrap(data, "node_pool")

    async def update_kubernetes_node_pool(
        self, cluster_id: str, node_pool_id: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        data = await self.request(
            f"/kubernetes/clusters/{cluster_id}/node_pools/{node_pool_id}",
            method="PUT",
            body=body,
        )
        return self.unwrap(data, "node_pool")

    async def delete_kubernetes_node_pool(self, cluster_id: str, node_pool_id: str) -> None:
        await self.request(
            f"/kubernetes/clusters/{cluster_id}/node_pools/{node_pool_id}",
            method="DELETE",
        )

    async def delete_kubernetes_node(
        self,
        cluster_id: str,
        node_pool_id: str,
        node_id: str,
        replace: bool | None = None,
        skip_drain: bool | None = None,
    ) -> None:
        await self.request(
            f"/kubernetes/clusters/{cluster_id}/node_pools/{node_pool_id}/nodes/{node_id}",
            method="DELETE",
            params={"replace": replace, "skip_drain": skip_drain},
        )

    async def upgrade_kubernetes_cluster(self, cluster_id: str, version: str) -> None:
        await self.request(
            f"/kubernetes/clusters/{cluster_id}/upgrade",
            method="POST",
            body={"version": version},
        )

    async def list_kubernetes_available_upgrades(self, cluster_id: str) -> list[Any]:
        data = await self.request(f"/kubernetes/clusters/{cluster_id}/upgrades")
        return self.unwrap(data, "available_upgrade_versions") or []

    async def get_kubernetes_options(self) -> dict[str, Any]:
        data = await self.request("/kubernetes/options")
        return self.unwrap(data, "options")
