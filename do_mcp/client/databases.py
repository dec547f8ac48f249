"""Managed database cluster endpoints."""

from typing import Any

from ..schema import Page
from .base import BaseClient


class DatabasesClient(BaseClient):
    """Managed database endpoints of the DigitalOcean API."""

    async def list_databases(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/databases", "databases", page, per_page)

    async def get_database(self, database_id: str) -> dict[str, Any]:
        data = await self.request(f"/databases/{database_id}")
        return self.unwrap(data, "database")

    async def create_database(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/databases", method="POST", body=body)
        return self.unwrap(data, "database")

    async def delete_database(self, database_id: str) -> None:
        await self.request(f"/databases/{database_id}", method="DELETE")

    async def resize_database(self, database_id: str, size: str, num_nodes: int) -> None:
        await self.request(
            f"/databases/{database_id}/resize",
            method="PUT",
            body={"size": size, "num_nodes": num_nodes},
        )

    async def migrate_database(self, database_id: str, region: str) -> None:
        await self.request(
            f"/databases/{database_id}/migrate", method="PUT", body={"region": region}
        )

    async def list_database_backups(self, database_id: str) -> list[Any]:
        data = await self.request(f"/databases/{database_id}/backups")
        return self.unwrap(data, "backups")

    async def get_database_ca(self, database_id: str) -> str:
        """Return the cluster CA certificate (base64 PEM as served by the API)."""
        data = await self.request(f"/databases/{database_id}/ca")
        ca = self.unwrap(data, "ca")
        if isinstance(ca, dict):
            return ca.get("certificate", "")
        return ca

    # Replicas

    async def list_database_replicas(self, database_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/databases/{database_id}/replicas")
        return self.unwrap(data, "replicas")

    async def create_database_replica(
        self,
        database_id: str,
        name: str,
        size: str | None = None,
        region: str | None = None,
        tags: list[str] | None = None,
    ) -> dict[str, Any]:
        data = await self.request(
            f"/databases/{database_id}/replicas",
            method="POST",
            body={"name": name, "size": size, "region": region, "tags": tags},
        )
        return self.unwrap(data, "replica")

    async def delete_database_replica(self, database_id: str, replica_name: str) -> None:
        await self.request(
            f"/databases/{database_id}/replicas/{replica_name}", method="DELETE"
        )

    async def promote_database_replica(self, database_id: str, replica_name: str) -> None:
        await self.request(
            f"/databases/{database_id}/replicas/{replica_name}/promote", method="PUT"
        )

    # Users

    async def list_database_users(self, database_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/databases/{database_id}/users")
        return self.unwrap(data, "users")

    async def create_database_user(
        self, database_id: str, name: str, mysql_auth_plugin: str | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"name": name}
        if mysql_auth_plugin:
            body["mysql_settings"] = {"auth_plugin": mysql_auth_plugin}
        data = await self.request(
            f"/databases/{database_id}/users", method="POST", body=body
        )
        return self.unwrap(data, "user")

    async def delete_database_user(self, database_id: str, username: str) -> None:
        await self.request(f"/databases/{database_id}/users/{username}", method="DELETE")

    async def reset_database_user_auth(
        self, database_id: str, username: str, mysql_auth_plugin: str | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if mysql_auth_plugin:
            body["mysql_settings"] = {"auth_plugin": mysql_auth_plugin}
        data = await self.request(
            f"/databases/{database_id}/users/{username}/reset_auth",
            method="POST",
            body=body,
        )
        return self.unwrap(data, "user")

    # Databases within a cluster

    async def list_database_dbs(self, database_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/databases/{database_id}/dbs")
        return self.unwrap(data, "dbs")

    async def create_database_db(self, database_id: str, name: str) -> dict[str, Any]:
        data = await self.request(
            f"/databases/{database_id}/dbs", method="POST", body={"name": name}
        )
        return self.unwrap(data, "db")

    async def delete_database_db(self, database_id: str, db_name: str) -> None:
        await self.request(f"/databases/{database_id}/dbs/{db_name}", method="DELETE")

    # Connection pools

    async def list_database_pools(self, database_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/databases/{database_id}/pools")
        return self.unwrap(data, "pools")

    async def create_database_pool(
        self, database_id: str, name: str, mode: str, size: int, db: str, user: str
    ) -> dict[str, Any]:
        data = await self.request(
            f"/databases/{database_id}/pools",
            method="POST",
            body={"name": name, "mode": mode, "size": size, "db": db, "user": user},
        )
        return self.unwrap(data, "pool")

    async def delete_database_pool(self, database_id: str, pool_name: str) -> None:
        await self.request(f"/databases/{database_id}/pools/{pool_name}", method="DELETE")

    # Trusted sources

    async def list_database_firewall_rules(self, database_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/databases/{database_id}/firewall")
        return self.unwrap(data, "rules")

    async def update_database_firewall_rules(
        self, database_id: str, rules: list[dict[str, Any]]
    ) -> None:
        await self.request(
            f"/databases/{database_id}/firewall", method="PUT", body={"rules": rules}
        )
