"""Block storage, Spaces key, and container registry endpoints."""

from typing import Any
from urllib.parse import quote

from ..schema import Page
from .base import BaseClient


class StorageClient(BaseClient):
    """Storage endpoints of the DigitalOcean API."""

    # Volumes

    async def list_volumes(
        self,
        page: int | None = None,
        per_page: int | None = None,
        name: str | None = None,
        region: str | None = None,
    ) -> Page:
        return await self.list_paginated(
            "/volumes", "volumes", page, per_page, name=name, region=region
        )

    async def get_volume(self, volume_id: str) -> dict[str, Any]:
        data = await self.request(f"/volumes/{volume_id}")
        return self.unwrap(data, "volume")

    async def create_volume(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/volumes", method="POST", body=body)
        return self.unwrap(data, "volume")

    async def delete_volume(self, volume_id: str) -> None:
        await self.request(f"/volumes/{volume_id}", method="DELETE")

    async def delete_volume_by_name(self, name: str, region: str) -> None:
        await self.request(
            "/volumes", method="DELETE", params={"name": name, "region": region}
        )

    async def list_volume_snapshots(
        self, volume_id: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/volumes/{volume_id}/snapshots", "snapshots", page, per_page
        )

    async def create_volume_snapshot(
        self, volume_id: str, name: str, tags: list[str] | None = None
    ) -> dict[str, Any]:
        data = await self.request(
            f"/volumes/{volume_id}/snapshots",
            method="POST",
            body={"name": name, "tags": tags},
        )
        return self.unwrap(data, "snapshot")

    async def list_volume_actions(
        self, volume_id: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/volumes/{volume_id}/actions", "actions", page, per_page
        )

    async def perform_volume_action(
        self, volume_id: str, action: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        body = {"type": action, **(params or {})}
        data = await self.request(f"/volumes/{volume_id}/actions", method="POST", body=body)
        return self.unwrap(data, "action")

    # Spaces access keys

    async def list_spaces_keys(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated("/spaces/keys", "keys", page, per_page)

    async def create_spaces_key(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/spaces/keys", method="POST", body=body)
        return self.unwrap(data, "key")

    async def delete_spaces_key(self, access_key: str) -> None:
        await self.request(f"/spaces/keys/{access_key}", method="DELETE")

    # Container registry

    async def get_container_registry(self) -> dict[str, Any]:
        data = await self.request("/registry")
        return self.unwrap(data, "registry")

    async def create_container_registry(
        self, name: str, subscription_tier: str, region: str | None = None
    ) -> dict[str, Any]:
        data = await self.request(
            "/registry",
            method="POST",
            body={
                "name": name,
                "subscription_tier_slug": subscription_tier,
                "region": region,
            },
        )
        return self.unwrap(data, "registry")

    async def delete_container_registry(self) -> None:
        await self.request("/registry", method="DELETE")

    async def get_docker_credentials(
        self, read_write: bool | None = None, expiry_seconds: int | None = None
    ) -> Any:
        return await self.request(
            "/registry/docker-credentials",
            params={"read_write": read_write, "expiry_seconds": expiry_seconds},
        )

    async def validate_registry_name(self, name: str) -> dict[str, Any]:
        return await self.request(
            "/registry/validate-name", method="POST", body={"name": name}
        )

    async def list_container_repositories(
        self, registry_name: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/registry/{registry_name}/repositoriesV2", "repositories", page, per_page
        )

    async def list_container_repository_tags(
        self,
        registry_name: str,
        repository_name: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> Page:
        repository = quote(repository_name, safe="")
        return await self.list_paginated(
            f"/registry/{registry_name}/repositories/{repository}/tags",
            "tags",
            page,
            per_page,
        )

    async def delete_container_repository_tag(
        self, registry_name: str, repository_name: str, tag: str
    ) -> None:
        repository = quote(repository_name, safe="")
        await self.request(
            f"/registry/{registry_name}/repositories/{repository}/tags/{tag}",
            method="DELETE",
        )

    async def delete_container_repository_manifest(
        self, registry_name: str, repository_name: str, digest: str
    ) -> None:
        repository = quote(repository_name, safe="")
        await self.request(
            f"/registry/{registry_name}/repositories/{repository}/digests/"
            f"{quote(digest, safe='')}",
            method="DELETE",
        )

    async def run_garbage_collection(self, registry_name: str) -> Any:
        data = await self.request(
            f"/registry/{registry_name}/garbage-collection", method="POST"
        )
        return self.unwrap(data, "garbage_collection")

    async def get_garbage_collection(self, registry_name: str) -> Any:
        data = await self.request(f"/registry/{registry_name}/garbage-collection")
        return self.unwrap(data, "garbage_collection")

    async def list_garbage_collections(
        self, registry_name: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/registry/{registry_name}/garbage-collections",
            "garbage_collections",
            page,
            per_page,
        )
