"""Account, droplet, image, SSH key, snapshot, and action endpoints."""

from typing import Any
from urllib.parse import quote

from ..schema import Page
from .base import BaseClient


class ComputeClient(BaseClient):
    """Compute-side endpoints of the DigitalOcean API."""

    # Connection / account

    async def get_account(self) -> dict[str, Any]:
        data = await self.request("/account")
        return self.unwrap(data, "account")

    async def list_regions(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/regions", "regions", page, per_page)

    async def list_sizes(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/sizes", "sizes", page, per_page)

    async def list_actions(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/actions", "actions", page, per_page)

    async def get_action(self, action_id: int) -> dict[str, Any]:
        data = await self.request(f"/actions/{action_id}")
        return self.unwrap(data, "action")

    # Droplets

    async def list_droplets(
        self,
        page: int | None = None,
        per_page: int | None = None,
        tag_name: str | None = None,
    ) -> Page:
        return await self.list_paginated(
            "/droplets", "droplets", page, per_page, tag_name=tag_name
        )

    async def get_droplet(self, droplet_id: int) -> dict[str, Any]:
        data = await self.request(f"/droplets/{droplet_id}")
        return self.unwrap(data, "droplet")

    async def create_droplet(self, body: dict[str, Any]) -> Any:
        """Create one droplet (``name``) or several (``names``).

        Returns:
            The created droplet, or the list of droplets for a multi-create.
        """
        data = await self.request("/droplets", method="POST", body=body)
        if isinstance(data, dict) and "droplets" in data:
            return data["droplets"]
        return self.unwrap(data, "droplet")

    async def delete_droplet(self, droplet_id: int) -> None:
        await self.request(f"/droplets/{droplet_id}", method="DELETE")

    async def delete_droplets_by_tag(self, tag_name: str) -> None:
        await self.request("/droplets", method="DELETE", params={"tag_name": tag_name})

    async def list_droplet_actions(
        self, droplet_id: int, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/droplets/{droplet_id}/actions", "actions", page, per_page
        )

    async def perform_droplet_action(
        self, droplet_id: int, action: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        body = {"type": action, **(params or {})}
        data = await self.request(
            f"/droplets/{droplet_id}/actions", method="POST", body=body
        )
        return self.unwrap(data, "action")

    async def perform_droplet_action_by_tag(
        self, tag_name: str, action: str, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        body = {"type": action, **(params or {})}
        data = await self.request(
            "/droplets/actions",
            method="POST",
            body=body,
            params={"tag_name": tag_name},
        )
        return self.unwrap(data, "actions")

    async def list_droplet_snapshots(
        self, droplet_id: int, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/droplets/{droplet_id}/snapshots", "snapshots", page, per_page
        )

    async def list_droplet_backups(
        self, droplet_id: int, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/droplets/{droplet_id}/backups", "backups", page, per_page
        )

    async def list_droplet_firewalls(
        self, droplet_id: int, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/droplets/{droplet_id}/firewalls", "firewalls", page, per_page
        )

    async def list_droplet_neighbors(self, droplet_id: int) -> list[dict[str, Any]]:
        data = await self.request(f"/droplets/{droplet_id}/neighbors")
        return self.unwrap(data, "droplets")

    # Images

    async def list_images(
        self,
        page: int | None = None,
        per_page: int | None = None,
        type: str | None = None,
        private: bool | None = None,
    ) -> Page:
        return await self.list_paginated(
            "/images", "images", page, per_page, type=type, private=private
        )

    async def get_image(self, image_id: int | str) -> dict[str, Any]:
        data = await self.request(f"/images/{quote(str(image_id), safe='')}")
        return self.unwrap(data, "image")

    async def update_image(self, image_id: int, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/images/{image_id}", method="PUT", body=body)
        return self.unwrap(data, "image")

    async def delete_image(self, image_id: int) -> None:
        await self.request(f"/images/{image_id}", method="DELETE")

    async def list_image_actions(
        self, image_id: int, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/images/{image_id}/actions", "actions", page, per_page
        )

    async def perform_image_action(
        self, image_id: int, action: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        body = {"type": action, **(params or {})}
        data = await self.request(f"/images/{image_id}/actions", method="POST", body=body)
        return self.unwrap(data, "action")

    # SSH keys

    async def list_ssh_keys(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/account/keys", "ssh_keys", page, per_page)

    async def get_ssh_key(self, key_id: int | str) -> dict[str, Any]:
        data = await self.request(f"/account/keys/{key_id}")
        return self.unwrap(data, "ssh_key")

    async def create_ssh_key(self, name: str, public_key: str) -> dict[str, Any]:
        data = await self.request(
            "/account/keys",
            method="POST",
            body={"name": name, "public_key": public_key},
        )
        return self.unwrap(data, "ssh_key")

    async def update_ssh_key(self, key_id: int | str, name: str) -> dict[str, Any]:
        data = await self.request(
            f"/account/keys/{key_id}", method="PUT", body={"name": name}
        )
        return self.unwrap(data, "ssh_key")

    async def delete_ssh_key(self, key_id: int | str) -> None:
        await self.request(f"/account/keys/{key_id}", method="DELETE")

    # Snapshots

    async def list_snapshots(
        self,
        page: int | None = None,
        per_page: int | None = None,
        resource_type: str | None = None,
    ) -> Page:
        return await self.list_paginated(
            "/snapshots", "snapshots", page, per_page, resource_type=resource_type
        )

    async def get_snapshot(self, snapshot_id: str) -> dict[str, Any]:
        data = await self.request(f"/snapshots/{snapshot_id}")
        return self.unwrap(data, "snapshot")

    async def delete_snapshot(self, snapshot_id: str) -> None:
        await self.request(f"/snapshots/{snapshot_id}", method="DELETE")
