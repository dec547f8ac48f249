"""Tests for droplet, volume, image, and SSH key tools."""

import json
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import pytest
from mcp.types import CallToolResult

from do_mcp.exceptions import DigitalOceanAPIError, RateLimitError
from do_mcp.schema import Page
from do_mcp.tools import droplets, ssh_keys, volumes


def _payload(result: CallToolResult) -> dict:
    return json.loads(result.content[0].text)


def _patched_client(module: str) -> Iterator[AsyncMock]:
    client = AsyncMock()
    with patch(f"do_mcp.tools.{module}.get_client", return_value=client):
        yield client


@pytest.fixture
def droplet_client() -> Iterator[AsyncMock]:
    yield from _patched_client("droplets")


@pytest.fixture
def volume_client() -> Iterator[AsyncMock]:
    yield from _patched_client("volumes")


@pytest.fixture
def ssh_key_client() -> Iterator[AsyncMock]:
    yield from _patched_client("ssh_keys")


WEB_1 = {
    "id": 42,
    "name": "web-1",
    "status": "active",
    "region": {"slug": "nyc3"},
    "size_slug": "s-1vcpu-1gb",
    "networks": {"v4": [{"type": "public", "ip_address": "203.0.113.10"}]},
}


class TestListDroplets:
    @pytest.mark.asyncio
    async def test_json_page(self, droplet_client: AsyncMock) -> None:
        droplet_client.list_droplets.return_value = Page(
            items=[WEB_1], total=50, has_more=True, next_page=3
        )

        result = await droplets.digitalocean_list_droplets(per_page=3, page=2)

        droplet_client.list_droplets.assert_awaited_once_with(
            tag_name=None, page=2, per_page=3
        )
        payload = _payload(result)
        assert result.isError is False
        assert payload["count"] == 1
        assert payload["total"] == 50
        assert payload["next_page"] == 3

    @pytest.mark.asyncio
    async def test_markdown_table(self, droplet_client: AsyncMock) -> None:
        droplet_client.list_droplets.return_value = Page(items=[WEB_1], total=1)

        result = await droplets.digitalocean_list_droplets(format="markdown")

        text = result.content[0].text
        assert text.startswith("## Droplets")
        assert "**Total:** 1 | **Showing:** 1" in text
        assert "| 42 | web-1 | active | 203.0.113.10 | nyc3 | s-1vcpu-1gb |" in text

    @pytest.mark.asyncio
    async def test_page_size_default_and_clamp(self, droplet_client: AsyncMock) -> None:
        droplet_client.list_droplets.return_value = Page()

        await droplets.digitalocean_list_droplets(per_page=1000, tag_name="web")

        droplet_client.list_droplets.assert_awaited_once_with(
            tag_name="web", page=1, per_page=200
        )


class TestDropletMutations:
    @pytest.mark.asyncio
    async def test_create(self, droplet_client: AsyncMock) -> None:
        droplet_client.create_droplet.return_value = WEB_1

        result = await droplets.digitalocean_create_droplet(
            name="web-1", region="nyc3", size="s-1vcpu-1gb", image="ubuntu-24-04-x64"
        )

        body = droplet_client.create_droplet.await_args.args[0]
        assert body["name"] == "web-1"
        assert body["image"] == "ubuntu-24-04-x64"
        payload = _payload(result)
        assert payload["success"] is True
        assert payload["message"] == "Droplet created"
        assert payload["droplet"]["id"] == 42

    @pytest.mark.asyncio
    async def test_delete(self, droplet_client: AsyncMock) -> None:
        droplet_client.delete_droplet.return_value = None

        result = await droplets.digitalocean_delete_droplet(droplet_id=42)

        droplet_client.delete_droplet.assert_awaited_once_with(42)
        assert _payload(result) == {"success": True, "message": "Droplet 42 deleted"}

    @pytest.mark.asyncio
    async def test_action_passes_only_given_params(
        self, droplet_client: AsyncMock
    ) -> None:
        droplet_client.perform_droplet_action.return_value = {
            "id": 7,
            "type": "resize",
            "status": "in-progress",
        }

        result = await droplets.digitalocean_droplet_action(
            droplet_id=42, action="resize", size="s-2vcpu-4gb"
        )

        droplet_client.perform_droplet_action.assert_awaited_once_with(
            42, "resize", {"size": "s-2vcpu-4gb"}
        )
        assert _payload(result)["action"]["status"] == "in-progress"


class TestDropletErrors:
    @pytest.mark.asyncio
    async def test_not_found(self, droplet_client: AsyncMock) -> None:
        droplet_client.get_droplet.side_effect = DigitalOceanAPIError(
            "The resource you were accessing could not be found.", status_code=404
        )

        result = await droplets.digitalocean_get_droplet(droplet_id=999)

        assert result.isError is True
        payload = _payload(result)
        assert payload["error"].startswith("Error: The resource")
        assert payload["details"]["http_status"] == 404
        assert payload["details"]["kind"] == "generic"

    @pytest.mark.asyncio
    async def test_rate_limited(self, droplet_client: AsyncMock) -> None:
        droplet_client.list_droplets.side_effect = RateLimitError(
            "Rate limit exceeded", 120
        )

        result = await droplets.digitalocean_list_droplets()

        payload = _payload(result)
        assert result.isError is True
        assert payload["details"]["retryable"] is True
        assert payload["details"]["retry_after_seconds"] == 120


class TestVolumes:
    @pytest.mark.asyncio
    async def test_create_volume(self, volume_client: AsyncMock) -> None:
        volume_client.create_volume.return_value = {"id": "vol-1", "name": "data"}

        result = await volumes.digitalocean_create_volume(
            name="data", size_gigabytes=100, region="nyc3", filesystem_type="ext4"
        )

        body = volume_client.create_volume.await_args.args[0]
        assert body["size_gigabytes"] == 100
        assert body["filesystem_type"] == "ext4"
        assert _payload(result)["volume"]["id"] == "vol-1"

    @pytest.mark.asyncio
    async def test_attach_volume(self, volume_client: AsyncMock) -> None:
        volume_client.perform_volume_action.return_value = {"id": 1, "type": "attach"}

        await volumes.digitalocean_attach_volume(
            volume_id="vol-1", droplet_id=42, region="nyc3"
        )

        volume_client.perform_volume_action.assert_awaited_once_with(
            "vol-1", "attach", {"droplet_id": 42, "region": "nyc3"}
        )


class TestSshKeys:
    @pytest.mark.asyncio
    async def test_create_key(self, ssh_key_client: AsyncMock) -> None:
        ssh_key_client.create_ssh_key.return_value = {
            "id": 512,
            "fingerprint": "3b:16:bf",
            "name": "laptop",
        }

        result = await ssh_keys.digitalocean_create_ssh_key(
            name="laptop", public_key="ssh-ed25519 AAAA laptop"
        )

        ssh_key_client.create_ssh_key.assert_awaited_once_with(
            "laptop", "ssh-ed25519 AAAA laptop"
        )
        assert _payload(result)["ssh_key"]["fingerprint"] == "3b:16:bf"
