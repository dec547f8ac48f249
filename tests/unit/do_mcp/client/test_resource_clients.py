"""Tests for resource-family endpoint methods of DigitalOceanClient."""

from unittest.mock import AsyncMock

import httpx
import pytest

from do_mcp.auth import TenantCredentials
from do_mcp.client import DigitalOceanClient
from do_mcp.config import Settings

API = "https://api.digitalocean.com/v2"


@pytest.fixture
def client(credentials: TenantCredentials, settings: Settings) -> DigitalOceanClient:
    return DigitalOceanClient(credentials, settings)


def _sent(mock_http: AsyncMock) -> tuple[str, str, object]:
    method, url = mock_http.request.call_args.args
    return method, url, mock_http.request.call_args.kwargs["json"]


class TestCompute:
    @pytest.mark.asyncio
    async def test_get_droplet_unwraps(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            200, json={"droplet": {"id": 42, "name": "web-1"}}
        )
        assert await client.get_droplet(42) == {"id": 42, "name": "web-1"}
        assert _sent(mock_http)[:2] == ("GET", f"{API}/droplets/42")

    @pytest.mark.asyncio
    async def test_multi_create_returns_list(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            202, json={"droplets": [{"id": 1}, {"id": 2}]}
        )

        result = await client.create_droplet(
            {"names": ["a", "b"], "region": "nyc3", "size": "s-1vcpu-1gb"}
        )

        assert result == [{"id": 1}, {"id": 2}]
        method, url, body = _sent(mock_http)
        assert (method, url) == ("POST", f"{API}/droplets")
        assert body["names"] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_delete_by_tag_uses_query(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        await client.delete_droplets_by_tag("staging")
        assert _sent(mock_http)[:2] == ("DELETE", f"{API}/droplets?tag_name=staging")

    @pytest.mark.asyncio
    async def test_droplet_action_body(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            201, json={"action": {"id": 9, "type": "resize"}}
        )

        action = await client.perform_droplet_action(
            42, "resize", {"size": "s-2vcpu-4gb", "disk": True}
        )

        assert action["id"] == 9
        method, url, body = _sent(mock_http)
        assert (method, url) == ("POST", f"{API}/droplets/42/actions")
        assert body == {"type": "resize", "size": "s-2vcpu-4gb", "disk": True}

    @pytest.mark.asyncio
    async def test_image_slug_is_quoted(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(200, json={"image": {}})
        await client.get_image("ubuntu-24-04-x64")
        assert _sent(mock_http)[1] == f"{API}/images/ubuntu-24-04-x64"


class TestConnection:
    @pytest.mark.asyncio
    async def test_connected(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(200, json={"account": {}})
        status = await client.test_connection()
        assert status["connected"] is True

    @pytest.mark.asyncio
    async def test_rejected_token_is_reported_not_raised(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(401)
        status = await client.test_connection()
        assert status == {
            "connected": False,
            "message": "Authentication failed. Check your API token.",
        }


class TestPlatform:
    @pytest.mark.asyncio
    async def test_kubeconfig_is_text(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            200,
            text="apiVersion: v1\nkind: Config\n",
            headers={"content-type": "application/yaml"},
        )
        kubeconfig = await client.get_kubernetes_kubeconfig("k8s-1")
        assert kubeconfig.startswith("apiVersion: v1")
        assert _sent(mock_http)[1] == f"{API}/kubernetes/clusters/k8s-1/kubeconfig"

    @pytest.mark.asyncio
    async def test_database_ca(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            200, json={"ca": {"certificate": "LS0tLS1CRUdJTg=="}}
        )
        assert await client.get_database_ca("db-1") == "LS0tLS1CRUdJTg=="

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({}, "/apps/app-1/logs"),
            (
                {"deployment_id": "dep-1", "component_name": "web", "log_type": "RUN"},
                "/apps/app-1/deployments/dep-1/components/web/logs?type=RUN",
            ),
        ],
    )
    async def test_app_logs_path(
        self,
        client: DigitalOceanClient,
        mock_http: AsyncMock,
        kwargs: dict[str, str],
        expected: str,
    ) -> None:
        await client.get_app_logs("app-1", **kwargs)
        assert _sent(mock_http)[1] == f"{API}{expected}"

    @pytest.mark.asyncio
    async def test_repository_name_is_escaped(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        await client.delete_container_repository_tag("reg", "team/api", "v1")
        assert _sent(mock_http)[:2] == (
            "DELETE",
            f"{API}/registry/reg/repositories/team%2Fapi/tags/v1",
        )

    @pytest.mark.asyncio
    async def test_purge_cdn_cache_body(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        await client.purge_cdn_cache("cdn-1", ["assets/*"])
        method, url, body = _sent(mock_http)
        assert (method, url) == ("DELETE", f"{API}/cdn/endpoints/cdn-1/cache")
        assert body == {"files": ["assets/*"]}


class TestManagement:
    @pytest.mark.asyncio
    async def test_metrics_query(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            200, json={"status": "success", "data": {"result": []}}
        )
        await client.get_droplet_metrics("cpu", "42", "1700000000", "1700003600")
        assert _sent(mock_http)[1] == (
            f"{API}/monitoring/metrics/droplet/cpu"
            "?host_id=42&start=1700000000&end=1700003600"
        )

    @pytest.mark.asyncio
    async def test_invoice_items_use_summary(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            200, json={"invoice_items": [{"amount": "12.00"}]}
        )
        assert await client.get_invoice_items("inv-1") == [{"amount": "12.00"}]
        assert _sent(mock_http)[1] == f"{API}/customers/my/invoices/inv-1/summary"

    @pytest.mark.asyncio
    async def test_invoice_pdf_is_bytes(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        mock_http.request.return_value = httpx.Response(
            200, content=b"%PDF-1.7", headers={"content-type": "application/pdf"}
        )
        assert await client.get_invoice_pdf("inv-1") == b"%PDF-1.7"

    @pytest.mark.asyncio
    async def test_tag_resources_body(
        self, client: DigitalOceanClient, mock_http: AsyncMock
    ) -> None:
        resources = [{"resource_id": "42", "resource_type": "droplet"}]
        await client.tag_resources("web", resources)
        method, url, body = _sent(mock_http)
        assert (method, url) == ("POST", f"{API}/tags/web/resources")
        assert body == {"resources": resources}
