"""Tests for Kubernetes, database, app, registry, monitoring, project, and account tools."""

import base64
import json
from unittest.mock import AsyncMock, patch

import pytest
from mcp.types import CallToolResult

from do_mcp.tools import (
    account,
    apps,
    databases,
    kubernetes,
    monitoring,
    projects,
    registry,
)
from do_mcp.tools.databases import TrustedSource
from do_mcp.tools.kubernetes import NodePool
from do_mcp.tools.monitoring import Notifications
from do_mcp.tools.projects import TaggedResource


def _payload(result: CallToolResult) -> dict:
    return json.loads(result.content[0].text)


@pytest.fixture
def mock_client() -> AsyncMock:
    return AsyncMock()


def _patch(module: str, client: AsyncMock):
    return patch(f"do_mcp.tools.{module}.get_client", return_value=client)


class TestKubernetes:
    @pytest.mark.asyncio
    async def test_create_cluster_dumps_node_pools(self, mock_client: AsyncMock) -> None:
        mock_client.create_kubernetes_cluster.return_value = {"id": "k8s-1"}

        with _patch("kubernetes", mock_client):
            result = await kubernetes.digitalocean_create_kubernetes_cluster(
                name="prod",
                region="nyc1",
                version="latest",
                node_pools=[NodePool(name="workers", size="s-2vcpu-4gb", count=3)],
            )

        body = mock_client.create_kubernetes_cluster.await_args.args[0]
        assert body["node_pools"] == [
            {"name": "workers", "size": "s-2vcpu-4gb", "count": 3}
        ]
        assert body["maintenance_policy"] is None
        assert _payload(result)["kubernetes_cluster"]["id"] == "k8s-1"

    @pytest.mark.asyncio
    async def test_kubeconfig_is_plain_text(self, mock_client: AsyncMock) -> None:
        mock_client.get_kubernetes_kubeconfig.return_value = "apiVersion: v1\nkind: Config\n"

        with _patch("kubernetes", mock_client):
            result = await kubernetes.digitalocean_get_kubeconfig(cluster_id="k8s-1")

        assert result.isError is False
        assert result.content[0].text == "apiVersion: v1\nkind: Config\n"


class TestDatabases:
    @pytest.mark.asyncio
    async def test_ca_certificate(self, mock_client: AsyncMock) -> None:
        mock_client.get_database_ca.return_value = "LS0tLS1CRUdJTg=="

        with _patch("databases", mock_client):
            result = await databases.digitalocean_get_database_ca(database_id="db-1")

        assert _payload(result) == {"certificate": "LS0tLS1CRUdJTg=="}

    @pytest.mark.asyncio
    async def test_firewall_rules_replace(self, mock_client: AsyncMock) -> None:
        with _patch("databases", mock_client):
            result = await databases.digitalocean_update_database_firewall_rules(
                database_id="db-1",
                rules=[
                    TrustedSource(type="ip_addr", value="192.0.2.0/24"),
                    TrustedSource(type="k8s", value="k8s-1"),
                ],
            )

        mock_client.update_database_firewall_rules.assert_awaited_once_with(
            "db-1",
            [
                {"type": "ip_addr", "value": "192.0.2.0/24"},
                {"type": "k8s", "value": "k8s-1"},
            ],
        )
        assert _payload(result)["message"] == "Trusted sources updated (2 rule(s))"


class TestApps:
    @pytest.mark.asyncio
    async def test_logs_forward_filters(self, mock_client: AsyncMock) -> None:
        mock_client.get_app_logs.return_value = {
            "live_url": "https://logs.example.com/live"
        }

        with _patch("apps", mock_client):
            result = await apps.digitalocean_get_app_logs(
                app_id="app-1", component_name="web", log_type="RUN"
            )

        mock_client.get_app_logs.assert_awaited_once_with(
            "app-1",
            deployment_id=None,
            component_name="web",
            log_type="RUN",
            follow=None,
        )
        assert _payload(result)["live_url"] == "https://logs.example.com/live"


class TestRegistry:
    @pytest.mark.asyncio
    async def test_spaces_key_defaults_to_full_access(
        self, mock_client: AsyncMock
    ) -> None:
        mock_client.create_spaces_key.return_value = {
            "name": "ci",
            "access_key": "DO00",
            "secret_key": "shown-once",
        }

        with _patch("registry", mock_client):
            result = await registry.digitalocean_create_spaces_key(name="ci")

        mock_client.create_spaces_key.assert_awaited_once_with(
            {"name": "ci", "grants": [{"bucket": "", "permission": "fullaccess"}]}
        )
        assert _payload(result)["key"]["secret_key"] == "shown-once"


class TestMonitoring:
    @pytest.mark.asyncio
    async def test_alert_policy_needs_a_target(self, mock_client: AsyncMock) -> None:
        with _patch("monitoring", mock_client):
            result = await monitoring.digitalocean_create_alert_policy(
                type="v1/insights/droplet/cpu",
                description="CPU high",
                compare="GreaterThan",
                value=80,
                window="5m",
                alerts=Notifications(),
            )

        assert result.isError is True
        mock_client.create_alert_policy.assert_not_called()

    @pytest.mark.asyncio
    async def test_alert_policy_body(self, mock_client: AsyncMock) -> None:
        mock_client.create_alert_policy.return_value = {"uuid": "pol-1"}

        with _patch("monitoring", mock_client):
            await monitoring.digitalocean_create_alert_policy(
                type="v1/insights/droplet/cpu",
                description="CPU high",
                compare="GreaterThan",
                value=80,
                window="5m",
                alerts=Notifications(email=["ops@example.com"]),
                entities=["42"],
            )

        body = mock_client.create_alert_policy.await_args.args[0]
        assert body["alerts"] == {"email": ["ops@example.com"]}
        assert body["entities"] == ["42"]
        assert body["tags"] == []
        assert body["enabled"] is True

    @pytest.mark.asyncio
    async def test_bandwidth_metric_query(self, mock_client: AsyncMock) -> None:
        mock_client.get_droplet_metrics.return_value = {"status": "success"}

        with _patch("monitoring", mock_client):
            await monitoring.digitalocean_get_droplet_bandwidth_metrics(
                host_id="42", start="1700000000", end="1700003600", direction="outbound"
            )

        mock_client.get_droplet_metrics.assert_awaited_once_with(
            "bandwidth",
            "42",
            "1700000000",
            "1700003600",
            direction="outbound",
            interface="public",
        )


class TestProjects:
    @pytest.mark.asyncio
    async def test_tag_resources(self, mock_client: AsyncMock) -> None:
        with _patch("projects", mock_client):
            result = await projects.digitalocean_tag_resources(
                tag_name="web",
                resources=[TaggedResource(resource_id="42", resource_type="droplet")],
            )

        mock_client.tag_resources.assert_awaited_once_with(
            "web", [{"resource_id": "42", "resource_type": "droplet"}]
        )
        assert _payload(result)["success"] is True


class TestAccount:
    @pytest.mark.asyncio
    async def test_connection_failure_is_error_result(
        self, mock_client: AsyncMock
    ) -> None:
        mock_client.test_connection.return_value = {
            "connected": False,
            "message": "Authentication failed. Check your API token.",
        }

        with _patch("account", mock_client):
            result = await account.digitalocean_test_connection()

        assert result.isError is True
        assert _payload(result)["connected"] is False

    @pytest.mark.asyncio
    async def test_invoice_pdf_is_base64(self, mock_client: AsyncMock) -> None:
        mock_client.get_invoice_pdf.return_value = b"%PDF-1.7 invoice"

        with _patch("account", mock_client):
            result = await account.digitalocean_get_invoice_pdf(invoice_id="inv-1")

        payload = _payload(result)
        assert payload["encoding"] == "base64"
        assert payload["size_bytes"] == len(b"%PDF-1.7 invoice")
        assert base64.b64decode(payload["data"]) == b"%PDF-1.7 invoice"
