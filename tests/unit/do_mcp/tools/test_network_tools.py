"""Tests for domain, firewall, load balancer, VPC, reserved IP, and certificate tools."""

import json
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import pytest
from mcp.types import CallToolResult

from do_mcp.tools import certificates, domains, firewalls, load_balancers, reserved_ips
from do_mcp.tools.firewalls import FirewallRule, FirewallTargets
from do_mcp.tools.load_balancers import ForwardingRule, HealthCheck


def _payload(result: CallToolResult) -> dict:
    return json.loads(result.content[0].text)


@pytest.fixture
def mock_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def patch_client(mock_client: AsyncMock):
    """Patch ``get_client`` in the given tool modules."""
    patchers = []

    def _apply(*modules: str) -> AsyncMock:
        for module in modules:
            patcher = patch(f"do_mcp.tools.{module}.get_client", return_value=mock_client)
            patcher.start()
            patchers.append(patcher)
        return mock_client

    yield _apply
    for patcher in patchers:
        patcher.stop()


class TestDomains:
    @pytest.mark.asyncio
    async def test_create_record_drops_unset_fields_downstream(
        self, patch_client
    ) -> None:
        client = patch_client("domains")
        client.create_domain_record.return_value = {"id": 3352896, "type": "A"}

        result = await domains.digitalocean_create_domain_record(
            domain_name="example.com", type="A", name="www", data="203.0.113.10", ttl=1800
        )

        domain, body = client.create_domain_record.await_args.args
        assert domain == "example.com"
        assert body["type"] == "A"
        assert body["ttl"] == 1800
        assert body["priority"] is None
        assert _payload(result)["domain_record"]["id"] == 3352896

    @pytest.mark.asyncio
    async def test_delete_record(self, patch_client) -> None:
        client = patch_client("domains")

        result = await domains.digitalocean_delete_domain_record(
            domain_name="example.com", record_id=12
        )

        client.delete_domain_record.assert_awaited_once_with("example.com", 12)
        assert _payload(result)["message"] == "Record 12 deleted from example.com"


class TestFirewalls:
    @pytest.mark.asyncio
    async def test_create_serializes_rules(self, patch_client) -> None:
        client = patch_client("firewalls")
        client.create_firewall.return_value = {"id": "fw-1", "name": "web"}

        await firewalls.digitalocean_create_firewall(
            name="web",
            inbound_rules=[
                FirewallRule(
                    protocol="tcp",
                    ports="22",
                    sources=FirewallTargets(addresses=["0.0.0.0/0"]),
                )
            ],
            tags=["web"],
        )

        body = client.create_firewall.await_args.args[0]
        assert body["inbound_rules"] == [
            {"protocol": "tcp", "ports": "22", "sources": {"addresses": ["0.0.0.0/0"]}}
        ]
        assert body["outbound_rules"] is None
        assert body["tags"] == ["web"]

    @pytest.mark.asyncio
    async def test_add_tags(self, patch_client) -> None:
        client = patch_client("firewalls")

        result = await firewalls.digitalocean_add_tags_to_firewall(
            firewall_id="fw-1", tags=["web", "api"]
        )

        client.add_tags_to_firewall.assert_awaited_once_with("fw-1", ["web", "api"])
        assert _payload(result)["message"] == "Added tags to firewall: web, api"


class TestLoadBalancers:
    @pytest.mark.asyncio
    async def test_create_serializes_nested_models(self, patch_client) -> None:
        client = patch_client("load_balancers")
        client.create_load_balancer.return_value = {"id": "lb-1"}

        await load_balancers.digitalocean_create_load_balancer(
            name="edge",
            region="nyc3",
            forwarding_rules=[
                ForwardingRule(
                    entry_protocol="http",
                    entry_port=80,
                    target_protocol="http",
                    target_port=8080,
                )
            ],
            health_check=HealthCheck(protocol="http", port=8080, path="/health"),
            droplet_ids=[1, 2],
        )

        body = client.create_load_balancer.await_args.args[0]
        assert body["forwarding_rules"] == [
            {
                "entry_protocol": "http",
                "entry_port": 80,
                "target_protocol": "http",
                "target_port": 8080,
            }
        ]
        assert body["health_check"] == {"protocol": "http", "port": 8080, "path": "/health"}
        assert body["droplet_ids"] == [1, 2]


class TestReservedIps:
    @pytest.mark.asyncio
    async def test_create_requires_region_or_droplet(self, patch_client) -> None:
        client = patch_client("reserved_ips")

        result = await reserved_ips.digitalocean_create_reserved_ip()

        assert result.isError is True
        assert _payload(result)["details"] == {
            "type": "ValueError",
            "message": "Either region or droplet_id is required",
        }
        client.create_reserved_ip.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_in_region(self, patch_client) -> None:
        client = patch_client("reserved_ips")
        client.create_reserved_ip.return_value = {"ip": "203.0.113.5"}

        result = await reserved_ips.digitalocean_create_reserved_ip(region="nyc3")

        client.create_reserved_ip.assert_awaited_once_with("nyc3", None, None)
        assert _payload(result)["reserved_ip"]["ip"] == "203.0.113.5"


class TestCertificates:
    @pytest.mark.asyncio
    async def test_lets_encrypt_needs_dns_names(self, patch_client) -> None:
        client = patch_client("certificates")

        result = await certificates.digitalocean_create_certificate(name="edge")

        assert result.isError is True
        client.create_certificate.assert_not_called()

    @pytest.mark.asyncio
    async def test_custom_needs_key_material(self, patch_client) -> None:
        client = patch_client("certificates")

        result = await certificates.digitalocean_create_certificate(
            name="edge", type="custom", leaf_certificate="-----BEGIN CERTIFICATE-----"
        )

        assert result.isError is True
        assert "private_key" in _payload(result)["error"]
        client.create_certificate.assert_not_called()

    @pytest.mark.asyncio
    async def test_purge_cdn_cache(self, patch_client) -> None:
        client = patch_client("certificates")

        result = await certificates.digitalocean_purge_cdn_cache(
            cdn_id="cdn-1", files=["*"]
        )

        client.purge_cdn_cache.assert_awaited_once_with("cdn-1", ["*"])
        assert result.isError is False
