"""Tests for the shared tool plumbing."""

import json
import logging

import pytest
from mcp.types import CallToolResult
from pydantic import BaseModel

from do_mcp.auth import MISSING_CREDENTIALS_MESSAGE, TenantCredentials
from do_mcp.client import DigitalOceanClient
from do_mcp.config import Settings
from do_mcp.exceptions import AuthenticationError, RateLimitError
from do_mcp.formatters import text_result
from do_mcp.tools.account import digitalocean_get_account
from do_mcp.tools.common import (
    _describe_args,
    do_tool,
    dump_models,
    get_client,
    page_params,
)


def _payload(result: CallToolResult) -> dict:
    return json.loads(result.content[0].text)


class TestPageParams:
    def test_defaults(self) -> None:
        assert page_params(None, None) == {"page": 1, "per_page": 20}

    def test_clamps_to_bounds(self) -> None:
        assert page_params(500, 3) == {"page": 3, "per_page": 200}
        assert page_params(0, 0) == {"page": 1, "per_page": 1}

    def test_uses_configured_sizes(self) -> None:
        settings = Settings(default_page_size=5, max_page_size=10)
        assert page_params(None, 1, settings) == {"page": 1, "per_page": 5}
        assert page_params(50, 1, settings) == {"page": 1, "per_page": 10}


class _Rule(BaseModel):
    protocol: str
    ports: str | None = None


def test_dump_models() -> None:
    assert dump_models(_Rule(protocol="tcp")) == {"protocol": "tcp"}
    assert dump_models([_Rule(protocol="udp", ports="53")]) == [
        {"protocol": "udp", "ports": "53"}
    ]
    assert dump_models(None) is None
    assert dump_models({"raw": True}) == {"raw": True}


class TestGetClient:
    def test_requires_credentials(self) -> None:
        with pytest.raises(AuthenticationError, match=MISSING_CREDENTIALS_MESSAGE):
            get_client()

    def test_binds_request_credentials(
        self, bound_credentials: TenantCredentials
    ) -> None:
        client = get_client()
        assert isinstance(client, DigitalOceanClient)
        assert client.base_url == "https://api.digitalocean.com/v2"

    @pytest.mark.asyncio
    async def test_tool_without_token_returns_auth_error(self) -> None:
        result = await digitalocean_get_account()

        assert result.isError is True
        payload = _payload(result)
        assert payload["error"] == f"Error: {MISSING_CREDENTIALS_MESSAGE}"
        assert payload["details"]["kind"] == "authentication"
        assert payload["details"]["retryable"] is False


class TestDoTool:
    @pytest.mark.asyncio
    async def test_success_passes_through(self) -> None:
        @do_tool
        async def digitalocean_echo(value: str) -> CallToolResult:
            return text_result(value)

        result = await digitalocean_echo("hello")

        assert digitalocean_echo.__name__ == "digitalocean_echo"
        assert result.isError is False
        assert result.content[0].text == "hello"

    @pytest.mark.asyncio
    async def test_api_error_is_mapped(self) -> None:
        @do_tool
        async def digitalocean_busy() -> CallToolResult:
            raise RateLimitError("Rate limit exceeded", 30)

        result = await digitalocean_busy()

        assert result.isError is True
        payload = _payload(result)
        assert payload["error"] == "Error: Rate limit exceeded (retryable after 30s)"
        assert payload["details"]["kind"] == "rate_limit"
        assert payload["details"]["retry_after_seconds"] == 30

    @pytest.mark.asyncio
    async def test_unexpected_error_is_mapped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        @do_tool
        async def digitalocean_broken() -> CallToolResult:
            raise KeyError("droplet")

        with caplog.at_level(logging.ERROR, logger="do_mcp.tools.common"):
            result = await digitalocean_broken()

        assert result.isError is True
        assert _payload(result)["details"]["type"] == "KeyError"
        assert "Tool Failed: 'digitalocean_broken'" in caplog.text


def test_describe_args_masks_secrets() -> None:
    def digitalocean_create_certificate(name: str, private_key: str | None = None):
        return None

    described = _describe_args(
        digitalocean_create_certificate, (), {"name": "edge", "private_key": "-----BEGIN"}
    )
    assert "name='edge'" in described
    assert "BEGIN" not in described
    assert "private_key='***'" in described
