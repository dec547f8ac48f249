"""Shared fixtures for the DigitalOcean MCP test suite."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from do_mcp.auth import (
    TenantCredentials,
    reset_current_credentials,
    set_current_credentials,
)
from do_mcp.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the host environment and the settings cache."""
    for name in (
        "DIGITALOCEAN_API_BASE_URL",
        "DIGITALOCEAN_HTTP_TIMEOUT",
        "DEFAULT_PAGE_SIZE",
        "MAX_PAGE_SIZE",
        "CHARACTER_LIMIT",
        "RATE_LIMIT_DEFAULT_RETRY_AFTER",
        "RETRY_SERVER_ERRORS",
        "MCP_ALLOWED_HOSTS",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def credentials() -> TenantCredentials:
    return TenantCredentials(token="dop_v1_test_token")


@pytest.fixture
def bound_credentials(credentials: TenantCredentials) -> Iterator[TenantCredentials]:
    """Bind tenant credentials to the current context, as the middleware does."""
    token = set_current_credentials(credentials)
    yield credentials
    reset_current_credentials(token)


@pytest.fixture
def mock_http() -> Iterator[AsyncMock]:
    """Patch the httpx.AsyncClient used by the request engine.

    Tests set ``mock_http.request.return_value`` (or ``side_effect``) to real
    ``httpx.Response`` objects and inspect ``mock_http.request.call_args``.
    """
    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client.request = AsyncMock(return_value=httpx.Response(204))
    with patch("do_mcp.client.base.httpx.AsyncClient", return_value=mock_client):
        yield mock_client

