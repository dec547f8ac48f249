"""Tests for the HTTP surface: health, info, tenant auth, and the MCP endpoint."""

import json
from collections.abc import Iterator
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from do_mcp import SERVER_NAME
from do_mcp.api import create_app
from do_mcp.auth import MISSING_TOKEN_MESSAGE, TOKEN_HEADER
from do_mcp.config import Settings
from do_mcp.tools import ALL_TOOLS

MCP_HEADERS = {
    "Accept": "application/json, text/event-stream",
    "Content-Type": "application/json",
}


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def _rpc(method: str, params: dict | None = None) -> str:
    message = {"jsonrpc": "2.0", "id": 1, "method": method}
    if params is not None:
        message["params"] = params
    return json.dumps(message)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "server": SERVER_NAME}


def test_info_lists_tools(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == SERVER_NAME
    assert data["endpoints"]["mcp"] == "POST /mcp"
    assert TOKEN_HEADER in data["authentication"]["required_headers"]
    assert len(data["tools"]) == len(ALL_TOOLS)
    assert "digitalocean_list_droplets" in data["tools"]


def test_request_id_is_echoed(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-abc"})
    assert response.headers["X-Request-ID"] == "req-abc"


def test_request_id_is_generated(client: TestClient) -> None:
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_mcp_without_token_is_rejected(client: TestClient) -> None:
    response = client.post("/mcp", content=_rpc("tools/list"), headers=MCP_HEADERS)

    assert response.status_code == 401
    assert response.json() == {
        "error": "Unauthorized",
        "message": MISSING_TOKEN_MESSAGE,
        "required_headers": [TOKEN_HEADER],
    }


def test_mcp_with_blank_token_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/mcp",
        content=_rpc("tools/list"),
        headers={**MCP_HEADERS, TOKEN_HEADER: "   "},
    )
    assert response.status_code == 401


def test_tools_list(client: TestClient) -> None:
    response = client.post(
        "/mcp",
        content=_rpc("tools/list"),
        headers={**MCP_HEADERS, TOKEN_HEADER: "dop_v1_test_token"},
    )

    assert response.status_code == 200
    tools = response.json()["result"]["tools"]
    names = {tool["name"] for tool in tools}
    assert len(names) == len(ALL_TOOLS)
    assert "digitalocean_create_droplet" in names
    create = next(t for t in tools if t["name"] == "digitalocean_create_droplet")
    assert {"name", "region", "size", "image"} <= set(create["inputSchema"]["required"])


def test_tools_call_uses_request_token(
    client: TestClient, mock_http: AsyncMock
) -> None:
    mock_http.request.return_value = httpx.Response(
        200, json={"account": {"email": "ops@example.com", "status": "active"}}
    )

    response = client.post(
        "/mcp",
        content=_rpc(
            "tools/call", {"name": "digitalocean_get_account", "arguments": {}}
        ),
        headers={**MCP_HEADERS, TOKEN_HEADER: "dop_v1_tenant_a"},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["isError"] is False
    assert json.loads(result["content"][0]["text"])["email"] == "ops@example.com"
    sent_headers = mock_http.request.call_args.kwargs["headers"]
    assert sent_headers["Authorization"] == "Bearer dop_v1_tenant_a"
