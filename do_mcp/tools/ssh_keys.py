"""SSH key tools."""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

KeyRef = Annotated[int | str, Field(description="SSH key ID or fingerprint")]


@do_tool
async def digitalocean_list_ssh_keys(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List SSH keys registered on the account."""
    result = await get_client().list_ssh_keys(**page_params(per_page, page))
    return format_response(result, format, "ssh_keys")


@do_tool
async def digitalocean_get_ssh_key(key_id: KeyRef, format: Format = "json") -> CallToolResult:
    """Get an SSH key by ID or fingerprint."""
    key = await get_client().get_ssh_key(key_id)
    return format_response(key, format, "ssh_keys")


@do_tool
async def digitalocean_create_ssh_key(
    name: Annotated[str, Field(description="Key name")],
    public_key: Annotated[str, Field(description="Public key in OpenSSH format")],
) -> CallToolResult:
    """Register a new SSH public key."""
    key = await get_client().create_ssh_key(name, public_key)
    return success_response("SSH key created", ssh_key=key)


@do_tool
async def digitalocean_update_ssh_key(
    key_id: KeyRef, name: Annotated[str, Field(description="New key name")]
) -> CallToolResult:
    """Rename an SSH key."""
    key = await get_client().update_ssh_key(key_id, name)
    return success_response("SSH key updated", ssh_key=key)


@do_tool
async def digitalocean_delete_ssh_key(key_id: KeyRef) -> CallToolResult:
    """Delete an SSH key."""
    await get_client().delete_ssh_key(key_id)
    return success_response(f"SSH key {key_id} deleted")


TOOLS = [
    digitalocean_list_ssh_keys,
    digitalocean_get_ssh_key,
    digitalocean_create_ssh_key,
    digitalocean_update_ssh_key,
    digitalocean_delete_ssh_key,
]
