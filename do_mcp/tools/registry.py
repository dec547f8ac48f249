"""Container registry and Spaces access key tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from ..formatters import format_response, success_response
from .common import (
    Format,
    PageNumber,
    PerPage,
    do_tool,
    dump_models,
    get_client,
    page_params,
)

RegistryName = Annotated[str, Field(description="Registry name")]
RepositoryName = Annotated[str, Field(description="Repository name (may contain '/')")]


class SpacesGrant(BaseModel):
    bucket: str = Field(description="Bucket name; empty string for all buckets")
    permission: Literal["read", "readwrite", "fullaccess"]


@do_tool
async def digitalocean_get_container_registry(format: Format = "json") -> CallToolResult:
    """Get the account's container registry."""
    registry = await get_client().get_container_registry()
    return format_response(registry, format, "registry")


@do_tool
async def digitalocean_create_container_registry(
    name: RegistryName,
    subscription_tier: Annotated[
        Literal["starter", "basic", "professional"],
        Field(description="Subscription tier slug"),
    ] = "starter",
    region: Annotated[str | None, Field(description="Region slug")] = None,
) -> CallToolResult:
    """Create the account's container registry."""
    registry = await get_client().create_container_registry(name, subscription_tier, region)
    return success_response("Container registry created", registry=registry)


@do_tool
async def digitalocean_delete_container_registry() -> CallToolResult:
    """Delete the account's container registry and every image in it."""
    await get_client().delete_container_registry()
    return success_response("Container registry deleted")


@do_tool
async def digitalocean_get_docker_credentials(
    read_write: Annotated[bool | None, Field(description="Grant push access")] = None,
    expiry_seconds: Annotated[
        int | None, Field(ge=1, description="Credential lifetime in seconds")
    ] = None,
) -> CallToolResult:
    """Get a Docker config JSON for authenticating to the registry."""
    credentials = await get_client().get_docker_credentials(read_write, expiry_seconds)
    return format_response(credentials)


@do_tool
async def digitalocean_validate_registry_name(name: RegistryName) -> CallToolResult:
    """Check whether a registry name is available."""
    await get_client().validate_registry_name(name)
    return success_response(f"Registry name '{name}' is available")


@do_tool
async def digitalocean_list_container_repositories(
    registry_name: RegistryName,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List repositories in a registry."""
    result = await get_client().list_container_repositories(
        registry_name, **page_params(per_page, page)
    )
    return format_response(result, format, "repositories")


@do_tool
async def digitalocean_list_container_repository_tags(
    registry_name: RegistryName,
    repository_name: RepositoryName,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List tags of a repository."""
    result = await get_client().list_container_repository_tags(
        registry_name, repository_name, **page_params(per_page, page)
    )
    return format_response(result, format, "tags")


@do_tool
async def digitalocean_delete_container_repository_tag(
    registry_name: RegistryName,
    repository_name: RepositoryName,
    tag: Annotated[str, Field(description="Tag to delete")],
) -> CallToolResult:
    """Delete a tag from a repository."""
    await get_client().delete_container_repository_tag(registry_name, repository_name, tag)
    return success_response(f"Tag {repository_name}:{tag} deleted")


@do_tool
async def digitalocean_delete_container_repository_manifest(
    registry_name: RegistryName,
    repository_name: RepositoryName,
    digest: Annotated[str, Field(description="Manifest digest, e.g. sha256:...")],
) -> CallToolResult:
    """Delete a manifest (and all tags pointing at it) from a repository."""
    await get_client().delete_container_repository_manifest(
        registry_name, repository_name, digest
    )
    return success_response(f"Manifest {digest} deleted")


@do_tool
async def digitalocean_run_garbage_collection(registry_name: RegistryName) -> CallToolResult:
    """Start garbage collection to reclaim space from untagged manifests."""
    gc = await get_client().run_garbage_collection(registry_name)
    return success_response("Garbage collection started", garbage_collection=gc)


@do_tool
async def digitalocean_get_garbage_collection(
    registry_name: RegistryName, format: Format = "json"
) -> CallToolResult:
    """Get the active garbage collection of a registry."""
    gc = await get_client().get_garbage_collection(registry_name)
    return format_response(gc, format, "garbage_collections")


@do_tool
async def digitalocean_list_garbage_collections(
    registry_name: RegistryName,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List past garbage collections of a registry."""
    result = await get_client().list_garbage_collections(
        registry_name, **page_params(per_page, page)
    )
    return format_response(result, format, "garbage_collections")


@do_tool
async def digitalocean_list_spaces_keys(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List Spaces access keys."""
    result = await get_client().list_spaces_keys(**page_params(per_page, page))
    return format_response(result, format, "keys")


@do_tool
async def digitalocean_create_spaces_key(
    name: Annotated[str, Field(description="Key name")],
    grants: Annotated[
        list[SpacesGrant] | None,
        Field(description="Bucket grants; omit for full access to all buckets"),
    ] = None,
) -> CallToolResult:
    """Create a Spaces access key. The secret is only returned once."""
    grant_list = dump_models(grants) or [{"bucket": "", "permission": "fullaccess"}]
    key = await get_client().create_spaces_key({"name": name, "grants": grant_list})
    return success_response("Spaces key created", key=key)


@do_tool
async def digitalocean_delete_spaces_key(
    access_key: Annotated[str, Field(description="Access key ID")],
) -> CallToolResult:
    """Revoke a Spaces access key."""
    await get_client().delete_spaces_key(access_key)
    return success_response(f"Spaces key {access_key} deleted")


TOOLS = [
    digitalocean_get_container_registry,
    digitalocean_create_container_registry,
    digitalocean_delete_container_registry,
    digitalocean_get_docker_credentials,
    digitalocean_validate_registry_name,
    digitalocean_list_container_repositories,
    digitalocean_list_container_repository_tags,
    digitalocean_delete_container_repository_tag,
    digitalocean_delete_container_repository_manifest,
    digitalocean_run_garbage_collection,
    digitalocean_get_garbage_collection,
    digitalocean_list_garbage_collections,
    digitalocean_list_spaces_keys,
    digitalocean_create_spaces_key,
    digitalocean_delete_spaces_key,
]
