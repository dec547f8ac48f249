"""Project and tag tools."""

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

ProjectId = Annotated[str, Field(description="Project UUID")]
TagName = Annotated[str, Field(description="Tag name")]
Environment = Literal["Development", "Staging", "Production"]


class TaggedResource(BaseModel):
    resource_id: str
    resource_type: Literal["droplet", "image", "volume", "volume_snapshot", "database"]


@do_tool
async def digitalocean_list_projects(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List projects."""
    result = await get_client().list_projects(**page_params(per_page, page))
    return format_response(result, format, "projects")


@do_tool
async def digitalocean_get_project(project_id: ProjectId, format: Format = "json") -> CallToolResult:
    """Get details of a project."""
    project = await get_client().get_project(project_id)
    return format_response(project, format, "project")


@do_tool
async def digitalocean_get_default_project(format: Format = "json") -> CallToolResult:
    """Get the account's default project."""
    project = await get_client().get_default_project()
    return format_response(project, format, "project")


@do_tool
async def digitalocean_create_project(
    name: Annotated[str, Field(description="Project name")],
    purpose: Annotated[str, Field(description="Project purpose, e.g. 'Web Application'")],
    environment: Annotated[Environment, Field(description="Environment")],
    description: str | None = None,
) -> CallToolResult:
    """Create a project."""
    project = await get_client().create_project(
        {
            "name": name,
            "purpose": purpose,
            "environment": environment,
            "description": description,
        }
    )
    return success_response("Project created", project=project)


@do_tool
async def digitalocean_update_project(
    project_id: ProjectId,
    name: str | None = None,
    description: str | None = None,
    purpose: str | None = None,
    environment: Environment | None = None,
    is_default: bool | None = None,
) -> CallToolResult:
    """Update fields of a project. Omitted fields keep their value."""
    project = await get_client().update_project(
        project_id,
        {
            "name": name,
            "description": description,
            "purpose": purpose,
            "environment": environment,
            "is_default": is_default,
        },
    )
    return success_response("Project updated", project=project)


@do_tool
async def digitalocean_delete_project(project_id: ProjectId) -> CallToolResult:
    """Delete a project. It must not contain resources."""
    await get_client().delete_project(project_id)
    return success_response(f"Project {project_id} deleted")


@do_tool
async def digitalocean_list_project_resources(
    project_id: ProjectId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List resources assigned to a project."""
    result = await get_client().list_project_resources(
        project_id, **page_params(per_page, page)
    )
    return format_response(result, format, "project_resources")


@do_tool
async def digitalocean_assign_resources_to_project(
    project_id: ProjectId,
    resources: Annotated[
        list[str], Field(description="Resource URNs, e.g. do:droplet:123")
    ],
) -> CallToolResult:
    """Move resources into a project."""
    assigned = await get_client().assign_resources_to_project(project_id, resources)
    return success_response("Resources assigned", resources=assigned)


@do_tool
async def digitalocean_list_tags(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List tags."""
    result = await get_client().list_tags(**page_params(per_page, page))
    return format_response(result, format, "tags")


@do_tool
async def digitalocean_get_tag(tag_name: TagName, format: Format = "json") -> CallToolResult:
    """Get a tag with counts of the resources carrying it."""
    tag = await get_client().get_tag(tag_name)
    return format_response(tag, format, "tags")


@do_tool
async def digitalocean_create_tag(name: TagName) -> CallToolResult:
    """Create a tag."""
    tag = await get_client().create_tag(name)
    return success_response("Tag created", tag=tag)


@do_tool
async def digitalocean_delete_tag(tag_name: TagName) -> CallToolResult:
    """Delete a tag. Tagged resources are untagged, not deleted."""
    await get_client().delete_tag(tag_name)
    return success_response(f"Tag {tag_name} deleted")


@do_tool
async def digitalocean_tag_resources(
    tag_name: TagName,
    resources: Annotated[list[TaggedResource], Field(description="Resources to tag")],
) -> CallToolResult:
    """Apply a tag to resources."""
    await get_client().tag_resources(tag_name, dump_models(resources))
    return success_response("Resources tagged")


@do_tool
async def digitalocean_untag_resources(
    tag_name: TagName,
    resources: Annotated[list[TaggedResource], Field(description="Resources to untag")],
) -> CallToolResult:
    """Remove a tag from resources."""
    await get_client().untag_resources(tag_name, dump_models(resources))
    return success_response("Resources untagged")


TOOLS = [
    digitalocean_list_projects,
    digitalocean_get_project,
    digitalocean_get_default_project,
    digitalocean_create_project,
    digitalocean_update_project,
    digitalocean_delete_project,
    digitalocean_list_project_resources,
    digitalocean_assign_resources_to_project,
    digitalocean_list_tags,
    digitalocean_get_tag,
    digitalocean_create_tag,
    digitalocean_delete_tag,
    digitalocean_tag_resources,
    digitalocean_untag_resources,
]
