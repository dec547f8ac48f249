"""App Platform tools."""

from typing import Annotated, Any, Literal

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

AppId = Annotated[str, Field(description="App UUID")]
DeploymentId = Annotated[str, Field(description="Deployment UUID")]
AppSpec = Annotated[
    dict[str, Any],
    Field(description="App spec object (name, region, services, static_sites, workers, ...)"),
]


@do_tool
async def digitalocean_list_apps(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List App Platform apps."""
    result = await get_client().list_apps(**page_params(per_page, page))
    return format_response(result, format, "apps")


@do_tool
async def digitalocean_get_app(app_id: AppId, format: Format = "json") -> CallToolResult:
    """Get details of an app."""
    app = await get_client().get_app(app_id)
    return format_response(app, format, "apps")


@do_tool
async def digitalocean_create_app(
    spec: AppSpec,
    project_id: Annotated[str | None, Field(description="Project to place the app in")] = None,
) -> CallToolResult:
    """Create an app from an app spec."""
    app = await get_client().create_app(spec, project_id)
    return success_response("App created", app=app)


@do_tool
async def digitalocean_update_app(app_id: AppId, spec: AppSpec) -> CallToolResult:
    """Replace an app's spec. This triggers a new deployment."""
    app = await get_client().update_app(app_id, spec)
    return success_response("App updated", app=app)


@do_tool
async def digitalocean_delete_app(app_id: AppId) -> CallToolResult:
    """Delete an app."""
    await get_client().delete_app(app_id)
    return success_response(f"App {app_id} deleted")


@do_tool
async def digitalocean_list_app_deployments(
    app_id: AppId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List deployments of an app."""
    result = await get_client().list_app_deployments(app_id, **page_params(per_page, page))
    return format_response(result, format, "deployments")


@do_tool
async def digitalocean_get_app_deployment(
    app_id: AppId, deployment_id: DeploymentId, format: Format = "json"
) -> CallToolResult:
    """Get details of a deployment."""
    deployment = await get_client().get_app_deployment(app_id, deployment_id)
    return format_response(deployment, format, "deployments")


@do_tool
async def digitalocean_create_app_deployment(
    app_id: AppId,
    force_build: Annotated[bool | None, Field(description="Rebuild even if source is unchanged")] = None,
) -> CallToolResult:
    """Trigger a new deployment of an app."""
    deployment = await get_client().create_app_deployment(app_id, force_build)
    return success_response("Deployment created", deployment=deployment)


@do_tool
async def digitalocean_cancel_app_deployment(
    app_id: AppId, deployment_id: DeploymentId
) -> CallToolResult:
    """Cancel an in-progress deployment."""
    deployment = await get_client().cancel_app_deployment(app_id, deployment_id)
    return success_response("Deployment cancelled", deployment=deployment)


@do_tool
async def digitalocean_get_app_logs(
    app_id: AppId,
    deployment_id: Annotated[str | None, Field(description="Deployment UUID")] = None,
    component_name: Annotated[str | None, Field(description="Component name")] = None,
    log_type: Annotated[
        Literal["BUILD", "DEPLOY", "RUN", "RUN_RESTARTED"] | None,
        Field(description="Log type"),
    ] = None,
    follow: Annotated[bool | None, Field(description="Return a live-stream URL")] = None,
) -> CallToolResult:
    """Get log download URLs for an app, deployment, or component."""
    logs = await get_client().get_app_logs(
        app_id,
        deployment_id=deployment_id,
        component_name=component_name,
        log_type=log_type,
        follow=follow,
    )
    return format_response(logs)


@do_tool
async def digitalocean_list_app_regions(format: Format = "json") -> CallToolResult:
    """List regions available to App Platform."""
    regions = await get_client().list_app_regions()
    return format_response(regions, format, "regions")


@do_tool
async def digitalocean_list_app_instance_sizes(format: Format = "json") -> CallToolResult:
    """List App Platform instance sizes and their prices."""
    sizes = await get_client().list_app_instance_sizes()
    return format_response(sizes, format, "instance_sizes")


@do_tool
async def digitalocean_propose_app(
    spec: AppSpec,
    app_id: Annotated[str | None, Field(description="Existing app to compare against")] = None,
) -> CallToolResult:
    """Validate an app spec and preview its cost without creating anything."""
    proposal = await get_client().propose_app(spec, app_id)
    return format_response(proposal)


TOOLS = [
    digitalocean_list_apps,
    digitalocean_get_app,
    digitalocean_create_app,
    digitalocean_update_app,
    digitalocean_delete_app,
    digitalocean_list_app_deployments,
    digitalocean_get_app_deployment,
    digitalocean_create_app_deployment,
    digitalocean_cancel_app_deployment,
    digitalocean_get_app_logs,
    digitalocean_list_app_regions,
    digitalocean_list_app_instance_sizes,
    digitalocean_propose_app,
]
