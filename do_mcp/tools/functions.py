"""Serverless Functions tools."""

from typing import Annotated, Any

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

NamespaceId = Annotated[str, Field(description="Functions namespace ID")]
TriggerName = Annotated[str, Field(description="Trigger name")]


class ScheduledDetails(BaseModel):
    cron: str = Field(description="Cron expression, e.g. '*/5 * * * *'")
    body: dict[str, Any] | None = None


@do_tool
async def digitalocean_list_functions_namespaces(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List Functions namespaces."""
    result = await get_client().list_functions_namespaces(**page_params(per_page, page))
    return format_response(result, format, "namespaces")


@do_tool
async def digitalocean_get_functions_namespace(
    namespace_id: NamespaceId, format: Format = "json"
) -> CallToolResult:
    """Get details of a Functions namespace."""
    namespace = await get_client().get_functions_namespace(namespace_id)
    return format_response(namespace, format, "namespaces")


@do_tool
async def digitalocean_create_functions_namespace(
    region: Annotated[str, Field(description="Region slug")],
    label: Annotated[str, Field(description="Namespace label")],
) -> CallToolResult:
    """Create a Functions namespace."""
    namespace = await get_client().create_functions_namespace(region, label)
    return success_response("Namespace created", namespace=namespace)


@do_tool
async def digitalocean_delete_functions_namespace(namespace_id: NamespaceId) -> CallToolResult:
    """Delete a Functions namespace and everything deployed in it."""
    await get_client().delete_functions_namespace(namespace_id)
    return success_response(f"Namespace {namespace_id} deleted")


@do_tool
async def digitalocean_list_functions_triggers(
    namespace_id: NamespaceId, format: Format = "json"
) -> CallToolResult:
    """List triggers in a namespace."""
    triggers = await get_client().list_functions_triggers(namespace_id)
    return format_response(triggers, format, "triggers")


@do_tool
async def digitalocean_get_functions_trigger(
    namespace_id: NamespaceId, trigger_name: TriggerName, format: Format = "json"
) -> CallToolResult:
    """Get details of a trigger."""
    trigger = await get_client().get_functions_trigger(namespace_id, trigger_name)
    return format_response(trigger, format, "triggers")


@do_tool
async def digitalocean_create_functions_trigger(
    namespace_id: NamespaceId,
    name: TriggerName,
    function: Annotated[str, Field(description="Function to invoke, e.g. 'pkg/fn'")],
    scheduled_details: ScheduledDetails,
    is_enabled: bool = True,
) -> CallToolResult:
    """Create a scheduled trigger for a function."""
    trigger = await get_client().create_functions_trigger(
        namespace_id,
        {
            "name": name,
            "function": function,
            "type": "SCHEDULED",
            "is_enabled": is_enabled,
            "scheduled_details": dump_models(scheduled_details),
        },
    )
    return success_response("Trigger created", trigger=trigger)


@do_tool
async def digitalocean_update_functions_trigger(
    namespace_id: NamespaceId,
    trigger_name: TriggerName,
    is_enabled: bool | None = None,
    scheduled_details: ScheduledDetails | None = None,
) -> CallToolResult:
    """Enable, disable, or reschedule a trigger."""
    trigger = await get_client().update_functions_trigger(
        namespace_id,
        trigger_name,
        {"is_enabled": is_enabled, "scheduled_details": dump_models(scheduled_details)},
    )
    return success_response("Trigger updated", trigger=trigger)


@do_tool
async def digitalocean_delete_functions_trigger(
    namespace_id: NamespaceId, trigger_name: TriggerName
) -> CallToolResult:
    """Delete a trigger."""
    await get_client().delete_functions_trigger(namespace_id, trigger_name)
    return success_response(f"Trigger {trigger_name} deleted")


TOOLS = [
    digitalocean_list_functions_namespaces,
    digitalocean_get_functions_namespace,
    digitalocean_create_functions_namespace,
    digitalocean_delete_functions_namespace,
    digitalocean_list_functions_triggers,
    digitalocean_get_functions_trigger,
    digitalocean_create_functions_trigger,
    digitalocean_update_functions_trigger,
    digitalocean_delete_functions_trigger,
]
