"""Monitoring tools: alert policies, droplet metrics, and uptime checks."""

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

AlertId = Annotated[str, Field(description="Alert policy UUID")]
CheckId = Annotated[str, Field(description="Uptime check UUID")]
HostId = Annotated[str, Field(description="Droplet ID")]
Start = Annotated[str, Field(description="Window start as a Unix timestamp")]
End = Annotated[str, Field(description="Window end as a Unix timestamp")]


class SlackNotification(BaseModel):
    channel: str
    url: str


class Notifications(BaseModel):
    email: list[str] | None = None
    slack: list[SlackNotification] | None = None


def _require_notifications(alerts: Notifications) -> dict:
    body = dump_models(alerts)
    if not body:
        raise ValueError("At least one email or slack notification target is required")
    return body


@do_tool
async def digitalocean_list_alert_policies(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List monitoring alert policies."""
    result = await get_client().list_alert_policies(**page_params(per_page, page))
    return format_response(result, format, "policies")


@do_tool
async def digitalocean_get_alert_policy(alert_id: AlertId, format: Format = "json") -> CallToolResult:
    """Get details of an alert policy."""
    policy = await get_client().get_alert_policy(alert_id)
    return format_response(policy, format, "policies")


@do_tool
async def digitalocean_create_alert_policy(
    type: Annotated[
        str, Field(description="Metric type, e.g. v1/insights/droplet/cpu")
    ],
    description: Annotated[str, Field(description="Human readable description")],
    compare: Literal["GreaterThan", "LessThan"],
    value: Annotated[float, Field(description="Threshold value")],
    window: Literal["5m", "10m", "30m", "1h"],
    alerts: Notifications,
    entities: Annotated[list[str] | None, Field(description="Droplet IDs to watch")] = None,
    tags: Annotated[list[str] | None, Field(description="Tags to watch")] = None,
    enabled: bool = True,
) -> CallToolResult:
    """Create an alert policy on a droplet metric."""
    policy = await get_client().create_alert_policy(
        {
            "type": type,
            "description": description,
            "compare": compare,
            "value": value,
            "window": window,
            "alerts": _require_notifications(alerts),
            "entities": entities or [],
            "tags": tags or [],
            "enabled": enabled,
        }
    )
    return success_response("Alert policy created", policy=policy)


@do_tool
async def digitalocean_update_alert_policy(
    alert_id: AlertId,
    type: str,
    description: str,
    compare: Literal["GreaterThan", "LessThan"],
    value: float,
    window: Literal["5m", "10m", "30m", "1h"],
    alerts: Notifications,
    entities: list[str] | None = None,
    tags: list[str] | None = None,
    enabled: bool = True,
) -> CallToolResult:
    """Replace an alert policy."""
    policy = await get_client().update_alert_policy(
        alert_id,
        {
            "type": type,
            "description": description,
            "compare": compare,
            "value": value,
            "window": window,
            "alerts": _require_notifications(alerts),
            "entities": entities or [],
            "tags": tags or [],
            "enabled": enabled,
        },
    )
    return success_response("Alert policy updated", policy=policy)


@do_tool
async def digitalocean_delete_alert_policy(alert_id: AlertId) -> CallToolResult:
    """Delete an alert policy."""
    await get_client().delete_alert_policy(alert_id)
    return success_response(f"Alert policy {alert_id} deleted")


@do_tool
async def digitalocean_get_droplet_bandwidth_metrics(
    host_id: HostId,
    start: Start,
    end: End,
    direction: Literal["inbound", "outbound"] = "inbound",
    interface: Literal["public", "private"] = "public",
) -> CallToolResult:
    """Get network bandwidth of a droplet over a time window."""
    metrics = await get_client().get_droplet_metrics(
        "bandwidth", host_id, start, end, direction=direction, interface=interface
    )
    return format_response(metrics)


@do_tool
async def digitalocean_get_droplet_cpu_metrics(
    host_id: HostId, start: Start, end: End
) -> CallToolResult:
    """Get CPU usage of a droplet over a time window."""
    metrics = await get_client().get_droplet_metrics("cpu", host_id, start, end)
    return format_response(metrics)


@do_tool
async def digitalocean_get_droplet_memory_metrics(
    host_id: HostId,
    start: Start,
    end: End,
    metric: Literal["total", "free", "available", "cached"] = "available",
) -> CallToolResult:
    """Get memory usage of a droplet over a time window."""
    metrics = await get_client().get_droplet_metrics(f"memory_{metric}", host_id, start, end)
    return format_response(metrics)


@do_tool
async def digitalocean_get_droplet_filesystem_metrics(
    host_id: HostId,
    start: Start,
    end: End,
    metric: Literal["free", "size"] = "free",
) -> CallToolResult:
    """Get filesystem usage of a droplet over a time window."""
    metrics = await get_client().get_droplet_metrics(
        f"filesystem_{metric}", host_id, start, end
    )
    return format_response(metrics)


@do_tool
async def digitalocean_get_droplet_load_metrics(
    host_id: HostId,
    start: Start,
    end: End,
    period: Literal["1", "5", "15"] = "5",
) -> CallToolResult:
    """Get the 1, 5, or 15 minute load average of a droplet."""
    metrics = await get_client().get_droplet_metrics(f"load_{period}", host_id, start, end)
    return format_response(metrics)


@do_tool
async def digitalocean_list_uptime_checks(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List uptime checks."""
    result = await get_client().list_uptime_checks(**page_params(per_page, page))
    return format_response(result, format, "checks")


@do_tool
async def digitalocean_get_uptime_check(check_id: CheckId, format: Format = "json") -> CallToolResult:
    """Get details of an uptime check."""
    check = await get_client().get_uptime_check(check_id)
    return format_response(check, format, "checks")


@do_tool
async def digitalocean_create_uptime_check(
    name: Annotated[str, Field(description="Check name")],
    target: Annotated[str, Field(description="URL, hostname or IP to probe")],
    type: Literal["ping", "http", "https"] = "https",
    regions: Annotated[
        list[Literal["us_east", "us_west", "eu_west", "se_asia"]] | None,
        Field(description="Probe regions"),
    ] = None,
    enabled: bool = True,
) -> CallToolResult:
    """Create an uptime check."""
    check = await get_client().create_uptime_check(
        {
            "name": name,
            "target": target,
            "type": type,
            "regions": regions,
            "enabled": enabled,
        }
    )
    return success_response("Uptime check created", check=check)


@do_tool
async def digitalocean_update_uptime_check(
    check_id: CheckId,
    name: str | None = None,
    target: str | None = None,
    type: Literal["ping", "http", "https"] | None = None,
    regions: list[Literal["us_east", "us_west", "eu_west", "se_asia"]] | None = None,
    enabled: bool | None = None,
) -> CallToolResult:
    """Update an uptime check."""
    check = await get_client().update_uptime_check(
        check_id,
        {
            "name": name,
            "target": target,
            "type": type,
            "regions": regions,
            "enabled": enabled,
        },
    )
    return success_response("Uptime check updated", check=check)


@do_tool
async def digitalocean_delete_uptime_check(check_id: CheckId) -> CallToolResult:
    """Delete an uptime check and its alerts."""
    await get_client().delete_uptime_check(check_id)
    return success_response(f"Uptime check {check_id} deleted")


@do_tool
async def digitalocean_get_uptime_check_state(check_id: CheckId) -> CallToolResult:
    """Get the current up/down state of a check per region."""
    state = await get_client().get_uptime_check_state(check_id)
    return format_response(state)


@do_tool
async def digitalocean_list_uptime_alerts(
    check_id: CheckId,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List alerts configured on an uptime check."""
    result = await get_client().list_uptime_alerts(check_id, **page_params(per_page, page))
    return format_response(result, format, "alerts")


@do_tool
async def digitalocean_create_uptime_alert(
    check_id: CheckId,
    name: Annotated[str, Field(description="Alert name")],
    type: Literal["latency", "down", "down_global", "ssl_expiry"],
    notifications: Notifications,
    threshold: Annotated[
        int | None, Field(description="Latency ms or days before SSL expiry")
    ] = None,
    comparison: Literal["greater_than", "less_than"] | None = None,
    period: Literal["2m", "3m", "5m", "10m", "15m", "30m", "1h"] | None = None,
) -> CallToolResult:
    """Create an alert on an uptime check."""
    alert = await get_client().create_uptime_alert(
        check_id,
        {
            "name": name,
            "type": type,
            "notifications": _require_notifications(notifications),
            "threshold": threshold,
            "comparison": comparison,
            "period": period,
        },
    )
    return success_response("Uptime alert created", alert=alert)


@do_tool
async def digitalocean_delete_uptime_alert(
    check_id: CheckId,
    alert_id: Annotated[str, Field(description="Uptime alert UUID")],
) -> CallToolResult:
    """Delete an uptime alert."""
    await get_client().delete_uptime_alert(check_id, alert_id)
    return success_response(f"Uptime alert {alert_id} deleted")


TOOLS = [
    digitalocean_list_alert_policies,
    digitalocean_get_alert_policy,
    digitalocean_create_alert_policy,
    digitalocean_update_alert_policy,
    digitalocean_delete_alert_policy,
    digitalocean_get_droplet_bandwidth_metrics,
    digitalocean_get_droplet_cpu_metrics,
    digitalocean_get_droplet_memory_metrics,
    digitalocean_get_droplet_filesystem_metrics,
    digitalocean_get_droplet_load_metrics,
    digitalocean_list_uptime_checks,
    digitalocean_get_uptime_check,
    digitalocean_create_uptime_check,
    digitalocean_update_uptime_check,
    digitalocean_delete_uptime_check,
    digitalocean_get_uptime_check_state,
    digitalocean_list_uptime_alerts,
    digitalocean_create_uptime_alert,
    digitalocean_delete_uptime_alert,
]
