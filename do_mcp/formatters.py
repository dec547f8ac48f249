"""Response formatting for MCP tool results.

Successful results are rendered either as indented JSON (the default) or as
Markdown meant for human scanning. Failures of any kind are mapped to a
uniform error payload flagged with ``isError``.
"""

import base64
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel

from .config import Settings, get_settings
from .exceptions import DigitalOceanAPIError
from .schema import ErrorKind, Page, ResponseFormat

logger = logging.getLogger(__name__)

GENERIC_TABLE_MAX_COLUMNS = 6
GENERIC_CELL_MAX_CHARS = 50
NO_ITEMS_NOTICE = "_No items found._"
NESTED_PLACEHOLDER = "[object]"
MISSING = "-"


# =============================================================================
# Serialization helpers
# =============================================================================


def _json_default(value: Any) -> Any:
    if isinstance(value, Page):
        return value.to_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


def to_json(data: Any) -> str:
    """Indented JSON dump that never fails on well-formed input."""
    if isinstance(data, Page):
        data = data.to_dict()
    return json.dumps(data, indent=2, default=_json_default, ensure_ascii=False)


def _scalar(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _dig(item: Any, *path: str) -> Any:
    """Nested lookup; any missing level yields None."""
    current = item
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _length(value: Any) -> int:
    return len(value) if isinstance(value, (list, tuple)) else 0


def _title(entity_type: str) -> str:
    words = entity_type.replace("-", "_").split("_")
    return " ".join(word[:1].upper() + word[1:] for word in words if word)


def _singular(entity_type: str) -> str:
    return entity_type[:-1] if entity_type.endswith("s") else entity_type


def format_key(key: str) -> str:
    """snake_case to Title Case."""
    return " ".join(word[:1].upper() + word[1:] for word in key.split("_"))


# =============================================================================
# Resource-family table layouts
# =============================================================================

Column = tuple[str, Callable[[Any], Any]]


def _droplet_public_ip(droplet: Any) -> Any:
    networks = _dig(droplet, "networks", "v4")
    if isinstance(networks, list):
        for network in networks:
            if _dig(network, "type") == "public" and _dig(network, "ip_address"):
                return network["ip_address"]
    return None


def _volume_attachments(volume: Any) -> str:
    droplet_ids = _dig(volume, "droplet_ids")
    if isinstance(droplet_ids, list) and droplet_ids:
        return ", ".join(str(d) for d in droplet_ids)
    return "Not attached"


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


_DROPLET_COLUMNS: list[Column] = [
    ("ID", lambda d: _dig(d, "id")),
    ("Name", lambda d: _dig(d, "name")),
    ("Status", lambda d: _dig(d, "status")),
    ("Public IPv4", _droplet_public_ip),
    ("Region", lambda d: _dig(d, "region", "slug")),
    ("Size", lambda d: _dig(d, "size_slug")),
]

TABLE_LAYOUTS: dict[str, list[Column]] = {
    "droplets": _DROPLET_COLUMNS,
    "instances": _DROPLET_COLUMNS,
    "volumes": [
        ("ID", lambda v: _dig(v, "id")),
        ("Name", lambda v: _dig(v, "name")),
        ("Size (GB)", lambda v: _dig(v, "size_gigabytes")),
        ("Region", lambda v: _dig(v, "region", "slug")),
        ("Attached To", _volume_attachments),
    ],
    "firewalls": [
        ("ID", lambda f: _dig(f, "id")),
        ("Name", lambda f: _dig(f, "name")),
        ("Status", lambda f: _dig(f, "status")),
        ("Droplets", lambda f: _length(_dig(f, "droplet_ids"))),
        ("Inbound Rules", lambda f: _length(_dig(f, "inbound_rules"))),
        ("Outbound Rules", lambda f: _length(_dig(f, "outbound_rules"))),
    ],
    "load_balancers": [
        ("ID", lambda lb: _dig(lb, "id")),
        ("Name", lambda lb: _dig(lb, "name")),
        ("IP", lambda lb: _dig(lb, "ip") or None),
        ("Status", lambda lb: _dig(lb, "status")),
        ("Region", lambda lb: _dig(lb, "region", "slug")),
        ("Droplets", lambda lb: _length(_dig(lb, "droplet_ids"))),
    ],
    "vpcs": [
        ("ID", lambda v: _dig(v, "id")),
        ("Name", lambda v: _dig(v, "name")),
        ("Region", lambda v: _dig(v, "region")),
        ("IP Range", lambda v: _dig(v, "ip_range")),
        ("Default", lambda v: _yes_no(_dig(v, "default"))),
    ],
    "kubernetes_clusters": [
        ("ID", lambda c: _dig(c, "id")),
        ("Name", lambda c: _dig(c, "name")),
        ("Region", lambda c: _dig(c, "region")),
        ("Version", lambda c: _dig(c, "version")),
        ("Status", lambda c: _dig(c, "status", "state")),
        ("Node Pools", lambda c: _length(_dig(c, "node_pools"))),
    ],
    "databases": [
        ("ID", lambda db: _dig(db, "id")),
        ("Name", lambda db: _dig(db, "name")),
        ("Engine", lambda db: _dig(db, "engine")),
        ("Version", lambda db: _dig(db, "version")),
        ("Size", lambda db: _dig(db, "size")),
        ("Region", lambda db: _dig(db, "region")),
        ("Status", lambda db: _dig(db, "status")),
    ],
    "apps": [
        ("ID", lambda a: _dig(a, "id")),
        ("Name", lambda a: _dig(a, "spec", "name")),
        ("Region", lambda a: _dig(a, "region", "slug")),
        ("Tier", lambda a: _dig(a, "tier_slug")),
        ("Live URL", lambda a: _dig(a, "live_url")),
    ],
}


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def _table(headers: list[str], rows: list[list[str]]) -> str:
    lines = [
        f"| {' | '.join(_cell(h) for h in headers)} |",
        f"|{'|'.join('---' for _ in headers)}|",
    ]
    lines.extend(f"| {' | '.join(_cell(c) for c in row)} |" for row in rows)
    return "\n".join(lines)


def _family_table(items: list[Any], columns: list[Column]) -> str:
    rows = [[_scalar(accessor(item)) for _, accessor in columns] for item in items]
    return _table([header for header, _ in columns], rows)


def _generic_cell(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, (Mapping, list, tuple)):
        return NESTED_PLACEHOLDER
    return _scalar(value)[:GENERIC_CELL_MAX_CHARS]


def format_generic_table(items: list[Any]) -> str:
    """Table over the first six keys of the first item."""
    if not items:
        return NO_ITEMS_NOTICE

    first = items[0]
    if not isinstance(first, Mapping):
        return _table(["value"], [[_generic_cell(item)] for item in items])

    keys = list(first.keys())[:GENERIC_TABLE_MAX_COLUMNS]
    rows = [
        [
            _generic_cell(item.get(key) if isinstance(item, Mapping) else None)
            for key in keys
        ]
        for item in items
    ]
    return _table([str(k) for k in keys], rows)


# =============================================================================
# Markdown rendering
# =============================================================================


def _page_as_markdown(page: Page, entity_type: str) -> str:
    lines = [f"## {_title(entity_type)}", ""]

    if page.total is not None:
        lines.append(f"**Total:** {page.total} | **Showing:** {page.count}")
    else:
        lines.append(f"**Showing:** {page.count}")

    if page.has_more:
        if page.next_page is not None:
            lines.append(f"**More available:** Yes (next page: {page.next_page})")
        else:
            lines.append("**More available:** Yes")
    lines.append("")

    if not page.items:
        lines.append(NO_ITEMS_NOTICE)
        return "\n".join(lines)

    columns = TABLE_LAYOUTS.get(entity_type)
    if columns is None:
        lines.append(format_generic_table(page.items))
    else:
        lines.append(_family_table(page.items, columns))
    return "\n".join(lines)


def _object_as_markdown(data: Mapping[str, Any], entity_type: str) -> str:
    lines = [f"## {_title(_singular(entity_type))}", ""]
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (Mapping, list, tuple)):
            lines.append(f"**{format_key(str(key))}:**")
            lines.append("```json")
            lines.append(to_json(value))
            lines.append("```")
        else:
            lines.append(f"**{format_key(str(key))}:** {_scalar(value)}")
    return "\n".join(lines)


def to_markdown(data: Any, entity_type: str) -> str:
    """Render a result as Markdown, dispatching on its shape."""
    if isinstance(data, Page):
        return _page_as_markdown(data, entity_type)
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return format_generic_table(list(data))
    if isinstance(data, Mapping):
        return _object_as_markdown(data, entity_type)
    if data is None:
        return ""
    return _scalar(data)


# =============================================================================
# Tool results
# =============================================================================


def truncate_text(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, appending a notice when cut."""
    if limit <= 0 or len(text) <= limit:
        return text
    notice = (
        f"\n\n... (truncated: response exceeded {limit} characters. "
        "Use pagination or filters to narrow the results.)"
    )
    return text[: max(limit - len(notice), 0)] + notice


def text_result(
    text: str, is_error: bool = False, settings: Settings | None = None
) -> CallToolResult:
    """Wrap text into a tool result, enforcing the character budget."""
    limit = (settings or get_settings()).character_limit
    return CallToolResult(
        content=[TextContent(type="text", text=truncate_text(text, limit))],
        isError=is_error,
    )


def format_response(
    data: Any,
    response_format: ResponseFormat = "json",
    entity_type: str = "items",
    settings: Settings | None = None,
) -> CallToolResult:
    """Render a successful result.

    Args:
        data: Entity, list, ``Page``, or scalar returned by the client.
        response_format: ``json`` (default) or ``markdown``.
        entity_type: Resource-family tag selecting the Markdown table layout.
        settings: Process settings; defaults to ``get_settings()``.

    Returns:
        A non-error ``CallToolResult`` with a single text content block.
    """
    if response_format == "markdown":
        text = to_markdown(data, entity_type)
    else:
        text = to_json(data)
    return text_result(text, settings=settings)


def success_response(
    message: str | None = None,
    settings: Settings | None = None,
    **payload: Any,
) -> CallToolResult:
    """JSON ``{"success": true, ...}`` result for mutating tools."""
    body: dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    body.update({k: v for k, v in payload.items() if v is not None})
    return text_result(to_json(body), settings=settings)


def error_details(error: BaseException, settings: Settings | None = None) -> dict[str, Any]:
    """Structured details for an error payload."""
    if isinstance(error, DigitalOceanAPIError):
        info = error.info
        settings = settings or get_settings()
        if (
            settings.retry_server_errors
            and info.kind == ErrorKind.GENERIC
            and info.http_status is not None
            and info.http_status >= 500
            and not info.retryable
        ):
            info = info.model_copy(update={"retryable": True})
        return info.model_dump(mode="json", exclude_none=True)
    return {"type": type(error).__name__, "message": str(error)}


def format_error(error: BaseException, settings: Settings | None = None) -> CallToolResult:
    """Map any exception into an error tool result.

    Classified API errors carry their ``ApiErrorInfo`` as details, with a
    retryability notice appended to the message. Anything else is reported
    with its type and message.
    """
    details = error_details(error, settings)

    if isinstance(error, DigitalOceanAPIError):
        message = f"Error: {error.message}"
        if details.get("retryable"):
            retry_after = details.get("retry_after_seconds")
            if retry_after is not None:
                message += f" (retryable after {retry_after}s)"
            else:
                message += " (retryable)"
    else:
        message = f"Error: {error}" if str(error) else f"Error: {type(error).__name__}"

    return text_result(
        to_json({"error": message, "details": details}),
        is_error=True,
        settings=settings,
    )
