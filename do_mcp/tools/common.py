"""Shared plumbing for MCP tools: decorator, client factory, argument types."""

import functools
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, Literal

from mcp.types import CallToolResult
from opentelemetry.trace import Status, StatusCode
from pydantic import BaseModel, Field

from ..auth import get_current_credentials
from ..client import DigitalOceanClient
from ..config import Settings, get_settings
from ..exceptions import DigitalOceanAPIError
from ..formatters import format_error
from ..telemetry import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

_SENSITIVE_ARGS = frozenset(
    {"private_key", "leaf_certificate", "certificate_chain", "public_key", "spec"}
)

PerPage = Annotated[
    int | None,
    Field(ge=1, le=200, description="Items per page (default 20, max 200)"),
]
PageNumber = Annotated[int, Field(ge=1, description="Page number (starts at 1)")]
Format = Annotated[
    Literal["json", "markdown"],
    Field(description="Response format: 'json' (default) or 'markdown'"),
]


def get_client() -> DigitalOceanClient:
    """Build a client bound to the credentials of the current request.

    Raises:
        AuthenticationError: If the request carried no token.
    """
    return DigitalOceanClient(get_current_credentials(), get_settings())


def page_params(
    per_page: int | None, page: int | None, settings: Settings | None = None
) -> dict[str, int]:
    """Resolve pagination arguments against the configured defaults and bounds."""
    settings = settings or get_settings()
    size = settings.default_page_size if per_page is None else per_page
    size = max(1, min(size, settings.max_page_size))
    return {"page": max(1, page or 1), "per_page": size}


def dump_models(value: Any) -> Any:
    """Convert pydantic argument models (or lists of them) into request-body dicts."""
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    if isinstance(value, list):
        return [dump_models(v) for v in value]
    return value


def _describe_args(func: Callable[..., Any], args: Any, kwargs: Any) -> str:
    try:
        bound = inspect.signature(func).bind(*args, **kwargs)
        bound.apply_defaults()
    except TypeError:
        return f"args={args}, kwargs={kwargs}"
    parts = []
    for name, value in bound.arguments.items():
        shown = "'***'" if name in _SENSITIVE_ARGS and value else repr(value)[:200]
        parts.append(f"{name}={shown}")
    return ", ".join(parts)


def do_tool(
    func: Callable[..., Awaitable[CallToolResult]],
) -> Callable[..., Awaitable[CallToolResult]]:
    """Decorator for DigitalOcean MCP tools.

    Provides:
    - An OTel span per execution, named after the tool
    - Standardized logging of args, duration, and outcome
    - Error mapping: every exception becomes an ``isError`` tool result

    Example:
        @do_tool
        async def digitalocean_get_droplet(droplet_id: int) -> CallToolResult:
            ...
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> CallToolResult:
        tool_name = func.__name__
        log_extra = {"tool": tool_name}
        start_time = time.time()
        logger.info(
            f"🛠️  Tool Call: '{tool_name}' | Args: {_describe_args(func, args, kwargs)}",
            extra=log_extra,
        )

        with tracer.start_as_current_span(tool_name) as span:
            span.set_attribute("mcp.tool.name", tool_name)
            try:
                result = await func(*args, **kwargs)
            except DigitalOceanAPIError as e:
                duration_ms = (time.time() - start_time) * 1000
                span.set_attribute("error.kind", e.info.kind.value)
                span.set_status(Status(StatusCode.ERROR, e.message))
                logger.warning(
                    f"❌ Tool Failed: '{tool_name}' | Duration: {duration_ms:.2f}ms | "
                    f"Kind: {e.info.kind.value} | Error: {e.message}",
                    extra=log_extra,
                )
                return format_error(e)
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(
                    f"❌ Tool Failed: '{tool_name}' | Duration: {duration_ms:.2f}ms | Error: {e}",
                    exc_info=True,
                    extra=log_extra,
                )
                return format_error(e)

            duration_ms = (time.time() - start_time) * 1000
            if result.isError:
                logger.warning(
                    f"❌ Tool Failed (Logical): '{tool_name}' | Duration: {duration_ms:.2f}ms",
                    extra=log_extra,
                )
            else:
                logger.info(
                    f"✅ Tool Success: '{tool_name}' | Duration: {duration_ms:.2f}ms",
                    extra=log_extra,
                )
            return result

    return wrapper
