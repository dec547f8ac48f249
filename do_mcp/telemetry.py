"""Logging and tracing setup for the DigitalOcean MCP server."""

import json
import logging
import os
import re
import sys
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

from . import SERVER_NAME, SERVER_VERSION

_CHATTY_LOGGERS = ["httpx", "httpcore", "mcp", "asyncio", "urllib3.connectionpool"]
_UVICORN_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error"]

TEXT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)s] %(name)s "
    "[trace_id=%(otelTraceID)s span_id=%(otelSpanID)s]: %(message)s"
)

_TOOL_MARKERS = {
    "Tool Call": "🛠️ ",
    "Tool Success": "✅",
    "Tool Failed": "❌",
}

# Bearer headers and raw personal access tokens
_TOKEN_PATTERN = re.compile(r"(Bearer\s+|dop_v1_)[A-Za-z0-9._~+/=-]+")


class EmojiLoggingFilter(logging.Filter):
    """Prefix tool, DigitalOcean API and access log lines with emojis."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True
        msg = record.getMessage()

        if record.name.startswith("uvicorn.access"):
            if not record.msg.startswith("🌐"):
                record.msg = f"🌐 API Call | {record.msg}"
        elif record.name.startswith("do_mcp.client"):
            if not record.msg.startswith("🌊"):
                record.msg = f"🌊 {record.msg}"
        elif record.name.startswith("do_mcp.tools"):
            for marker, emoji in _TOOL_MARKERS.items():
                if marker in msg:
                    if emoji.strip() not in msg:
                        record.msg = f"{emoji} {record.msg}"
                    break

        return True


class TokenRedactingFilter(logging.Filter):
    """Mask API tokens that end up in a log message."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        redacted = _TOKEN_PATTERN.sub(lambda m: f"{m.group(1)}***", msg)
        if redacted != msg:
            record.msg = redacted
            record.args = ()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, correlated with the active span and request."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "severity": record.levelname,
            "service": SERVER_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            entry["trace_id"] = format(span_context.trace_id, "032x")
            entry["span_id"] = format(span_context.span_id, "016x")

        for attr in ("request_id", "tool"):
            value = getattr(record, attr, None)
            if value:
                entry[attr] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


def get_tracer(name: str) -> trace.Tracer:
    """Returns a tracer for the given module name."""
    return trace.get_tracer(name)


def set_span_attribute(key: str, value: Any) -> None:
    """Sets an attribute on the current OTel span. Safe to call if no span active."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attribute(key, value)


def setup_telemetry(level: int = logging.INFO) -> None:
    """Configures tracing and logging for the server.

    Configures:
    - Traces: SDK TracerProvider tagged with the service name (no exporter
      unless one is attached by the hosting environment)
    - Logs: JSON lines (``LOG_FORMAT=JSON``) or text, both correlated with
      the active trace and span

    Args:
        level: The logging level to use (default: INFO)
    """
    env_level = os.environ.get("LOG_LEVEL", "").upper()
    if env_level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        level = getattr(logging, env_level)

    from opentelemetry.instrumentation.logging import LoggingInstrumentor

    LoggingInstrumentor().instrument(set_logging_format=False)

    if not isinstance(trace.get_tracer_provider(), TracerProvider):
        resource = Resource.create(
            {
                "service.name": SERVER_NAME,
                "service.version": SERVER_VERSION,
                "service.instance.id": os.environ.get("HOSTNAME", "localhost"),
            }
        )
        trace.set_tracer_provider(TracerProvider(resource=resource))

    _configure_logging_handlers(level)


def _configure_logging_handlers(level: int) -> None:
    """Install the root handler and attach redaction and emoji filters."""
    for logger_name in _CHATTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.INFO)

    root = logging.getLogger()
    if os.environ.get("LOG_FORMAT", "TEXT").upper() == "JSON":
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        root.handlers = [handler]
    else:
        logging.basicConfig(
            level=level, format=TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", force=True
        )

    # Redaction runs first so the emoji filter sees the masked message
    filters: list[logging.Filter] = [TokenRedactingFilter(), EmojiLoggingFilter()]
    targets = [root] + [logging.getLogger(name) for name in _UVICORN_LOGGERS]
    for target in targets:
        for log_filter in filters:
            if target is not root:
                target.addFilter(log_filter)
            for handler in target.handlers:
                handler.addFilter(log_filter)

    root.setLevel(level)
