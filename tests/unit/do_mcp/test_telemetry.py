"""Tests for logging setup helpers."""

import json
import logging
import sys

import pytest

from do_mcp.telemetry import (
    EmojiLoggingFilter,
    JsonFormatter,
    TokenRedactingFilter,
    setup_telemetry,
)


def _record(name: str, msg: str, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, msg, None, exc_info)


class TestEmojiLoggingFilter:
    @pytest.mark.parametrize(
        ("msg", "prefix"),
        [
            ("Tool Call: 'digitalocean_list_droplets'", "🛠️"),
            ("Tool Success: 'digitalocean_list_droplets'", "✅"),
            ("Tool Failed: 'digitalocean_list_droplets'", "❌"),
        ],
    )
    def test_decorates_tool_lifecycle(self, msg: str, prefix: str) -> None:
        record = _record("do_mcp.tools.common", msg)
        assert EmojiLoggingFilter().filter(record) is True
        assert record.msg.startswith(prefix)

    def test_does_not_double_decorate(self) -> None:
        record = _record("do_mcp.tools.common", "✅ Tool Success: 'x'")
        EmojiLoggingFilter().filter(record)
        assert record.msg == "✅ Tool Success: 'x'"

    def test_client_logs_are_tagged(self) -> None:
        record = _record("do_mcp.client.base", "DigitalOcean API GET /account")
        EmojiLoggingFilter().filter(record)
        assert record.msg == "🌊 DigitalOcean API GET /account"

    def test_other_loggers_untouched(self) -> None:
        record = _record("do_mcp.config", "Tool Call lookalike")
        EmojiLoggingFilter().filter(record)
        assert record.msg == "Tool Call lookalike"


class TestTokenRedactingFilter:
    @pytest.mark.parametrize(
        ("msg", "expected"),
        [
            ("Authorization: Bearer abc.def-123", "Authorization: Bearer ***"),
            ("token=dop_v1_0123456789abcdef rejected", "token=dop_v1_*** rejected"),
        ],
    )
    def test_masks_tokens(self, msg: str, expected: str) -> None:
        record = _record("do_mcp.api.middleware", msg)
        assert TokenRedactingFilter().filter(record) is True
        assert record.getMessage() == expected

    def test_formats_args_before_masking(self) -> None:
        record = logging.LogRecord(
            "do_mcp", logging.INFO, __file__, 1, "sent %s", ("Bearer secret",), None
        )
        TokenRedactingFilter().filter(record)
        assert record.getMessage() == "sent Bearer ***"

    def test_leaves_clean_messages_alone(self) -> None:
        record = logging.LogRecord(
            "do_mcp", logging.INFO, __file__, 1, "listed %d droplets", (3,), None
        )
        TokenRedactingFilter().filter(record)
        assert record.msg == "listed %d droplets"
        assert record.args == (3,)


class TestJsonFormatter:
    def test_emits_one_json_object(self) -> None:
        record = _record("do_mcp.api.middleware", "Request End")
        record.request_id = "req-123"
        record.tool = "digitalocean_list_droplets"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["severity"] == "INFO"
        assert payload["logger"] == "do_mcp.api.middleware"
        assert payload["message"] == "Request End"
        assert payload["request_id"] == "req-123"
        assert payload["tool"] == "digitalocean_list_droplets"
        assert payload["service"] == "digitalocean-mcp"
        assert "trace_id" not in payload

    def test_includes_exception(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record("do_mcp", "failed", exc_info=sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in payload["exception"]


def test_setup_telemetry_honors_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_telemetry()
        assert root.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.INFO
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
