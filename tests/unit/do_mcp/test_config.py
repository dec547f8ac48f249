"""Tests for environment-driven settings."""

import pytest

from do_mcp.config import DEFAULT_API_BASE_URL, Settings, get_settings


class TestSettingsFromEnv:
    def test_defaults(self) -> None:
        settings = Settings.from_env()
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.http_timeout_seconds == 30.0
        assert settings.default_page_size == 20
        assert settings.max_page_size == 200
        assert settings.character_limit == 50000
        assert settings.default_retry_after_seconds == 60
        assert settings.retry_server_errors is False
        assert settings.allowed_hosts == []
        assert settings.port == 8080

    def test_reads_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIGITALOCEAN_API_BASE_URL", "https://proxy.internal/v2")
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "50")
        monkeypatch.setenv("RATE_LIMIT_DEFAULT_RETRY_AFTER", "15")
        monkeypatch.setenv("RETRY_SERVER_ERRORS", "true")
        monkeypatch.setenv("MCP_ALLOWED_HOSTS", "mcp.example.com, localhost:*,")

        settings = Settings.from_env()

        assert settings.api_base_url == "https://proxy.internal/v2"
        assert settings.default_page_size == 50
        assert settings.default_retry_after_seconds == 15
        assert settings.retry_server_errors is True
        assert settings.allowed_hosts == ["mcp.example.com", "localhost:*"]

    def test_malformed_numbers_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHARACTER_LIMIT", "lots")
        monkeypatch.setenv("DIGITALOCEAN_HTTP_TIMEOUT", "soon")

        settings = Settings.from_env()

        assert settings.character_limit == 50000
        assert settings.http_timeout_seconds == 30.0

    def test_settings_are_immutable(self) -> None:
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.port = 1  # type: ignore[misc]


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
