"""Runtime configuration for the DigitalOcean MCP server.

Settings are read from environment variables once per process. Tenant
credentials are not part of the configuration; they arrive with each
request (see ``do_mcp.auth``).
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.digitalocean.com/v2"


def _env_int(name: str, default: int) -> int:
    """Read an integer env var, falling back to the default when malformed."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def _env_list(name: str) -> list[str]:
    raw = os.environ.get(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Process-wide settings owned by the hosting environment.

    Attributes:
        api_base_url: Canonical API root used when a tenant sends no override.
        http_timeout_seconds: Deadline applied to every outbound API call.
        default_page_size: ``per_page`` used when a list tool receives none.
        max_page_size: Upper bound ``per_page`` is clamped to.
        character_limit: Response character budget for tool output text.
        default_retry_after_seconds: Wait hint used when a 429 response has no
            usable ``Retry-After`` header.
        retry_server_errors: Present 5xx API errors as retryable.
        allowed_hosts: Hosts accepted by the MCP transport. Empty disables
            DNS-rebinding protection.
        host: Bind address for the HTTP server.
        port: Bind port for the HTTP server.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    http_timeout_seconds: float = 30.0
    default_page_size: int = 20
    max_page_size: int = 200
    character_limit: int = 50000
    default_retry_after_seconds: int = 60
    retry_server_errors: bool = False
    allowed_hosts: list[str] = field(default_factory=list)
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            api_base_url=os.environ.get("DIGITALOCEAN_API_BASE_URL", "").strip()
            or DEFAULT_API_BASE_URL,
            http_timeout_seconds=_env_float("DIGITALOCEAN_HTTP_TIMEOUT", 30.0),
            default_page_size=_env_int("DEFAULT_PAGE_SIZE", 20),
            max_page_size=_env_int("MAX_PAGE_SIZE", 200),
            character_limit=_env_int("CHARACTER_LIMIT", 50000),
            default_retry_after_seconds=_env_int("RATE_LIMIT_DEFAULT_RETRY_AFTER", 60),
            retry_server_errors=_env_bool("RETRY_SERVER_ERRORS", False),
            allowed_hosts=_env_list("MCP_ALLOWED_HOSTS"),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=_env_int("PORT", 8080),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached process settings."""
    return Settings.from_env()
