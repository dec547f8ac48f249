"""Request engine for the DigitalOcean REST API.

Thin async wrapper around the DigitalOcean API v2 using httpx. Every call
goes through ``BaseClient.request`` (or ``request_bytes`` for binary
downloads), which attaches the tenant's bearer token and classifies the
response status into the error hierarchy of ``do_mcp.exceptions``.

The engine performs no retries and keeps no state between calls.
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlencode, urlsplit

import httpx

from ..auth import MISSING_TOKEN_MESSAGE, TenantCredentials
from ..config import Settings, get_settings
from ..exceptions import (
    AuthenticationError,
    DigitalOceanAPIError,
    DigitalOceanTransportError,
    RateLimitError,
)
from ..schema import Page

logger = logging.getLogger(__name__)

AUTH_FAILED_MESSAGE = "Authentication failed. Check your API token."
RATE_LIMIT_MESSAGE = "Rate limit exceeded"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    return str(value)


def build_query_string(params: Mapping[str, Any] | None) -> str:
    """Build a URL query string from optional parameters.

    Entries whose value is None or the empty string are dropped. The
    remaining entries keep their insertion order and are percent-encoded.

    Returns:
        ``""`` when nothing is left, otherwise ``"?k=v&..."``.
    """
    if not params:
        return ""
    filtered = [
        (key, _stringify(value))
        for key, value in params.items()
        if value is not None and value != ""
    ]
    if not filtered:
        return ""
    return "?" + urlencode(filtered)


def extract_page_number(url: str | None) -> int | None:
    """Read the ``page`` query parameter from a pagination link.

    Returns None on any parse failure.
    """
    if not isinstance(url, str) or not url:
        return None
    try:
        values = parse_qs(urlsplit(url).query).get("page")
        if not values:
            return None
        return int(values[0])
    except (ValueError, TypeError):
        return None


def parse_paginated_response(response: Any, key: str) -> Page:
    """Normalize a raw list response into a ``Page``.

    The list of items is read from ``response[key]``; ``meta.total`` and
    ``links.pages.next`` supply the totals and the continuation. Missing or
    malformed sections degrade to defaults; this function never raises.
    """
    if not isinstance(response, Mapping):
        return Page()

    items = response.get(key) or []
    if not isinstance(items, list):
        items = [items]

    meta = response.get("meta")
    total = meta.get("total") if isinstance(meta, Mapping) else None
    if not isinstance(total, int) or isinstance(total, bool):
        total = None

    links = response.get("links")
    pages = links.get("pages") if isinstance(links, Mapping) else None
    next_link = pages.get("next") if isinstance(pages, Mapping) else None
    has_more = bool(next_link)

    return Page(
        items=items,
        total=total,
        has_more=has_more,
        next_page=extract_page_number(next_link) if has_more else None,
    )


def drop_none(value: Any) -> Any:
    """Recursively remove None-valued keys from mappings in a request body."""
    if isinstance(value, Mapping):
        return {k: drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [drop_none(v) for v in value]
    return value


def _parse_retry_after(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    raw = raw.strip()
    if not raw.isdigit():
        return default
    return int(raw)


def _error_message(response: httpx.Response) -> str:
    fallback = f"API error: {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, Mapping):
        return str(payload.get("message") or payload.get("id") or fallback)
    return fallback


class BaseClient:
    """Request engine bound to one tenant's credentials.

    Instances are cheap and are built fresh for every tool call.
    """

    def __init__(
        self,
        credentials: TenantCredentials,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials: Tenant credentials for this call.
            settings: Process settings; defaults to ``get_settings()``.
        """
        self._credentials = credentials
        self._settings = settings or get_settings()
        self.base_url = (credentials.base_url or self._settings.api_base_url).rstrip(
            "/"
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def _headers(self, overrides: Mapping[str, str] | None) -> httpx.Headers:
        """Build request headers; explicit overrides win per field."""
        if not self._credentials.token:
            raise AuthenticationError(MISSING_TOKEN_MESSAGE)
        headers = httpx.Headers(
            {
                "Authorization": f"Bearer {self._credentials.token}",
                "Content-Type": "application/json",
            }
        )
        if overrides:
            headers.update(overrides)
        return headers

    async def _send(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue one HTTP call and classify failure statuses.

        Raises:
            ValueError: If ``path`` does not begin with ``/``.
            AuthenticationError: On a missing token (before any I/O) or 401/403.
            RateLimitError: On HTTP 429.
            DigitalOceanAPIError: On any other non-2xx status.
            DigitalOceanTransportError: On network-level failures.
        """
        if not path.startswith("/"):
            raise ValueError(f"API path must begin with '/': {path!r}")

        request_headers = self._headers(headers)
        url = f"{self.base_url}{path}{build_query_string(params)}"
        payload = drop_none(body) if body is not None else None

        logger.debug(f"DigitalOcean API {method} {path}")
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.http_timeout_seconds
            ) as http:
                response = await http.request(
                    method, url, headers=request_headers, json=payload
                )
        except httpx.TransportError as e:
            logger.warning(f"DigitalOcean API {method} {path} transport error: {e}")
            raise DigitalOceanTransportError(
                f"Network error calling DigitalOcean API: {e}"
            ) from e

        if response.status_code == 429:
            retry_after = _parse_retry_after(
                response.headers.get("Retry-After"),
                self._settings.default_retry_after_seconds,
            )
            logger.warning(
                f"DigitalOcean API rate limit on {method} {path}, retry after {retry_after}s"
            )
            raise RateLimitError(RATE_LIMIT_MESSAGE, retry_after)

        if response.status_code in (401, 403):
            raise AuthenticationError(
                AUTH_FAILED_MESSAGE, status_code=response.status_code
            )

        if not response.is_success:
            message = _error_message(response)
            logger.info(
                f"DigitalOcean API {method} {path} failed: {response.status_code} {message}"
            )
            raise DigitalOceanAPIError(message, status_code=response.status_code)

        return response

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call the API and decode the result.

        Returns:
            None for 204, the decoded structure for JSON responses, and the raw
            text for anything else.
        """
        response = await self._send(
            path, method=method, body=body, headers=headers, params=params
        )
        if response.status_code == 204:
            return None
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return response.text

    async def request_bytes(
        self,
        path: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Fetch a binary resource, bypassing JSON decoding."""
        response = await self._send(path, headers=headers, params=params)
        return response.content

    async def list_paginated(
        self,
        path: str,
        key: str,
        page: int | None = None,
        per_page: int | None = None,
        **params: Any,
    ) -> Page:
        """GET a list endpoint and normalize it into a ``Page``."""
        query: dict[str, Any] = {"page": page, "per_page": per_page, **params}
        data = await self.request(path, params=query)
        return parse_paginated_response(data, key)

    @staticmethod
    def unwrap(data: Any, key: str) -> Any:
        """Return ``data[key]`` when present, otherwise ``data`` unchanged."""
        if isinstance(data, Mapping) and key in data:
            return data[key]
        return data
