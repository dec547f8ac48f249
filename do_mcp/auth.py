"""Per-request tenant credential handling.

Tenant credentials are never configured on the server. Each inbound MCP
request carries them in HTTP headers::

    X-DigitalOcean-Token:     <API token>      (required)
    X-DigitalOcean-Base-URL:  <API root>       (optional, e.g. a proxy)

The HTTP middleware parses the headers, binds the result to a ContextVar for
the lifetime of the request, and clears it afterwards. Tool handlers read the
credentials through ``get_current_credentials()``; nothing is shared between
requests.
"""

import contextvars
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-DigitalOcean-Token"
BASE_URL_HEADER = "X-DigitalOcean-Base-URL"

MISSING_TOKEN_MESSAGE = f"No token provided. Include {TOKEN_HEADER} header."
MISSING_CREDENTIALS_MESSAGE = f"Missing credentials. Provide {TOKEN_HEADER} header."


@dataclass(frozen=True)
class TenantCredentials:
    """Credentials of the tenant issuing the current request."""

    token: str = field(repr=False)
    base_url: str | None = None


_credentials_context: contextvars.ContextVar[TenantCredentials | None] = (
    contextvars.ContextVar("tenant_credentials", default=None)
)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup that works for plain dicts too."""
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_tenant_credentials(
    headers: Mapping[str, str],
) -> TenantCredentials | None:
    """Extract tenant credentials from inbound request headers.

    Args:
        headers: Inbound HTTP headers.

    Returns:
        The parsed credentials, or None when no token header is present.
    """
    token = _header(headers, TOKEN_HEADER)
    if not token:
        return None
    base_url = _header(headers, BASE_URL_HEADER)
    return TenantCredentials(token=token, base_url=base_url)


def validate_credentials(credentials: TenantCredentials | None) -> TenantCredentials:
    """Ensure credentials carry a usable token.

    Raises:
        AuthenticationError: If credentials are absent or the token is empty.
    """
    if credentials is None or not credentials.token:
        raise AuthenticationError(MISSING_CREDENTIALS_MESSAGE)
    return credentials


def set_current_credentials(
    credentials: TenantCredentials | None,
) -> contextvars.Token[TenantCredentials | None]:
    """Bind credentials to the current context.

    Returns:
        A token to pass to ``reset_current_credentials`` once the request ends.
    """
    return _credentials_context.set(credentials)


def reset_current_credentials(
    token: contextvars.Token[TenantCredentials | None],
) -> None:
    """Restore the context to its state before ``set_current_credentials``."""
    _credentials_context.reset(token)


def get_current_credentials_or_none() -> TenantCredentials | None:
    """Gets the credentials bound to the current context, if any."""
    return _credentials_context.get()


def get_current_credentials() -> TenantCredentials:
    """Gets the credentials for the current context.

    Raises:
        AuthenticationError: If no credentials were bound for this request.
    """
    credentials = _credentials_context.get()
    if credentials is None:
        logger.warning("No tenant credentials bound to the current request")
    return validate_credentials(credentials)
