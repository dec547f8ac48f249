"""DigitalOcean API client.

``DigitalOceanClient`` combines the request engine with every resource
family's endpoint methods. A new instance is built for each tool call from
the calling tenant's credentials.
"""

from ..exceptions import DigitalOceanAPIError
from .apps import AppsClient
from .base import (
    BaseClient,
    build_query_string,
    drop_none,
    extract_page_number,
    parse_paginated_response,
)
from .compute import ComputeClient
from .databases import DatabasesClient
from .kubernetes import KubernetesClient
from .management import ManagementClient
from .networking import NetworkingClient
from .storage import StorageClient


class DigitalOceanClient(
    ComputeClient,
    NetworkingClient,
    StorageClient,
    KubernetesClient,
    DatabasesClient,
    AppsClient,
    ManagementClient,
):
    """Tenant-scoped client for the full DigitalOcean API surface."""

    async def test_connection(self) -> dict[str, bool | str]:
        """Probe the API with the tenant's token.

        Returns:
            ``{"connected": bool, "message": str}``; failures are reported in
            the payload, never raised.
        """
        try:
            await self.get_account()
        except DigitalOceanAPIError as e:
            return {"connected": False, "message": e.message or "Connection failed"}
        return {"connected": True, "message": "Successfully connected to DigitalOcean API"}


__all__ = [
    "BaseClient",
    "DigitalOceanClient",
    "build_query_string",
    "drop_none",
    "extract_page_number",
    "parse_paginated_response",
]
