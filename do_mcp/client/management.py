"""Tag, project, monitoring, uptime, and billing endpoints."""

from typing import Any

from ..schema import Page
from .base import BaseClient


class ManagementClient(BaseClient):
    """Account-management and observability endpoints of the DigitalOcean API."""

    # Tags

    async def list_tags(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/tags", "tags", page, per_page)

    async def get_tag(self, tag_name: str) -> dict[str, Any]:
        data = await self.request(f"/tags/{tag_name}")
        return self.unwrap(data, "tag")

    async def create_tag(self, name: str) -> dict[str, Any]:
        data = await self.request("/tags", method="POST", body={"name": name})
        return self.unwrap(data, "tag")

    async def delete_tag(self, tag_name: str) -> None:
        await self.request(f"/tags/{tag_name}", method="DELETE")

    async def tag_resources(self, tag_name: str, resources: list[dict[str, str]]) -> None:
        await self.request(
            f"/tags/{tag_name}/resources", method="POST", body={"resources": resources}
        )

    async def untag_resources(self, tag_name: str, resources: list[dict[str, str]]) -> None:
        await self.request(
            f"/tags/{tag_name}/resources",
            method="DELETE",
            body={"resources": resources},
        )

    # Projects

    async def list_projects(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/projects", "projects", page, per_page)

    async def get_project(self, project_id: str) -> dict[str, Any]:
        data = await self.request(f"/projects/{project_id}")
        return self.unwrap(data, "project")

    async def get_default_project(self) -> dict[str, Any]:
        data = await self.request("/projects/default")
        return self.unwrap(data, "project")

    async def create_project(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/projects", method="POST", body=body)
        return self.unwrap(data, "project")

    async def update_project(self, project_id: str, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/projects/{project_id}", method="PATCH", body=body)
        return self.unwrap(data, "project")

    async def delete_project(self, project_id: str) -> None:
        await self.request(f"/projects/{project_id}", method="DELETE")

    async def list_project_resources(
        self, project_id: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/projects/{project_id}/resources", "resources", page, per_page
        )

    async def assign_resources_to_project(
        self, project_id: str, resources: list[str]
    ) -> list[dict[str, Any]]:
        data = await self.request(
            f"/projects/{project_id}/resources",
            method="POST",
            body={"resources": resources},
        )
        return self.unwrap(data, "resources")

    # Monitoring alert policies

    async def list_alert_policies(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated("/monitoring/alerts", "policies", page, per_page)

    async def get_alert_policy(self, alert_id: str) -> dict[str, Any]:
        data = await self.request(f"/monitoring/alerts/{alert_id}")
        return self.unwrap(data, "policy")

    async def create_alert_policy(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/monitoring/alerts", method="POST", body=body)
        return self.unwrap(data, "policy")

    async def update_alert_policy(self, alert_id: str, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/monitoring/alerts/{alert_id}", method="PUT", body=body)
        return self.unwrap(data, "policy")

    async def delete_alert_policy(self, alert_id: str) -> None:
        await self.request(f"/monitoring/alerts/{alert_id}", method="DELETE")

    # Droplet metrics

    async def get_droplet_metrics(
        self, metric: str, host_id: str, start: str, end: str, **extra: Any
    ) -> Any:
        """Query a droplet metric series, e.g. ``cpu`` or ``memory_free``."""
        return await self.request(
            f"/monitoring/metrics/droplet/{metric}",
            params={"host_id": host_id, "start": start, "end": end, **extra},
        )

    # Uptime checks

    async def list_uptime_checks(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated("/uptime/checks", "checks", page, per_page)

    async def get_uptime_check(self, check_id: str) -> dict[str, Any]:
        data = await self.request(f"/uptime/checks/{check_id}")
        return self.unwrap(data, "check")

    async def create_uptime_check(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/uptime/checks", method="POST", body=body)
        return self.unwrap(data, "check")

    async def update_uptime_check(self, check_id: str, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/uptime/checks/{check_id}", method="PUT", body=body)
        return self.unwrap(data, "check")

    async def delete_uptime_check(self, check_id: str) -> None:
        await self.request(f"/uptime/checks/{check_id}", method="DELETE")

    async def get_uptime_check_state(self, check_id: str) -> Any:
        data = await self.request(f"/uptime/checks/{check_id}/state")
        return self.unwrap(data, "state")

    async def list_uptime_alerts(
        self, check_id: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/uptime/checks/{check_id}/alerts", "alerts", page, per_page
        )

    async def create_uptime_alert(self, check_id: str, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(
            f"/uptime/checks/{check_id}/alerts", method="POST", body=body
        )
        return self.unwrap(data, "alert")

    async def delete_uptime_alert(self, check_id: str, alert_id: str) -> None:
        await self.request(f"/uptime/checks/{check_id}/alerts/{alert_id}", method="DELETE")

    # Billing

    async def get_balance(self) -> dict[str, Any]:
        return await self.request("/customers/my/balance")

    async def list_billing_history(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            "/customers/my/billing_history", "billing_history", page, per_page
        )

    async def list_invoices(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/customers/my/invoices", "invoices", page, per_page)

    async def get_invoice(self, invoice_id: str) -> dict[str, Any]:
        return await self.request(f"/customers/my/invoices/{invoice_id}")

    async def get_invoice_items(self, invoice_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/customers/my/invoices/{invoice_id}/summary")
        return self.unwrap(data, "invoice_items")

    async def get_invoice_csv(self, invoice_id: str) -> str:
        data = await self.request(f"/customers/my/invoices/{invoice_id}/csv")
        return data if isinstance(data, str) else str(data)

    async def get_invoice_pdf(self, invoice_id: str) -> bytes:
        return await self.request_bytes(f"/customers/my/invoices/{invoice_id}/pdf")
