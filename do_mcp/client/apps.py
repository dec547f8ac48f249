"""App Platform and Functions endpoints."""

from typing import Any

from ..schema import Page
from .base import BaseClient


class AppsClient(BaseClient):
    """App Platform and serverless Functions endpoints."""

    # Apps

    async def list_apps(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/apps", "apps", page, per_page)

    async def get_app(self, app_id: str) -> dict[str, Any]:
        data = await self.request(f"/apps/{app_id}")
        return self.unwrap(data, "app")

    async def create_app(self, spec: dict[str, Any], project_id: str | None = None) -> dict[str, Any]:
        data = await self.request(
            "/apps", method="POST", body={"spec": spec, "project_id": project_id}
        )
        return self.unwrap(data, "app")

    async def update_app(self, app_id: str, spec: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/apps/{app_id}", method="PUT", body={"spec": spec})
        return self.unwrap(data, "app")

    async def delete_app(self, app_id: str) -> None:
        await self.request(f"/apps/{app_id}", method="DELETE")

    async def list_app_deployments(
        self, app_id: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/apps/{app_id}/deployments", "deployments", page, per_page
        )

    async def get_app_deployment(self, app_id: str, deployment_id: str) -> dict[str, Any]:
        data = await self.request(f"/apps/{app_id}/deployments/{deployment_id}")
        return self.unwrap(data, "deployment")

    async def create_app_deployment(
        self, app_id: str, force_build: bool | None = None
    ) -> dict[str, Any]:
        data = await self.request(
            f"/apps/{app_id}/deployments",
            method="POST",
            body={"force_build": force_build},
        )
        return self.unwrap(data, "deployment")

    async def cancel_app_deployment(self, app_id: str, deployment_id: str) -> dict[str, Any]:
        data = await self.request(
            f"/apps/{app_id}/deployments/{deployment_id}/cancel", method="POST"
        )
        return self.unwrap(data, "deployment")

    async def get_app_logs(
        self,
        app_id: str,
        deployment_id: str | None = None,
        component_name: str | None = None,
        log_type: str | None = None,
        follow: bool | None = None,
    ) -> Any:
        """Fetch log URLs for an app, optionally narrowed to a deployment and component."""
        path = f"/apps/{app_id}"
        if deployment_id:
            path += f"/deployments/{deployment_id}"
        if component_name:
            path += f"/components/{component_name}"
        path += "/logs"
        return await self.request(path, params={"type": log_type, "follow": follow})

    async def list_app_regions(self) -> list[Any]:
        data = await self.request("/apps/regions")
        return self.unwrap(data, "regions")

    async def list_app_instance_sizes(self) -> list[Any]:
        data = await self.request("/apps/tiers/instance_sizes")
        return self.unwrap(data, "instance_sizes")

    async def propose_app(self, spec: dict[str, Any], app_id: str | None = None) -> Any:
        return await self.request(
            "/apps/propose", method="POST", body={"spec": spec, "app_id": app_id}
        )

    # Functions

    async def list_functions_namespaces(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            "/functions/namespaces", "namespaces", page, per_page
        )

    async def get_functions_namespace(self, namespace_id: str) -> dict[str, Any]:
        data = await self.request(f"/functions/namespaces/{namespace_id}")
        return self.unwrap(data, "namespace")

    async def create_functions_namespace(self, region: str, label: str) -> dict[str, Any]:
        data = await self.request(
            "/functions/namespaces",
            method="POST",
            body={"region": region, "label": label},
        )
        return self.unwrap(data, "namespace")

    async def delete_functions_namespace(self, namespace_id: str) -> None:
        await self.request(f"/functions/namespaces/{namespace_id}", method="DELETE")

    async def list_functions_triggers(self, namespace_id: str) -> list[dict[str, Any]]:
        data = await self.request(f"/functions/namespaces/{namespace_id}/triggers")
        return self.unwrap(data, "triggers")

    async def get_functions_trigger(
        self, namespace_id: str, trigger_name: str
    ) -> dict[str, Any]:
        data = await self.request(
            f"/functions/namespaces/{namespace_id}/triggers/{trigger_name}"
        )
        return self.unwrap(data, "trigger")

    async def create_functions_trigger(
        self, namespace_id: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        data = await self.request(
            f"/functions/namespaces/{namespace_id}/triggers", method="POST", body=body
        )
        return self.unwrap(data, "trigger")

    async def update_functions_trigger(
        self, namespace_id: str, trigger_name: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        data = await self.request(
            f"/functions/namespaces/{namespace_id}/triggers/{trigger_name}",
            method="PUT",
            body=body,
        )
        return self.unwrap(data, "trigger")

    async def delete_functions_trigger(self, namespace_id: str, trigger_name: str) -> None:
        await self.request(
            f"/functions/namespaces/{namespace_id}/triggers/{trigger_name}",
            method="DELETE",
        )
