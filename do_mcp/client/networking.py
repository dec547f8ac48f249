"""Domain, firewall, load balancer, VPC, reserved IP, certificate, and CDN endpoints."""

from typing import Any

from ..schema import Page
from .base import BaseClient


class NetworkingClient(BaseClient):
    """Networking endpoints of the DigitalOcean API."""

    # Domains and records

    async def list_domains(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/domains", "domains", page, per_page)

    async def get_domain(self, domain_name: str) -> dict[str, Any]:
        data = await self.request(f"/domains/{domain_name}")
        return self.unwrap(data, "domain")

    async def create_domain(self, name: str, ip_address: str | None = None) -> dict[str, Any]:
        data = await self.request(
            "/domains", method="POST", body={"name": name, "ip_address": ip_address}
        )
        return self.unwrap(data, "domain")

    async def delete_domain(self, domain_name: str) -> None:
        await self.request(f"/domains/{domain_name}", method="DELETE")

    async def list_domain_records(
        self, domain_name: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            f"/domains/{domain_name}/records", "domain_records", page, per_page
        )

    async def get_domain_record(self, domain_name: str, record_id: int) -> dict[str, Any]:
        data = await self.request(f"/domains/{domain_name}/records/{record_id}")
        return self.unwrap(data, "domain_record")

    async def create_domain_record(
        self, domain_name: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        data = await self.request(
            f"/domains/{domain_name}/records", method="POST", body=body
        )
        return self.unwrap(data, "domain_record")

    async def update_domain_record(
        self, domain_name: str, record_id: int, body: dict[str, Any]
    ) -> dict[str, Any]:
        data = await self.request(
            f"/domains/{domain_name}/records/{record_id}", method="PUT", body=body
        )
        return self.unwrap(data, "domain_record")

    async def delete_domain_record(self, domain_name: str, record_id: int) -> None:
        await self.request(f"/domains/{domain_name}/records/{record_id}", method="DELETE")

    # Firewalls

    async def list_firewalls(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/firewalls", "firewalls", page, per_page)

    async def get_firewall(self, firewall_id: str) -> dict[str, Any]:
        data = await self.request(f"/firewalls/{firewall_id}")
        return self.unwrap(data, "firewall")

    async def create_firewall(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/firewalls", method="POST", body=body)
        return self.unwrap(data, "firewall")

    async def update_firewall(self, firewall_id: str, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/firewalls/{firewall_id}", method="PUT", body=body)
        return self.unwrap(data, "firewall")

    async def delete_firewall(self, firewall_id: str) -> None:
        await self.request(f"/firewalls/{firewall_id}", method="DELETE")

    async def add_droplets_to_firewall(self, firewall_id: str, droplet_ids: list[int]) -> None:
        await self.request(
            f"/firewalls/{firewall_id}/droplets",
            method="POST",
            body={"droplet_ids": droplet_ids},
        )

    async def remove_droplets_from_firewall(
        self, firewall_id: str, droplet_ids: list[int]
    ) -> None:
        await self.request(
            f"/firewalls/{firewall_id}/droplets",
            method="DELETE",
            body={"droplet_ids": droplet_ids},
        )

    async def add_tags_to_firewall(self, firewall_id: str, tags: list[str]) -> None:
        await self.request(
            f"/firewalls/{firewall_id}/tags", method="POST", body={"tags": tags}
        )

    async def remove_tags_from_firewall(self, firewall_id: str, tags: list[str]) -> None:
        await self.request(
            f"/firewalls/{firewall_id}/tags", method="DELETE", body={"tags": tags}
        )

    async def add_rules_to_firewall(
        self,
        firewall_id: str,
        inbound_rules: list[dict[str, Any]] | None = None,
        outbound_rules: list[dict[str, Any]] | None = None,
    ) -> None:
        await self.request(
            f"/firewalls/{firewall_id}/rules",
            method="POST",
            body={"inbound_rules": inbound_rules, "outbound_rules": outbound_rules},
        )

    async def remove_rules_from_firewall(
        self,
        firewall_id: str,
        inbound_rules: list[dict[str, Any]] | None = None,
        outbound_rules: list[dict[str, Any]] | None = None,
    ) -> None:
        await self.request(
            f"/firewalls/{firewall_id}/rules",
            method="DELETE",
            body={"inbound_rules": inbound_rules, "outbound_rules": outbound_rules},
        )

    # Load balancers

    async def list_load_balancers(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(
            "/load_balancers", "load_balancers", page, per_page
        )

    async def get_load_balancer(self, lb_id: str) -> dict[str, Any]:
        data = await self.request(f"/load_balancers/{lb_id}")
        return self.unwrap(data, "load_balancer")

    async def create_load_balancer(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/load_balancers", method="POST", body=body)
        return self.unwrap(data, "load_balancer")

    async def update_load_balancer(self, lb_id: str, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request(f"/load_balancers/{lb_id}", method="PUT", body=body)
        return self.unwrap(data, "load_balancer")

    async def delete_load_balancer(self, lb_id: str) -> None:
        await self.request(f"/load_balancers/{lb_id}", method="DELETE")

    async def add_droplets_to_load_balancer(self, lb_id: str, droplet_ids: list[int]) -> None:
        await self.request(
            f"/load_balancers/{lb_id}/droplets",
            method="POST",
            body={"droplet_ids": droplet_ids},
        )

    async def remove_droplets_from_load_balancer(
        self, lb_id: str, droplet_ids: list[int]
    ) -> None:
        await self.request(
            f"/load_balancers/{lb_id}/droplets",
            method="DELETE",
            body={"droplet_ids": droplet_ids},
        )

    # VPCs

    async def list_vpcs(self, page: int | None = None, per_page: int | None = None) -> Page:
        return await self.list_paginated("/vpcs", "vpcs", page, per_page)

    async def get_vpc(self, vpc_id: str) -> dict[str, Any]:
        data = await self.request(f"/vpcs/{vpc_id}")
        return self.unwrap(data, "vpc")

    async def create_vpc(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/vpcs", method="POST", body=body)
        return self.unwrap(data, "vpc")

    async def update_vpc(
        self, vpc_id: str, name: str, description: str | None = None
    ) -> dict[str, Any]:
        data = await self.request(
            f"/vpcs/{vpc_id}",
            method="PUT",
            body={"name": name, "description": description},
        )
        return self.unwrap(data, "vpc")

    async def delete_vpc(self, vpc_id: str) -> None:
        await self.request(f"/vpcs/{vpc_id}", method="DELETE")

    async def list_vpc_members(
        self, vpc_id: str, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated(f"/vpcs/{vpc_id}/members", "members", page, per_page)

    # Reserved IPs

    async def list_reserved_ips(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated("/reserved_ips", "reserved_ips", page, per_page)

    async def get_reserved_ip(self, ip: str) -> dict[str, Any]:
        data = await self.request(f"/reserved_ips/{ip}")
        return self.unwrap(data, "reserved_ip")

    async def create_reserved_ip(
        self,
        region: str | None = None,
        droplet_id: int | None = None,
        project_id: str | None = None,
    ) -> dict[str, Any]:
        data = await self.request(
            "/reserved_ips",
            method="POST",
            body={"region": region, "droplet_id": droplet_id, "project_id": project_id},
        )
        return self.unwrap(data, "reserved_ip")

    async def delete_reserved_ip(self, ip: str) -> None:
        await self.request(f"/reserved_ips/{ip}", method="DELETE")

    async def perform_reserved_ip_action(
        self, ip: str, action: str, droplet_id: int | None = None
    ) -> dict[str, Any]:
        data = await self.request(
            f"/reserved_ips/{ip}/actions",
            method="POST",
            body={"type": action, "droplet_id": droplet_id},
        )
        return self.unwrap(data, "action")

    # Certificates

    async def list_certificates(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated("/certificates", "certificates", page, per_page)

    async def get_certificate(self, certificate_id: str) -> dict[str, Any]:
        data = await self.request(f"/certificates/{certificate_id}")
        return self.unwrap(data, "certificate")

    async def create_certificate(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/certificates", method="POST", body=body)
        return self.unwrap(data, "certificate")

    async def delete_certificate(self, certificate_id: str) -> None:
        await self.request(f"/certificates/{certificate_id}", method="DELETE")

    # CDN endpoints

    async def list_cdn_endpoints(
        self, page: int | None = None, per_page: int | None = None
    ) -> Page:
        return await self.list_paginated("/cdn/endpoints", "endpoints", page, per_page)

    async def get_cdn_endpoint(self, cdn_id: str) -> dict[str, Any]:
        data = await self.request(f"/cdn/endpoints/{cdn_id}")
        return self.unwrap(data, "endpoint")

    async def create_cdn_endpoint(self, body: dict[str, Any]) -> dict[str, Any]:
        data = await self.request("/cdn/endpoints", method="POST", body=body)
        return self.unwrap(data, "endpoint")

    async def update_cdn_endpoint(
        self,
        cdn_id: str,
        ttl: int | None = None,
        certificate_id: str | None = None,
        custom_domain: str | None = None,
    ) -> dict[str, Any]:
        data = await self.request(
            f"/cdn/endpoints/{cdn_id}",
            method="PUT",
            body={
                "ttl": ttl,
                "certificate_id": certificate_id,
                "custom_domain": custom_domain,
            },
        )
        return self.unwrap(data, "endpoint")

    async def delete_cdn_endpoint(self, cdn_id: str) -> None:
        await self.request(f"/cdn/endpoints/{cdn_id}", method="DELETE")

    async def purge_cdn_cache(self, cdn_id: str, files: list[str]) -> None:
        await self.request(
            f"/cdn/endpoints/{cdn_id}/cache", method="DELETE", body={"files": files}
        )
