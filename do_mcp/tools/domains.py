"""Domain and DNS record tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

DomainName = Annotated[str, Field(description="Domain name, e.g. example.com")]
RecordId = Annotated[int, Field(description="Record ID")]
RecordType = Literal["A", "AAAA", "CAA", "CNAME", "MX", "NS", "SOA", "SRV", "TXT"]


@do_tool
async def digitalocean_list_domains(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List domains managed by DigitalOcean DNS."""
    result = await get_client().list_domains(**page_params(per_page, page))
    return format_response(result, format, "domains")


@do_tool
async def digitalocean_get_domain(domain_name: DomainName, format: Format = "json") -> CallToolResult:
    """Get details of a domain."""
    domain = await get_client().get_domain(domain_name)
    return format_response(domain, format, "domains")


@do_tool
async def digitalocean_create_domain(
    name: DomainName,
    ip_address: Annotated[
        str | None, Field(description="IP address to create an A record for")
    ] = None,
) -> CallToolResult:
    """Add a domain to DigitalOcean DNS."""
    domain = await get_client().create_domain(name, ip_address)
    return success_response("Domain created", domain=domain)


@do_tool
async def digitalocean_delete_domain(domain_name: DomainName) -> CallToolResult:
    """Delete a domain and all of its records."""
    await get_client().delete_domain(domain_name)
    return success_response(f"Domain {domain_name} deleted")


@do_tool
async def digitalocean_list_domain_records(
    domain_name: DomainName,
    per_page: PerPage = None,
    page: PageNumber = 1,
    format: Format = "json",
) -> CallToolResult:
    """List DNS records of a domain."""
    result = await get_client().list_domain_records(
        domain_name, **page_params(per_page, page)
    )
    return format_response(result, format, "domain_records")


@do_tool
async def digitalocean_get_domain_record(
    domain_name: DomainName, record_id: RecordId, format: Format = "json"
) -> CallToolResult:
    """Get a single DNS record."""
    record = await get_client().get_domain_record(domain_name, record_id)
    return format_response(record, format, "domain_records")


@do_tool
async def digitalocean_create_domain_record(
    domain_name: DomainName,
    type: Annotated[RecordType, Field(description="Record type")],
    name: Annotated[str, Field(description="Record name (use @ for root)")],
    data: Annotated[str, Field(description="Record data")],
    priority: Annotated[int | None, Field(description="Priority (MX/SRV)")] = None,
    port: Annotated[int | None, Field(description="Port (SRV)")] = None,
    ttl: Annotated[int | None, Field(description="TTL in seconds")] = None,
    weight: Annotated[int | None, Field(description="Weight (SRV)")] = None,
    flags: Annotated[int | None, Field(description="Flags (CAA)")] = None,
    tag: Annotated[str | None, Field(description="Tag (CAA)")] = None,
) -> CallToolResult:
    """Create a DNS record."""
    record = await get_client().create_domain_record(
        domain_name,
        {
            "type": type,
            "name": name,
            "data": data,
            "priority": priority,
            "port": port,
            "ttl": ttl,
            "weight": weight,
            "flags": flags,
            "tag": tag,
        },
    )
    return success_response("Domain record created", domain_record=record)


@do_tool
async def digitalocean_update_domain_record(
    domain_name: DomainName,
    record_id: RecordId,
    type: RecordType | None = None,
    name: str | None = None,
    data: str | None = None,
    priority: int | None = None,
    port: int | None = None,
    ttl: int | None = None,
    weight: int | None = None,
    flags: int | None = None,
    tag: str | None = None,
) -> CallToolResult:
    """Update fields of a DNS record. Omitted fields keep their value."""
    record = await get_client().update_domain_record(
        domain_name,
        record_id,
        {
            "type": type,
            "name": name,
            "data": data,
            "priority": priority,
            "port": port,
            "ttl": ttl,
            "weight": weight,
            "flags": flags,
            "tag": tag,
        },
    )
    return success_response("Domain record updated", domain_record=record)


@do_tool
async def digitalocean_delete_domain_record(
    domain_name: DomainName, record_id: RecordId
) -> CallToolResult:
    """Delete a DNS record."""
    await get_client().delete_domain_record(domain_name, record_id)
    return success_response(f"Record {record_id} deleted from {domain_name}")


TOOLS = [
    digitalocean_list_domains,
    digitalocean_get_domain,
    digitalocean_create_domain,
    digitalocean_delete_domain,
    digitalocean_list_domain_records,
    digitalocean_get_domain_record,
    digitalocean_create_domain_record,
    digitalocean_update_domain_record,
    digitalocean_delete_domain_record,
]
