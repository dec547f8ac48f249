"""SSL certificate and CDN endpoint tools."""

from typing import Annotated, Literal

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, success_response
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

CertificateId = Annotated[str, Field(description="Certificate UUID")]
CdnId = Annotated[str, Field(description="CDN endpoint UUID")]


@do_tool
async def digitalocean_list_certificates(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List SSL certificates."""
    result = await get_client().list_certificates(**page_params(per_page, page))
    return format_response(result, format, "certificates")


@do_tool
async def digitalocean_get_certificate(
    certificate_id: CertificateId, format: Format = "json"
) -> CallToolResult:
    """Get details of a certificate."""
    certificate = await get_client().get_certificate(certificate_id)
    return format_response(certificate, format, "certificates")


@do_tool
async def digitalocean_create_certificate(
    name: Annotated[str, Field(description="Certificate name")],
    type: Annotated[
        Literal["custom", "lets_encrypt"],
        Field(description="'custom' to upload, 'lets_encrypt' to have one issued"),
    ] = "lets_encrypt",
    dns_names: Annotated[
        list[str] | None, Field(description="Domains to cover (lets_encrypt only)")
    ] = None,
    private_key: Annotated[str | None, Field(description="PEM private key (custom only)")] = None,
    leaf_certificate: Annotated[
        str | None, Field(description="PEM leaf certificate (custom only)")
    ] = None,
    certificate_chain: Annotated[
        str | None, Field(description="PEM certificate chain (custom only)")
    ] = None,
) -> CallToolResult:
    """Create a certificate: upload a custom one or request one from Let's Encrypt."""
    if type == "lets_encrypt" and not dns_names:
        raise ValueError("dns_names is required for lets_encrypt certificates")
    if type == "custom" and not (private_key and leaf_certificate):
        raise ValueError("private_key and leaf_certificate are required for custom certificates")
    certificate = await get_client().create_certificate(
        {
            "name": name,
            "type": type,
            "dns_names": dns_names,
            "private_key": private_key,
            "leaf_certificate": leaf_certificate,
            "certificate_chain": certificate_chain,
        }
    )
    return success_response("Certificate created", certificate=certificate)


@do_tool
async def digitalocean_delete_certificate(certificate_id: CertificateId) -> CallToolResult:
    """Delete a certificate."""
    await get_client().delete_certificate(certificate_id)
    return success_response(f"Certificate {certificate_id} deleted")


@do_tool
async def digitalocean_list_cdn_endpoints(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List CDN endpoints."""
    result = await get_client().list_cdn_endpoints(**page_params(per_page, page))
    return format_response(result, format, "endpoints")


@do_tool
async def digitalocean_get_cdn_endpoint(cdn_id: CdnId, format: Format = "json") -> CallToolResult:
    """Get details of a CDN endpoint."""
    endpoint = await get_client().get_cdn_endpoint(cdn_id)
    return format_response(endpoint, format, "endpoints")


@do_tool
async def digitalocean_create_cdn_endpoint(
    origin: Annotated[str, Field(description="Spaces origin, e.g. bucket.nyc3.digitaloceanspaces.com")],
    ttl: Annotated[
        int | None, Field(description="Cache TTL in seconds (60, 600, 3600, 86400, 604800)")
    ] = None,
    certificate_id: str | None = None,
    custom_domain: str | None = None,
) -> CallToolResult:
    """Create a CDN endpoint for a Spaces bucket."""
    endpoint = await get_client().create_cdn_endpoint(
        {
            "origin": origin,
            "ttl": ttl,
            "certificate_id": certificate_id,
            "custom_domain": custom_domain,
        }
    )
    return success_response("CDN endpoint created", endpoint=endpoint)


@do_tool
async def digitalocean_update_cdn_endpoint(
    cdn_id: CdnId,
    ttl: int | None = None,
    certificate_id: str | None = None,
    custom_domain: str | None = None,
) -> CallToolResult:
    """Update a CDN endpoint's TTL or custom domain."""
    endpoint = await get_client().update_cdn_endpoint(cdn_id, ttl, certificate_id, custom_domain)
    return success_response("CDN endpoint updated", endpoint=endpoint)


@do_tool
async def digitalocean_delete_cdn_endpoint(cdn_id: CdnId) -> CallToolResult:
    """Delete a CDN endpoint."""
    await get_client().delete_cdn_endpoint(cdn_id)
    return success_response(f"CDN endpoint {cdn_id} deleted")


@do_tool
async def digitalocean_purge_cdn_cache(
    cdn_id: CdnId,
    files: Annotated[
        list[str], Field(description='Paths to purge; use ["*"] to purge everything')
    ],
) -> CallToolResult:
    """Purge cached content from a CDN endpoint."""
    await get_client().purge_cdn_cache(cdn_id, files)
    return success_response(f"Purged {len(files)} path(s) from CDN cache")


TOOLS = [
    digitalocean_list_certificates,
    digitalocean_get_certificate,
    digitalocean_create_certificate,
    digitalocean_delete_certificate,
    digitalocean_list_cdn_endpoints,
    digitalocean_get_cdn_endpoint,
    digitalocean_create_cdn_endpoint,
    digitalocean_update_cdn_endpoint,
    digitalocean_delete_cdn_endpoint,
    digitalocean_purge_cdn_cache,
]
