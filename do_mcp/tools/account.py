"""Account-wide tools: connection check, account, regions, sizes, actions, billing."""

import base64
from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..formatters import format_response, text_result, to_json
from .common import Format, PageNumber, PerPage, do_tool, get_client, page_params

InvoiceId = Annotated[str, Field(description="Invoice UUID")]


@do_tool
async def digitalocean_test_connection() -> CallToolResult:
    """Check that the supplied API token can reach the DigitalOcean API."""
    status = await get_client().test_connection()
    return text_result(to_json(status), is_error=not status["connected"])


@do_tool
async def digitalocean_get_account(format: Format = "json") -> CallToolResult:
    """Get account information (email, limits, status)."""
    account = await get_client().get_account()
    return format_response(account, format, "account")


@do_tool
async def digitalocean_list_regions(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List datacenter regions and their availability."""
    result = await get_client().list_regions(**page_params(per_page, page))
    return format_response(result, format, "regions")


@do_tool
async def digitalocean_list_sizes(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List droplet sizes and prices."""
    result = await get_client().list_sizes(**page_params(per_page, page))
    return format_response(result, format, "sizes")


@do_tool
async def digitalocean_list_actions(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List actions performed on the account's resources."""
    result = await get_client().list_actions(**page_params(per_page, page))
    return format_response(result, format, "actions")


@do_tool
async def digitalocean_get_action(
    action_id: Annotated[int, Field(description="Action ID")], format: Format = "json"
) -> CallToolResult:
    """Get the status of an action."""
    action = await get_client().get_action(action_id)
    return format_response(action, format, "actions")


@do_tool
async def digitalocean_get_balance(format: Format = "json") -> CallToolResult:
    """Get the account balance and month-to-date usage."""
    balance = await get_client().get_balance()
    return format_response(balance, format, "balance")


@do_tool
async def digitalocean_list_billing_history(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List billing history entries (invoices, payments, credits)."""
    result = await get_client().list_billing_history(**page_params(per_page, page))
    return format_response(result, format, "billing_history")


@do_tool
async def digitalocean_list_invoices(
    per_page: PerPage = None, page: PageNumber = 1, format: Format = "json"
) -> CallToolResult:
    """List invoices."""
    result = await get_client().list_invoices(**page_params(per_page, page))
    return format_response(result, format, "invoices")


@do_tool
async def digitalocean_get_invoice(invoice_id: InvoiceId, format: Format = "json") -> CallToolResult:
    """Get an invoice."""
    invoice = await get_client().get_invoice(invoice_id)
    return format_response(invoice, format, "invoices")


@do_tool
async def digitalocean_get_invoice_items(
    invoice_id: InvoiceId, format: Format = "json"
) -> CallToolResult:
    """Get the line items of an invoice."""
    items = await get_client().get_invoice_items(invoice_id)
    return format_response(items, format, "invoice_items")


@do_tool
async def digitalocean_get_invoice_csv(invoice_id: InvoiceId) -> CallToolResult:
    """Download an invoice as CSV text."""
    csv_text = await get_client().get_invoice_csv(invoice_id)
    return text_result(csv_text)


@do_tool
async def digitalocean_get_invoice_pdf(invoice_id: InvoiceId) -> CallToolResult:
    """Download an invoice as PDF, returned base64-encoded."""
    pdf = await get_client().get_invoice_pdf(invoice_id)
    return format_response(
        {
            "invoice_id": invoice_id,
            "content_type": "application/pdf",
            "encoding": "base64",
            "size_bytes": len(pdf),
            "data": base64.b64encode(pdf).decode("ascii"),
        }
    )


TOOLS = [
    digitalocean_test_connection,
    digitalocean_get_account,
    digitalocean_list_regions,
    digitalocean_list_sizes,
    digitalocean_list_actions,
    digitalocean_get_action,
    digitalocean_get_balance,
    digitalocean_list_billing_history,
    digitalocean_list_invoices,
    digitalocean_get_invoice,
    digitalocean_get_invoice_items,
    digitalocean_get_invoice_csv,
    digitalocean_get_invoice_pdf,
]
