"""`billingohu partners` commands."""

from __future__ import annotations

from typing import Optional

import typer

from app.cli.common import (
    JSON_OPTION_HELP,
    PAGE_OPTION_HELP,
    PER_PAGE_OPTION_HELP,
    call_api,
    console,
    fail,
    load_data,
    print_json,
    print_success,
)
from app.cli.ui_components import Column, print_details, print_table
from billingo import DEFAULT_PER_PAGE

app = typer.Typer(no_args_is_help=True, help="Manage partners (clients).")

COLUMNS = [
    Column("id", "ID"),
    Column("name", "Name"),
    Column("email", "Email"),
    Column("taxcode", "Tax Code"),
    Column("iban", "IBAN"),
]


async def _collect(partners, per_page, query):
    return [partner async for partner in partners.iterate(per_page=per_page, query=query)]


@app.command("list")
def list_partners(
    query: Optional[str] = typer.Option(None, "--query", help="Search query"),
    page: int = typer.Option(1, "--page", min=1, help=PAGE_OPTION_HELP),
    per_page: int = typer.Option(DEFAULT_PER_PAGE, "--per-page", min=1, help=PER_PAGE_OPTION_HELP),
    all_pages: bool = typer.Option(False, "--all", help="Fetch every page"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """List partners."""
    if all_pages:
        partners = call_api("Fetching partners...", lambda api: _collect(api.partners, per_page, query))
    else:
        partners = call_api(
            "Fetching partners...",
            lambda api: api.partners.list(page=page, per_page=per_page, query=query),
        )

    if as_json:
        print_json(partners)
        return
    print_table(console, partners, COLUMNS)


@app.command("get")
def get_partner(
    partner_id: str = typer.Argument(..., metavar="ID"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Get a specific partner."""
    partner = call_api("Fetching partner...", lambda api: api.partners.get(partner_id))
    if not partner:
        fail("Partner not found")

    if as_json:
        print_json(partner)
        return

    address = partner.get("address") or {}
    print_details(console, "Partner Details", [
        ("ID", partner.get("id")),
        ("Name", partner.get("name")),
        ("Email", partner.get("email")),
        ("Tax Code", partner.get("taxcode")),
        ("IBAN", partner.get("iban")),
        ("Address", address.get("address") if isinstance(address, dict) else address),
    ])


@app.command("create")
def create_partner(
    data: str = typer.Option(..., "--data", help="Partner data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Create a new partner."""
    payload = load_data(data)
    partner = call_api("Creating partner...", lambda api: api.partners.create(payload)) or {}

    if as_json:
        print_json(partner)
        return
    print_success(f"Partner created: {partner.get('name')}")
    console.print(f"ID: {partner.get('id')}", highlight=False)


@app.command("update")
def update_partner(
    partner_id: str = typer.Argument(..., metavar="ID"),
    data: str = typer.Option(..., "--data", help="Partner data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Update a partner."""
    payload = load_data(data)
    partner = call_api(
        "Updating partner...", lambda api: api.partners.update(partner_id, payload)
    ) or {}

    if as_json:
        print_json(partner)
        return
    print_success(f"Partner updated: {partner.get('name', partner_id)}")


@app.command("delete")
def delete_partner(partner_id: str = typer.Argument(..., metavar="ID")) -> None:
    """Delete a partner."""
    call_api("Deleting partner...", lambda api: api.partners.delete(partner_id))
    print_success("Partner deleted")
