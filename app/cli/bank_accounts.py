"""`billingohu bank-accounts` commands."""

from __future__ import annotations

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

app = typer.Typer(no_args_is_help=True, help="Manage bank accounts.")

COLUMNS = [
    Column("id", "ID"),
    Column("name", "Name"),
    Column("account_number", "Account Number"),
    Column("iban", "IBAN"),
    Column("swift", "SWIFT"),
    Column("currency", "Currency"),
]


@app.command("list")
def list_bank_accounts(
    page: int = typer.Option(1, "--page", min=1, help=PAGE_OPTION_HELP),
    per_page: int = typer.Option(DEFAULT_PER_PAGE, "--per-page", min=1, help=PER_PAGE_OPTION_HELP),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """List bank accounts."""
    accounts = call_api(
        "Fetching bank accounts...",
        lambda api: api.bank_accounts.list(page=page, per_page=per_page),
    )

    if as_json:
        print_json(accounts)
        return
    print_table(console, accounts, COLUMNS)


@app.command("get")
def get_bank_account(
    account_id: str = typer.Argument(..., metavar="ID"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Get a specific bank account."""
    account = call_api("Fetching bank account...", lambda api: api.bank_accounts.get(account_id))
    if not account:
        fail("Bank account not found")

    if as_json:
        print_json(account)
        return

    print_details(console, "Bank Account Details", [
        ("ID", account.get("id")),
        ("Name", account.get("name")),
        ("Account Number", account.get("account_number")),
        ("IBAN", account.get("iban")),
        ("SWIFT", account.get("swift")),
        ("Currency", account.get("currency")),
    ])


@app.command("create")
def create_bank_account(
    data: str = typer.Option(..., "--data", help="Bank account data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Create a new bank account."""
    payload = load_data(data)
    account = call_api(
        "Creating bank account...", lambda api: api.bank_accounts.create(payload)
    ) or {}

    if as_json:
        print_json(account)
        return
    print_success(f"Bank account created: {account.get('name')}")
    console.print(f"ID: {account.get('id')}", highlight=False)


@app.command("update")
def update_bank_account(
    account_id: str = typer.Argument(..., metavar="ID"),
    data: str = typer.Option(..., "--data", help="Bank account data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Update a bank account."""
    payload = load_data(data)
    account = call_api(
        "Updating bank account...", lambda api: api.bank_accounts.update(account_id, payload)
    ) or {}

    if as_json:
        print_json(account)
        return
    print_success(f"Bank account updated: {account.get('name', account_id)}")


@app.command("delete")
def delete_bank_account(account_id: str = typer.Argument(..., metavar="ID")) -> None:
    """Delete a bank account."""
    call_api("Deleting bank account...", lambda api: api.bank_accounts.delete(account_id))
    print_success("Bank account deleted")
