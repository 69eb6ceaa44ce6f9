"""`billingohu documents` commands."""

from __future__ import annotations

import json
from pathlib import Path
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
    split_emails,
)
from app.cli.ui_components import Column, nested_name, print_details, print_table
from billingo import DEFAULT_PER_PAGE

app = typer.Typer(no_args_is_help=True, help="Manage documents (invoices).")

COLUMNS = [
    Column("id", "ID"),
    Column("invoice_number", "Number"),
    Column("type", "Type"),
    Column("partner", "Partner", nested_name),
    Column("gross_total", "Total"),
    Column("currency", "Currency"),
    Column("fulfillment_date", "Date"),
]


async def _collect(documents, per_page, **filters):
    return [doc async for doc in documents.iterate(per_page=per_page, **filters)]


@app.command("list")
def list_documents(
    type_: Optional[str] = typer.Option(None, "--type", help="Filter by type (invoice, proforma, etc.)"),
    status: Optional[str] = typer.Option(None, "--status", help="Filter by status"),
    page: int = typer.Option(1, "--page", min=1, help=PAGE_OPTION_HELP),
    per_page: int = typer.Option(DEFAULT_PER_PAGE, "--per-page", min=1, help=PER_PAGE_OPTION_HELP),
    all_pages: bool = typer.Option(False, "--all", help="Fetch every page"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """List documents."""
    if all_pages:
        documents = call_api(
            "Fetching documents...",
            lambda api: _collect(api.documents, per_page, type=type_, status=status),
        )
    else:
        documents = call_api(
            "Fetching documents...",
            lambda api: api.documents.list(page=page, per_page=per_page, type=type_, status=status),
        )

    if as_json:
        print_json(documents)
        return
    print_table(console, documents, COLUMNS)


@app.command("get")
def get_document(
    document_id: str = typer.Argument(..., metavar="ID"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Get a specific document."""
    document = call_api("Fetching document...", lambda api: api.documents.get(document_id))
    if not document:
        fail("Document not found")

    if as_json:
        print_json(document)
        return

    partner = document.get("partner") or {}
    print_details(console, "Document Details", [
        ("ID", document.get("id")),
        ("Number", document.get("invoice_number")),
        ("Type", document.get("type")),
        ("Partner", partner.get("name") if isinstance(partner, dict) else None),
        ("Currency", document.get("currency")),
        ("Net Total", document.get("net_total")),
        ("Gross Total", document.get("gross_total")),
        ("Date", document.get("fulfillment_date")),
    ])


@app.command("create")
def create_document(
    data: str = typer.Option(..., "--data", help="Document data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Create a new document."""
    payload = load_data(data)
    document = call_api("Creating document...", lambda api: api.documents.create(payload)) or {}

    if as_json:
        print_json(document)
        return

    print_success(f"Document created: {document.get('id')}")
    console.print(f"Number:  {document.get('invoice_number') or 'N/A'}", highlight=False)
    console.print(f"Total:   {document.get('gross_total')} {document.get('currency')}", highlight=False)


@app.command("update")
def update_document(
    document_id: str = typer.Argument(..., metavar="ID"),
    data: str = typer.Option(..., "--data", help="Document data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Update a document."""
    payload = load_data(data)
    document = call_api(
        "Updating document...", lambda api: api.documents.update(document_id, payload)
    ) or {}

    if as_json:
        print_json(document)
        return
    print_success(f"Document updated: {document.get('id', document_id)}")


@app.command("delete")
def delete_document(document_id: str = typer.Argument(..., metavar="ID")) -> None:
    """Delete a document."""
    call_api("Deleting document...", lambda api: api.documents.delete(document_id))
    print_success("Document deleted")


@app.command("download")
def download_document(
    document_id: str = typer.Argument(..., metavar="ID"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="File to write the PDF to"),
) -> None:
    """Download document PDF."""
    payload = call_api("Downloading document...", lambda api: api.documents.download(document_id))

    if isinstance(payload, bytes):
        target = output or Path(f"document-{document_id}.pdf")
        try:
            target.write_bytes(payload)
        except OSError as e:
            fail(f"Cannot write {target}: {e.strerror}")
        print_success(f"Document downloaded to {target}")
        return

    if output is not None:
        try:
            output.write_text(json.dumps(payload, indent=2, ensure_ascii=False))
        except OSError as e:
            fail(f"Cannot write {output}: {e.strerror}")
        print_success(f"Document data written to {output}")
        return

    print_success("Document downloaded (data returned)")
    print_json(payload)


@app.command("send")
def send_document(
    document_id: str = typer.Argument(..., metavar="ID"),
    emails: str = typer.Option(..., "--emails", help="Comma-separated email addresses"),
) -> None:
    """Send document via email."""
    recipients = split_emails(emails)
    call_api("Sending document...", lambda api: api.documents.send(document_id, recipients))
    print_success(f"Document sent to: {', '.join(recipients)}")
