"""`billingohu document-blocks` commands."""

from __future__ import annotations

import typer

from app.cli.common import (
    JSON_OPTION_HELP,
    PAGE_OPTION_HELP,
    PER_PAGE_OPTION_HELP,
    call_api,
    console,
    fail,
    print_json,
)
from app.cli.ui_components import Column, print_details, print_table
from billingo import DEFAULT_PER_PAGE

app = typer.Typer(no_args_is_help=True, help="Manage document blocks (invoice pads).")

COLUMNS = [
    Column("id", "ID"),
    Column("name", "Name"),
    Column("prefix", "Prefix"),
    Column("type", "Type"),
]


@app.command("list")
def list_document_blocks(
    page: int = typer.Option(1, "--page", min=1, help=PAGE_OPTION_HELP),
    per_page: int = typer.Option(DEFAULT_PER_PAGE, "--per-page", min=1, help=PER_PAGE_OPTION_HELP),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """List document blocks."""
    blocks = call_api(
        "Fetching document blocks...",
        lambda api: api.document_blocks.list(page=page, per_page=per_page),
    )

    if as_json:
        print_json(blocks)
        return
    print_table(console, blocks, COLUMNS)


@app.command("get")
def get_document_block(
    block_id: str = typer.Argument(..., metavar="ID"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Get a specific document block."""
    block = call_api("Fetching document block...", lambda api: api.document_blocks.get(block_id))
    if not block:
        fail("Document block not found")

    if as_json:
        print_json(block)
        return

    print_details(console, "Document Block Details", [
        ("ID", block.get("id")),
        ("Name", block.get("name")),
        ("Prefix", block.get("prefix")),
        ("Type", block.get("type")),
    ])
