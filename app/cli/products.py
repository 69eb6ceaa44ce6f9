"""`billingohu products` commands."""

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

app = typer.Typer(no_args_is_help=True, help="Manage products.")

COLUMNS = [
    Column("id", "ID"),
    Column("name", "Name"),
    Column("net_unit_price", "Net Price"),
    Column("gross_unit_price", "Gross Price"),
    Column("currency", "Currency"),
    Column("vat", "VAT"),
]


@app.command("list")
def list_products(
    page: int = typer.Option(1, "--page", min=1, help=PAGE_OPTION_HELP),
    per_page: int = typer.Option(DEFAULT_PER_PAGE, "--per-page", min=1, help=PER_PAGE_OPTION_HELP),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """List products."""
    products = call_api(
        "Fetching products...", lambda api: api.products.list(page=page, per_page=per_page)
    )

    if as_json:
        print_json(products)
        return
    print_table(console, products, COLUMNS)


@app.command("get")
def get_product(
    product_id: str = typer.Argument(..., metavar="ID"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Get a specific product."""
    product = call_api("Fetching product...", lambda api: api.products.get(product_id))
    if not product:
        fail("Product not found")

    if as_json:
        print_json(product)
        return

    print_details(console, "Product Details", [
        ("ID", product.get("id")),
        ("Name", product.get("name")),
        ("Net Price", product.get("net_unit_price")),
        ("Gross Price", product.get("gross_unit_price")),
        ("Currency", product.get("currency")),
        ("VAT", product.get("vat")),
    ])


@app.command("create")
def create_product(
    data: str = typer.Option(..., "--data", help="Product data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Create a new product."""
    payload = load_data(data)
    product = call_api("Creating product...", lambda api: api.products.create(payload)) or {}

    if as_json:
        print_json(product)
        return
    print_success(f"Product created: {product.get('name')}")
    console.print(f"ID: {product.get('id')}", highlight=False)


@app.command("update")
def update_product(
    product_id: str = typer.Argument(..., metavar="ID"),
    data: str = typer.Option(..., "--data", help="Product data as JSON"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Update a product."""
    payload = load_data(data)
    product = call_api(
        "Updating product...", lambda api: api.products.update(product_id, payload)
    ) or {}

    if as_json:
        print_json(product)
        return
    print_success(f"Product updated: {product.get('name', product_id)}")


@app.command("delete")
def delete_product(product_id: str = typer.Argument(..., metavar="ID")) -> None:
    """Delete a product."""
    call_api("Deleting product...", lambda api: api.products.delete(product_id))
    print_success("Product deleted")
