"""
Billingo CLI
Hungarian invoicing from your terminal.

Command groups:
- config           - API key and base URL
- documents        - Invoices, proformas, receipts (list/get/create/update/delete/download/send)
- partners         - Clients
- products         - Product catalog
- bank-accounts    - Bank accounts
- document-blocks  - Invoice pads
- currencies       - Conversion rates
"""

from __future__ import annotations

import logging
from typing import Optional

import typer

from app.cli import bank_accounts, currencies, document_blocks, documents, partners, products
from app.cli.common import console, fail, get_store, print_error, print_success
from app.cli.ui_components import print_details
from app.config import CONFIG_KEYS, get_settings
from billingo import Credentials, __version__

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(
    name="billingohu",
    invoke_without_command=True,
    help="Billingo CLI - Hungarian invoicing from your terminal",
)
config_app = typer.Typer(no_args_is_help=True, help="Manage CLI configuration.")


def configure_logging(debug: bool = False) -> None:
    """Configure root logging on stderr."""
    level = logging.DEBUG if debug else getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # httpx logs every request at INFO
    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"billingohu {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Billingo CLI - Hungarian invoicing from your terminal."""
    configure_logging(debug)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# ==================== CONFIG ====================

@config_app.command("set")
def config_set(
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Billingo API key"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL override"),
) -> None:
    """Set API key and/or base URL."""
    if not api_key and not base_url:
        fail("No value provided. Use --api-key <key> or --base-url <url>")

    store = get_store()
    if api_key:
        store.set("apiKey", api_key)
        print_success("API key set")
    if base_url:
        base_url = base_url.rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            fail(f"Invalid base URL: {base_url}. It must start with http:// or https://")
        store.set("baseUrl", base_url)
        print_success(f"Base URL set to {base_url}")


@config_app.command("unset")
def config_unset(key: str = typer.Argument(..., help="apiKey or baseUrl")) -> None:
    """Remove a stored configuration value."""
    if key not in CONFIG_KEYS:
        fail(f"Unknown config key: {key}. Available: {', '.join(CONFIG_KEYS)}")

    if get_store().unset(key):
        print_success(f"{key} removed")
    else:
        print_error(f"{key} was not set")


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    store = get_store()
    api_key = store.get("apiKey")
    print_details(console, "Billingo CLI Configuration", [
        ("API Key", Credentials(api_key=api_key).masked_key if api_key else "not set"),
        ("API Key Source", store.source("apiKey")),
        ("Base URL", store.get("baseUrl")),
        ("Base URL Source", store.source("baseUrl")),
        ("Config File", store.path),
    ])


app.add_typer(config_app, name="config")
app.add_typer(documents.app, name="documents")
app.add_typer(partners.app, name="partners")
app.add_typer(products.app, name="products")
app.add_typer(bank_accounts.app, name="bank-accounts")
app.add_typer(document_blocks.app, name="document-blocks")
app.add_typer(currencies.app, name="currencies")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
