"""`billingohu currencies` commands."""

from __future__ import annotations

import typer

from app.cli.common import JSON_OPTION_HELP, call_api, console, print_json

app = typer.Typer(no_args_is_help=True, help="Currency conversion rates.")

RATE_KEYS = ("conversation_rate", "conversion_rate", "rate")


@app.command("convert")
def convert(
    from_currency: str = typer.Option(..., "--from", help="Source currency (e.g. HUF)"),
    to_currency: str = typer.Option(..., "--to", help="Target currency (e.g. EUR)"),
    as_json: bool = typer.Option(False, "--json", help=JSON_OPTION_HELP),
) -> None:
    """Look up the conversion rate between two currencies."""
    result = call_api(
        "Fetching conversion rate...",
        lambda api: api.currencies.conversion_rate(from_currency, to_currency),
    )

    if as_json or not isinstance(result, dict):
        print_json(result)
        return

    # Billingo spells it "conversation_rate"
    rate = next((result[key] for key in RATE_KEYS if key in result), None)
    if rate is None:
        print_json(result)
        return
    console.print(
        f"1 {from_currency.upper()} = {rate} {to_currency.upper()}", highlight=False
    )
