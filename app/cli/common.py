"""Shared plumbing for CLI commands.

Commands never talk to ``BillingoClient`` directly: they hand a coroutine to
``call_api``, which checks credentials, shows a spinner, runs the request and
turns any ``BillingoError`` into a one-line message with exit code 1.
"""

from __future__ import annotations

import asyncio
import json
from contextlib import nullcontext
from typing import Any, Awaitable, Callable, Dict, List, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.text import Text

from app.config import ConfigFileError, ConfigStore
from billingo import BillingoApi, BillingoClient, BillingoError, Credentials

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)

PAGE_OPTION_HELP = "Page number"
PER_PAGE_OPTION_HELP = "Results per page"
JSON_OPTION_HELP = "Output as JSON"


class ValidationError(Exception):
    """Invalid user input, rejected before any API call."""


def build_client(credentials: Credentials) -> BillingoClient:
    """Create the client used by every command."""
    return BillingoClient(credentials)


def get_store() -> ConfigStore:
    """Open the config store, exiting with a message if its file is unreadable."""
    store = ConfigStore.from_settings()
    try:
        store.load()
    except ConfigFileError as e:
        fail(str(e))
    return store


# ==================== OUTPUT ====================

def print_success(message: str) -> None:
    console.print(Text.assemble(("✓", "green"), " ", message), soft_wrap=True)


def print_error(message: str) -> None:
    err_console.print(Text.assemble(("✗", "red"), " ", message), soft_wrap=True)


def print_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def fail(message: str) -> NoReturn:
    """Report an error and exit with code 1."""
    print_error(message.splitlines()[0] if message else "Unknown error")
    raise typer.Exit(code=1)


# ==================== INPUT ====================

def parse_data(raw: str) -> Dict[str, Any]:
    """Parse a --data argument into a JSON object.

    Raises:
        ValidationError: Not valid JSON, or not a JSON object
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON for --data: {e.msg}") from e
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON for --data: expected a JSON object")
    return data


def load_data(raw: str) -> Dict[str, Any]:
    """parse_data for commands: exit 1 on invalid input."""
    try:
        return parse_data(raw)
    except ValidationError as e:
        fail(str(e))


def split_emails(raw: str) -> List[str]:
    emails = [email.strip() for email in raw.split(",") if email.strip()]
    if not emails:
        fail("No email addresses provided. Use --emails a@example.com,b@example.com")
    return emails


# ==================== API CALLS ====================

def require_auth(store: ConfigStore) -> None:
    """Exit with a configuration hint when no API key is available."""
    if not store.is_configured():
        print_error("Billingo API key not configured.")
        err_console.print("\nRun the following to configure:")
        err_console.print("  billingohu config set --api-key <key>", style="cyan", highlight=False)
        raise typer.Exit(code=1)


def call_api(message: str, operation: Callable[[BillingoApi], Awaitable[T]]) -> T:
    """Run one API operation with a spinner.

    Args:
        message: Spinner text, e.g. "Fetching partners..."
        operation: Coroutine function receiving a BillingoApi

    Returns:
        Whatever the operation returns
    """
    store = get_store()
    require_auth(store)

    async def _run() -> T:
        async with build_client(store.credentials()) as client:
            spinner = err_console.status(message) if err_console.is_terminal else nullcontext()
            with spinner:
                return await operation(BillingoApi(client))

    try:
        return asyncio.run(_run())
    except BillingoError as e:
        fail(str(e))
