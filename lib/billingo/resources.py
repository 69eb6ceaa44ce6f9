"""Resource facade over ``BillingoClient``.

Each resource object shapes parameters into ``send`` calls and unwraps the
``{"data": ...}`` envelope. Records are plain dicts; their fields are defined
by the remote API and are never validated here.

Usage:
    async with BillingoClient(credentials) as client:
        api = BillingoApi(client)
        partners = await api.partners.list(query="acme")
        invoice = await api.documents.get(1234)
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Dict, List, Optional, Union

from .client import BillingoClient

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 25

ResourceId = Union[int, str]
Record = Dict[str, Any]


def unwrap_list(envelope: Any) -> List[Record]:
    """Return the envelope's ``data`` sequence, or [] when absent."""
    data = envelope.get("data") if isinstance(envelope, dict) else None
    if data is None:
        return []
    if isinstance(data, list):
        return data
    return [data]


def unwrap_one(envelope: Any) -> Optional[Record]:
    """Return the envelope's ``data`` object, or None when absent."""
    if not isinstance(envelope, dict):
        return None
    return envelope.get("data")


class Resource:
    """Generic list/get/create/update/delete over one collection path."""

    path = ""

    def __init__(self, client: BillingoClient) -> None:
        self._client = client

    def item_path(self, resource_id: ResourceId) -> str:
        return f"{self.path}/{resource_id}"

    async def _list(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        filters: Optional[Dict[str, Any]] = None,
    ) -> Any:
        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        # Empty filters are not sent at all
        for key, value in (filters or {}).items():
            if value not in (None, ""):
                params[key] = value
        return await self._client.send("GET", self.path, params=params)

    async def list(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        **filters: Any,
    ) -> List[Record]:
        """List one page of records. Never fails on an empty result."""
        return unwrap_list(await self._list(page, per_page, filters))

    async def iterate(
        self,
        per_page: int = DEFAULT_PER_PAGE,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> AsyncIterator[Record]:
        """Iterate through every page of the collection.

        Pages are fetched one at a time. Stops at ``last_page`` when the
        envelope reports it, otherwise at the first short page.

        Args:
            per_page: Page size requested from the API
            limit: Maximum records to yield (None for all)
            **filters: Resource-specific query filters

        Yields:
            Individual records
        """
        page = DEFAULT_PAGE
        count = 0

        while limit is None or count < limit:
            envelope = await self._list(page, per_page, filters)
            items = unwrap_list(envelope)

            for item in items:
                if limit is not None and count >= limit:
                    return
                yield item
                count += 1

            last_page = envelope.get("last_page") if isinstance(envelope, dict) else None
            if last_page is not None:
                if page >= int(last_page):
                    break
            elif len(items) < per_page:
                break

            page += 1
            logger.debug(f"Fetching {self.path} page {page}")

    async def get(self, resource_id: ResourceId) -> Optional[Record]:
        """Get a single record. Returns None when the envelope has no data."""
        return unwrap_one(await self._client.send("GET", self.item_path(resource_id)))

    async def create(self, payload: Record) -> Optional[Record]:
        """Create a record and return it as stored by the API."""
        return unwrap_one(await self._client.send("POST", self.path, body=payload))

    async def update(self, resource_id: ResourceId, payload: Record) -> Optional[Record]:
        """Update a record and return it as stored by the API."""
        return unwrap_one(
            await self._client.send("PUT", self.item_path(resource_id), body=payload)
        )

    async def delete(self, resource_id: ResourceId) -> bool:
        """Delete a record. The response body is ignored."""
        await self._client.send("DELETE", self.item_path(resource_id))
        return True


# ==================== RESOURCES ====================

class Documents(Resource):
    """Invoices, receipts, proformas and other documents."""

    path = "/documents"

    # Document types accepted by the ``type`` filter
    DOCUMENT_TYPES = [
        "advance", "cancellation", "draft", "invoice",
        "modification", "proforma", "dossier", "receipt",
    ]

    async def list(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        type: Optional[str] = None,
        status: Optional[str] = None,
        **filters: Any,
    ) -> List[Record]:
        """List documents.

        Args:
            page: Page number
            per_page: Results per page
            type: Filter by document type (invoice, proforma, etc.)
            status: Filter by payment status
        """
        return await super().list(page, per_page, type=type, status=status, **filters)

    async def download(self, document_id: ResourceId) -> Union[bytes, Dict[str, Any]]:
        """Download a document.

        Returns:
            Raw PDF bytes, or the JSON body when the API answers with JSON
        """
        return await self._client.send("GET", f"{self.item_path(document_id)}/download")

    async def send(self, document_id: ResourceId, emails: List[str]) -> Any:
        """Send a document by email.

        Args:
            document_id: Document ID
            emails: Recipient email addresses
        """
        return await self._client.send(
            "POST", f"{self.item_path(document_id)}/send", body={"emails": list(emails)}
        )


class Partners(Resource):
    """Partners (clients)."""

    path = "/partners"

    async def list(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        query: Optional[str] = None,
        **filters: Any,
    ) -> List[Record]:
        """List partners, optionally filtered by a free-text query."""
        return await super().list(page, per_page, query=query, **filters)


class Products(Resource):
    path = "/products"


class BankAccounts(Resource):
    path = "/bank-accounts"


class DocumentBlocks(Resource):
    """Document blocks (invoice pads)."""

    path = "/document-blocks"


class Currencies:
    """Currency conversion lookup."""

    path = "/currencies"

    def __init__(self, client: BillingoClient) -> None:
        self._client = client

    async def conversion_rate(self, from_currency: str, to_currency: str) -> Any:
        """Get the conversion rate between two currencies.

        Returns:
            The API response as-is (e.g. {"conversation_rate": 0.0025, ...})
        """
        return await self._client.send(
            "GET",
            self.path,
            params={"from": from_currency.upper(), "to": to_currency.upper()},
        )


class BillingoApi:
    """Entry point grouping every resource around one client."""

    def __init__(self, client: BillingoClient) -> None:
        self.client = client
        self.documents = Documents(client)
        self.partners = Partners(client)
        self.products = Products(client)
        self.bank_accounts = BankAccounts(client)
        self.document_blocks = DocumentBlocks(client)
        self.currencies = Currencies(client)
