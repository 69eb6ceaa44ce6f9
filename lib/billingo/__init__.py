"""Billingo v3 API client library.

Usage:
    from billingo import BillingoApi, BillingoClient, Credentials

    async with BillingoClient(Credentials(api_key="...")) as client:
        api = BillingoApi(client)
        documents = await api.documents.list(type="invoice")
        await api.documents.send(documents[0]["id"], ["billing@example.com"])
"""

from .client import (
    BillingoClient,
    Credentials,
    DEFAULT_BASE_URL,
)
from .errors import (
    BillingoError,
    ConfigurationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitError,
    ApiError,
    NetworkError,
    UnknownError,
)
from .resources import (
    BillingoApi,
    Resource,
    Documents,
    Partners,
    Products,
    BankAccounts,
    DocumentBlocks,
    Currencies,
    DEFAULT_PER_PAGE,
)

__version__ = "1.0.0"

__all__ = [
    "BillingoClient",
    "Credentials",
    "DEFAULT_BASE_URL",
    "BillingoError",
    "ConfigurationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "ApiError",
    "NetworkError",
    "UnknownError",
    "BillingoApi",
    "Resource",
    "Documents",
    "Partners",
    "Products",
    "BankAccounts",
    "DocumentBlocks",
    "Currencies",
    "DEFAULT_PER_PAGE",
]
