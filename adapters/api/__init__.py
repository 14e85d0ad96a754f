"""
Ledger Service API adapter

Async REST client for the expense endpoints.
"""

from adapters.api.rest_client import LedgerRestClient

__all__ = [
    "LedgerRestClient",
]
