"""
Adapter layer

Integration with external services (Ledger REST API, SQLite, local cache).
Protocol-based interfaces so mocks can replace them.
"""

from adapters.interfaces import ILedgerApi, INotifier

__all__ = [
    "ILedgerApi",
    "INotifier",
]
