"""
Client package

Client-side ledger state with offline fallback, connectivity probe and
a text front end (python -m client).
"""

from client.notifier import ConsoleNotifier
from client.probe import ConnectivityProbe
from client.state import ExpenseStateManager

__all__ = [
    "ConsoleNotifier",
    "ConnectivityProbe",
    "ExpenseStateManager",
]
