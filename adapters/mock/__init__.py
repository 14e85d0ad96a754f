"""
Mock adapters

Protocol-conforming test doubles, interchangeable with the real adapters.
"""

from adapters.mock.ledger_api import MockLedgerApi, MockLedgerState
from adapters.mock.notifier import MockNotifier, NotificationRecord

__all__ = [
    "MockLedgerApi",
    "MockLedgerState",
    "MockNotifier",
    "NotificationRecord",
]
