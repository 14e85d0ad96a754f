"""
Adapter interfaces

Protocol-based so implementations can be injected and replaced by mocks.
"""

from typing import Any, Protocol, runtime_checkable

from core.ledger.types import Expense, ExpenseDraft
from core.types import NotificationKind


@runtime_checkable
class ILedgerApi(Protocol):
    """Ledger Service client interface

    Errors follow core.errors: ConnectivityError when the service cannot
    be reached, ValidationError/NotFoundError/StorageError for error
    responses.
    """

    async def list_expenses(self) -> list[Expense]:
        """All expenses, date descending"""
        ...

    async def create_expense(self, draft: ExpenseDraft) -> Expense:
        """Persist a new expense

        Returns:
            stored record incl. id and created_at
        """
        ...

    async def delete_expense(self, expense_id: str) -> None:
        ...

    async def check_health(self) -> dict[str, Any]:
        ...

    async def test_connection(self) -> bool:
        """True when the service and its store are reachable"""
        ...


@runtime_checkable
class INotifier(Protocol):
    """Notification sink for the presentation layer

    Distinguishes confirmed writes from offline-pending ones.
    """

    async def send(
        self,
        message: str,
        kind: NotificationKind = NotificationKind.CONFIRMED,
        extra: dict[str, Any] | None = None,
    ) -> bool:
        """Deliver a notification

        Args:
            message: notification text
            kind: CONFIRMED, OFFLINE or ERROR
            extra: additional data (optional)

        Returns:
            delivery success
        """
        ...
