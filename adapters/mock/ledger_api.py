"""
Mock Ledger API

In-memory ILedgerApi implementation with a switch to simulate an
unreachable service.
"""

from dataclasses import dataclass, field
from typing import Any

from core.errors import ConnectivityError, NotFoundError, StorageError
from core.ledger.types import Expense, ExpenseDraft
from core.utils.ids import MonotonicIdGenerator
from core.utils.timezone import now_utc


@dataclass
class MockLedgerState:
    """Mock state (kept in memory, insertion order)"""

    expenses: list[Expense] = field(default_factory=list)

    # Simulation options
    offline: bool = False
    storage_failure: bool = False

    # Call log (method names)
    calls: list[str] = field(default_factory=list)


class MockLedgerApi:
    """Mock Ledger API

    Usage:
    ```python
    api = MockLedgerApi()
    stored = await api.create_expense(draft)

    api.go_offline()
    await api.list_expenses()  # raises ConnectivityError
    ```
    """

    def __init__(self, state: MockLedgerState | None = None):
        self.state = state or MockLedgerState()
        self._ids = MonotonicIdGenerator()

    def _check(self, method: str) -> None:
        self.state.calls.append(method)
        if self.state.offline:
            raise ConnectivityError("Mock ledger service is offline")
        if self.state.storage_failure:
            raise StorageError("Mock storage failure")

    async def list_expenses(self) -> list[Expense]:
        self._check("list_expenses")
        # stable sort keeps insertion order for equal dates
        return sorted(self.state.expenses, key=lambda e: e.date, reverse=True)

    async def create_expense(self, draft: ExpenseDraft) -> Expense:
        self._check("create_expense")
        expense = Expense.from_draft(draft, self._ids.next_id(), now_utc())
        self.state.expenses.append(expense)
        return expense

    async def delete_expense(self, expense_id: str) -> None:
        self._check("delete_expense")
        for i, expense in enumerate(self.state.expenses):
            if expense.id == expense_id:
                del self.state.expenses[i]
                return
        raise NotFoundError(expense_id)

    async def check_health(self) -> dict[str, Any]:
        self._check("check_health")
        return {
            "status": "OK",
            "message": "Mock service",
            "expenses_count": len(self.state.expenses),
        }

    async def test_connection(self) -> bool:
        try:
            await self.check_health()
            return True
        except (ConnectivityError, StorageError):
            return False

    # -------------------------------------------------------------------------
    # Test helpers
    # -------------------------------------------------------------------------

    def go_offline(self) -> None:
        self.state.offline = True

    def go_online(self) -> None:
        self.state.offline = False

    def seed(self, *expenses: Expense) -> None:
        self.state.expenses.extend(expenses)
