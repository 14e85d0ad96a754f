"""
Expense service

Ledger Service operations: list, create, delete.
No update operation exists.
"""

import logging
from typing import Any, Mapping

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.store import ExpenseStore
from core.ledger.types import Expense, ExpenseDraft
from core.utils.ids import MonotonicIdGenerator, get_id_generator
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


class ExpenseService:
    """Expense service

    Args:
        db: SQLite adapter (writable for create/delete)
        partners: the two valid partner names
        id_generator: id source (default: process-wide generator)
    """

    def __init__(
        self,
        db: SQLiteAdapter,
        partners: tuple[str, str],
        id_generator: MonotonicIdGenerator | None = None,
    ):
        self.store = ExpenseStore(db)
        self.partners = partners
        self.id_generator = id_generator or get_id_generator()

    async def list_expenses(self) -> list[Expense]:
        """All expenses, date descending

        Raises:
            StorageError: store unreachable
        """
        expenses = await self.store.list_all()
        logger.info(f"{len(expenses)} expenses found")
        return expenses

    async def create_expense(self, fields: Mapping[str, Any]) -> Expense:
        """Validate and persist a new expense

        Args:
            fields: partner, description, amount, date, category

        Returns:
            stored Expense incl. id and created_at

        Raises:
            ValidationError: missing/invalid field (nothing persisted)
            StorageError: write failed
        """
        draft = ExpenseDraft.parse(fields, self.partners)

        expense = Expense.from_draft(
            draft,
            expense_id=self.id_generator.next_id(),
            created_at=now_utc(),
        )
        return await self.store.insert(expense)

    async def delete_expense(self, expense_id: str) -> None:
        """Delete by id

        Raises:
            NotFoundError: no expense with this id
            StorageError: write failed
        """
        await self.store.delete(expense_id)
