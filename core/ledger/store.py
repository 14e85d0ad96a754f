"""
Expense store

CRUD (minus update) over the expenses table.
Driver errors are converted to StorageError.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator

import aiosqlite

from core.errors import NotFoundError, StorageError
from core.ledger.types import Expense

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)

_COLUMNS = "id, partner, description, amount, date, category, created_at"


def _row_to_expense(row: tuple[Any, ...]) -> Expense:
    return Expense.from_dict({
        "id": row[0],
        "partner": row[1],
        "description": row[2],
        "amount": row[3],
        "date": row[4],
        "category": row[5],
        "created_at": row[6],
    })


class ExpenseStore:
    """Expense store

    Args:
        db: SQLite adapter (writable for insert/delete)
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    @asynccontextmanager
    async def _storage_errors(self, action: str) -> AsyncIterator[None]:
        try:
            yield
        except (aiosqlite.Error, sqlite3.Error, RuntimeError) as e:
            logger.error(
                f"Store {action} failed",
                extra={"error": str(e), "db_path": str(self.db.db_path)},
                exc_info=True,
            )
            raise StorageError(f"Failed to {action} expenses") from e

    async def list_all(self) -> list[Expense]:
        """All expenses, date descending

        Ties keep insertion order (rowid ascending).
        """
        async with self._storage_errors("load"):
            rows = await self.db.fetchall(
                f"SELECT {_COLUMNS} FROM expenses ORDER BY date DESC, rowid ASC"
            )
        return [_row_to_expense(row) for row in rows]

    async def get(self, expense_id: str) -> Expense | None:
        async with self._storage_errors("load"):
            row = await self.db.fetchone(
                f"SELECT {_COLUMNS} FROM expenses WHERE id = ?",
                (expense_id,),
            )
        return _row_to_expense(row) if row else None

    async def count(self) -> int:
        async with self._storage_errors("count"):
            row = await self.db.fetchone("SELECT COUNT(*) FROM expenses")
        return int(row[0]) if row else 0

    async def max_numeric_id(self) -> int | None:
        """Highest purely numeric id (seeds the id generator)"""
        async with self._storage_errors("load"):
            row = await self.db.fetchone(
                "SELECT MAX(CAST(id AS INTEGER)) FROM expenses WHERE id GLOB '[0-9]*'"
            )
        return int(row[0]) if row and row[0] is not None else None

    async def insert(self, expense: Expense) -> Expense:
        """Persist a new expense

        Raises:
            StorageError: write failed (including duplicate id)
        """
        async with self._storage_errors("add"):
            async with self.db.transaction():
                await self.db.execute(
                    f"INSERT INTO expenses ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (
                        expense.id,
                        expense.partner,
                        expense.description,
                        str(expense.amount),
                        expense.date.isoformat(),
                        expense.category,
                        expense.created_at.isoformat(),
                    ),
                )

        logger.info(
            "Expense added",
            extra={"expense_id": expense.id, "partner": expense.partner},
        )
        return expense

    async def delete(self, expense_id: str) -> None:
        """Delete by id

        Raises:
            NotFoundError: zero rows affected
            StorageError: write failed
        """
        async with self._storage_errors("delete"):
            async with self.db.transaction():
                cursor = await self.db.execute(
                    "DELETE FROM expenses WHERE id = ?",
                    (expense_id,),
                )
                deleted = cursor.rowcount

        if deleted == 0:
            logger.warning("Expense not found", extra={"expense_id": expense_id})
            raise NotFoundError(expense_id)

        logger.info("Expense deleted", extra={"expense_id": expense_id})
