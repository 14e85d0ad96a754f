"""
Expense ledger

Expense model, SQLite-backed store and the balance engine.

Usage:
```python
from core.ledger import ExpenseStore, ExpenseDraft, summarize

store = ExpenseStore(db)
expenses = await store.list_all()
summary = summarize(expenses, ("Sebi", "Alex"))
```
"""

from core.ledger.balance import (
    SETTLED_TOLERANCE,
    BalanceSummary,
    Settlement,
    average,
    balance_for,
    categories_of,
    count_for,
    difference,
    filter_records,
    grand_total,
    settle,
    summarize,
    total_for,
)
from core.ledger.store import ExpenseStore
from core.ledger.types import DRAFT_FIELDS, Expense, ExpenseDraft

__all__ = [
    # Model
    "Expense",
    "ExpenseDraft",
    "DRAFT_FIELDS",
    # Store
    "ExpenseStore",
    # Balance engine
    "SETTLED_TOLERANCE",
    "BalanceSummary",
    "Settlement",
    "total_for",
    "count_for",
    "grand_total",
    "average",
    "balance_for",
    "difference",
    "settle",
    "summarize",
    "filter_records",
    "categories_of",
]
