"""
Utility package

Expense id generation and timezone handling
"""

from core.utils.ids import MonotonicIdGenerator, get_id_generator, new_expense_id
from core.utils.timezone import ensure_utc, now_utc, parse_utc

__all__ = [
    "MonotonicIdGenerator",
    "get_id_generator",
    "new_expense_id",
    "ensure_utc",
    "now_utc",
    "parse_utc",
]
