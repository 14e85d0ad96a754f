"""
Expense id generation

Ids are millisecond epoch timestamps rendered as strings.
Strictly increasing within a process even when two ids are
requested in the same millisecond.
"""

import threading
import time
from typing import Callable


class MonotonicIdGenerator:
    """Time-based, strictly increasing id generator

    Args:
        clock: returns the current time in milliseconds (injectable for tests)

    Example:
        >>> gen = MonotonicIdGenerator(clock=lambda: 1700000000000)
        >>> gen.next_id(), gen.next_id()
        ('1700000000000', '1700000000001')
    """

    def __init__(self, clock: Callable[[], int] | None = None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last: int = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """Issue the next id"""
        with self._lock:
            candidate = self._clock()
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)

    def observe(self, expense_id: str) -> None:
        """Never issue an id at or below an id seen elsewhere

        Non-numeric ids are ignored.
        """
        try:
            value = int(expense_id)
        except (TypeError, ValueError):
            return
        with self._lock:
            if value > self._last:
                self._last = value


# Process-wide generator shared by the service and the offline client path
_default_generator = MonotonicIdGenerator()


def new_expense_id() -> str:
    """Issue an id from the process-wide generator"""
    return _default_generator.next_id()


def get_id_generator() -> MonotonicIdGenerator:
    """Process-wide generator"""
    return _default_generator
