"""
ConsoleNotifier tests
"""

import io

import pytest

from client.notifier import ConsoleNotifier
from core.types import NotificationKind


class TestConsoleNotifier:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kind,prefix",
        [
            (NotificationKind.CONFIRMED, "[OK]"),
            (NotificationKind.OFFLINE, "[OFFLINE]"),
            (NotificationKind.ERROR, "[ERROR]"),
        ],
    )
    async def test_prefix_per_kind(self, kind: NotificationKind, prefix: str) -> None:
        stream = io.StringIO()
        notifier = ConsoleNotifier(stream)

        result = await notifier.send("Expense added", kind=kind, extra={"expense_id": "1"})

        assert result is True
        assert stream.getvalue() == f"{prefix} Expense added\n"
