"""
Mock notifier

Test notifier, INotifier Protocol implementation.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from core.types import NotificationKind


@dataclass
class NotificationRecord:
    """Recorded notification"""

    message: str
    kind: NotificationKind
    extra: dict[str, Any] | None
    timestamp: datetime
    sent: bool


class MockNotifier:
    """Mock notifier

    Records every notification for assertions.

    Usage:
    ```python
    notifier = MockNotifier()

    await notifier.send("Saved", kind=NotificationKind.CONFIRMED)

    assert notifier.last_notification.kind == NotificationKind.CONFIRMED
    ```
    """

    def __init__(self, should_fail: bool = False):
        """
        Args:
            should_fail: every send fails (error scenarios)
        """
        self.should_fail = should_fail
        self.notifications: list[NotificationRecord] = []

    async def send(
        self,
        message: str,
        kind: NotificationKind = NotificationKind.CONFIRMED,
        extra: dict[str, Any] | None = None,
    ) -> bool:
        record = NotificationRecord(
            message=message,
            kind=kind,
            extra=extra,
            timestamp=datetime.now(timezone.utc),
            sent=not self.should_fail,
        )

        self.notifications.append(record)

        return not self.should_fail

    # -------------------------------------------------------------------------
    # Test helpers
    # -------------------------------------------------------------------------

    def clear(self) -> None:
        self.notifications.clear()

    def get_by_kind(self, kind: NotificationKind) -> list[NotificationRecord]:
        return [n for n in self.notifications if n.kind == kind]

    @property
    def last_notification(self) -> NotificationRecord | None:
        return self.notifications[-1] if self.notifications else None

    @property
    def message_count(self) -> int:
        return len(self.notifications)
