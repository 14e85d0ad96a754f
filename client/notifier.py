"""
Console notifier

INotifier implementation for the CLI: prints one line per notification,
prefixed by its kind, and logs it.
"""

import logging
import sys
from typing import Any, TextIO

from core.types import NotificationKind

logger = logging.getLogger(__name__)

PREFIXES: dict[NotificationKind, str] = {
    NotificationKind.CONFIRMED: "[OK]",
    NotificationKind.OFFLINE: "[OFFLINE]",
    NotificationKind.ERROR: "[ERROR]",
}


class ConsoleNotifier:
    """Prints notifications to a text stream

    Args:
        stream: output stream (default stdout)
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    async def send(
        self,
        message: str,
        kind: NotificationKind = NotificationKind.CONFIRMED,
        extra: dict[str, Any] | None = None,
    ) -> bool:
        level = logging.INFO if kind == NotificationKind.CONFIRMED else logging.WARNING
        logger.log(level, message, extra={"kind": kind.value, **(extra or {})})

        print(f"{PREFIXES[kind]} {message}", file=self.stream)
        return True
