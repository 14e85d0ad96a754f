"""
Health service

Service and store reachability plus liveness metadata.
"""

import logging
import time
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from core.errors import StorageError
from core.ledger.store import ExpenseStore
from core.types import HealthStatus
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)

# Process start (monotonic), for uptime
_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


class HealthService:
    """Health service

    Opens its own read-only connection so an unreachable store is
    reported in the body instead of failing inside a dependency.

    Args:
        settings: application settings
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def check(self) -> tuple[bool, dict[str, Any]]:
        """Probe the store

        Returns:
            (healthy, body)
        """
        timestamp = now_utc()

        try:
            async with SQLiteAdapter(self.settings.db_path, readonly=True) as db:
                count = await ExpenseStore(db).count()
        except StorageError as e:
            return False, self._error_body(timestamp, e)
        except Exception as e:
            # connect() failures surface as driver/OS errors
            logger.error(
                "Database health check failed",
                extra={"error": str(e)},
                exc_info=True,
            )
            return False, self._error_body(timestamp, e)

        return True, {
            "status": HealthStatus.OK.value,
            "message": "Server and database are running",
            "timestamp": timestamp,
            "port": self.settings.web_port,
            "database": "connected",
            "expenses_count": count,
            "uptime": uptime_seconds(),
        }

    @staticmethod
    def _error_body(timestamp: Any, error: Exception) -> dict[str, Any]:
        return {
            "status": HealthStatus.ERROR.value,
            "message": "Database error",
            "timestamp": timestamp.isoformat(),
            "error": str(error),
        }
