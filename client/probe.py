"""
Connectivity probe

Periodically re-checks the Ledger Service health endpoint and keeps a
boolean connectivity indicator for the presentation layer. Probe
results never touch the ledger state.
"""

import asyncio
import logging
from datetime import datetime, timezone

from adapters.interfaces import ILedgerApi
from core.constants import Defaults

logger = logging.getLogger(__name__)


class ConnectivityProbe:
    """Connectivity probe

    Args:
        api: Ledger Service client
        interval_seconds: seconds between checks

    Usage:
    ```python
    probe = ConnectivityProbe(api, interval_seconds=30)
    probe.start()
    ...
    if probe.is_connected is False:
        show_offline_banner()
    ...
    await probe.stop()
    ```
    """

    def __init__(
        self,
        api: ILedgerApi,
        interval_seconds: float = Defaults.PROBE_INTERVAL_SEC,
    ):
        self.api = api
        self.interval_seconds = interval_seconds

        # None until the first check completes
        self.is_connected: bool | None = None
        self.last_checked: datetime | None = None
        self.check_count: int = 0

        self._is_checking: bool = False
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def check(self) -> bool:
        """Run one connectivity check

        Returns:
            current connectivity (previous value if a check is in flight)
        """
        if self._is_checking:
            return bool(self.is_connected)

        self._is_checking = True
        try:
            connected = await self.api.test_connection()
        except Exception as e:
            logger.warning("Connectivity check failed", extra={"error": str(e)})
            connected = False
        finally:
            self._is_checking = False

        previous = self.is_connected
        self.is_connected = connected
        self.last_checked = datetime.now(timezone.utc)
        self.check_count += 1

        if previous is not connected:
            if connected:
                logger.info("Ledger service connected")
            else:
                logger.warning("Ledger service not reachable")

        return connected

    async def run(self, stop_event: asyncio.Event) -> None:
        """Check, then sleep for the interval, until stop_event is set"""
        logger.info(
            "Connectivity probe started",
            extra={"interval_seconds": self.interval_seconds},
        )

        while not stop_event.is_set():
            await self.check()
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                pass

        logger.info("Connectivity probe stopped")

    def start(self) -> asyncio.Task:
        """Run in a background task (requires a running event loop)"""
        if self.is_running:
            assert self._task is not None
            return self._task

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self.run(self._stop_event))
        return self._task

    async def stop(self) -> None:
        """Stop the background task and wait for it"""
        if self._stop_event is not None:
            self._stop_event.set()
        if self._task is not None:
            await self._task
            self._task = None
