"""
Snapshot cache

Local persistence for the client's ledger: one JSON file holding the
records under a single snapshot key (default "firma-expenses") and the
ids of offline-pending records under "<key>:pending".

The cache is never the source of truth; the service is authoritative
whenever it is reachable.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from core.constants import Defaults
from core.ledger.types import Expense

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Cached ledger state"""

    expenses: list[Expense]
    pending_ids: frozenset[str] = field(default_factory=frozenset)


class SnapshotCache:
    """JSON file snapshot cache

    Args:
        path: cache file path
        key: snapshot key inside the file

    Usage:
    ```python
    cache = SnapshotCache(path)
    cache.save(expenses, pending_ids={"1700000000000"})
    snapshot = cache.load()
    ```
    """

    def __init__(self, path: Path | str, key: str = Defaults.CACHE_KEY):
        self.path = Path(path)
        self.key = key

    @property
    def pending_key(self) -> str:
        return f"{self.key}:pending"

    def _read_file(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(
                "Snapshot cache unreadable",
                extra={"path": str(self.path), "error": str(e)},
            )
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> Snapshot | None:
        """Load the cached snapshot

        Returns:
            Snapshot, or None when nothing usable is cached
        """
        data = self._read_file()
        records = data.get(self.key)
        if not isinstance(records, list):
            return None

        expenses: list[Expense] = []
        for record in records:
            try:
                expenses.append(Expense.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Skipping malformed cached expense",
                    extra={"record": record, "error": str(e)},
                )

        pending = data.get(self.pending_key) or []
        known_ids = {e.id for e in expenses}
        pending_ids = frozenset(str(i) for i in pending if str(i) in known_ids)

        logger.info(
            f"Loaded {len(expenses)} expenses from snapshot cache",
            extra={"path": str(self.path), "pending": len(pending_ids)},
        )
        return Snapshot(expenses=expenses, pending_ids=pending_ids)

    def _write_file(self, data: dict[str, Any]) -> bool:
        """Atomic replace via a sibling temp file"""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(data, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(
                "Snapshot cache write failed",
                extra={"path": str(self.path), "error": str(e)},
            )
            return False

        return True

    def save(self, expenses: Iterable[Expense], pending_ids: Iterable[str] = ()) -> bool:
        """Write the snapshot (atomic replace)

        Other keys in the file are preserved.

        Returns:
            True on success, False when the file could not be written
        """
        data = self._read_file()
        data[self.key] = [e.to_dict() for e in expenses]
        data[self.pending_key] = sorted(set(pending_ids))
        return self._write_file(data)

    def clear(self) -> bool:
        """Drop this snapshot key (other keys stay)

        Returns:
            True when nothing is left to drop
        """
        data = self._read_file()
        if self.key not in data and self.pending_key not in data:
            return True
        data.pop(self.key, None)
        data.pop(self.pending_key, None)
        return self._write_file(data)
