"""
Local snapshot cache

JSON file mirror of the client's ledger.
"""

from adapters.cache.snapshot_cache import Snapshot, SnapshotCache

__all__ = [
    "Snapshot",
    "SnapshotCache",
]
