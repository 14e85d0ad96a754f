"""
Client state manager

Holds the in-memory ledger used by the balance engine and the list view,
synchronizes it with the Ledger Service and falls back to the local
snapshot cache when the service is unreachable.

Mutations go to the service first. When the service cannot be reached
(ConnectivityError) or fails to store (StorageError) the mutation is
applied locally only and reported as OFFLINE instead of CONFIRMED.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from adapters.cache.snapshot_cache import SnapshotCache
from adapters.interfaces import ILedgerApi, INotifier
from core.errors import ConnectivityError, NotFoundError, StorageError
from core.ledger.balance import BalanceSummary, categories_of, filter_records, summarize
from core.ledger.types import Expense, ExpenseDraft
from core.types import LoadSource, NotificationKind
from core.utils.ids import MonotonicIdGenerator, get_id_generator
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)

# Failures that degrade a mutation to local-only
OFFLINE_ERRORS = (ConnectivityError, StorageError)


def _ordered(expenses: list[Expense]) -> list[Expense]:
    """Date descending, stable for equal dates"""
    return sorted(expenses, key=lambda e: e.date, reverse=True)


class ExpenseStateManager:
    """Client-side ledger store

    Passed by reference to the presentation layer; synchronization is
    explicit (initialize/sync) rather than tied to a UI lifecycle.

    Args:
        api: Ledger Service client
        cache: local snapshot cache
        notifier: notification sink for the presentation layer
        partners: the two valid partner names
        id_generator: id source for offline-created records
    """

    def __init__(
        self,
        api: ILedgerApi,
        cache: SnapshotCache,
        notifier: INotifier,
        partners: tuple[str, str],
        id_generator: MonotonicIdGenerator | None = None,
    ):
        self.api = api
        self.cache = cache
        self.notifier = notifier
        self.partners = partners
        self.id_generator = id_generator or get_id_generator()

        self._expenses: list[Expense] = []
        self._pending_ids: set[str] = set()
        self.load_source: LoadSource | None = None

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------

    @property
    def expenses(self) -> tuple[Expense, ...]:
        """Current ledger, date descending"""
        return tuple(self._expenses)

    @property
    def pending_ids(self) -> frozenset[str]:
        """Ids of offline-pending records"""
        return frozenset(self._pending_ids)

    def is_pending(self, expense_id: str) -> bool:
        return expense_id in self._pending_ids

    def get(self, expense_id: str) -> Expense | None:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def filtered(self, partner: str | None = None, category: str | None = None) -> list[Expense]:
        """List view restricted by partner and/or category"""
        return filter_records(self._expenses, partner=partner, category=category)

    def categories(self) -> list[str]:
        """Categories present in the ledger (category filter options)"""
        return categories_of(self._expenses)

    def summary(self, partner: str | None = None) -> BalanceSummary:
        """Balance overview over the whole or partner-filtered ledger"""
        return summarize(filter_records(self._expenses, partner=partner), self.partners)

    # -------------------------------------------------------------------------
    # Synchronization
    # -------------------------------------------------------------------------

    async def initialize(self) -> LoadSource:
        """Initial load

        Service first, then the snapshot cache, then empty.

        Returns:
            where the ledger came from
        """
        try:
            remote = await self.api.list_expenses()
        except OFFLINE_ERRORS as e:
            logger.warning(
                "Ledger service unavailable, loading snapshot cache",
                extra={"error": str(e)},
            )
            snapshot = self.cache.load()
            if snapshot is None:
                self._expenses = []
                self._pending_ids = set()
                self.load_source = LoadSource.EMPTY
            else:
                self._expenses = _ordered(snapshot.expenses)
                self._pending_ids = set(snapshot.pending_ids)
                self._observe_ids()
                self.load_source = LoadSource.CACHE
            logger.info(
                f"Ledger initialized from {self.load_source.value}",
                extra={"count": len(self._expenses)},
            )
            return self.load_source

        self._restore_pending()
        self._replace_with_remote(remote)
        self.load_source = LoadSource.REMOTE
        logger.info("Ledger initialized from service", extra={"count": len(self._expenses)})
        return self.load_source

    async def sync(self) -> None:
        """Re-synchronize with the service

        Offline-pending records unknown to the service are kept (still
        pending). On failure the error propagates and state is unchanged.
        """
        remote = await self.api.list_expenses()
        self._replace_with_remote(remote)
        logger.info(
            "Ledger synchronized",
            extra={"count": len(self._expenses), "pending": len(self._pending_ids)},
        )

    def _restore_pending(self) -> None:
        """Carry offline-pending records over from an earlier session"""
        snapshot = self.cache.load()
        if snapshot is None:
            return
        known_ids = {e.id for e in self._expenses}
        for expense in snapshot.expenses:
            if expense.id in snapshot.pending_ids and expense.id not in known_ids:
                self._expenses.append(expense)
                self._pending_ids.add(expense.id)

    def _replace_with_remote(self, remote: list[Expense]) -> None:
        remote_ids = {e.id for e in remote}
        pending = [
            e for e in self._expenses
            if e.id in self._pending_ids and e.id not in remote_ids
        ]
        self._pending_ids = {e.id for e in pending}
        self._expenses = _ordered(list(remote) + pending)
        self._observe_ids()
        self._persist()

    def _observe_ids(self) -> None:
        for expense in self._expenses:
            self.id_generator.observe(expense.id)

    def _persist(self) -> None:
        self.cache.save(self._expenses, self._pending_ids)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def add_expense(self, fields: ExpenseDraft | Mapping[str, Any]) -> Expense:
        """Add an expense

        Args:
            fields: validated draft or raw form fields

        Returns:
            stored record (CONFIRMED) or local record (OFFLINE)

        Raises:
            ValidationError: invalid input, nothing changed
        """
        draft = fields if isinstance(fields, ExpenseDraft) else ExpenseDraft.parse(fields, self.partners)

        try:
            expense = await self.api.create_expense(draft)
        except OFFLINE_ERRORS as e:
            expense = Expense.from_draft(draft, self.id_generator.next_id(), now_utc())
            self._insert(expense)
            self._pending_ids.add(expense.id)
            self._persist()

            logger.warning(
                "Expense saved locally only",
                extra={"expense_id": expense.id, "error": str(e)},
            )
            await self.notifier.send(
                f"Offline: '{expense.description}' saved locally only",
                kind=NotificationKind.OFFLINE,
                extra={"expense_id": expense.id, "error": str(e)},
            )
            return expense

        self.id_generator.observe(expense.id)
        self._insert(expense)
        self._persist()
        await self.notifier.send(
            f"Expense '{expense.description}' added",
            kind=NotificationKind.CONFIRMED,
            extra={"expense_id": expense.id},
        )
        return expense

    async def delete_expense(self, expense_id: str) -> None:
        """Delete an expense

        Offline-pending records were never sent to the service and are
        removed locally only.

        Raises:
            NotFoundError: unknown to the service (a stale local copy is
                dropped first)
        """
        if expense_id in self._pending_ids:
            self._remove(expense_id)
            self._persist()
            logger.info("Pending expense discarded", extra={"expense_id": expense_id})
            await self.notifier.send(
                "Expense deleted",
                kind=NotificationKind.CONFIRMED,
                extra={"expense_id": expense_id},
            )
            return

        try:
            await self.api.delete_expense(expense_id)
        except NotFoundError:
            known_locally = self._remove(expense_id)
            if known_locally:
                self._persist()
                await self.notifier.send(
                    "Expense no longer exists on the server, removed locally",
                    kind=NotificationKind.ERROR,
                    extra={"expense_id": expense_id},
                )
            raise
        except OFFLINE_ERRORS as e:
            if not self._remove(expense_id):
                raise NotFoundError(expense_id) from e
            self._persist()

            logger.warning(
                "Expense deleted locally only",
                extra={"expense_id": expense_id, "error": str(e)},
            )
            await self.notifier.send(
                "Offline: expense deleted locally only",
                kind=NotificationKind.OFFLINE,
                extra={"expense_id": expense_id, "error": str(e)},
            )
            return

        self._remove(expense_id)
        self._persist()
        await self.notifier.send(
            "Expense deleted",
            kind=NotificationKind.CONFIRMED,
            extra={"expense_id": expense_id},
        )

    def _insert(self, expense: Expense) -> None:
        self._expenses = _ordered(self._expenses + [expense])

    def _remove(self, expense_id: str) -> bool:
        before = len(self._expenses)
        self._expenses = [e for e in self._expenses if e.id != expense_id]
        self._pending_ids.discard(expense_id)
        return len(self._expenses) != before
