"""
Balance engine

Pure, side-effect-free aggregation over a sequence of expenses.
Even-split rule: each partner should have paid half of the combined
total; the partner who paid less owes the shortfall to the other.

All arithmetic is Decimal.

Usage:
```python
summary = summarize(expenses, ("Sebi", "Alex"))
if summary.settlement.settled:
    ...
else:
    print(f"{summary.settlement.debtor} owes {summary.settlement.creditor} "
          f"{summary.settlement.amount}")
```
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from core.constants import Money
from core.ledger.types import Expense

SETTLED_TOLERANCE = Decimal(Money.SETTLED_TOLERANCE)
ZERO = Decimal("0")
TWO = Decimal("2")


@dataclass(frozen=True)
class Settlement:
    """Who owes whom

    settled=True means |balance| < SETTLED_TOLERANCE; debtor/creditor are None.
    """

    settled: bool
    debtor: str | None
    creditor: str | None
    amount: Decimal


@dataclass(frozen=True)
class BalanceSummary:
    """Everything the balance overview shows"""

    partners: tuple[str, str]
    totals: dict[str, Decimal]
    counts: dict[str, int]
    balances: dict[str, Decimal]
    grand_total: Decimal
    average: Decimal
    difference: Decimal
    leader: str | None
    settlement: Settlement


def total_for(records: Iterable[Expense], partner: str) -> Decimal:
    """Sum of amounts paid by partner"""
    return sum((r.amount for r in records if r.partner == partner), ZERO)


def count_for(records: Iterable[Expense], partner: str) -> int:
    """Number of expenses paid by partner"""
    return sum(1 for r in records if r.partner == partner)


def grand_total(records: Sequence[Expense], partners: tuple[str, str]) -> Decimal:
    a, b = partners
    return total_for(records, a) + total_for(records, b)


def average(records: Sequence[Expense], partners: tuple[str, str]) -> Decimal:
    """Even per-partner share of the grand total"""
    return grand_total(records, partners) / TWO


def balance_for(
    records: Sequence[Expense],
    partner: str,
    partners: tuple[str, str],
) -> Decimal:
    """Signed deviation of partner's spending from the even share

    Positive: partner paid more than their share (is owed money).
    """
    return total_for(records, partner) - average(records, partners)


def difference(records: Sequence[Expense], partners: tuple[str, str]) -> Decimal:
    """|total(A) - total(B)|"""
    a, b = partners
    return abs(total_for(records, a) - total_for(records, b))


def leader(records: Sequence[Expense], partners: tuple[str, str]) -> str | None:
    """Partner with the larger total, None when equal"""
    a, b = partners
    total_a = total_for(records, a)
    total_b = total_for(records, b)
    if total_a > total_b:
        return a
    if total_b > total_a:
        return b
    return None


def settle(records: Sequence[Expense], partners: tuple[str, str]) -> Settlement:
    """Settlement determination

    Args:
        records: expenses to settle
        partners: (A, B)

    Returns:
        Settlement; amount is |balance(A)|, i.e. half the difference
    """
    a, b = partners
    balance_a = balance_for(records, a, partners)

    if abs(balance_a) < SETTLED_TOLERANCE:
        return Settlement(settled=True, debtor=None, creditor=None, amount=ZERO)

    if balance_a > 0:
        return Settlement(settled=False, debtor=b, creditor=a, amount=abs(balance_a))
    return Settlement(settled=False, debtor=a, creditor=b, amount=abs(balance_a))


def summarize(records: Sequence[Expense], partners: tuple[str, str]) -> BalanceSummary:
    """Full balance overview for the given records"""
    records = list(records)
    totals = {p: total_for(records, p) for p in partners}
    avg = (totals[partners[0]] + totals[partners[1]]) / TWO

    return BalanceSummary(
        partners=partners,
        totals=totals,
        counts={p: count_for(records, p) for p in partners},
        balances={p: totals[p] - avg for p in partners},
        grand_total=totals[partners[0]] + totals[partners[1]],
        average=avg,
        difference=difference(records, partners),
        leader=leader(records, partners),
        settlement=settle(records, partners),
    )


def filter_records(
    records: Iterable[Expense],
    partner: str | None = None,
    category: str | None = None,
) -> list[Expense]:
    """Restrict by partner and/or category (None = no restriction)

    Returns a new list; the input is never modified.
    """
    return [
        r
        for r in records
        if (partner is None or r.partner == partner)
        and (category is None or r.category == category)
    ]


def categories_of(records: Iterable[Expense]) -> list[str]:
    """Distinct categories in first-seen order"""
    seen: dict[str, None] = {}
    for r in records:
        seen.setdefault(r.category, None)
    return list(seen)
