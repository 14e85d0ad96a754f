"""
Text rendering

Expense list, balance overview and connectivity line as plain text.
Amounts use the German format (1.234,56 €), dates DD.MM.YYYY.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from core.constants import Money
from core.ledger.balance import BalanceSummary
from core.ledger.types import Expense

CENT = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """German currency format

    Example:
        >>> format_currency(Decimal("1234.5"))
        '1.234,50 €'
    """
    quantized = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    text = f"{abs(quantized):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if quantized < 0 else ""
    return f"{sign}{text} {Money.CURRENCY_SYMBOL}"


def format_date(value: date) -> str:
    return value.strftime("%d.%m.%Y")


def render_expenses(expenses: Iterable[Expense], pending_ids: frozenset[str] = frozenset()) -> str:
    """Expense table (one row per expense)"""
    rows = list(expenses)
    if not rows:
        return "No expenses."

    lines = []
    for e in rows:
        marker = "*" if e.id in pending_ids else " "
        lines.append(
            f"{marker} {e.id:<15} {format_date(e.date)}  {e.partner:<8} "
            f"{e.category:<12} {format_currency(e.amount):>14}  {e.description}"
        )

    if pending_ids:
        lines.append("* offline, not yet stored on the server")
    return "\n".join(lines)


def render_summary(summary: BalanceSummary) -> str:
    """Balance overview"""
    a, b = summary.partners
    lines = [
        f"{a}: {format_currency(summary.totals[a])} ({summary.counts[a]} expenses)",
        f"{b}: {format_currency(summary.totals[b])} ({summary.counts[b]} expenses)",
        f"Total: {format_currency(summary.grand_total)}",
    ]

    if summary.leader is None:
        lines.append(f"Difference: {format_currency(summary.difference)} (even)")
    else:
        lines.append(f"Difference: {format_currency(summary.difference)} ({summary.leader} ahead)")

    settlement = summary.settlement
    if settlement.settled:
        lines.append("Balance: settled, no debts")
    else:
        lines.append(
            f"Balance: {settlement.debtor} owes {settlement.creditor} "
            f"{format_currency(settlement.amount)}"
        )
    return "\n".join(lines)


def render_connectivity(is_connected: bool | None, last_checked: datetime | None) -> str:
    if is_connected is None:
        return "Backend: not checked yet"
    status = "connected" if is_connected else "not reachable"
    if last_checked is None:
        return f"Backend: {status}"
    return f"Backend: {status} (last check {last_checked.astimezone().strftime('%H:%M:%S')})"
