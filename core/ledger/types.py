"""
Expense types

Expense (stored record) and ExpenseDraft (user input before an id is
assigned). ExpenseDraft.parse is the single validation point for the
service and the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from core.errors import ValidationError
from core.utils.timezone import ensure_utc, parse_utc

# User-supplied fields, in form order
DRAFT_FIELDS: tuple[str, ...] = ("partner", "description", "amount", "date", "category")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def parse_amount(value: Any) -> Decimal:
    """Parse a monetary amount into Decimal

    Floats go through str() so 12.3 becomes Decimal("12.3").

    Raises:
        ValueError: not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip().replace(",", "."))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def parse_date(value: Any) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)

    Raises:
        ValueError: not an ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if "T" in text:
        # ISO timestamp: keep the calendar date
        text = text.split("T", 1)[0]
    if len(text) != 10:
        raise ValueError(f"Not an ISO date: {value!r}")
    return date.fromisoformat(text)


@dataclass(frozen=True)
class ExpenseDraft:
    """Validated user input for a new expense"""

    partner: str
    description: str
    amount: Decimal
    date: date
    category: str

    @classmethod
    def parse(cls, data: Mapping[str, Any], partners: Iterable[str]) -> "ExpenseDraft":
        """Validate raw input

        Args:
            data: raw field values (JSON body, form, CLI args)
            partners: the two valid partner names

        Returns:
            ExpenseDraft

        Raises:
            ValidationError: one or more fields missing or invalid
        """
        missing = [name for name in DRAFT_FIELDS if _is_blank(data.get(name))]
        if missing:
            raise ValidationError(missing)

        invalid: list[str] = []

        partner = str(data["partner"]).strip()
        if partner not in tuple(partners):
            invalid.append("partner")

        try:
            amount = parse_amount(data["amount"])
            if amount <= 0:
                invalid.append("amount")
        except ValueError:
            amount = Decimal("0")
            invalid.append("amount")

        try:
            expense_date = parse_date(data["date"])
        except ValueError:
            expense_date = date.min
            invalid.append("date")

        if invalid:
            raise ValidationError(
                invalid,
                f"Invalid fields: {', '.join(invalid)}",
            )

        return cls(
            partner=partner,
            description=str(data["description"]).strip(),
            amount=amount,
            date=expense_date,
            category=str(data["category"]).strip(),
        )


@dataclass(frozen=True)
class Expense:
    """Stored expense record

    Immutable; the only mutation is deletion by id.
    """

    id: str
    partner: str
    description: str
    amount: Decimal
    date: date
    category: str
    created_at: datetime

    @classmethod
    def from_draft(cls, draft: ExpenseDraft, expense_id: str, created_at: datetime) -> "Expense":
        return cls(
            id=expense_id,
            partner=draft.partner,
            description=draft.description,
            amount=draft.amount,
            date=draft.date,
            category=draft.category,
            created_at=ensure_utc(created_at),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Expense":
        """Build from the wire/cache shape

        Raises:
            KeyError: missing field
            ValueError: malformed amount/date/timestamp
        """
        return cls(
            id=str(data["id"]),
            partner=str(data["partner"]),
            description=str(data["description"]),
            amount=parse_amount(data["amount"]),
            date=parse_date(data["date"]),
            category=str(data["category"]),
            created_at=parse_utc(str(data["created_at"])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire/cache shape (JSON serializable)"""
        return {
            "id": self.id,
            "partner": self.partner,
            "description": self.description,
            "amount": str(self.amount),
            "date": self.date.isoformat(),
            "category": self.category,
            "created_at": self.created_at.isoformat(),
        }

    def to_draft(self) -> ExpenseDraft:
        return ExpenseDraft(
            partner=self.partner,
            description=self.description,
            amount=self.amount,
            date=self.date,
            category=self.category,
        )
