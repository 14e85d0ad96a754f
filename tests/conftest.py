"""
Shared pytest fixtures
"""

import tempfile
from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

from core.config.loader import Settings
from core.ledger.types import Expense

PARTNERS = ("Sebi", "Alex")


@pytest.fixture
def temp_dir() -> Path:
    """OS independent temporary directory"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def partners() -> tuple[str, str]:
    return PARTNERS


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """settings.yaml pointing at temporary DB/cache files"""
    settings_content = f"""# test settings.yaml
partners:
  - Sebi
  - Alex

web:
  port: 3999

database:
  path: {(temp_dir / "expenses.db").as_posix()}

client:
  api_base_url: http://testserver
  request_timeout_sec: 2
  read_retries: 1
  probe_interval_sec: 5
  cache_path: {(temp_dir / "cache.json").as_posix()}
  cache_key: test-expenses
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture(autouse=True)
def reset_settings():
    """Never leak the Settings singleton between tests"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def make_expense() -> Callable[..., Expense]:
    """Expense factory with sensible defaults"""
    counter = {"n": 0}

    def _make(
        partner: str = "Sebi",
        amount: str | Decimal = "10.00",
        expense_date: date | str = date(2024, 1, 1),
        description: str = "Item",
        category: str = "Sonstiges",
        expense_id: str | None = None,
    ) -> Expense:
        counter["n"] += 1
        if isinstance(expense_date, str):
            expense_date = date.fromisoformat(expense_date)
        return Expense(
            id=expense_id or str(1700000000000 + counter["n"]),
            partner=partner,
            description=description,
            amount=Decimal(str(amount)),
            date=expense_date,
            category=category,
            created_at=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        )

    return _make
