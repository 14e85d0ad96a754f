"""
Adapter test fixtures

Shared data and mock fixtures.
"""

import pytest

from adapters.mock.ledger_api import MockLedgerApi
from adapters.mock.notifier import MockNotifier


# -------------------------------------------------------------------------
# Wire samples
# -------------------------------------------------------------------------

@pytest.fixture
def expense_payload() -> dict:
    """Stored expense as returned by GET /api/expenses"""
    return {
        "id": "1709280000000",
        "partner": "Sebi",
        "description": "Laptop",
        "amount": "1299.00",
        "date": "2024-03-01",
        "category": "Elektronik",
        "created_at": "2024-03-01T10:00:00+00:00",
    }


# -------------------------------------------------------------------------
# Mock fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def mock_ledger_api() -> MockLedgerApi:
    """Mock Ledger API"""
    return MockLedgerApi()


@pytest.fixture
def mock_notifier() -> MockNotifier:
    """Mock Notifier"""
    return MockNotifier()
