"""
core/types.py and core/errors.py tests
"""

import pytest

from core.errors import (
    ConnectivityError,
    LedgerError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from core.types import HealthStatus, LoadSource, NotificationKind


class TestEnums:
    """Enums serialize as plain strings"""

    def test_health_status(self) -> None:
        assert HealthStatus.OK == "OK"
        assert HealthStatus.ERROR.value == "ERROR"

    def test_notification_kinds(self) -> None:
        assert {k.value for k in NotificationKind} == {"CONFIRMED", "OFFLINE", "ERROR"}

    def test_load_source(self) -> None:
        assert LoadSource("CACHE") is LoadSource.CACHE


class TestErrorTaxonomy:
    """Error classes and their HTTP status codes"""

    @pytest.mark.parametrize(
        "error,status",
        [
            (ValidationError(["amount"]), 400),
            (NotFoundError("1"), 404),
            (StorageError("db down"), 500),
            (ConnectivityError("refused"), 503),
        ],
    )
    def test_status_codes(self, error: LedgerError, status: int) -> None:
        assert isinstance(error, LedgerError)
        assert error.status_code == status

    def test_validation_error_names_fields(self) -> None:
        error = ValidationError(["partner", "amount"])

        assert error.fields == ["partner", "amount"]
        assert "partner" in error.message
        assert "amount" in error.message

    def test_validation_error_custom_message(self) -> None:
        error = ValidationError(["date"], "Invalid fields: date")

        assert str(error) == "Invalid fields: date"

    def test_not_found_error_keeps_id(self) -> None:
        error = NotFoundError("1700000000000")

        assert error.expense_id == "1700000000000"
        assert "1700000000000" in error.message
