"""
Timezone utility tests
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.utils.timezone import ensure_utc, now_utc, parse_utc


class TestEnsureUtc:
    def test_naive_taken_as_utc(self) -> None:
        result = ensure_utc(datetime(2024, 3, 1, 12, 0))

        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_converts_offset(self) -> None:
        cet = timezone(timedelta(hours=1))

        result = ensure_utc(datetime(2024, 3, 1, 12, 0, tzinfo=cet))

        assert result.hour == 11
        assert result.tzinfo == timezone.utc


class TestParseUtc:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-03-01T10:00:00+00:00",
            "2024-03-01T10:00:00Z",
            "2024-03-01 10:00:00",
            "2024-03-01T11:00:00+01:00",
        ],
    )
    def test_formats(self, value: str) -> None:
        assert parse_utc(value) == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_utc("not a timestamp")


def test_now_utc_is_aware() -> None:
    assert now_utc().tzinfo == timezone.utc
