from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from habit_tracker import dates


def test_day_key_is_fixed_width() -> None:
    assert dates.day_key(date(2024, 1, 5)) == "2024-01-05"


def test_parse_day_roundtrip_and_rejects_other_formats() -> None:
    assert dates.parse_day(" 2024-01-05 ") == date(2024, 1, 5)
    with pytest.raises(ValueError):
        dates.parse_day("2024-1-5")
    with pytest.raises(ValueError):
        dates.parse_day("20240105")


def test_last_n_days_is_chronological() -> None:
    window = dates.last_n_days(3, today=date(2024, 3, 1))

    assert window == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert dates.last_n_days(0, today=date(2024, 3, 1)) == []


def test_today_follows_configured_timezone() -> None:
    tokyo = ZoneInfo("Asia/Tokyo")

    assert dates.today(tokyo) == datetime.now(tokyo).date()
    assert dates.today(timezone.utc) == datetime.now(timezone.utc).date()
