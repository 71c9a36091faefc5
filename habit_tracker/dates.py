"""Calendar-day helpers.

Day boundaries follow the configured timezone. Without one, the local
timezone of the running process decides where midnight is. Days are keyed
as fixed-width ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo


def today(tz: tzinfo | None = None) -> date:
    """Return the current calendar day in ``tz`` or the process-local zone."""

    if tz is None:
        return datetime.now().astimezone().date()
    return datetime.now(tz).date()


def day_key(day: date) -> str:
    return day.isoformat()


def parse_day(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` key, raising ``ValueError`` for anything else."""

    cleaned = text.strip()
    if len(cleaned) != 10:
        raise ValueError(f"Expected a YYYY-MM-DD day, got {text!r}.")
    return date.fromisoformat(cleaned)


def last_n_days(n: int, *, today: date) -> list[date]:
    """Return the trailing ``n`` days in chronological order, ending with ``today``."""

    return [today - timedelta(days=offset) for offset in range(n - 1, -1, -1)]


__all__ = ["day_key", "last_n_days", "parse_day", "today"]
