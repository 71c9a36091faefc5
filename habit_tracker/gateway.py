from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Mapping, Sequence

from pydantic import BaseModel, ValidationError

from habit_tracker.constants import (
    COMPLETIONS_RECORD_KEY,
    DEFAULT_SAVE_ATTEMPTS,
    DEFAULT_SAVE_BACKOFF_SECONDS,
    HABITS_RECORD_KEY,
    SCHEMA_VERSION,
)
from habit_tracker.models import Completion, Habit, HabitState
from habit_tracker.storage import StorageBackend

LOGGER = logging.getLogger(__name__)
_BACKOFF_FACTOR = 2.0


class PersistenceError(RuntimeError):
    """Raised when a record cannot be read or written."""


def _envelope(items: Iterable[BaseModel]) -> dict[str, object]:
    return {
        "schema_version": SCHEMA_VERSION,
        "items": [item.model_dump(mode="json") for item in items],
    }


def _unwrap(key: str, raw: object | None) -> list[object]:
    if raw is None:
        return []
    # Records written before the envelope existed are bare lists.
    if isinstance(raw, list):
        return raw
    if not isinstance(raw, Mapping):
        raise PersistenceError(f"Record {key!r} has an unexpected layout.")

    version = raw.get("schema_version", SCHEMA_VERSION)
    if not isinstance(version, int) or version > SCHEMA_VERSION:
        raise PersistenceError(f"Record {key!r} uses unsupported schema version {version!r}.")

    items = raw.get("items", [])
    if not isinstance(items, list):
        raise PersistenceError(f"Record {key!r} has no item list.")
    return items


_LEGACY_FIELD_NAMES: dict[str, str] = {
    "createdAt": "created_at",
    "videoId": "video_id",
    "videoTitle": "video_title",
    "habitId": "habit_id",
}


def _rename_legacy_fields(raw: object) -> object:
    if not isinstance(raw, Mapping):
        return raw
    migrated = dict(raw)
    for legacy_name, field_name in _LEGACY_FIELD_NAMES.items():
        if legacy_name in migrated and field_name not in migrated:
            migrated[field_name] = migrated.pop(legacy_name)
    return migrated


def _coerce_habit(raw: object) -> Habit:
    return Habit.model_validate(_rename_legacy_fields(raw))


def _coerce_completion(raw: object) -> Completion:
    return Completion.model_validate(_rename_legacy_fields(raw))


class PersistenceGateway:
    """Load and save the habit and completion records as whole collections."""

    def __init__(
        self,
        backend: StorageBackend,
        *,
        max_attempts: int = DEFAULT_SAVE_ATTEMPTS,
        base_delay: float = DEFAULT_SAVE_BACKOFF_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.backend = backend
        self.max_attempts = max(1, max_attempts)
        self.base_delay = base_delay
        self._sleep = sleep

    def _read(self, key: str) -> list[object]:
        try:
            raw = self.backend.read_record(key)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Could not read record {key!r}.") from exc
        return _unwrap(key, raw)

    def load(self) -> HabitState:
        """Read both records; a record that was never written counts as empty."""

        try:
            habits = tuple(_coerce_habit(raw) for raw in self._read(HABITS_RECORD_KEY))
            completions = tuple(_coerce_completion(raw) for raw in self._read(COMPLETIONS_RECORD_KEY))
        except ValidationError as exc:
            raise PersistenceError("Stored habit data is invalid.") from exc

        # Keep the at-most-one-per-day invariant even for hand-edited files.
        unique_completions = tuple(dict.fromkeys(completions))
        return HabitState(habits=habits, completions=unique_completions)

    def _write(self, key: str, payload: dict[str, object]) -> None:
        delay = self.base_delay
        last_error: Exception | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                self.backend.write_record(key, payload)
                return
            except OSError as exc:
                last_error = exc
                LOGGER.warning("Saving %s failed (attempt %s/%s): %s", key, attempt, self.max_attempts, exc)
                if attempt < self.max_attempts:
                    self._sleep(delay)
                    delay *= _BACKOFF_FACTOR

        raise PersistenceError(f"Could not save {key} after {self.max_attempts} attempts.") from last_error

    def save_habits(self, habits: Sequence[Habit]) -> None:
        self._write(HABITS_RECORD_KEY, _envelope(habits))

    def save_completions(self, completions: Sequence[Completion]) -> None:
        self._write(COMPLETIONS_RECORD_KEY, _envelope(completions))

    def save(self, state: HabitState) -> None:
        self.save_habits(state.habits)
        self.save_completions(state.completions)


__all__ = ["PersistenceError", "PersistenceGateway"]
