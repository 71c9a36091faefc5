from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from habit_tracker.models import Completion, Habit


def is_completed(habit_id: str, completions: Iterable[Completion], day: date) -> bool:
    return any(completion.matches(habit_id, day) for completion in completions)


def toggle_completion(habit_id: str, completions: Sequence[Completion], today: date) -> tuple[Completion, ...]:
    """Flip the completion of ``habit_id`` for ``today`` and return a new collection.

    Habit ids are not validated here; a completion for an unknown habit is
    stored like any other and ignored by the aggregate statistics.
    """

    if is_completed(habit_id, completions, today):
        return tuple(completion for completion in completions if not completion.matches(habit_id, today))
    return (*completions, Completion(habit_id=habit_id, date=today))


def prune_orphaned(habits: Iterable[Habit], completions: Sequence[Completion]) -> tuple[Completion, ...]:
    """Drop completions whose habit no longer exists."""

    known_ids = {habit.id for habit in habits}
    return tuple(completion for completion in completions if completion.habit_id in known_ids)


__all__ = ["is_completed", "prune_orphaned", "toggle_completion"]
