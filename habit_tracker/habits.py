from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Sequence
from uuid import uuid4

from habit_tracker.completions import toggle_completion
from habit_tracker.models import Completion, Habit, HabitState, HabitSuggestion
from habit_tracker.suggestions import suggest

SuggestionLookup = Callable[[str], HabitSuggestion]


def create_habit(
    name: str,
    suggestion_lookup: SuggestionLookup = suggest,
    *,
    now: datetime | None = None,
) -> Habit | None:
    """Build a new habit, or return ``None`` when the trimmed name is empty.

    The suggestion lookup runs exactly once and its result is cached on the
    habit for good.
    """

    cleaned = name.strip()
    if not cleaned:
        return None

    suggestion = suggestion_lookup(cleaned)
    video = suggestion.video
    playlist = suggestion.playlist
    return Habit(
        name=cleaned,
        created_at=now or datetime.now(timezone.utc),
        video_id=video.id,
        video_title=video.title,
        playlist_id=playlist.id,
        playlist_title=playlist.title,
        playlist_category=playlist.category or "",
        playlist_emoji=playlist.emoji or "",
        playlist_color=playlist.color or "",
    )


def delete_habit(
    habit_id: str,
    habits: Sequence[Habit],
    completions: Sequence[Completion],
) -> tuple[tuple[Habit, ...], tuple[Completion, ...]]:
    """Remove a habit together with its whole completion history.

    Only call this after the user confirmed the deletion.
    """

    remaining_habits = tuple(habit for habit in habits if habit.id != habit_id)
    remaining_completions = tuple(completion for completion in completions if completion.habit_id != habit_id)
    return remaining_habits, remaining_completions


def add_habit(
    state: HabitState,
    name: str,
    suggestion_lookup: SuggestionLookup = suggest,
    *,
    now: datetime | None = None,
) -> HabitState:
    habit = create_habit(name, suggestion_lookup, now=now)
    if habit is None:
        return state

    existing_ids = state.habit_ids()
    while habit.id in existing_ids:
        habit = habit.model_copy(update={"id": str(uuid4())})
    return state.model_copy(update={"habits": (*state.habits, habit)})


def remove_habit(state: HabitState, habit_id: str) -> HabitState:
    habits, completions = delete_habit(habit_id, state.habits, state.completions)
    return state.model_copy(update={"habits": habits, "completions": completions})


def toggle_today(state: HabitState, habit_id: str, today: date) -> HabitState:
    completions = toggle_completion(habit_id, state.completions, today)
    return state.model_copy(update={"completions": completions})


__all__ = [
    "SuggestionLookup",
    "add_habit",
    "create_habit",
    "delete_habit",
    "remove_habit",
    "toggle_today",
]
