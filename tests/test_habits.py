from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from habit_tracker.habits import add_habit, create_habit, delete_habit, remove_habit, toggle_today
from habit_tracker.models import Completion, Habit, HabitState, HabitSuggestion, MediaSuggestion
from habit_tracker.suggestions import FALLBACK_PLAYLIST, FALLBACK_VIDEO


def _counting_lookup(calls: list[str]):
    def lookup(name: str) -> HabitSuggestion:
        calls.append(name)
        return HabitSuggestion(
            video=MediaSuggestion(id="vid", title="Video"),
            playlist=MediaSuggestion(id="pl", title="Playlist", category="Focus", emoji="🎯", color="#EEF2FF"),
        )

    return lookup


@pytest.mark.parametrize("name", ["", "  ", "\t\n"])
def test_create_habit_rejects_blank_names(name: str) -> None:
    calls: list[str] = []

    assert create_habit(name, _counting_lookup(calls)) is None
    assert calls == []


def test_create_habit_trims_and_looks_up_once() -> None:
    calls: list[str] = []
    created_at = datetime(2024, 3, 1, 7, 30, tzinfo=timezone.utc)

    habit = create_habit("  Deep work  ", _counting_lookup(calls), now=created_at)

    assert habit is not None
    assert habit.name == "Deep work"
    assert habit.created_at == created_at
    assert calls == ["Deep work"]
    assert habit.video_id == "vid"
    assert habit.playlist_title == "Playlist"
    assert habit.playlist_category == "Focus"


def test_create_habit_generates_unique_ids() -> None:
    ids = {create_habit(f"Habit {index}").id for index in range(50)}  # type: ignore[union-attr]

    assert len(ids) == 50


def test_create_habit_morning_run_prefers_running() -> None:
    habit = create_habit("Morning Run")

    assert habit is not None
    assert habit.video_id == "iSFpgQUGCVo"
    assert habit.playlist_category == "Running"


def test_create_habit_uses_fallback_without_keyword() -> None:
    habit = create_habit("Call grandma")

    assert habit is not None
    assert habit.video_id == FALLBACK_VIDEO.id
    assert habit.playlist_id == FALLBACK_PLAYLIST.id


def test_delete_habit_cascades_to_completions(today: date) -> None:
    habits = (Habit(id="a", name="Read"), Habit(id="b", name="Run"))
    completions = (
        Completion(habit_id="a", date=today),
        Completion(habit_id="b", date=today),
        Completion(habit_id="a", date=date(2024, 3, 14)),
    )

    remaining_habits, remaining_completions = delete_habit("a", habits, completions)

    assert [habit.id for habit in remaining_habits] == ["b"]
    assert remaining_completions == (Completion(habit_id="b", date=today),)


def test_add_habit_leaves_state_unchanged_for_blank_name() -> None:
    state = HabitState(habits=(Habit(id="a", name="Read"),))

    assert add_habit(state, "   ") is state


def test_add_habit_appends_new_habit() -> None:
    state = HabitState()

    updated = add_habit(state, "Drink water")

    assert state.habits == ()
    assert [habit.name for habit in updated.habits] == ["Drink water"]
    assert updated.habits[0].video_title == "Why Staying Hydrated Is So Important"


def test_remove_and_toggle_return_new_state(today: date) -> None:
    state = HabitState(habits=(Habit(id="a", name="Read"),))

    toggled = toggle_today(state, "a", today)
    assert toggled.completions == (Completion(habit_id="a", date=today),)
    assert state.completions == ()

    removed = remove_habit(toggled, "a")
    assert removed.habits == ()
    assert removed.completions == ()
