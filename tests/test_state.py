from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from habit_tracker.completions import prune_orphaned
from habit_tracker.constants import COMPLETIONS_RECORD_KEY, HABITS_RECORD_KEY, SS_HABIT_STATE, SS_STATE_LOADED
from habit_tracker.gateway import PersistenceError, PersistenceGateway
from habit_tracker.models import Completion, Habit, HabitState
from habit_tracker.state import (
    add_habit,
    configure_gateway,
    delete_habit,
    get_state,
    load_persisted_state,
    reset_state,
    toggle_habit,
)
from habit_tracker.storage import FileStorageBackend, MemoryStorageBackend


class FailingBackend(MemoryStorageBackend):
    def write_record(self, key: str, payload: object) -> None:
        raise OSError("read-only file system")


def _configure(tmp_path: Path) -> PersistenceGateway:
    gateway = PersistenceGateway(FileStorageBackend(tmp_path))
    configure_gateway(gateway)
    return gateway


def test_first_load_starts_empty(session_state: dict[str, object], tmp_path: Path) -> None:
    _configure(tmp_path)

    state = load_persisted_state()

    assert state == HabitState()
    assert session_state[SS_STATE_LOADED] is True
    assert get_state() is state


def test_commands_persist_and_reload(session_state: dict[str, object], tmp_path: Path, today: date) -> None:
    gateway = _configure(tmp_path)
    load_persisted_state()

    habit = add_habit("  Morning Run ")
    assert habit is not None
    toggle_habit(habit.id, today=today)

    reloaded = gateway.load()
    assert [item.name for item in reloaded.habits] == ["Morning Run"]
    assert reloaded.completions == (Completion(habit_id=habit.id, date=today),)
    assert reloaded == get_state()

    toggle_habit(habit.id, today=today)
    assert gateway.load().completions == ()


def test_blank_name_does_not_touch_storage(session_state: dict[str, object], tmp_path: Path) -> None:
    _configure(tmp_path)
    load_persisted_state()

    assert add_habit("   ") is None
    assert get_state().habits == ()
    assert not (tmp_path / "habits.json").exists()


def test_delete_cascades_and_persists(session_state: dict[str, object], tmp_path: Path, today: date) -> None:
    gateway = _configure(tmp_path)
    load_persisted_state()
    keep = add_habit("Read")
    drop = add_habit("Run")
    assert keep is not None and drop is not None
    toggle_habit(keep.id, today=today)
    toggle_habit(drop.id, today=today)

    delete_habit(drop.id)

    expected = HabitState(habits=(keep,), completions=(Completion(habit_id=keep.id, date=today),))
    assert get_state() == expected
    assert gateway.load() == expected


def test_failed_write_keeps_previous_state(session_state: dict[str, object], today: date) -> None:
    configure_gateway(PersistenceGateway(FailingBackend(), max_attempts=2, base_delay=0, sleep=lambda _: None))
    previous = HabitState(habits=(Habit(id="a", name="Read"),))
    session_state[SS_HABIT_STATE] = previous
    session_state[SS_STATE_LOADED] = True

    with pytest.raises(PersistenceError):
        toggle_habit("a", today=today)
    with pytest.raises(PersistenceError):
        add_habit("Run")
    with pytest.raises(PersistenceError):
        delete_habit("a")

    assert get_state() is previous


def test_load_prunes_orphaned_completions(session_state: dict[str, object], today: date) -> None:
    backend = MemoryStorageBackend()
    gateway = PersistenceGateway(backend)
    gateway.save(
        HabitState(
            habits=(Habit(id="a", name="Read"),),
            completions=(
                Completion(habit_id="a", date=today),
                Completion(habit_id="gone", date=today),
            ),
        )
    )
    configure_gateway(gateway)

    state = load_persisted_state()

    assert state.completions == (Completion(habit_id="a", date=today),)


def test_load_runs_once_per_session(session_state: dict[str, object]) -> None:
    backend = MemoryStorageBackend()
    configure_gateway(PersistenceGateway(backend))
    load_persisted_state()
    backend.write_record(HABITS_RECORD_KEY, [{"id": "late", "name": "Late"}])

    assert load_persisted_state().habits == ()

    reset_state()
    assert [habit.id for habit in load_persisted_state().habits] == ["late"]


def test_commands_without_gateway_stay_in_memory(session_state: dict[str, object], today: date) -> None:
    habit = add_habit("Stretch")

    assert habit is not None
    assert toggle_habit(habit.id, today=today).completions == (Completion(habit_id=habit.id, date=today),)


class CompletionsWriteFailsBackend(MemoryStorageBackend):
    def write_record(self, key: str, payload: object) -> None:
        if key == COMPLETIONS_RECORD_KEY:
            raise OSError("completions file is locked")
        super().write_record(key, payload)


def test_delete_with_failed_completion_write_matches_disk(session_state: dict[str, object], today: date) -> None:
    seeded = HabitState(
        habits=(Habit(id="a", name="Read"), Habit(id="b", name="Run")),
        completions=(Completion(habit_id="a", date=today), Completion(habit_id="b", date=today)),
    )
    backend = CompletionsWriteFailsBackend(
        {
            HABITS_RECORD_KEY: [habit.model_dump(mode="json") for habit in seeded.habits],
            COMPLETIONS_RECORD_KEY: [completion.model_dump(mode="json") for completion in seeded.completions],
        }
    )
    gateway = PersistenceGateway(backend, max_attempts=2, base_delay=0, sleep=lambda _: None)
    configure_gateway(gateway)
    session_state[SS_HABIT_STATE] = seeded
    session_state[SS_STATE_LOADED] = True

    with pytest.raises(PersistenceError):
        delete_habit("a")

    on_disk = gateway.load()
    in_memory = get_state()
    assert [habit.id for habit in in_memory.habits] == [habit.id for habit in on_disk.habits] == ["b"]
    assert in_memory.completions == prune_orphaned(on_disk.habits, on_disk.completions)
    assert in_memory.completions == (Completion(habit_id="b", date=today),)


def test_toggle_requires_an_explicit_day(session_state: dict[str, object]) -> None:
    with pytest.raises(TypeError):
        toggle_habit("a")  # type: ignore[call-arg]
