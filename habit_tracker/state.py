from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from habit_tracker import habits
from habit_tracker.completions import prune_orphaned
from habit_tracker.constants import SS_HABIT_STATE, SS_STATE_LOADED
from habit_tracker.gateway import PersistenceError, PersistenceGateway
from habit_tracker.models import Habit, HabitState

LOGGER = logging.getLogger(__name__)

_gateway: PersistenceGateway | None = None


def configure_gateway(gateway: PersistenceGateway | None) -> None:
    """Register the gateway that every mutating command writes through."""

    global _gateway

    _gateway = gateway


def load_persisted_state() -> HabitState:
    """Hydrate the session once per browser session from durable storage.

    Completions that point at a missing habit are dropped while loading.
    """

    if st.session_state.get(SS_STATE_LOADED, False):
        return get_state()

    state = HabitState()
    if _gateway is not None:
        state = _gateway.load()
        pruned = prune_orphaned(state.habits, state.completions)
        if len(pruned) != len(state.completions):
            LOGGER.info("Ignoring %s orphaned completions.", len(state.completions) - len(pruned))
            state = state.model_copy(update={"completions": pruned})

    st.session_state[SS_HABIT_STATE] = state
    st.session_state[SS_STATE_LOADED] = True
    return state


def get_state() -> HabitState:
    raw = st.session_state.get(SS_HABIT_STATE)
    if isinstance(raw, HabitState):
        return raw
    if raw is None:
        return HabitState()
    return HabitState.model_validate(raw)


def _commit(previous: HabitState, updated: HabitState) -> HabitState:
    """Persist the changed records, then publish ``updated`` to the session.

    If the first write fails, the session stays on ``previous``. If the habit
    record was written but the completion record was not, the session moves
    to what a reload would see: the new habits with the old completions,
    minus orphans. Either way the ``PersistenceError`` is re-raised.
    """

    if updated is previous:
        return previous

    if _gateway is not None:
        habits_written = False
        if updated.habits != previous.habits:
            _gateway.save_habits(updated.habits)
            habits_written = True
        if updated.completions != previous.completions:
            try:
                _gateway.save_completions(updated.completions)
            except PersistenceError:
                if habits_written:
                    st.session_state[SS_HABIT_STATE] = HabitState(
                        habits=updated.habits,
                        completions=prune_orphaned(updated.habits, previous.completions),
                    )
                raise

    st.session_state[SS_HABIT_STATE] = updated
    return updated


def add_habit(name: str) -> Habit | None:
    """Create a habit from user input; blank names are ignored."""

    previous = get_state()
    updated = _commit(previous, habits.add_habit(previous, name))
    if updated is previous:
        return None
    return updated.habits[-1]


def delete_habit(habit_id: str) -> HabitState:
    previous = get_state()
    if previous.find_habit(habit_id) is None:
        return previous
    return _commit(previous, habits.remove_habit(previous, habit_id))


def toggle_habit(habit_id: str, *, today: date) -> HabitState:
    """Flip the completion for ``today``, a day resolved in the configured timezone."""

    previous = get_state()
    return _commit(previous, habits.toggle_today(previous, habit_id, today))


def reset_state() -> None:
    for key in (SS_HABIT_STATE, SS_STATE_LOADED):
        if key in st.session_state:
            del st.session_state[key]


__all__ = [
    "add_habit",
    "configure_gateway",
    "delete_habit",
    "get_state",
    "load_persisted_state",
    "reset_state",
    "toggle_habit",
]
