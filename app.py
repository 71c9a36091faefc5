from __future__ import annotations

import logging

import streamlit as st

from habit_tracker import dates
from habit_tracker.config import Settings, load_settings
from habit_tracker.gateway import PersistenceError, PersistenceGateway
from habit_tracker.models import HabitState
from habit_tracker.state import configure_gateway, load_persisted_state
from habit_tracker.storage import FileStorageBackend
from habit_tracker.streaks import habit_progress, summarize
from habit_tracker.ui.common import inject_styles
from habit_tracker.ui.habits import (
    render_habit_form,
    render_habit_list,
    render_persistence_error,
    render_summary,
)

LOGGER = logging.getLogger(__name__)


def _bootstrap_gateway(settings: Settings) -> PersistenceGateway:
    backend = FileStorageBackend(settings.data_dir)
    gateway = PersistenceGateway(backend, max_attempts=settings.save_attempts, base_delay=settings.save_backoff_seconds)
    configure_gateway(gateway)
    return gateway


def _load_state() -> HabitState | None:
    try:
        return load_persisted_state()
    except PersistenceError as exc:
        LOGGER.warning("Failed to load persisted habits: %s", exc)
        st.error(
            "Stored habits could not be loaded. Nothing was changed on disk; fix or move the data files and reload.",
            icon="⚠️",
        )
        return None


def main() -> None:
    st.set_page_config(page_title="Habit Tracker", page_icon="🔥", layout="centered")
    inject_styles()
    settings = load_settings()
    _bootstrap_gateway(settings)

    st.title("Habit Tracker")
    state = _load_state()
    if state is None:
        st.stop()

    today = dates.today(settings.timezone)
    st.caption(today.strftime("%A, %d %B %Y"))
    render_persistence_error()
    render_summary(summarize(state, today=today))
    render_habit_form()
    render_habit_list(habit_progress(state, today=today), today=today)


if __name__ == "__main__":
    main()
