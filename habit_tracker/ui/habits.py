from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

import streamlit as st

from habit_tracker.charts import build_weekly_completion_figure
from habit_tracker.constants import NEW_HABIT_NAME_KEY, PENDING_DELETE_HABIT_KEY, PERSISTENCE_ERROR_KEY
from habit_tracker.gateway import PersistenceError
from habit_tracker.models import Habit, HabitProgress, HabitStats
from habit_tracker.state import add_habit, delete_habit, toggle_habit
from habit_tracker.ui.common import playlist_pill_html, week_dots_html

LOGGER = logging.getLogger(__name__)

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
YOUTUBE_PLAYLIST_URL = "https://www.youtube.com/playlist?list={playlist_id}"


def _report_persistence_error(exc: PersistenceError) -> None:
    LOGGER.error("Persisting habit data failed: %s", exc)
    st.session_state[PERSISTENCE_ERROR_KEY] = str(exc)


def render_persistence_error() -> None:
    message = st.session_state.pop(PERSISTENCE_ERROR_KEY, None)
    if message:
        st.error(f"Your change could not be saved and was not applied. {message}", icon="⚠️")


def render_habit_form() -> None:
    with st.form("new_habit", clear_on_submit=True):
        name = st.text_input("New habit", key=NEW_HABIT_NAME_KEY, placeholder="e.g. Morning run")
        submitted = st.form_submit_button("Add habit")

    if not submitted:
        return

    try:
        if add_habit(name) is None:
            return
    except PersistenceError as exc:
        _report_persistence_error(exc)
    st.rerun()


def render_summary(stats: HabitStats) -> None:
    columns = st.columns(3)
    columns[0].metric("Habits", stats.habit_count)
    columns[1].metric("Done today", f"{stats.completed_today}/{stats.habit_count}")
    columns[2].metric("Best streak", f"🔥 {stats.best_streak}")


def _render_delete_confirmation(habit: Habit) -> None:
    pending_key = f"{PENDING_DELETE_HABIT_KEY}_{habit.id}"

    if st.session_state.get(pending_key):
        st.warning("Delete habit? This will remove all its history too.")
        confirm_cols = st.columns(2)
        if confirm_cols[0].button("Delete", key=f"habit_confirm_{habit.id}", type="primary"):
            st.session_state.pop(pending_key, None)
            try:
                delete_habit(habit.id)
            except PersistenceError as exc:
                _report_persistence_error(exc)
            st.rerun()

        if confirm_cols[1].button("Cancel", key=f"habit_cancel_{habit.id}"):
            st.session_state.pop(pending_key, None)
            st.rerun()
        return

    if st.button("Delete", key=f"habit_delete_{habit.id}", help="Remove this habit"):
        st.session_state[pending_key] = True
        st.rerun()


def _render_media(habit: Habit) -> None:
    with st.expander("▶ Watch & listen"):
        if habit.video_id:
            st.caption(habit.video_title)
            st.video(YOUTUBE_WATCH_URL.format(video_id=habit.video_id))
        if habit.playlist_id:
            pill = playlist_pill_html(
                emoji=habit.playlist_emoji,
                category=habit.playlist_category,
                color=habit.playlist_color,
            )
            if pill:
                st.markdown(pill, unsafe_allow_html=True)
            st.markdown(
                f"[{habit.playlist_title}]({YOUTUBE_PLAYLIST_URL.format(playlist_id=habit.playlist_id)})"
            )


def _render_habit_card(item: HabitProgress, *, today: date) -> None:
    habit = item.habit
    with st.container(border=True):
        header_cols = st.columns([6, 2])
        checked = header_cols[0].checkbox(habit.name, value=item.done_today, key=f"habit_done_{habit.id}")
        if item.streak > 0:
            header_cols[1].markdown(f"<span class='habit-streak'>🔥 {item.streak}</span>", unsafe_allow_html=True)

        if checked != item.done_today:
            try:
                toggle_habit(habit.id, today=today)
            except PersistenceError as exc:
                _report_persistence_error(exc)
                st.session_state.pop(f"habit_done_{habit.id}", None)
            st.rerun()

        st.markdown(week_dots_html(item.week), unsafe_allow_html=True)
        _render_media(habit)
        _render_delete_confirmation(habit)


def render_habit_list(progress: Sequence[HabitProgress], *, today: date) -> None:
    if not progress:
        st.info("No habits yet. Add your first one above.")
        return

    for item in progress:
        _render_habit_card(item, today=today)

    st.plotly_chart(build_weekly_completion_figure(progress), use_container_width=True)


__all__ = [
    "render_habit_form",
    "render_habit_list",
    "render_persistence_error",
    "render_summary",
]
