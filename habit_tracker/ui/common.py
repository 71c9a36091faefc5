from __future__ import annotations

from typing import Sequence

import streamlit as st

from habit_tracker.models import WeekDay

DONE_COLOR = "#34C759"
EMPTY_COLOR = "#D1D1D6"


def week_dots_html(week: Sequence[WeekDay]) -> str:
    """Render the seven-day history as a row of coloured dots with weekday labels."""

    cells: list[str] = []
    for day in week:
        color = DONE_COLOR if day.done else EMPTY_COLOR
        cells.append(
            "<span class='week-dot' title='{date}'>"
            "<span class='week-dot__dot' style='background:{color}'></span>"
            "<span class='week-dot__label'>{label}</span>"
            "</span>".format(date=day.date.isoformat(), color=color, label=day.label)
        )
    return f"<div class='week-dots'>{''.join(cells)}</div>"


def playlist_pill_html(*, emoji: str, category: str, color: str) -> str:
    if not category:
        return ""
    return (
        f"<span class='playlist-pill' style='background:{color or '#EEF2FF'}'>"
        f"{emoji} {category}</span>"
    )


def inject_styles() -> None:
    st.markdown(
        """
        <style>
            .week-dots {
                display: flex;
                gap: 6px;
                margin-top: 0.4rem;
            }

            .week-dot {
                display: flex;
                flex-direction: column;
                align-items: center;
                gap: 3px;
            }

            .week-dot__dot {
                width: 10px;
                height: 10px;
                border-radius: 5px;
            }

            .week-dot__label {
                font-size: 9px;
                color: #8E8E93;
                font-weight: 500;
            }

            .playlist-pill {
                border-radius: 999px;
                padding: 2px 10px;
                font-size: 0.8rem;
                font-weight: 600;
                color: #1C1C1E;
            }

            .habit-streak {
                color: #FF9500;
                font-weight: 600;
            }
        </style>
    """,
        unsafe_allow_html=True,
    )


__all__ = ["inject_styles", "playlist_pill_html", "week_dots_html"]
