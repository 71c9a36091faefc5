from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from habit_tracker.dates import day_key
from habit_tracker.models import HabitProgress

HABIT_COLORS = [
    "#34C759",
    "#30B0C7",
    "#FF9500",
    "#AF52DE",
    "#5856D6",
]
FONT_COLOR = "#1C1C1E"
GRID_COLOR = "#D1D1D6"


def _apply_light_theme(figure: go.Figure) -> go.Figure:
    figure.update_layout(
        template="plotly_white",
        font=dict(color=FONT_COLOR),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor=GRID_COLOR, zerolinecolor=GRID_COLOR),
        yaxis=dict(gridcolor=GRID_COLOR, zerolinecolor=GRID_COLOR),
    )
    return figure


def build_weekly_completion_figure(progress: Sequence[HabitProgress]) -> go.Figure:
    """Create a stacked bar chart with one trace per habit for the last 7 days."""

    bars: list[go.Bar] = []
    for index, item in enumerate(progress):
        color = HABIT_COLORS[index % len(HABIT_COLORS)]
        bars.append(
            go.Bar(
                x=[day_key(day.date) for day in item.week],
                y=[1 if day.done else 0 for day in item.week],
                name=item.habit.name,
                marker_color=color,
                hovertemplate=f"<b>%{{x}}</b><br>{item.habit.name}: %{{y}}<extra></extra>",
            )
        )

    figure = go.Figure(data=bars)
    figure.update_layout(
        barmode="stack",
        bargap=0.35,
        legend_title_text="Habits",
        title_text="Completions (last 7 days)",
        xaxis_title="Day",
        yaxis_title="Completions",
        margin=dict(t=60, r=10, b=40, l=10),
        showlegend=bool(bars),
    )
    figure.update_yaxes(rangemode="tozero", dtick=1)
    _apply_light_theme(figure)
    return figure


__all__ = ["HABIT_COLORS", "build_weekly_completion_figure"]
