from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from habit_tracker import dates
from habit_tracker.constants import STREAK_HORIZON_DAYS, WEEK_WINDOW_DAYS, WEEKDAY_LABELS
from habit_tracker.models import Completion, Habit, HabitProgress, HabitState, HabitStats, WeekDay


def _completion_days(habit_id: str, completions: Iterable[Completion]) -> set[date]:
    return {completion.date for completion in completions if completion.habit_id == habit_id}


def compute_streak(
    habit_id: str,
    completions: Iterable[Completion],
    *,
    today: date | None = None,
    horizon: int = STREAK_HORIZON_DAYS,
) -> int:
    """Count consecutive completed days walking back from ``today``.

    A missing completion for today does not break the streak: the walk simply
    continues with yesterday. Any gap before today ends it. The walk never
    looks further back than ``horizon`` days.
    """

    day_lookup = _completion_days(habit_id, completions)
    if not day_lookup:
        return 0

    current_day = today or dates.today()
    streak = 0
    for offset in range(horizon):
        if current_day - timedelta(days=offset) in day_lookup:
            streak += 1
        elif offset > 0:
            break
    return streak


def best_streak(
    habits: Iterable[Habit],
    completions: Sequence[Completion],
    *,
    today: date | None = None,
) -> int:
    current_day = today or dates.today()
    return max((compute_streak(habit.id, completions, today=current_day) for habit in habits), default=0)


def count_completed_today(
    habits: Iterable[Habit],
    completions: Iterable[Completion],
    *,
    today: date | None = None,
) -> int:
    """Count today's completions that belong to a known habit."""

    current_day = today or dates.today()
    known_ids = {habit.id for habit in habits}
    return sum(
        1 for completion in completions if completion.date == current_day and completion.habit_id in known_ids
    )


def week_history(
    habit_id: str,
    completions: Iterable[Completion],
    *,
    today: date | None = None,
    days: int = WEEK_WINDOW_DAYS,
) -> list[WeekDay]:
    current_day = today or dates.today()
    day_lookup = _completion_days(habit_id, completions)
    return [
        WeekDay(date=day, label=WEEKDAY_LABELS[day.weekday()], done=day in day_lookup)
        for day in dates.last_n_days(days, today=current_day)
    ]


def summarize(state: HabitState, *, today: date | None = None) -> HabitStats:
    current_day = today or dates.today()
    return HabitStats(
        habit_count=len(state.habits),
        completed_today=count_completed_today(state.habits, state.completions, today=current_day),
        best_streak=best_streak(state.habits, state.completions, today=current_day),
    )


def habit_progress(state: HabitState, *, today: date | None = None) -> list[HabitProgress]:
    current_day = today or dates.today()
    progress: list[HabitProgress] = []
    for habit in state.habits:
        progress.append(
            HabitProgress(
                habit=habit,
                done_today=any(completion.matches(habit.id, current_day) for completion in state.completions),
                streak=compute_streak(habit.id, state.completions, today=current_day),
                week=week_history(habit.id, state.completions, today=current_day),
            )
        )
    return progress


__all__ = [
    "best_streak",
    "compute_streak",
    "count_completed_today",
    "habit_progress",
    "summarize",
    "week_history",
]
