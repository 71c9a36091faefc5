from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from habit_tracker.dates import parse_day


class MediaSuggestion(BaseModel):
    """Video or playlist recommendation resolved from a habit name."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    category: Optional[str] = None
    emoji: Optional[str] = None
    color: Optional[str] = None


class HabitSuggestion(BaseModel):
    """Video and playlist picked for a new habit."""

    model_config = ConfigDict(frozen=True)

    video: MediaSuggestion
    playlist: MediaSuggestion


class Habit(BaseModel):
    """Named recurring activity with suggestion fields cached at creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    video_id: str = ""
    video_title: str = ""
    playlist_id: str = ""
    playlist_title: str = ""
    playlist_category: str = ""
    playlist_emoji: str = ""
    playlist_color: str = ""

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Habit name must not be empty.")
        return cleaned


class Completion(BaseModel):
    """Marks a habit as done on one calendar day."""

    model_config = ConfigDict(frozen=True)

    habit_id: str
    date: date

    @field_validator("date", mode="before")
    @classmethod
    def _parse_day_key(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_day(value)
        return value

    def matches(self, habit_id: str, day: date) -> bool:
        return self.habit_id == habit_id and self.date == day


class HabitState(BaseModel):
    """Immutable snapshot of every habit and completion the app knows about."""

    model_config = ConfigDict(frozen=True)

    habits: tuple[Habit, ...] = ()
    completions: tuple[Completion, ...] = ()

    def habit_ids(self) -> set[str]:
        return {habit.id for habit in self.habits}

    def find_habit(self, habit_id: str) -> Habit | None:
        for habit in self.habits:
            if habit.id == habit_id:
                return habit
        return None


class WeekDay(BaseModel):
    """One dot of the trailing seven-day history."""

    date: date
    label: str
    done: bool


class HabitProgress(BaseModel):
    """Per-habit view model for the habit list."""

    habit: Habit
    done_today: bool
    streak: int
    week: list[WeekDay] = Field(default_factory=list)


class HabitStats(BaseModel):
    """Summary shown above the habit list."""

    habit_count: int = 0
    completed_today: int = 0
    best_streak: int = 0
