"""Curated video and playlist suggestions keyed by habit keywords.

Both tables are ordered: the first entry with a keyword contained in the
lower-cased habit name wins, so earlier entries take priority on overlapping
keywords. Every lookup falls back to a fixed suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from habit_tracker.models import HabitSuggestion, MediaSuggestion


@dataclass(frozen=True)
class SuggestionEntry:
    keywords: tuple[str, ...]
    suggestion: MediaSuggestion


def _video(keywords: Sequence[str], video_id: str, title: str) -> SuggestionEntry:
    return SuggestionEntry(keywords=tuple(keywords), suggestion=MediaSuggestion(id=video_id, title=title))


def _playlist(
    keywords: Sequence[str],
    playlist_id: str,
    title: str,
    description: str,
    *,
    category: str,
    emoji: str,
    color: str,
) -> SuggestionEntry:
    return SuggestionEntry(
        keywords=tuple(keywords),
        suggestion=MediaSuggestion(
            id=playlist_id,
            title=title,
            description=description,
            category=category,
            emoji=emoji,
            color=color,
        ),
    )


VIDEO_SUGGESTIONS: tuple[SuggestionEntry, ...] = (
    _video(
        ("meditat", "mindful", "breathe", "breath", "calm", "relax"),
        "inpok4MKVLM",
        "5-Minute Meditation You Can Do Anywhere",
    ),
    _video(
        ("run", "jog", "cardio", "marathon", "sprint"),
        "iSFpgQUGCVo",
        "How to Start Running (and Actually Enjoy It)",
    ),
    _video(
        ("workout", "exercise", "gym", "lift", "strength", "fitness", "train"),
        "vc1E5CfRfos",
        "The Science of Getting Stronger",
    ),
    _video(("read", "book", "learn", "study"), "YjPDMHB_oEY", "How to Read More Books"),
    _video(
        ("journal", "write", "diary", "gratitud"),
        "dArgOrm98Bk",
        "The Life-Changing Habit of Journaling",
    ),
    _video(("sleep", "wake", "morning", "routine", "rise"), "nm1TxQj9IsQ", "The Perfect Morning Routine"),
    _video(("water", "hydrat", "drink"), "aQiGDPuk3EQ", "Why Staying Hydrated Is So Important"),
    _video(
        ("diet", "eat", "food", "nutrition", "vegetable", "fruit", "cook"),
        "fqhYBTg73fw",
        "How to Build Healthy Eating Habits",
    ),
    _video(("walk", "step", "outdoor", "nature", "hike"), "bnHMDMxLKhw", "The Surprising Benefits of Walking"),
    _video(("stretch", "yoga", "flex", "mobil"), "4pKly2JojMw", "10-Minute Morning Yoga for Beginners"),
    _video(
        ("cod", "program", "develop", "hack", "build", "software"),
        "NtfbWkxJTHw",
        "How to Build a Coding Habit",
    ),
    _video(
        ("langua", "speak", "spanish", "french", "german", "chinese", "japanese"),
        "illApgaLgGA",
        "How to Learn Any Language",
    ),
    _video(
        ("saving", "save", "money", "financ", "budget", "invest"),
        "HQzoZfc3GwQ",
        "How to Build Better Money Habits",
    ),
    _video(
        ("social", "phone", "screen", "detox", "digital"),
        "OoFSMRHgSHA",
        "How to Break Your Phone Addiction",
    ),
    _video(
        ("focus", "productiv", "deep work", "pomodoro", "distract"),
        "WXBA4eWskrc",
        "How to Focus Like a Navy SEAL",
    ),
    _video(("cold", "shower", "ice"), "NUYP3bBnBY0", "Cold Showers: What Happens to Your Body"),
    _video(("vitamin", "supplement", "health"), "fLNJLIKMFsM", "Daily Habits for Long-Term Health"),
    _video(("gratitude", "thankful", "positive", "mindset"), "WPPPFqsECz0", "The Power of Gratitude"),
)

FALLBACK_VIDEO = MediaSuggestion(id="ZXsQAXx_ao0", title="The Power of Small Habits (James Clear)")


PLAYLIST_SUGGESTIONS: tuple[SuggestionEntry, ...] = (
    _playlist(
        ("focus", "productiv", "deep work", "study", "pomodoro", "work", "cod", "program", "develop"),
        "PLOfLYVXrwqBwbNnkVWUfFHFpbmmr5VJo_",
        "Deep Focus: Study & Work",
        "Instrumental music for deep concentration",
        category="Focus",
        emoji="🎯",
        color="#EEF2FF",
    ),
    _playlist(
        ("workout", "gym", "lift", "strength", "fitness", "train", "exercise"),
        "PLx65qkgCWNJIgq1Mj0rtsthQSXe3bQoLt",
        "Ultimate Workout Motivation",
        "High energy tracks to power your training",
        category="Workout",
        emoji="💪",
        color="#FFF1F2",
    ),
    _playlist(
        ("run", "jog", "cardio", "marathon", "sprint"),
        "PLgzTt0k8mXzEk586ze4BjKDn2KKOIUmMX",
        "Running Motivation Mix",
        "Upbeat beats to keep your pace up",
        category="Running",
        emoji="🏃",
        color="#FFF7ED",
    ),
    _playlist(
        ("meditat", "mindful", "breathe", "breath", "calm", "relax"),
        "PLQ_PIlf6OzqJpURN4dFxHV82l4vV7OEKZ",
        "Meditation & Mindfulness",
        "Calm ambient sounds for meditation",
        category="Calm",
        emoji="🧘",
        color="#F0FDF4",
    ),
    _playlist(
        ("sleep", "rest", "nap", "bedtime"),
        "PLtBQA7FZXBU2E2RcRLNnFHhzNKERnMV-L",
        "Sleep Sounds & Relaxation",
        "Gentle sounds to help you drift off",
        category="Sleep",
        emoji="😴",
        color="#F5F3FF",
    ),
    _playlist(
        ("yoga", "stretch", "flex", "mobil", "pilates"),
        "PLgzTt0k8mXzHQCkrHxBTQNLIUUMm8XEIQ",
        "Yoga Flow Music",
        "Peaceful music for flow and flexibility",
        category="Yoga",
        emoji="🌿",
        color="#ECFDF5",
    ),
    _playlist(
        ("morning", "wake", "rise", "routine"),
        "PLgzTt0k8mXzEk586ze4BjKDn2KKOIUmMX",
        "Morning Energy Boost",
        "Start your day with positive vibes",
        category="Morning",
        emoji="☀️",
        color="#FFFBEB",
    ),
    _playlist(
        ("read", "book", "learn"),
        "PLOfLYVXrwqBwbNnkVWUfFHFpbmmr5VJo_",
        "Reading Ambience",
        "Calm background music for reading",
        category="Reading",
        emoji="📚",
        color="#EFF6FF",
    ),
    _playlist(
        ("journal", "write", "diary"),
        "PLQ_PIlf6OzqJpURN4dFxHV82l4vV7OEKZ",
        "Journaling Atmosphere",
        "Reflective ambient sounds for writing",
        category="Journal",
        emoji="✍️",
        color="#FDF4FF",
    ),
    _playlist(
        ("walk", "step", "outdoor", "nature", "hike"),
        "PLgzTt0k8mXzHQCkrHxBTQNLIUUMm8XEIQ",
        "Nature Walk Vibes",
        "Easy listening for your daily walk",
        category="Walk",
        emoji="🚶",
        color="#F0FDF4",
    ),
    _playlist(
        ("cook", "food", "eat", "nutrition", "diet", "meal"),
        "PLx65qkgCWNJIgq1Mj0rtsthQSXe3bQoLt",
        "Cooking Vibes",
        "Feel-good music for the kitchen",
        category="Cooking",
        emoji="🍳",
        color="#FFF7ED",
    ),
    _playlist(
        ("langua", "spanish", "french", "german", "chinese", "japanese", "speak"),
        "PLOfLYVXrwqBwbNnkVWUfFHFpbmmr5VJo_",
        "Language Learning Focus",
        "Concentration music for language study",
        category="Language",
        emoji="🌍",
        color="#EEF2FF",
    ),
    _playlist(
        ("cold", "shower", "ice"),
        "PLx65qkgCWNJIgq1Mj0rtsthQSXe3bQoLt",
        "Cold Shower Pump-Up",
        "High energy to get you through it",
        category="Energy",
        emoji="⚡",
        color="#FFF1F2",
    ),
    _playlist(
        ("gratitude", "thankful", "positive", "mindset", "affirm"),
        "PLQ_PIlf6OzqJpURN4dFxHV82l4vV7OEKZ",
        "Positive Mindset Music",
        "Uplifting tracks for a grateful mindset",
        category="Mindset",
        emoji="✨",
        color="#FFFBEB",
    ),
    _playlist(
        ("saving", "money", "financ", "budget", "invest"),
        "PLOfLYVXrwqBwbNnkVWUfFHFpbmmr5VJo_",
        "Deep Work: Finance Mode",
        "Focus music for planning and analysis",
        category="Finance",
        emoji="💰",
        color="#F0FDF4",
    ),
)

FALLBACK_PLAYLIST = MediaSuggestion(
    id="PLx65qkgCWNJIgq1Mj0rtsthQSXe3bQoLt",
    title="Motivation & Success",
    description="Fuel your habits with great music",
    category="Motivation",
    emoji="🚀",
    color="#EEF2FF",
)


def match_entry(habit_name: str, entries: Sequence[SuggestionEntry], fallback: MediaSuggestion) -> MediaSuggestion:
    lowered = habit_name.lower()
    for entry in entries:
        if any(keyword in lowered for keyword in entry.keywords):
            return entry.suggestion
    return fallback


def suggest_video(habit_name: str) -> MediaSuggestion:
    return match_entry(habit_name, VIDEO_SUGGESTIONS, FALLBACK_VIDEO)


def suggest_playlist(habit_name: str) -> MediaSuggestion:
    return match_entry(habit_name, PLAYLIST_SUGGESTIONS, FALLBACK_PLAYLIST)


def suggest(habit_name: str) -> HabitSuggestion:
    """Resolve both suggestions for a habit name."""

    return HabitSuggestion(video=suggest_video(habit_name), playlist=suggest_playlist(habit_name))


__all__ = [
    "FALLBACK_PLAYLIST",
    "FALLBACK_VIDEO",
    "PLAYLIST_SUGGESTIONS",
    "SuggestionEntry",
    "VIDEO_SUGGESTIONS",
    "match_entry",
    "suggest",
    "suggest_playlist",
    "suggest_video",
]
