"""Central constants for Streamlit session state keys, record keys and defaults."""

SS_HABIT_STATE: str = "habit_state"
SS_STATE_LOADED: str = "_habit_state_loaded"

NEW_HABIT_NAME_KEY: str = "new_habit_name"
PENDING_DELETE_HABIT_KEY: str = "pending_delete_habit_id"
PERSISTENCE_ERROR_KEY: str = "persistence_error"

HABITS_RECORD_KEY: str = "habits"
COMPLETIONS_RECORD_KEY: str = "completions"

SCHEMA_VERSION: int = 1

STREAK_HORIZON_DAYS: int = 365
WEEK_WINDOW_DAYS: int = 7
WEEKDAY_LABELS: tuple[str, ...] = ("M", "T", "W", "T", "F", "S", "S")

DEFAULT_SAVE_ATTEMPTS: int = 3
DEFAULT_SAVE_BACKOFF_SECONDS: float = 0.2
