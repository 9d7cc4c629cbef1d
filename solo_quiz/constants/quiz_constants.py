"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_PER_QUESTION_SECONDS: int = 10
MAX_QUESTIONS_PER_SESSION: int = 10
LEADERBOARD_LIMIT: int = 10
FEEDBACK_PAUSE_MS: int = 900
TIME_LIMIT_WARNING_SECONDS: int = 3

DEFAULT_BANK_FILENAME: str = "questions.txt"
DEFAULT_RESULTS_FILENAME: str = "results.txt"

# Zero-padded so that string order equals chronological order.
TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M"
