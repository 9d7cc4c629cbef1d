"""Runtime settings for the quiz: file locations, timing and leaderboard size.

Defaults come from ``solo_quiz.constants``; every value can be overridden with
a ``SOLO_QUIZ_*`` environment variable. The paths are handed explicitly to the
parser and the leaderboard store rather than read from module globals.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from solo_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solo_quiz.constants.quiz_constants import (
    DEFAULT_BANK_FILENAME,
    DEFAULT_RESULTS_FILENAME,
    DEFAULT_TIME_PER_QUESTION_SECONDS,
    FEEDBACK_PAUSE_MS,
    LEADERBOARD_LIMIT,
    MAX_QUESTIONS_PER_SESSION,
)
from solo_quiz.styling.color_palette import Theme

ENV_BANK_PATH = "SOLO_QUIZ_BANK"
ENV_RESULTS_PATH = "SOLO_QUIZ_RESULTS"
ENV_TIME_LIMIT = "SOLO_QUIZ_TIME_LIMIT"
ENV_MAX_QUESTIONS = "SOLO_QUIZ_MAX_QUESTIONS"
ENV_LEADERBOARD_LIMIT = "SOLO_QUIZ_LEADERBOARD_LIMIT"
ENV_API_ENABLED = "SOLO_QUIZ_API"
ENV_API_PORT = "SOLO_QUIZ_API_PORT"
ENV_THEME = "SOLO_QUIZ_THEME"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class QuizSettings:
    """Settings shared by the desktop shell and the leaderboard viewer."""

    bank_path: Path
    results_path: Path
    time_per_question_seconds: int = DEFAULT_TIME_PER_QUESTION_SECONDS
    max_questions: int = MAX_QUESTIONS_PER_SESSION
    leaderboard_limit: int = LEADERBOARD_LIMIT
    feedback_pause_ms: int = FEEDBACK_PAUSE_MS
    api_enabled: bool = True
    api_host: str = DEFAULT_HOST
    api_port: int = DEFAULT_PORT
    theme: Theme = Theme.LIGHT

    def __post_init__(self) -> None:
        self.bank_path = Path(self.bank_path)
        self.results_path = Path(self.results_path)
        if self.time_per_question_seconds <= 0:
            raise ValueError("Time per question must be a positive number of seconds.")
        if self.max_questions <= 0:
            raise ValueError("Questions per session must be positive.")
        if self.leaderboard_limit <= 0:
            raise ValueError("Leaderboard size must be positive.")

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        base_dir: Path | None = None,
    ) -> QuizSettings:
        """Build settings from ``SOLO_QUIZ_*`` variables, relative to ``base_dir``."""
        env = os.environ if environ is None else environ
        root = Path.cwd() if base_dir is None else Path(base_dir)

        return cls(
            bank_path=_resolve_path(env.get(ENV_BANK_PATH), root, DEFAULT_BANK_FILENAME),
            results_path=_resolve_path(env.get(ENV_RESULTS_PATH), root, DEFAULT_RESULTS_FILENAME),
            time_per_question_seconds=_read_positive_int(
                env, ENV_TIME_LIMIT, DEFAULT_TIME_PER_QUESTION_SECONDS
            ),
            max_questions=_read_positive_int(env, ENV_MAX_QUESTIONS, MAX_QUESTIONS_PER_SESSION),
            leaderboard_limit=_read_positive_int(env, ENV_LEADERBOARD_LIMIT, LEADERBOARD_LIMIT),
            api_enabled=env.get(ENV_API_ENABLED, "1").strip().lower() not in _FALSE_VALUES,
            api_port=_read_positive_int(env, ENV_API_PORT, DEFAULT_PORT),
            theme=_read_theme(env),
        )


def _resolve_path(raw_value: str | None, root: Path, default_name: str) -> Path:
    if not raw_value or not raw_value.strip():
        return root / default_name
    path = Path(raw_value.strip()).expanduser()
    return path if path.is_absolute() else root / path


def _read_positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw_value = env.get(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        value = int(raw_value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}.") from exc
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}.")
    return value


def _read_theme(env: Mapping[str, str]) -> Theme:
    raw_value = env.get(ENV_THEME)
    if raw_value is None or not raw_value.strip():
        return Theme.LIGHT
    try:
        return Theme[raw_value.strip().upper()]
    except KeyError as exc:
        choices = ", ".join(theme.name.lower() for theme in Theme)
        raise ValueError(f"{ENV_THEME} must be one of {choices}, got {raw_value!r}.") from exc
