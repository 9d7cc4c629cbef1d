from datetime import datetime
from pathlib import Path

import pytest

from solo_quiz.core.question_parser import format_question_bank
from solo_quiz.core.services.leaderboard import LeaderboardStore


class RecordingListener:
    """Session listener that keeps every notification for later assertions."""

    def __init__(self):
        self.presented = []
        self.feedback = []
        self.completed = []
        self.errors = []

    def on_question_presented(self, question, remaining_seconds):
        self.presented.append((question, remaining_seconds))

    def on_feedback(self, feedback):
        self.feedback.append(feedback)

    def on_session_complete(self, final_score, total, leaderboard):
        self.completed.append((final_score, total, leaderboard))

    def on_error(self, kind, message):
        self.errors.append((kind, message))


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 5, 14, 30)


@pytest.fixture
def results_path(tmp_path) -> Path:
    return tmp_path / "results.txt"


@pytest.fixture
def store(results_path, fixed_clock):
    return LeaderboardStore(results_path, clock=fixed_clock)


@pytest.fixture
def bank_file(tmp_path):
    def write(questions):
        path = tmp_path / "questions.txt"
        path.write_text(format_question_bank(questions), encoding="utf-8")
        return path

    return write
