"""Domain models for the quiz application.

Questions are a tagged union of three frozen dataclasses. Grading lives in the
module-level ``is_correct`` / ``correct_answer_display`` functions so every
question kind is handled in one place; the per-class methods only delegate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from solo_quiz.utils.text_utils import parse_plain_int

OPTION_COUNT = 4

_TRUE_INPUTS = frozenset({"true", "t"})
_FALSE_INPUTS = frozenset({"false", "f"})


class QuestionKind(Enum):
    """Question kinds, valued by the tag used in the bank file."""

    MULTIPLE_CHOICE = "MCQ"
    TRUE_FALSE = "TF"
    FILL_BLANK = "FIB"


def _require_text(text: str) -> None:
    if not text or not text.strip():
        raise ValueError("Question text must not be empty.")


@dataclass(frozen=True, slots=True)
class MultipleChoiceQuestion:
    """Question with exactly four options and a 1-based correct index."""

    text: str
    options: tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        _require_text(self.text)
        options = tuple(self.options)
        if len(options) != OPTION_COUNT:
            raise ValueError("Each question must have exactly four options.")
        if not 1 <= self.correct_index <= OPTION_COUNT:
            raise ValueError("Correct option index must be between 1 and 4.")
        object.__setattr__(self, "options", options)

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.MULTIPLE_CHOICE

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index - 1]

    def is_correct(self, answer: str | None) -> bool:
        return is_correct(self, answer)

    def correct_answer_display(self) -> str:
        return correct_answer_display(self)


@dataclass(frozen=True, slots=True)
class TrueFalseQuestion:
    """Statement the participant marks as true or false."""

    text: str
    correct_value: bool

    def __post_init__(self) -> None:
        _require_text(self.text)

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TRUE_FALSE

    def is_correct(self, answer: str | None) -> bool:
        return is_correct(self, answer)

    def correct_answer_display(self) -> str:
        return correct_answer_display(self)


@dataclass(frozen=True, slots=True)
class FillBlankQuestion:
    """Free-text question; the stored answer is trimmed on construction."""

    text: str
    expected_answer: str

    def __post_init__(self) -> None:
        _require_text(self.text)
        object.__setattr__(self, "expected_answer", (self.expected_answer or "").strip())

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.FILL_BLANK

    def is_correct(self, answer: str | None) -> bool:
        return is_correct(self, answer)

    def correct_answer_display(self) -> str:
        return correct_answer_display(self)


Question = Union[MultipleChoiceQuestion, TrueFalseQuestion, FillBlankQuestion]


def is_correct(question: Question, answer: str | None) -> bool:
    """Grade ``answer`` against ``question``. An absent answer is never correct."""
    if answer is None:
        return False
    cleaned = answer.strip()

    if isinstance(question, MultipleChoiceQuestion):
        if parse_plain_int(cleaned) == question.correct_index:
            return True
        # Wrong numbers fall through to the text comparison as well.
        return cleaned.casefold() == question.correct_option.strip().casefold()

    if isinstance(question, TrueFalseQuestion):
        lowered = cleaned.lower()
        if lowered in _TRUE_INPUTS:
            return question.correct_value is True
        if lowered in _FALSE_INPUTS:
            return question.correct_value is False
        return False

    if isinstance(question, FillBlankQuestion):
        if not cleaned:
            return False
        return cleaned.casefold() == question.expected_answer.casefold()

    raise TypeError(f"Unsupported question type: {type(question).__name__}")


def correct_answer_display(question: Question) -> str:
    """Human-readable correct answer used in feedback messages."""
    if isinstance(question, MultipleChoiceQuestion):
        return f"{question.correct_index}. {question.correct_option}"
    if isinstance(question, TrueFalseQuestion):
        return "True" if question.correct_value else "False"
    if isinstance(question, FillBlankQuestion):
        return question.expected_answer
    raise TypeError(f"Unsupported question type: {type(question).__name__}")


@dataclass(frozen=True, slots=True)
class Feedback:
    """Outcome of grading one question."""

    correct: bool
    explanation: str
    timed_out: bool = False
    correct_answer: str = ""

    @classmethod
    def for_question(cls, question: Question, correct: bool, *, timed_out: bool) -> Feedback:
        display = correct_answer_display(question)
        if correct:
            return cls(correct=True, explanation="", timed_out=timed_out, correct_answer=display)
        prefix = "Time up! " if timed_out else "Wrong! "
        return cls(
            correct=False,
            explanation=prefix + display,
            timed_out=timed_out,
            correct_answer=display,
        )


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """One persisted quiz result."""

    name: str
    score: int
    total: int
    timestamp: str

    def format_line(self) -> str:
        return f"{self.name} - {self.score}/{self.total} @ {self.timestamp}"


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Snapshot handed to the shell once a session completes."""

    name: str
    score: int
    total: int
    leaderboard: list[LeaderboardEntry] = field(default_factory=list)
    warning: str | None = None
