"""Error taxonomy shared by the quiz core and its presentation shells."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories reported to ``SessionListener.on_error``."""

    VALIDATION = "validation"
    LOAD = "load"
    EMPTY_BANK = "empty_bank"
    INVALID_STATE = "invalid_state"
    PERSISTENCE = "persistence"


class QuizError(Exception):
    """Base class for every error raised by the quiz core."""

    kind: ErrorKind


class ValidationError(QuizError):
    """Raised when the participant name is empty."""

    kind = ErrorKind.VALIDATION


class LoadError(QuizError):
    """Raised when the question bank source cannot be read."""

    kind = ErrorKind.LOAD


class EmptyBankError(QuizError):
    """Raised when the question bank parses to zero questions."""

    kind = ErrorKind.EMPTY_BANK


class InvalidStateError(QuizError):
    """Raised when a session operation is invoked in the wrong state."""

    kind = ErrorKind.INVALID_STATE


class PersistenceError(QuizError):
    """Raised when the leaderboard log cannot be appended to or read."""

    kind = ErrorKind.PERSISTENCE
