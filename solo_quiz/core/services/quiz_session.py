"""State machine driving one timed quiz session from name entry to results."""

from __future__ import annotations

from enum import Enum, auto
from functools import partial
import logging
import random
from threading import RLock
import time
from typing import Callable, Protocol

from solo_quiz.constants.quiz_constants import (
    DEFAULT_TIME_PER_QUESTION_SECONDS,
    LEADERBOARD_LIMIT,
    MAX_QUESTIONS_PER_SESSION,
)
from solo_quiz.core.errors import (
    EmptyBankError,
    ErrorKind,
    InvalidStateError,
    PersistenceError,
    QuizError,
    ValidationError,
)
from solo_quiz.core.models import Feedback, LeaderboardEntry, Question, SessionResult, is_correct
from solo_quiz.core.question_parser import load_question_bank
from solo_quiz.core.services.countdown import DeadlineOutcome, QuestionDeadline
from solo_quiz.core.services.leaderboard import LeaderboardStore
from solo_quiz.core.settings import QuizSettings

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle of a quiz session."""

    AWAITING_NAME = auto()
    LOADING = auto()
    IN_PROGRESS = auto()
    COMPLETE = auto()


class SessionListener(Protocol):
    """Callbacks a presentation shell receives from the session."""

    def on_question_presented(self, question: Question, remaining_seconds: float) -> None: ...

    def on_feedback(self, feedback: Feedback) -> None: ...

    def on_session_complete(
        self, final_score: int, total: int, leaderboard: list[LeaderboardEntry]
    ) -> None: ...

    def on_error(self, kind: ErrorKind, message: str) -> None: ...


class NullSessionListener:
    """Listener that ignores every notification."""

    def on_question_presented(self, question: Question, remaining_seconds: float) -> None:
        pass

    def on_feedback(self, feedback: Feedback) -> None:
        pass

    def on_session_complete(
        self, final_score: int, total: int, leaderboard: list[LeaderboardEntry]
    ) -> None:
        pass

    def on_error(self, kind: ErrorKind, message: str) -> None:
        pass


class QuizSession:
    """Owns quiz progression: selection, timing, grading and completion.

    Transitions are serialized with a re-entrant lock because automatic expiry
    arrives on the deadline's timer thread, and listeners may call straight
    back into the session (for example ``advance()`` from ``on_feedback``).
    """

    def __init__(
        self,
        bank_loader: Callable[[], list[Question]],
        leaderboard: LeaderboardStore,
        *,
        listener: SessionListener | None = None,
        time_per_question_seconds: float = DEFAULT_TIME_PER_QUESTION_SECONDS,
        max_questions: int = MAX_QUESTIONS_PER_SESSION,
        leaderboard_limit: int = LEADERBOARD_LIMIT,
        auto_expire: bool = True,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if time_per_question_seconds <= 0:
            raise ValueError("Time per question must be positive.")
        if max_questions <= 0:
            raise ValueError("A session needs at least one question.")

        self._lock = RLock()
        self._bank_loader = bank_loader
        self._leaderboard = leaderboard
        self._listener: SessionListener = listener or NullSessionListener()
        self.time_per_question_seconds = time_per_question_seconds
        self.max_questions = max_questions
        self.leaderboard_limit = leaderboard_limit
        self._auto_expire = auto_expire
        self._rng = rng or random.Random()
        self._clock = clock

        self._state = SessionState.AWAITING_NAME
        self._participant_name: str | None = None
        self._questions: list[Question] = []
        self._position: int = -1
        self._score: int = 0
        self._deadline: QuestionDeadline | None = None
        self._question_live: bool = False
        self._result: SessionResult | None = None

    @classmethod
    def from_settings(
        cls,
        settings: QuizSettings,
        *,
        listener: SessionListener | None = None,
        auto_expire: bool = True,
    ) -> QuizSession:
        """Wire a session to the bank file and result log named in ``settings``."""
        return cls(
            partial(load_question_bank, settings.bank_path),
            LeaderboardStore(settings.results_path),
            listener=listener,
            time_per_question_seconds=settings.time_per_question_seconds,
            max_questions=settings.max_questions,
            leaderboard_limit=settings.leaderboard_limit,
            auto_expire=auto_expire,
        )

    # --- Read-only views ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def participant_name(self) -> str | None:
        return self._participant_name

    @property
    def ordered_questions(self) -> list[Question]:
        return list(self._questions)

    @property
    def position(self) -> int:
        return self._position

    @property
    def score(self) -> int:
        return self._score

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def question_number(self) -> int:
        """1-based number of the current question, 0 before the first."""
        return self._position + 1 if 0 <= self._position < len(self._questions) else 0

    @property
    def current_question(self) -> Question | None:
        if self._state is SessionState.IN_PROGRESS and 0 <= self._position < len(self._questions):
            return self._questions[self._position]
        return None

    @property
    def is_question_live(self) -> bool:
        return self._question_live

    @property
    def deadline(self) -> QuestionDeadline | None:
        return self._deadline

    @property
    def result(self) -> SessionResult | None:
        return self._result

    def remaining_seconds(self) -> float:
        with self._lock:
            if self._deadline is None or not self._question_live:
                return 0.0
            return self._deadline.remaining_seconds()

    # --- Transitions ---

    def start(self, name: str) -> None:
        """Accept the participant, load and shuffle the bank, enter IN_PROGRESS."""
        with self._lock:
            if self._state is not SessionState.AWAITING_NAME:
                raise InvalidStateError(f"Cannot start a session while {self._state.name}.")

            cleaned = (name or "").strip()
            if not cleaned:
                raise ValidationError("Please enter your name.")

            self._state = SessionState.LOADING
            try:
                bank = list(self._bank_loader())
                if not bank:
                    raise EmptyBankError("No questions found in the question bank.")
            except Exception:
                self._state = SessionState.AWAITING_NAME
                raise

            self._rng.shuffle(bank)
            self._participant_name = cleaned
            self._questions = bank[: self.max_questions]
            self._position = -1
            self._score = 0
            self._result = None
            self._question_live = False
            self._state = SessionState.IN_PROGRESS
            logger.info(
                "Session started for %s with %d of %d question(s)",
                cleaned,
                len(self._questions),
                len(bank),
            )

    def advance(self) -> Question | None:
        """Present the next question, or complete the session after the last one."""
        with self._lock:
            if self._state is not SessionState.IN_PROGRESS:
                raise InvalidStateError(f"Cannot advance while {self._state.name}.")
            if self._question_live:
                raise InvalidStateError("The current question has not been answered yet.")

            self._position += 1
            if self._position >= len(self._questions):
                self._complete()
                return None

            question = self._questions[self._position]
            deadline = QuestionDeadline(
                self.time_per_question_seconds,
                self._handle_expiry,
                auto_expire=self._auto_expire,
                clock=self._clock,
            )
            self._deadline = deadline
            self._question_live = True
            deadline.start()
            self._listener.on_question_presented(question, deadline.remaining_seconds())
            return question

    def submit(self, answer: str | None = None, *, timed_out: bool = False) -> Feedback:
        """Grade the live question. A timeout grades like an absent answer."""
        with self._lock:
            if self._state is not SessionState.IN_PROGRESS or not self._question_live:
                raise InvalidStateError("There is no question awaiting an answer.")

            # An answer arriving after the deadline ran out is graded as a timeout.
            if not timed_out and self._deadline is not None and self._deadline.remaining_seconds() <= 0:
                timed_out = True

            outcome = DeadlineOutcome.EXPIRED if timed_out else DeadlineOutcome.SUBMITTED
            if self._deadline is not None and not self._deadline.settle(outcome):
                raise InvalidStateError("The current question has already been resolved.")
            self._question_live = False

            question = self._questions[self._position]
            graded_answer = None if timed_out else answer
            correct = is_correct(question, graded_answer)
            if correct:
                self._score += 1
            feedback = Feedback.for_question(question, correct, timed_out=timed_out)
            logger.debug(
                "Question %d/%d graded: correct=%s timed_out=%s",
                self._position + 1,
                len(self._questions),
                correct,
                timed_out,
            )
            self._listener.on_feedback(feedback)
            return feedback

    def reset(self) -> None:
        """Abandon the current session without persisting anything."""
        with self._lock:
            if self._deadline is not None:
                self._deadline.cancel()
            if self._state is SessionState.IN_PROGRESS:
                logger.info("Session for %s abandoned", self._participant_name)
            self._deadline = None
            self._question_live = False
            self._participant_name = None
            self._questions = []
            self._position = -1
            self._score = 0
            self._result = None
            self._state = SessionState.AWAITING_NAME

    # --- Internals ---

    def _handle_expiry(self, deadline: QuestionDeadline) -> None:
        with self._lock:
            # A submit or reset may have won the race against the timer thread.
            if deadline is not self._deadline or not self._question_live:
                return
            try:
                self.submit(timed_out=True)
            except QuizError as exc:
                logger.warning("Automatic timeout failed: %s", exc)
                self._listener.on_error(exc.kind, str(exc))

    def _complete(self) -> None:
        name = self._participant_name or ""
        total = len(self._questions)
        self._state = SessionState.COMPLETE
        self._deadline = None
        warning: str | None = None

        try:
            self._leaderboard.record_result(name, self._score, total)
        except PersistenceError as exc:
            warning = str(exc)
            self._listener.on_error(ErrorKind.PERSISTENCE, warning)

        try:
            leaderboard = self._leaderboard.ranked_top(self.leaderboard_limit)
        except PersistenceError as exc:
            leaderboard = []
            if warning is None:
                warning = str(exc)
                self._listener.on_error(ErrorKind.PERSISTENCE, warning)

        self._result = SessionResult(
            name=name,
            score=self._score,
            total=total,
            leaderboard=leaderboard,
            warning=warning,
        )
        logger.info("Session for %s complete: %d/%d", name, self._score, total)
        self._listener.on_session_complete(self._score, total, leaderboard)
