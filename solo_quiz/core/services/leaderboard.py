"""Append-only result log and the ranking derived from it.

Every line of the log has the form::

    <name> - <score>/<total> @ <yyyy-MM-dd HH:mm>

The log is the only source of truth. ``ranked_top`` re-reads and re-ranks the
whole file on every call, so the board is correct after a crash or restart and
any external tool that appends well-formed lines is picked up automatically.
"""

from __future__ import annotations

from datetime import datetime
import logging
import os
from pathlib import Path
import re
from typing import Callable, Iterable

from solo_quiz.constants.quiz_constants import LEADERBOARD_LIMIT, TIMESTAMP_FORMAT
from solo_quiz.core.errors import PersistenceError
from solo_quiz.core.models import LeaderboardEntry
from solo_quiz.utils.text_utils import split_lines

logger = logging.getLogger(__name__)

_ENTRY_PATTERN = re.compile(
    r"^(?P<name>.+?) - (?P<score>\d+)/(?P<total>\d+) @ (?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2})$",
    re.ASCII,
)


def parse_entry(line: str) -> LeaderboardEntry | None:
    """Parse one log line; returns None when it does not match the grammar."""
    match = _ENTRY_PATTERN.match(line.strip())
    if match is None:
        return None
    name = match.group("name").strip()
    if not name:
        return None
    return LeaderboardEntry(
        name=name,
        score=int(match.group("score")),
        total=int(match.group("total")),
        timestamp=match.group("timestamp"),
    )


def rank_entries(entries: Iterable[LeaderboardEntry], limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
    """Sort by score, then timestamp, both descending, and keep the top ``limit``."""
    if limit <= 0:
        return []
    ranked = sorted(entries, key=lambda entry: (entry.score, entry.timestamp), reverse=True)
    return ranked[:limit]


def format_leaderboard_table(entries: Iterable[LeaderboardEntry]) -> str:
    """Render entries as the fixed-width table shown on the results screen."""
    lines = [
        f"{'#':<4} {'Name':<20} {'Score':<10} {'When':<16}",
        "-" * 46,
    ]
    for rank, entry in enumerate(entries, start=1):
        score = f"{entry.score}/{entry.total}"
        lines.append(f"{rank:<4} {entry.name:<20} {score:<10} {entry.timestamp:<16}")
    return "\n".join(lines) + "\n"


def _normalize_name(name: str) -> str:
    return " ".join(name.split())


class LeaderboardStore:
    """Appends results to the durable log and ranks them on demand."""

    def __init__(self, log_path: Path, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self.log_path = Path(log_path)
        self._clock = clock

    def record_result(self, name: str, score: int, total: int) -> LeaderboardEntry:
        """Append one result line, creating the log if needed."""
        cleaned_name = _normalize_name(name)
        if not cleaned_name:
            raise ValueError("Leaderboard entries need a name.")
        if score < 0 or total < 0:
            raise ValueError("Score and total must not be negative.")

        entry = LeaderboardEntry(
            name=cleaned_name,
            score=score,
            total=total,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
        )
        payload = entry.format_line() + "\n"
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            if self._needs_leading_newline():
                payload = "\n" + payload
            # One write of the whole line, then force it to disk.
            with self.log_path.open("a", encoding="utf-8", newline="\n") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            logger.warning("Failed to append result to %s: %s", self.log_path, exc)
            raise PersistenceError(f"Failed to write results to {self.log_path}: {exc}") from exc

        logger.info("Recorded result %s", entry.format_line())
        return entry

    def read_entries(self) -> list[LeaderboardEntry]:
        """Every well-formed entry of the log, in file order."""
        if not self.log_path.exists():
            return []
        try:
            text = self.log_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Failed to read leaderboard %s: %s", self.log_path, exc)
            raise PersistenceError(f"Failed to read results from {self.log_path}: {exc}") from exc

        entries: list[LeaderboardEntry] = []
        for line_number, line in enumerate(split_lines(text), start=1):
            entry = parse_entry(line)
            if entry is None:
                if line.strip():
                    logger.debug("Discarding leaderboard line %d: %r", line_number, line)
                continue
            entries.append(entry)
        return entries

    def ranked_top(self, limit: int = LEADERBOARD_LIMIT) -> list[LeaderboardEntry]:
        """Re-derive the top ``limit`` entries from the full log."""
        return rank_entries(self.read_entries(), limit)

    def _needs_leading_newline(self) -> bool:
        if not self.log_path.exists() or self.log_path.stat().st_size == 0:
            return False
        with self.log_path.open("rb") as handle:
            handle.seek(-1, os.SEEK_END)
            return handle.read(1) not in (b"\n", b"\r")
