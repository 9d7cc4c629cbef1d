"""Text helpers shared by the bank parser, grading and the result log reader."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_PLAIN_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def split_lines(text: str) -> list[str]:
    """Split on ``\\n``, ``\\r`` and ``\\r\\n`` only.

    ``str.splitlines`` also breaks on form feeds, NEL and the Unicode line and
    paragraph separators, which may legitimately appear inside a question.
    A final line terminator does not produce a trailing empty line.
    """
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_plain_int(text: str) -> int | None:
    """Parse optionally signed ASCII digits; None for anything else.

    Unlike ``int()`` this rejects digit separators (``"0_2"``) and non-ASCII
    digits.
    """
    if not _PLAIN_INTEGER.fullmatch(text):
        return None
    return int(text)
