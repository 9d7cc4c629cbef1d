"""Utilities for loading a question bank from the flat text format.

File format (blocks, blank lines between blocks are ignored):

    MCQ
    Question text
    First option
    Second option
    Third option
    Fourth option
    2               (1-based index of the correct option)

    TF
    Question text
    True            (anything other than "true" counts as false)

    FIB
    Question text
    Expected answer

Tags are case-insensitive. The parser is deliberately lenient: an unknown tag
line is skipped, a block with broken data is dropped, and a trailing block that
runs out of lines ends the parse without an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from solo_quiz.core.errors import LoadError
from solo_quiz.core.models import (
    FillBlankQuestion,
    MultipleChoiceQuestion,
    OPTION_COUNT,
    Question,
    QuestionKind,
    TrueFalseQuestion,
)
from solo_quiz.utils.text_utils import parse_plain_int, split_lines

logger = logging.getLogger(__name__)


def _build_multiple_choice(lines: Sequence[str]) -> Question | None:
    text = lines[0].strip()
    options = [line.strip() for line in lines[1 : 1 + OPTION_COUNT]]
    correct_index = parse_plain_int(lines[1 + OPTION_COUNT].strip())
    if not text or correct_index is None or not 1 <= correct_index <= OPTION_COUNT:
        return None
    return MultipleChoiceQuestion(text=text, options=tuple(options), correct_index=correct_index)


def _build_true_false(lines: Sequence[str]) -> Question | None:
    text = lines[0].strip()
    if not text:
        return None
    return TrueFalseQuestion(text=text, correct_value=lines[1].strip().lower() == "true")


def _build_fill_blank(lines: Sequence[str]) -> Question | None:
    text = lines[0].strip()
    if not text:
        return None
    return FillBlankQuestion(text=text, expected_answer=lines[1])


# Number of data lines that follow each tag, and the builder for them.
_BLOCK_LAYOUTS: dict[str, tuple[int, Callable[[Sequence[str]], Question | None]]] = {
    QuestionKind.MULTIPLE_CHOICE.value: (2 + OPTION_COUNT, _build_multiple_choice),
    QuestionKind.TRUE_FALSE.value: (2, _build_true_false),
    QuestionKind.FILL_BLANK.value: (2, _build_fill_blank),
}


def parse_question_bank(text: str) -> list[Question]:
    """Parse bank text into questions, in file order. Never raises."""
    lines = split_lines(text)
    questions: list[Question] = []
    index = 0
    while index < len(lines):
        tag = lines[index].strip().upper()
        if not tag:
            index += 1
            continue

        layout = _BLOCK_LAYOUTS.get(tag)
        if layout is None:
            logger.debug("Skipping unrecognised line %d: %r", index + 1, lines[index])
            index += 1
            continue

        data_line_count, build = layout
        if index + data_line_count >= len(lines):
            logger.debug(
                "Truncated %s block at line %d; keeping %d parsed question(s)",
                tag,
                index + 1,
                len(questions),
            )
            break

        block = lines[index + 1 : index + 1 + data_line_count]
        question = build(block)
        if question is None:
            logger.debug("Dropping malformed %s block at line %d", tag, index + 1)
        else:
            questions.append(question)
        index += 1 + data_line_count

    return questions


def load_question_bank(file_path: Path) -> list[Question]:
    """Read and parse a UTF-8 bank file; unreadable sources raise ``LoadError``."""
    file_path = Path(file_path)
    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Failed to read {file_path}\n{exc}") from exc

    questions = parse_question_bank(text)
    logger.info("Loaded %d question(s) from %s", len(questions), file_path)
    return questions


def format_question_bank(questions: Sequence[Question]) -> str:
    """Serialize questions back into the bank text format."""
    blocks = [_serialize_question(question) for question in questions]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def _serialize_question(question: Question) -> str:
    lines = [question.kind.value, question.text]
    if isinstance(question, MultipleChoiceQuestion):
        lines.extend(question.options)
        lines.append(str(question.correct_index))
    elif isinstance(question, TrueFalseQuestion):
        lines.append("True" if question.correct_value else "False")
    else:
        lines.append(question.expected_answer)
    return "\n".join(lines)
