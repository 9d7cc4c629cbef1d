import pytest

from solo_quiz.utils.text_utils import parse_plain_int, split_lines


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\r\nb\rc\nd", ["a", "b", "c", "d"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("a\x85b\u2028c\x0cd", ["a\x85b\u2028c\x0cd"]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("2", 2), ("+2", 2), ("-3", -3), ("007", 7), ("0_2", None), ("\u0662", None), ("", None), ("2 ", None)],
)
def test_parse_plain_int(text, expected):
    assert parse_plain_int(text) == expected
