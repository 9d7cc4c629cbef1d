import pytest

from solo_quiz.core.models import (
    Feedback,
    FillBlankQuestion,
    LeaderboardEntry,
    MultipleChoiceQuestion,
    QuestionKind,
    TrueFalseQuestion,
    correct_answer_display,
    is_correct,
)


@pytest.fixture
def capital_question():
    return MultipleChoiceQuestion(
        text="Capital of France?",
        options=("Berlin", "Paris", "Rome", "Madrid"),
        correct_index=2,
    )


def test_multiple_choice_accepts_correct_index(capital_question):
    assert is_correct(capital_question, "2")
    assert is_correct(capital_question, " 2 ")


def test_multiple_choice_accepts_option_text_case_insensitively(capital_question):
    assert is_correct(capital_question, "paris")
    assert is_correct(capital_question, "  PARIS ")


def test_multiple_choice_rejects_other_options(capital_question):
    assert not is_correct(capital_question, "1")
    assert not is_correct(capital_question, "Berlin")
    assert not is_correct(capital_question, "7")
    assert not is_correct(capital_question, "")


def test_multiple_choice_requires_four_options():
    with pytest.raises(ValueError):
        MultipleChoiceQuestion(text="Q?", options=("a", "b", "c"), correct_index=1)


@pytest.mark.parametrize("index", [0, 5])
def test_multiple_choice_rejects_out_of_range_index(index):
    with pytest.raises(ValueError):
        MultipleChoiceQuestion(text="Q?", options=("a", "b", "c", "d"), correct_index=index)


def test_options_are_stored_as_tuple():
    question = MultipleChoiceQuestion(text="Q?", options=["a", "b", "c", "d"], correct_index=4)
    assert question.options == ("a", "b", "c", "d")
    assert question.correct_option == "d"


@pytest.mark.parametrize("answer", ["true", "True", "T", " t "])
def test_true_false_accepts_true_spellings(answer):
    assert is_correct(TrueFalseQuestion(text="Sky is blue.", correct_value=True), answer)


@pytest.mark.parametrize("answer", ["false", "FALSE", "f"])
def test_true_false_accepts_false_spellings(answer):
    assert is_correct(TrueFalseQuestion(text="Fish can fly.", correct_value=False), answer)


@pytest.mark.parametrize("answer", ["yes", "", "maybe", "1"])
def test_true_false_rejects_unrecognised_input(answer):
    assert not is_correct(TrueFalseQuestion(text="Fish can fly.", correct_value=False), answer)
    assert not is_correct(TrueFalseQuestion(text="Sky is blue.", correct_value=True), answer)


def test_fill_blank_is_trimmed_and_case_insensitive():
    question = FillBlankQuestion(text="Symbol for gold?", expected_answer="  Au ")
    assert question.expected_answer == "Au"
    assert is_correct(question, "au")
    assert is_correct(question, " AU ")
    assert not is_correct(question, "Ag")


def test_fill_blank_empty_answer_is_wrong():
    question = FillBlankQuestion(text="Symbol for gold?", expected_answer="Au")
    assert not is_correct(question, "")
    assert not is_correct(question, "   ")


def test_absent_answer_is_never_correct(capital_question):
    assert not is_correct(capital_question, None)
    assert not is_correct(TrueFalseQuestion(text="x", correct_value=False), None)
    assert not is_correct(FillBlankQuestion(text="x", expected_answer="y"), None)


def test_blank_question_text_is_rejected():
    with pytest.raises(ValueError):
        TrueFalseQuestion(text="  ", correct_value=True)


def test_correct_answer_display(capital_question):
    assert correct_answer_display(capital_question) == "2. Paris"
    assert correct_answer_display(TrueFalseQuestion(text="x", correct_value=False)) == "False"
    assert FillBlankQuestion(text="x", expected_answer="Au").correct_answer_display() == "Au"


def test_question_kinds(capital_question):
    assert capital_question.kind is QuestionKind.MULTIPLE_CHOICE
    assert TrueFalseQuestion(text="x", correct_value=True).kind.value == "TF"
    assert FillBlankQuestion(text="x", expected_answer="y").kind.value == "FIB"


def test_feedback_explanations(capital_question):
    right = Feedback.for_question(capital_question, True, timed_out=False)
    wrong = Feedback.for_question(capital_question, False, timed_out=False)
    late = Feedback.for_question(capital_question, False, timed_out=True)

    assert right.correct and right.explanation == ""
    assert wrong.explanation == "Wrong! 2. Paris"
    assert late.explanation == "Time up! 2. Paris"
    assert late.timed_out


def test_leaderboard_entry_line():
    entry = LeaderboardEntry(name="Ana", score=7, total=10, timestamp="2024-01-01 10:00")
    assert entry.format_line() == "Ana - 7/10 @ 2024-01-01 10:00"


@pytest.mark.parametrize("answer", ["0_2", "2_", "\uff12", " 0x2"])
def test_multiple_choice_index_must_be_plain_digits(capital_question, answer):
    assert not is_correct(capital_question, answer)


@pytest.mark.parametrize("answer", ["+2", "02"])
def test_multiple_choice_accepts_signed_and_padded_digits(capital_question, answer):
    assert is_correct(capital_question, answer)
