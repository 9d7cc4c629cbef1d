"""Question factories shared by the session tests."""

from solo_quiz.core.models import (
    FillBlankQuestion,
    MultipleChoiceQuestion,
    TrueFalseQuestion,
)


def make_questions(count):
    """Mixed bank with ``count`` questions, cycling through the three kinds."""
    questions = []
    for number in range(1, count + 1):
        if number % 3 == 1:
            questions.append(
                MultipleChoiceQuestion(
                    text=f"Question {number}?",
                    options=("alpha", "beta", "gamma", "delta"),
                    correct_index=2,
                )
            )
        elif number % 3 == 2:
            questions.append(TrueFalseQuestion(text=f"Statement {number}.", correct_value=True))
        else:
            questions.append(FillBlankQuestion(text=f"Blank {number}?", expected_answer="word"))
    return questions


def correct_answer_for(question):
    if isinstance(question, MultipleChoiceQuestion):
        return str(question.correct_index)
    if isinstance(question, TrueFalseQuestion):
        return "true" if question.correct_value else "false"
    return question.expected_answer
