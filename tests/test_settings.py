from pathlib import Path

import pytest

from solo_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solo_quiz.core.settings import QuizSettings
from solo_quiz.styling.color_palette import Theme


def test_defaults_resolve_against_base_dir(tmp_path):
    settings = QuizSettings.from_environment({}, base_dir=tmp_path)

    assert settings.bank_path == tmp_path / "questions.txt"
    assert settings.results_path == tmp_path / "results.txt"
    assert settings.time_per_question_seconds == 10
    assert settings.max_questions == 10
    assert settings.leaderboard_limit == 10
    assert settings.api_enabled
    assert (settings.api_host, settings.api_port) == (DEFAULT_HOST, DEFAULT_PORT)


def test_environment_overrides(tmp_path):
    absolute_results = tmp_path / "elsewhere" / "log.txt"
    settings = QuizSettings.from_environment(
        {
            "SOLO_QUIZ_BANK": "banks/geo.txt",
            "SOLO_QUIZ_RESULTS": str(absolute_results),
            "SOLO_QUIZ_TIME_LIMIT": "15",
            "SOLO_QUIZ_MAX_QUESTIONS": " 5 ",
            "SOLO_QUIZ_LEADERBOARD_LIMIT": "3",
            "SOLO_QUIZ_API": "off",
            "SOLO_QUIZ_API_PORT": "9000",
        },
        base_dir=tmp_path,
    )

    assert settings.bank_path == tmp_path / "banks" / "geo.txt"
    assert settings.results_path == absolute_results
    assert settings.time_per_question_seconds == 15
    assert settings.max_questions == 5
    assert settings.leaderboard_limit == 3
    assert not settings.api_enabled
    assert settings.api_port == 9000


@pytest.mark.parametrize("value", ["abc", "0", "-2"])
def test_invalid_numbers_name_the_variable(tmp_path, value):
    with pytest.raises(ValueError, match="SOLO_QUIZ_TIME_LIMIT"):
        QuizSettings.from_environment({"SOLO_QUIZ_TIME_LIMIT": value}, base_dir=tmp_path)


def test_paths_are_coerced():
    settings = QuizSettings(bank_path="q.txt", results_path="r.txt")
    assert isinstance(settings.bank_path, Path)
    assert isinstance(settings.results_path, Path)


def test_direct_construction_validates_numbers():
    with pytest.raises(ValueError):
        QuizSettings(bank_path="q.txt", results_path="r.txt", max_questions=0)


def test_theme_defaults_to_light(tmp_path):
    assert QuizSettings.from_environment({}, base_dir=tmp_path).theme is Theme.LIGHT


def test_theme_from_environment(tmp_path):
    settings = QuizSettings.from_environment({"SOLO_QUIZ_THEME": " Dark "}, base_dir=tmp_path)
    assert settings.theme is Theme.DARK


def test_unknown_theme_names_the_variable(tmp_path):
    with pytest.raises(ValueError, match="SOLO_QUIZ_THEME"):
        QuizSettings.from_environment({"SOLO_QUIZ_THEME": "sepia"}, base_dir=tmp_path)
