import pytest

from solo_quiz.styling.color_palette import ColorPalette, Theme
from solo_quiz.styling.styles import Styles


@pytest.mark.parametrize("theme", list(Theme))
def test_main_window_style_uses_theme_colours(theme):
    style = Styles.get_main_window_style(theme)

    assert ColorPalette.BACKGROUND_PRIMARY.get(theme) in style
    assert ColorPalette.TEXT_PRIMARY.get(theme) in style


def test_dark_theme_differs_from_light():
    assert Styles.get_main_window_style(Theme.DARK) != Styles.get_main_window_style(Theme.LIGHT)
    assert ColorPalette.FEEDBACK_WRONG.get(Theme.DARK) in Styles.get_feedback_style(False, Theme.DARK)


def test_timer_warning_colour():
    assert ColorPalette.TIMER_WARNING.get(Theme.DARK) in Styles.get_timer_style(True, Theme.DARK)
    assert ColorPalette.TEXT_PRIMARY.get(Theme.LIGHT) in Styles.get_timer_style(False)
