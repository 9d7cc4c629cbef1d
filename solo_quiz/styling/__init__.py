"""Styling module for the SoloQuiz application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
