"""Pydantic models for slidetheme contracts."""

from .base import PartialModel, ResolvedModel, ThemeBaseModel
from .config import Config
from .partial import PartialTheme
from .resolved import (
    Alignment,
    Color,
    ColorPair,
    FooterMode,
    IntroPositioning,
    Margin,
    MarginUnit,
    Padding,
    ResolvedTheme,
)
from .validation import ThemeIssue, ThemeValidationReport

__all__ = [
    "Config",
    "ThemeBaseModel",
    "PartialModel",
    "ResolvedModel",
    "PartialTheme",
    "ResolvedTheme",
    "Alignment",
    "Color",
    "ColorPair",
    "FooterMode",
    "IntroPositioning",
    "Margin",
    "MarginUnit",
    "Padding",
    "ThemeIssue",
    "ThemeValidationReport",
]
