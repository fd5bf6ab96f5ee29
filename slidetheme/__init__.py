"""Theme resolution for terminal presentations."""

from .errors import (
    MalformedTheme,
    ThemeIOError,
    ThemeLoadError,
    ThemeNotFound,
    ThemeValidationFailed,
)
from .load.loader import ThemeSource, load_theme_source
from .merge.merger import merge_layers, merge_theme
from .models import PartialTheme, ResolvedTheme, ThemeIssue, ThemeValidationReport
from .pipeline import ActiveTheme, resolve_default, resolve_theme
from .registry.builtin import builtin_names, default_theme, lookup_builtin
from .validate.resolver import collect_issues, validate_theme

__all__ = [
    "ActiveTheme",
    "MalformedTheme",
    "PartialTheme",
    "ResolvedTheme",
    "ThemeIOError",
    "ThemeIssue",
    "ThemeLoadError",
    "ThemeNotFound",
    "ThemeSource",
    "ThemeValidationFailed",
    "ThemeValidationReport",
    "builtin_names",
    "collect_issues",
    "default_theme",
    "load_theme_source",
    "lookup_builtin",
    "merge_layers",
    "merge_theme",
    "resolve_default",
    "resolve_theme",
    "validate_theme",
]
