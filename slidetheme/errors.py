"""Exceptions raised while loading and resolving themes."""

from __future__ import annotations

from typing import List

from .models.validation import ThemeIssue, ThemeValidationReport


class ThemeLoadError(Exception):
    """A theme source could not be turned into a partial theme document."""


class ThemeNotFound(ThemeLoadError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown built-in theme: {name}")
        self.name = name


class MalformedTheme(ThemeLoadError):
    def __init__(self, origin: str, location: str, detail: str) -> None:
        super().__init__(f"Malformed theme {origin} at {location}: {detail}")
        self.origin = origin
        self.location = location
        self.detail = detail


class ThemeIOError(ThemeLoadError):
    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Cannot read theme file {path}: {detail}")
        self.path = path
        self.detail = detail


class ThemeValidationFailed(Exception):
    """A merged theme violated one or more constraints; ``report`` lists all of them."""

    def __init__(self, report: ThemeValidationReport) -> None:
        count = len(report.issues)
        super().__init__(f"Theme rejected with {count} issue{'s' if count != 1 else ''}")
        self.report = report

    @property
    def issues(self) -> List[ThemeIssue]:
        return self.report.issues
