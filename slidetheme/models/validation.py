"""ThemeValidationReport contracts."""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field

from .base import ThemeBaseModel

IssueReason = Literal[
    "INVALID_COLOR",
    "OUT_OF_RANGE",
    "UNKNOWN_ENUM_VALUE",
    "UNKNOWN_KEY",
    "MISSING_VALUE",
    "MIXED_REPRESENTATION",
    "UNKNOWN_PLACEHOLDER",
]


class ThemeIssue(ThemeBaseModel):
    path: str
    reason: IssueReason
    message: str = ""

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}: {self.message}" if self.message else f"{self.path}: {self.reason}"


class ThemeValidationReport(ThemeBaseModel):
    issues: List[ThemeIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def reasons_at(self, path: str) -> List[str]:
        return [issue.reason for issue in self.issues if issue.path == path]
