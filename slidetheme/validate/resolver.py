"""Theme validation and resolution.

Walks the resolved schema field by field against a merged partial document. Every
problem is recorded in one report; a ResolvedTheme is only built when the report is
empty.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple

from pydantic.fields import FieldInfo

from ..errors import ThemeValidationFailed
from ..models.base import PartialModel, ResolvedModel
from ..models.partial import PartialMargin, PartialTheme
from ..models.resolved import (
    FOOTER_PLACEHOLDERS,
    Color,
    Margin,
    MarginUnit,
    ResolvedTheme,
    template_placeholders,
)
from ..models.validation import IssueReason, ThemeIssue, ThemeValidationReport

_MARGIN_LIMITS = {MarginUnit.PERCENT: 100, MarginUnit.FIXED: 255}


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _range_text(low: Optional[int], high: Optional[int]) -> str:
    if high is None:
        return f"[{low}, ...)"
    return f"[{low}, {high}]"


def _bounds(field: FieldInfo) -> Tuple[Optional[int], Optional[int]]:
    low = high = None
    for constraint in field.metadata:
        low = getattr(constraint, "ge", low)
        high = getattr(constraint, "le", high)
    return low, high


class _Resolver:
    def __init__(self) -> None:
        self.issues: List[ThemeIssue] = []
        self.tree: Dict[str, Any] = {}
        self._failed: Set[str] = set()

    def add(self, path: str, reason: IssueReason, message: str) -> None:
        self.issues.append(ThemeIssue(path=path, reason=reason, message=message))
        self._failed.add(path)

    def lookup(self, path: str) -> Any:
        node: Any = self.tree
        for part in path.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def unknown_keys(self, partial: Optional[PartialModel], path: str) -> None:
        if partial is None:
            return
        for key in partial.unknown_keys():
            self.add(_join(path, key), "UNKNOWN_KEY", "not a recognised theme key")

    def model(self, cls: type, partial: Optional[PartialModel], path: str, into: Dict[str, Any]) -> None:
        self.unknown_keys(partial, path)
        fallbacks: Dict[str, str] = getattr(cls, "fallbacks", {})
        template_fields: Tuple[str, ...] = getattr(cls, "template_fields", ())

        for name, field in cls.model_fields.items():
            field_path = _join(path, name)
            raw = getattr(partial, name, None) if partial is not None else None
            annotation = field.annotation

            if annotation is Margin:
                self.margin(raw, field, field_path, into, name)
            elif isinstance(annotation, type) and issubclass(annotation, ResolvedModel) and annotation is not Color:
                child: Dict[str, Any] = {}
                into[name] = child
                self.model(annotation, raw, field_path, child)
            elif raw is None:
                self.missing(field, field_path, fallbacks.get(name), into, name)
            elif annotation is Color:
                self.color(raw, field_path, into, name)
            elif isinstance(annotation, type) and issubclass(annotation, Enum):
                self.enum(annotation, raw, field_path, into, name)
            else:
                self.scalar(raw, field, field_path, into, name, name in template_fields)

    def missing(
        self, field: FieldInfo, path: str, fallback: Optional[str], into: Dict[str, Any], name: str
    ) -> None:
        if fallback is not None:
            value = self.lookup(fallback)
            if value is not None:
                into[name] = value
                return
            if fallback in self._failed:
                # The fallback source is already reported.
                return
        if not field.is_required():
            return
        self.add(path, "MISSING_VALUE", "no value in the theme or its base")

    def color(self, raw: Any, path: str, into: Dict[str, Any], name: str) -> None:
        try:
            into[name] = Color.parse(raw)
        except ValueError as exc:
            self.add(path, "INVALID_COLOR", str(exc))

    def enum(self, enum_cls: type, raw: Any, path: str, into: Dict[str, Any], name: str) -> None:
        try:
            into[name] = enum_cls(raw)
        except ValueError:
            choices = ", ".join(member.value for member in enum_cls)
            self.add(path, "UNKNOWN_ENUM_VALUE", f"{raw!r} is not one of: {choices}")

    def scalar(
        self, raw: Any, field: FieldInfo, path: str, into: Dict[str, Any], name: str, is_template: bool
    ) -> None:
        if isinstance(raw, int) and not isinstance(raw, bool):
            low, high = _bounds(field)
            if (low is not None and raw < low) or (high is not None and raw > high):
                self.add(path, "OUT_OF_RANGE", f"{raw} is outside {_range_text(low, high)}")
                return
        if is_template:
            unknown = [token for token in template_placeholders(raw) if token not in FOOTER_PLACEHOLDERS]
            if unknown:
                names = ", ".join("{" + token + "}" for token in unknown)
                self.add(path, "UNKNOWN_PLACEHOLDER", f"unsupported placeholder {names}")
                return
        into[name] = raw

    def margin(
        self, raw: Optional[PartialMargin], field: FieldInfo, path: str, into: Dict[str, Any], name: str
    ) -> None:
        if raw is None:
            self.missing(field, path, None, into, name)
            return
        self.unknown_keys(raw, path)
        if raw.percent is not None and raw.fixed is not None:
            self.add(path, "MIXED_REPRESENTATION", "margin takes either percent or fixed, not both")
            return
        if raw.percent is not None:
            unit, value = MarginUnit.PERCENT, raw.percent
        elif raw.fixed is not None:
            unit, value = MarginUnit.FIXED, raw.fixed
        else:
            self.add(path, "MISSING_VALUE", "margin needs a percent or fixed value")
            return
        limit = _MARGIN_LIMITS[unit]
        if not 0 <= value <= limit:
            self.add(_join(path, unit.value), "OUT_OF_RANGE", f"{value} is outside [0, {limit}]")
            return
        into[name] = {"unit": unit, "value": value}


def _resolve(document: PartialTheme) -> Tuple[Optional[ResolvedTheme], ThemeValidationReport]:
    resolver = _Resolver()
    resolver.model(ResolvedTheme, document, "", resolver.tree)
    report = ThemeValidationReport(issues=resolver.issues)
    if not report.ok:
        return None, report
    return ResolvedTheme.model_validate(resolver.tree), report


def collect_issues(document: PartialTheme) -> ThemeValidationReport:
    """Return every constraint violation in ``document`` (an empty report when it is valid)."""
    return _resolve(document)[1]


def validate_theme(document: PartialTheme) -> ResolvedTheme:
    """Resolve a merged document, raising ThemeValidationFailed with the full issue list."""
    resolved, report = _resolve(document)
    if resolved is None:
        raise ThemeValidationFailed(report)
    return resolved
