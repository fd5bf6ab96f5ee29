"""YAML theme document parsing.

Turns YAML text into a PartialTheme. Only structure and wire types are checked here.
"""

from __future__ import annotations

from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from ..errors import MalformedTheme
from ..models.partial import PartialTheme


def _format_loc(loc: Iterable[Any]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _yaml_location(exc: yaml.YAMLError) -> str:
    mark = getattr(exc, "problem_mark", None)
    if mark is None:
        return "<unknown>"
    return f"{mark.line + 1}:{mark.column + 1}"


def parse_theme_document(text: str, origin: str = "<text>") -> PartialTheme:
    """Parse a YAML theme document into a PartialTheme.

    Raises MalformedTheme with a ``line:column`` location for YAML syntax errors and a
    dotted field path when a value has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedTheme(origin, _yaml_location(exc), str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedTheme(origin, "<root>", "theme document must be a mapping")

    try:
        return PartialTheme.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise MalformedTheme(origin, _format_loc(first["loc"]), first["msg"]) from exc
