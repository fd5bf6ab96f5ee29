"""Theme source loading.

A theme reference is either the name of a built-in preset, a path to a YAML file, or
inline YAML text. Loading only shapes data into a PartialTheme; it does not validate
colors, enums or ranges.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Union

from ..errors import MalformedTheme, ThemeIOError
from ..models.base import ThemeBaseModel
from ..models.partial import PartialTheme
from ..registry.builtin import lookup_builtin
from .document import parse_theme_document

SourceKind = Literal["builtin", "file", "text"]


class ThemeSource(ThemeBaseModel):
    kind: SourceKind
    value: str
    label: Optional[str] = None

    @classmethod
    def builtin(cls, name: str) -> "ThemeSource":
        return cls(kind="builtin", value=name)

    @classmethod
    def file(cls, path: Union[str, Path]) -> "ThemeSource":
        return cls(kind="file", value=str(path))

    @classmethod
    def text(cls, content: str, label: str = "<text>") -> "ThemeSource":
        return cls(kind="text", value=content, label=label)

    @classmethod
    def parse(cls, reference: Union[str, Path, "ThemeSource"]) -> "ThemeSource":
        """Interpret a user supplied reference: paths and ``*.yaml`` names are files."""
        if isinstance(reference, ThemeSource):
            return reference
        if isinstance(reference, Path):
            return cls.file(reference)
        if looks_like_path(reference):
            return cls.file(reference)
        return cls.builtin(reference)

    def describe(self) -> str:
        if self.kind == "text":
            return self.label or "<text>"
        return f"{self.kind}:{self.value}"


ThemeReference = Union[str, Path, ThemeSource]


def looks_like_path(reference: str) -> bool:
    """Return True when a textual reference names a file rather than a built-in theme."""
    return reference.endswith((".yaml", ".yml")) or "/" in reference or "\\" in reference


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedTheme(str(path), "<encoding>", str(exc)) from exc
    except OSError as exc:
        raise ThemeIOError(str(path), exc.strerror or str(exc)) from exc


def load_theme_source(reference: ThemeReference) -> PartialTheme:
    """Load a partial theme document.

    Raises ThemeNotFound for unknown built-in names, MalformedTheme for documents that do
    not parse into the theme shape and ThemeIOError when a file cannot be read.
    """
    source = ThemeSource.parse(reference)
    if source.kind == "builtin":
        return lookup_builtin(source.value)
    if source.kind == "file":
        path = Path(source.value)
        return parse_theme_document(_read_file(path), origin=str(path))
    return parse_theme_document(source.value, origin=source.describe())
