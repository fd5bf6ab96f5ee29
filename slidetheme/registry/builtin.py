"""Built-in themes: the complete default theme and the named presets."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from ..errors import ThemeNotFound
from ..load.document import parse_theme_document
from ..models.partial import PartialTheme

THEMES_DIR = Path(__file__).resolve().parents[1] / "themes"
DEFAULT_THEME_PATH = THEMES_DIR / "default.yaml"
PRESETS_DIR = THEMES_DIR / "presets"


def _read_builtin(path: Path) -> PartialTheme:
    return parse_theme_document(path.read_text(encoding="utf-8"), origin=f"builtin:{path.stem}")


@lru_cache(maxsize=1)
def _default_document() -> PartialTheme:
    return _read_builtin(DEFAULT_THEME_PATH)


@lru_cache(maxsize=1)
def _preset_paths() -> Dict[str, Path]:
    return {path.stem: path for path in sorted(PRESETS_DIR.glob("*.yaml"))}


@lru_cache(maxsize=None)
def _preset_document(name: str) -> PartialTheme:
    return _read_builtin(_preset_paths()[name])


def default_theme() -> PartialTheme:
    """Return the complete default theme.

    The document is parsed once per process; every caller gets its own deep copy.
    """
    return _default_document().model_copy(deep=True)


def builtin_names() -> List[str]:
    return sorted(_preset_paths())


def lookup_builtin(name: str) -> PartialTheme:
    """Return the partial override document for a named preset."""
    if name not in _preset_paths():
        raise ThemeNotFound(name)
    return _preset_document(name).model_copy(deep=True)
