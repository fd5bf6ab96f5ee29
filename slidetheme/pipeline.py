"""Theme resolution pipeline: load, merge onto the default theme, validate."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable, Optional

from .errors import ThemeLoadError, ThemeValidationFailed
from .load.loader import ThemeReference, ThemeSource, load_theme_source
from .logging_utils import log_event
from .merge.merger import merge_layers
from .models.resolved import ResolvedTheme
from .registry.builtin import default_theme
from .validate.resolver import validate_theme


def resolve_theme(
    reference: ThemeReference,
    overrides: Iterable[ThemeReference] = (),
    log_path: Optional[Path] = None,
) -> ResolvedTheme:
    """Resolve a theme reference into a ResolvedTheme.

    ``overrides`` are applied after the referenced theme, in order. Load failures raise
    ThemeLoadError before anything is merged; validation failures raise
    ThemeValidationFailed carrying every issue found.
    """
    sources = [ThemeSource.parse(reference)] + [ThemeSource.parse(item) for item in overrides]
    names = [source.describe() for source in sources]

    try:
        layers = [load_theme_source(source) for source in sources]
    except ThemeLoadError as exc:
        log_event(log_path, "THEME_REJECTED", {"sources": names, "stage": "load", "error": str(exc)})
        raise
    log_event(log_path, "THEME_LOADED", {"sources": names})

    merged = merge_layers(default_theme(), *layers)
    log_event(log_path, "THEME_MERGED", {"sources": names, "layers": len(layers)})

    try:
        resolved = validate_theme(merged)
    except ThemeValidationFailed as exc:
        log_event(log_path, "THEME_REJECTED", {
            "sources": names,
            "stage": "validate",
            "issues": [issue.to_dict() for issue in exc.issues],
        })
        raise
    log_event(log_path, "THEME_RESOLVED", {"sources": names})
    return resolved


def resolve_default() -> ResolvedTheme:
    """Resolve the built-in default theme with no overrides."""
    return validate_theme(default_theme())


class ActiveTheme:
    """Holds the theme currently in use and swaps it atomically on reload.

    Readers always see a complete ResolvedTheme. Reloads are serialised; a failed reload
    leaves the previous theme in place and re-raises the error.
    """

    def __init__(self, initial: Optional[ResolvedTheme] = None, log_path: Optional[Path] = None) -> None:
        self._current = initial if initial is not None else resolve_default()
        self._log_path = log_path
        self._write_lock = threading.Lock()

    @property
    def current(self) -> ResolvedTheme:
        return self._current

    def reload(self, reference: ThemeReference, overrides: Iterable[ThemeReference] = ()) -> ResolvedTheme:
        with self._write_lock:
            resolved = resolve_theme(reference, overrides, log_path=self._log_path)
            self._current = resolved
        return resolved
