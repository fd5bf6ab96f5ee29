"""Deep merge of partial theme documents.

Values present in the override win; absent values (``None``) defer to the base. Nested
sections merge field by field, which also gives per-key merging for the fixed-key
sections (heading levels, alert kinds, execution statuses). Margins are replaced whole so a
merge never mixes ``percent`` and ``fixed``. Neither input is mutated.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from ..models.base import PartialModel
from ..models.partial import PartialTheme

M = TypeVar("M", bound=PartialModel)


def _merge_value(base: Any, override: Any) -> Any:
    if override is None:
        return base.model_copy(deep=True) if isinstance(base, PartialModel) else base
    if isinstance(base, PartialModel) and isinstance(override, PartialModel):
        return _merge_model(base, override)
    if isinstance(override, PartialModel):
        return override.model_copy(deep=True)
    return override


def _merge_model(base: Optional[M], override: Optional[M]) -> Optional[M]:
    if override is None:
        return base.model_copy(deep=True) if base is not None else None
    if base is None or override.merge_whole:
        return override.model_copy(deep=True)

    values = {}
    for name in type(base).model_fields:
        merged = _merge_value(getattr(base, name), getattr(override, name))
        if merged is not None:
            values[name] = merged
    # Unknown keys travel with the document so validation can report them.
    extras = dict(base.model_extra or {})
    extras.update(override.model_extra or {})
    return type(base)(**values, **extras)


def merge_theme(base: PartialTheme, override: PartialTheme) -> PartialTheme:
    """Merge ``override`` onto ``base`` and return a new document."""
    return _merge_model(base, override)


def merge_layers(base: PartialTheme, *overrides: PartialTheme) -> PartialTheme:
    """Fold several overrides onto ``base``; later layers take precedence."""
    merged = base.model_copy(deep=True)
    for override in overrides:
        merged = merge_theme(merged, override)
    return merged
