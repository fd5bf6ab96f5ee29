"""Shared Pydantic base model helpers."""

from __future__ import annotations

import json
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class ThemeBaseModel(BaseModel):
    """Base model enforcing strict fields and stable JSON output."""

    model_config = ConfigDict(extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        """Return a deterministic dict representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=False)

    def to_json(self) -> str:
        """Return deterministic JSON with sorted keys."""
        return json.dumps(self.to_dict(), sort_keys=True, ensure_ascii=True)


class PartialModel(ThemeBaseModel):
    """Base for partial theme sections.

    Every field is optional and ``None`` means "inherit from the base document".
    Unknown keys are kept in ``model_extra`` so validation can report them.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    # Replace the base value wholesale instead of merging field by field.
    merge_whole: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def unknown_keys(self) -> list[str]:
        return sorted((self.model_extra or {}).keys())


class ResolvedModel(ThemeBaseModel):
    """Base for fully resolved, immutable theme sections."""

    model_config = ConfigDict(extra="forbid", frozen=True)
