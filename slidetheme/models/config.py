"""Config model."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, constr

from .base import ThemeBaseModel

NonEmptyStr = constr(min_length=1)


class Config(ThemeBaseModel):
    theme: NonEmptyStr = Field("dark", description="Built-in theme name or theme file path")
    overrides: List[NonEmptyStr] = Field(
        default_factory=list, description="Theme references applied after the theme, in order"
    )
    log_path: Optional[NonEmptyStr] = Field(None, description="JSONL event log path")
