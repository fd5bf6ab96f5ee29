"""Resolved theme contracts handed to the rendering layer."""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Optional, Tuple

from pydantic import Field, model_serializer, model_validator

from .base import ResolvedModel

Percent = Annotated[int, Field(ge=0, le=100)]
Byte = Annotated[int, Field(ge=0, le=255)]
Short = Annotated[int, Field(ge=0, le=65535)]
FontSize = Annotated[int, Field(ge=1, le=7)]
D2ThemeId = Annotated[int, Field(ge=0)]

NAMED_COLORS = frozenset(
    {
        "black",
        "dark_grey",
        "red",
        "dark_red",
        "green",
        "dark_green",
        "yellow",
        "dark_yellow",
        "blue",
        "dark_blue",
        "magenta",
        "dark_magenta",
        "cyan",
        "dark_cyan",
        "white",
        "grey",
    }
)

_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")

FOOTER_PLACEHOLDERS = frozenset(
    {"current_slide", "total_slides", "title", "sub_title", "event", "location", "date", "author"}
)
_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class IntroPositioning(str, Enum):
    BELOW_TITLE = "below_title"
    PAGE_BOTTOM = "page_bottom"


class FooterMode(str, Enum):
    TEMPLATE = "template"
    PROGRESS_BAR = "progress_bar"
    NONE = "none"


class MarginUnit(str, Enum):
    PERCENT = "percent"
    FIXED = "fixed"


class Color(ResolvedModel):
    """A terminal color: either an RGB triplet or one of the named colors."""

    rgb: Optional[Tuple[int, int, int]] = None
    name: Optional[str] = None

    @classmethod
    def parse(cls, text: Any) -> "Color":
        """Parse ``eed49f`` style hex strings or a named color; raise ValueError otherwise."""
        if not isinstance(text, str):
            raise ValueError(f"expected a color string, got {type(text).__name__}")
        if text in NAMED_COLORS:
            return cls(name=text)
        if not _HEX_COLOR.fullmatch(text):
            raise ValueError(f"expected 6 hex digits or a named color, got {text!r}")
        return cls(rgb=(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)))

    @model_validator(mode="before")
    @classmethod
    def accept_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            parsed = cls.parse(data)
            return {"rgb": parsed.rgb, "name": parsed.name}
        return data

    @model_serializer
    def serialize_as_text(self) -> str:
        return self.name if self.name is not None else self.hex

    @property
    def hex(self) -> Optional[str]:
        if self.rgb is None:
            return None
        return "{:02x}{:02x}{:02x}".format(*self.rgb)


class Margin(ResolvedModel):
    unit: MarginUnit
    value: Byte

    def columns(self, width: int) -> int:
        """Return the margin in columns for a terminal ``width`` columns wide."""
        if self.unit is MarginUnit.PERCENT:
            return width * self.value // 100
        return self.value


class Padding(ResolvedModel):
    horizontal: Byte
    vertical: Byte


class ColorPair(ResolvedModel):
    fallbacks: ClassVar[Dict[str, str]] = {
        "foreground": "default.colors.foreground",
        "background": "default.colors.background",
    }

    foreground: Color
    background: Color


class DefaultStyle(ResolvedModel):
    margin: Margin
    colors: ColorPair


class SlideTitleStyle(ResolvedModel):
    alignment: Alignment
    padding_top: Byte
    padding_bottom: Byte
    separator: bool
    bold: bool
    italics: bool
    underlined: bool
    font_size: FontSize
    prefix: str
    colors: ColorPair


class CodeBlockStyle(ResolvedModel):
    alignment: Alignment
    minimum_size: Short
    minimum_margin: Margin
    theme_name: str
    padding: Padding
    background: bool
    line_numbers: bool


class ExecutionStatusColors(ResolvedModel):
    running: ColorPair
    success: ColorPair
    failure: ColorPair
    not_started: ColorPair


class ExecutionOutputStyle(ResolvedModel):
    colors: ColorPair
    status: ExecutionStatusColors
    padding: Padding


class InlineCodeStyle(ResolvedModel):
    colors: ColorPair


class IntroElementStyle(ResolvedModel):
    alignment: Alignment
    colors: ColorPair
    font_size: FontSize = 1
    positioning: IntroPositioning = IntroPositioning.BELOW_TITLE


class IntroSlideStyle(ResolvedModel):
    title: IntroElementStyle
    subtitle: IntroElementStyle
    event: IntroElementStyle
    location: IntroElementStyle
    date: IntroElementStyle
    author: IntroElementStyle
    footer: bool


class HeadingStyle(ResolvedModel):
    prefix: str
    colors: ColorPair


class HeadingStyles(ResolvedModel):
    h1: HeadingStyle
    h2: HeadingStyle
    h3: HeadingStyle
    h4: HeadingStyle
    h5: HeadingStyle
    h6: HeadingStyle

    def level(self, level: int) -> HeadingStyle:
        if not 1 <= level <= 6:
            raise ValueError(f"heading level must be between 1 and 6, got {level}")
        return getattr(self, f"h{level}")


class BlockQuoteColors(ResolvedModel):
    fallbacks: ClassVar[Dict[str, str]] = {
        "foreground": "default.colors.foreground",
        "background": "default.colors.background",
        "prefix": "block_quote.colors.foreground",
    }

    foreground: Color
    background: Color
    prefix: Color


class BlockQuoteStyle(ResolvedModel):
    prefix: str
    colors: BlockQuoteColors


class AlertKindStyle(ResolvedModel):
    color: Color
    title: str
    icon: str


class AlertStyles(ResolvedModel):
    note: AlertKindStyle
    tip: AlertKindStyle
    important: AlertKindStyle
    warning: AlertKindStyle
    caution: AlertKindStyle


class AlertStyle(ResolvedModel):
    prefix: str
    base_colors: ColorPair
    styles: AlertStyles


class TypstStyle(ResolvedModel):
    colors: ColorPair
    horizontal_margin: Byte
    vertical_margin: Byte


class FooterStyle(ResolvedModel):
    template_fields: ClassVar[Tuple[str, ...]] = ("left", "center", "right")

    style: FooterMode
    left: str = ""
    center: str = ""
    right: str = ""
    character: str = "█"
    colors: ColorPair
    height: Byte = 3

    def render(self, side: str, **values: Any) -> str:
        """Substitute placeholders such as ``{current_slide}`` in the ``side`` template."""
        if side not in self.template_fields:
            raise ValueError(f"unknown footer side: {side}")
        template = getattr(self, side)
        return _PLACEHOLDER.sub(lambda match: str(values.get(match.group(1), "")), template)


class ModalStyle(ResolvedModel):
    colors: ColorPair
    selection_colors: ColorPair


class MermaidStyle(ResolvedModel):
    background: str
    theme: str


class D2Style(ResolvedModel):
    theme: D2ThemeId


class ResolvedTheme(ResolvedModel):
    """Fully resolved presentation theme; every field is concrete."""

    default: DefaultStyle
    slide_title: SlideTitleStyle
    code: CodeBlockStyle
    execution_output: ExecutionOutputStyle
    inline_code: InlineCodeStyle
    intro_slide: IntroSlideStyle
    headings: HeadingStyles
    block_quote: BlockQuoteStyle
    alert: AlertStyle
    typst: TypstStyle
    footer: FooterStyle
    modals: ModalStyle
    mermaid: MermaidStyle
    d2: D2Style


def template_placeholders(template: str) -> list[str]:
    """Return the placeholder names used in a footer template, in order."""
    return _PLACEHOLDER.findall(template)
