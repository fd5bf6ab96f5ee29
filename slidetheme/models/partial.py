"""Partial theme document contracts.

These models describe the shape of a theme document as written on disk. Only the wire
types are enforced here; colors, enums and ranges are checked during resolution.
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import StrictInt

from .base import PartialModel


class PartialColors(PartialModel):
    foreground: Optional[str] = None
    background: Optional[str] = None


class PartialMargin(PartialModel):
    merge_whole: ClassVar[bool] = True

    percent: Optional[StrictInt] = None
    fixed: Optional[StrictInt] = None


class PartialPadding(PartialModel):
    horizontal: Optional[StrictInt] = None
    vertical: Optional[StrictInt] = None


class PartialDefaultStyle(PartialModel):
    margin: Optional[PartialMargin] = None
    colors: Optional[PartialColors] = None


class PartialSlideTitle(PartialModel):
    alignment: Optional[str] = None
    padding_top: Optional[StrictInt] = None
    padding_bottom: Optional[StrictInt] = None
    separator: Optional[bool] = None
    bold: Optional[bool] = None
    italics: Optional[bool] = None
    underlined: Optional[bool] = None
    font_size: Optional[StrictInt] = None
    prefix: Optional[str] = None
    colors: Optional[PartialColors] = None


class PartialCodeBlock(PartialModel):
    alignment: Optional[str] = None
    minimum_size: Optional[StrictInt] = None
    minimum_margin: Optional[PartialMargin] = None
    theme_name: Optional[str] = None
    padding: Optional[PartialPadding] = None
    background: Optional[bool] = None
    line_numbers: Optional[bool] = None


class PartialExecutionStatus(PartialModel):
    running: Optional[PartialColors] = None
    success: Optional[PartialColors] = None
    failure: Optional[PartialColors] = None
    not_started: Optional[PartialColors] = None


class PartialExecutionOutput(PartialModel):
    colors: Optional[PartialColors] = None
    status: Optional[PartialExecutionStatus] = None
    padding: Optional[PartialPadding] = None


class PartialInlineCode(PartialModel):
    colors: Optional[PartialColors] = None


class PartialIntroElement(PartialModel):
    alignment: Optional[str] = None
    colors: Optional[PartialColors] = None
    font_size: Optional[StrictInt] = None
    positioning: Optional[str] = None


class PartialIntroSlide(PartialModel):
    title: Optional[PartialIntroElement] = None
    subtitle: Optional[PartialIntroElement] = None
    event: Optional[PartialIntroElement] = None
    location: Optional[PartialIntroElement] = None
    date: Optional[PartialIntroElement] = None
    author: Optional[PartialIntroElement] = None
    footer: Optional[bool] = None


class PartialHeading(PartialModel):
    prefix: Optional[str] = None
    colors: Optional[PartialColors] = None


class PartialHeadings(PartialModel):
    h1: Optional[PartialHeading] = None
    h2: Optional[PartialHeading] = None
    h3: Optional[PartialHeading] = None
    h4: Optional[PartialHeading] = None
    h5: Optional[PartialHeading] = None
    h6: Optional[PartialHeading] = None


class PartialBlockQuoteColors(PartialModel):
    foreground: Optional[str] = None
    background: Optional[str] = None
    prefix: Optional[str] = None


class PartialBlockQuote(PartialModel):
    prefix: Optional[str] = None
    colors: Optional[PartialBlockQuoteColors] = None


class PartialAlertKind(PartialModel):
    color: Optional[str] = None
    title: Optional[str] = None
    icon: Optional[str] = None


class PartialAlertStyles(PartialModel):
    note: Optional[PartialAlertKind] = None
    tip: Optional[PartialAlertKind] = None
    important: Optional[PartialAlertKind] = None
    warning: Optional[PartialAlertKind] = None
    caution: Optional[PartialAlertKind] = None


class PartialAlert(PartialModel):
    prefix: Optional[str] = None
    base_colors: Optional[PartialColors] = None
    styles: Optional[PartialAlertStyles] = None


class PartialTypst(PartialModel):
    colors: Optional[PartialColors] = None
    horizontal_margin: Optional[StrictInt] = None
    vertical_margin: Optional[StrictInt] = None


class PartialFooter(PartialModel):
    style: Optional[str] = None
    left: Optional[str] = None
    center: Optional[str] = None
    right: Optional[str] = None
    character: Optional[str] = None
    colors: Optional[PartialColors] = None
    height: Optional[StrictInt] = None


class PartialModals(PartialModel):
    colors: Optional[PartialColors] = None
    selection_colors: Optional[PartialColors] = None


class PartialMermaid(PartialModel):
    background: Optional[str] = None
    theme: Optional[str] = None


class PartialD2(PartialModel):
    theme: Optional[StrictInt] = None


class PartialTheme(PartialModel):
    """Root of a partial theme document."""

    default: Optional[PartialDefaultStyle] = None
    slide_title: Optional[PartialSlideTitle] = None
    code: Optional[PartialCodeBlock] = None
    execution_output: Optional[PartialExecutionOutput] = None
    inline_code: Optional[PartialInlineCode] = None
    intro_slide: Optional[PartialIntroSlide] = None
    headings: Optional[PartialHeadings] = None
    block_quote: Optional[PartialBlockQuote] = None
    alert: Optional[PartialAlert] = None
    typst: Optional[PartialTypst] = None
    footer: Optional[PartialFooter] = None
    modals: Optional[PartialModals] = None
    mermaid: Optional[PartialMermaid] = None
    d2: Optional[PartialD2] = None
