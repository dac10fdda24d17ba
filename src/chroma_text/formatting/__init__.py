"""Formatting utilities for parsing and rendering styled chat text."""

from chroma_text.formatting.ir import (
    DEFAULT_ESCAPE_LEAD,
    TextFormatting,
    ClickAction,
    HoverAction,
    ClickEvent,
    HoverEvent,
    GradientAnchor,
    StyledNode,
    GradientNode,
)
from chroma_text.formatting.palette import (
    Rgb,
    PaletteColor,
    ColorApproximator,
    DEFAULT_APPROXIMATOR,
)
from chroma_text.formatting.gradient import GradientEngine, GradientParseError
from chroma_text.formatting.parser import MarkupParser
from chroma_text.formatting.render import (
    to_structured_document,
    to_json,
    to_plain_text,
    to_rich_text,
)

__all__ = [
    "DEFAULT_ESCAPE_LEAD",
    "TextFormatting",
    "ClickAction",
    "HoverAction",
    "ClickEvent",
    "HoverEvent",
    "GradientAnchor",
    "StyledNode",
    "GradientNode",
    "Rgb",
    "PaletteColor",
    "ColorApproximator",
    "DEFAULT_APPROXIMATOR",
    "GradientEngine",
    "GradientParseError",
    "MarkupParser",
    "to_structured_document",
    "to_json",
    "to_plain_text",
    "to_rich_text",
]
