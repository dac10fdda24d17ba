"""Linear multi-stop gradients for chat text.

Gradient notation lists colors with their position on the gradient, enclosed
in angle brackets and separated by single spaces:

    <#FF0000:0 #00FF00:.5 #0000FF:1>
"""

import math
from typing import Optional, Sequence

from chroma_text.formatting.ir import GradientAnchor, GradientNode, StyledNode
from chroma_text.formatting.palette import (
    DEFAULT_APPROXIMATOR,
    HEX_DIGITS,
    WHITE,
    ColorApproximator,
    Rgb,
)


class GradientParseError(ValueError):
    """Malformed gradient notation."""

    pass


class GradientEngine:
    """Parses gradient notations and picks colors along them."""

    def parse_notation(self, notation: str) -> list[GradientAnchor]:
        """Parse a gradient notation into anchors sorted by offset.

        Args:
            notation: Notation including its angle brackets

        Returns:
            Non-empty list of anchors, ascending by offset

        Raises:
            GradientParseError: If any part of the notation is malformed
        """
        if not (notation.startswith("<") and notation.endswith(">")):
            raise GradientParseError(f"Not enclosed in angle brackets: {notation!r}")

        tokens = notation[1:-1].split(" ")

        # Trailing separators don't produce empty tokens
        while tokens and not tokens[-1]:
            tokens.pop()

        anchors = [self._parse_anchor(token) for token in tokens]
        if not anchors:
            raise GradientParseError("Gradient contains no colors")

        anchors.sort(key=lambda anchor: anchor.offset)
        return anchors

    def _parse_anchor(self, token: str) -> GradientAnchor:
        """Parse a single #RRGGBB:offset token."""
        data = token.split(":")
        if len(data) != 2:
            raise GradientParseError(f"Expected #RRGGBB:offset, got {token!r}")

        hex_color, raw_offset = data
        if len(hex_color) != 7 or not hex_color.startswith("#"):
            raise GradientParseError(f"Invalid hex color: {hex_color!r}")
        if not all(c in HEX_DIGITS for c in hex_color[1:]):
            raise GradientParseError(f"Invalid hex color: {hex_color!r}")

        try:
            offset = float(raw_offset)
        except ValueError as e:
            raise GradientParseError(f"Invalid offset: {raw_offset!r}") from e

        # Also rejects NaN
        if not 0 <= offset <= 1:
            raise GradientParseError(f"Offset out of range [0, 1]: {raw_offset!r}")

        return GradientAnchor(color=Rgb.from_hex(hex_color), offset=offset)

    def evaluate(self, anchors: Sequence[GradientAnchor], percentage: float) -> Rgb:
        """Get the color at a point of the gradient.

        Args:
            anchors: Anchors sorted ascending by offset
            percentage: Point on the gradient, from 0 to 1

        Returns:
            The interpolated color, each channel floored
        """
        if not anchors:
            return WHITE

        if len(anchors) == 1:
            return anchors[0].color

        first, last = anchors[0], anchors[-1]

        # Everything before the first and after the last anchor is flat
        if percentage <= first.offset:
            return first.color
        if percentage >= last.offset:
            return last.color

        # Narrow down to the enclosing section, first and last are taken
        a, b = first, last
        for anchor in anchors[1:-1]:
            if a.offset < anchor.offset < percentage:
                a = anchor

            # Inclusive, so an anchor's exact offset yields its exact color
            if percentage <= anchor.offset < b.offset:
                b = anchor

        local = (percentage - a.offset) / (b.offset - a.offset)

        return Rgb(
            math.floor(a.color.red + local * (b.color.red - a.color.red)),
            math.floor(a.color.green + local * (b.color.green - a.color.green)),
            math.floor(a.color.blue + local * (b.color.blue - a.color.blue)),
        )

    def gradientize(
        self,
        text: str,
        anchors: Sequence[GradientAnchor],
        approximator: Optional[ColorApproximator] = None,
    ) -> GradientNode:
        """Color every character of text along the gradient.

        Character i of n is picked at (i + 1) / n, so the last character
        always lands on the end of the gradient.
        """
        approximator = approximator or DEFAULT_APPROXIMATOR
        node = GradientNode(text="", anchors=tuple(anchors), approximator=approximator)

        for i, char in enumerate(text):
            color = self.evaluate(anchors, (i + 1) / len(text))
            node.add_sibling(
                StyledNode(text=char, color=color.to_hex(), approximator=approximator)
            )

        return node
