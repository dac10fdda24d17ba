"""Markup parser for converting legacy chat markup to IR."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from chroma_text.formatting.gradient import GradientEngine, GradientParseError
from chroma_text.formatting.ir import (
    DEFAULT_ESCAPE_LEAD,
    GradientAnchor,
    StyledNode,
    TextFormatting,
)
from chroma_text.formatting.palette import (
    DEFAULT_APPROXIMATOR,
    HEX_DIGITS,
    ColorApproximator,
)

logger = logging.getLogger(__name__)

# Vanilla color codes and the reset code, which end a pending hex color or gradient
VANILLA_COLOR_CODES = frozenset("0123456789abcdefr")


@dataclass
class _ScanState:
    """Style waiting to be applied to the buffered text."""

    buffer: list[str] = field(default_factory=list)
    color: Optional[str] = None
    gradient: Optional[list[GradientAnchor]] = None
    formatting: TextFormatting = TextFormatting.NONE

    @property
    def has_color(self) -> bool:
        return self.color is not None or self.gradient is not None

    def reset_style(self) -> None:
        self.color = None
        self.gradient = None
        self.formatting = TextFormatting.NONE


class MarkupParser:
    """Parse legacy chat markup into a tree of styled nodes.

    Understood sequences, each introduced by the escape lead:

    - #RRGGBB      exact color
    - <gradient>   gradient notation, see GradientEngine
    - l o n m k    formatting, only while a color or gradient is pending

    Vanilla sequences stay in the text untouched. Malformed sequences never
    raise; they are kept as literal text instead.
    """

    def __init__(
        self,
        gradient_engine: Optional[GradientEngine] = None,
        escape_lead: str = DEFAULT_ESCAPE_LEAD,
        approximator: Optional[ColorApproximator] = None,
    ) -> None:
        """Initialize the parser.

        Args:
            gradient_engine: Engine for gradient notations, None disables them
            escape_lead: Character introducing a marker sequence
            approximator: Color approximation policy for the created nodes

        Raises:
            ValueError: If escape_lead is not a single character
        """
        if len(escape_lead) != 1:
            raise ValueError(f"Escape lead must be one character, got {escape_lead!r}")

        self.gradient_engine = gradient_engine
        self.escape_lead = escape_lead
        self.approximator = approximator or DEFAULT_APPROXIMATOR

    def parse(self, text: str) -> StyledNode:
        """Convert markup to a head node whose siblings hold the content.

        Args:
            text: The markup to parse

        Returns:
            Text-less head node, one sibling per differently styled run
        """
        head = StyledNode(approximator=self.approximator)
        state = _ScanState()
        pos = 0

        while pos < len(text):
            char = text[pos]

            # Not a marker (or the last char), keep on collecting
            if char != self.escape_lead or pos == len(text) - 1:
                state.buffer.append(char)
                pos += 1
                continue

            marker = text[pos + 1]

            if marker == "#":
                color = self._match_hex(text, pos + 2)
                if color is not None:
                    self._flush(state, head, reset=True)
                    state.color = color
                    pos += 8
                    continue

            if marker == "<" and self.gradient_engine is not None:
                close = text.find(">", pos + 1)
                if close != -1:
                    gradient = self._match_gradient(text[pos + 1 : close + 1])
                    if gradient is not None:
                        self._flush(state, head, reset=True)
                        state.gradient = gradient
                        pos = close + 1
                        continue

            fmt = TextFormatting.from_marker(marker)
            if fmt is not None and state.has_color:
                # Push with the current flags, color carries over
                self._flush(state, head, reset=False)
                state.formatting |= fmt
                pos += 2
                continue

            # A vanilla color ends the pending color, but stays in the text
            if marker in VANILLA_COLOR_CODES and state.has_color:
                self._flush(state, head, reset=True)

            state.buffer.append(char)
            pos += 1

        if state.buffer:
            self._flush(state, head, reset=False)

        return head

    def _match_hex(self, text: str, start: int) -> Optional[str]:
        """Read #RRGGBB whose digits begin at start, None if there is none."""
        digits = text[start : start + 6]
        if len(digits) != 6 or not all(c in HEX_DIGITS for c in digits):
            return None
        return "#" + digits

    def _match_gradient(self, notation: str) -> Optional[list[GradientAnchor]]:
        try:
            return self.gradient_engine.parse_notation(notation)
        except GradientParseError as e:
            logger.debug("Keeping %r as text: %s", notation, e)
            return None

    def _flush(self, state: _ScanState, head: StyledNode, reset: bool) -> None:
        """Push the buffered text as a new sibling of head.

        Args:
            state: Scan state holding the buffer and pending style
            head: Node receiving the new sibling
            reset: Also drop the pending color, gradient and flags
        """
        if state.buffer:
            content = "".join(state.buffer)

            if state.gradient is not None and self.gradient_engine is not None:
                node = self.gradient_engine.gradientize(
                    content, state.gradient, self.approximator
                )
                node.formatting = state.formatting
            else:
                node = StyledNode(
                    text=content,
                    color=state.color,
                    formatting=state.formatting,
                    approximator=self.approximator,
                )

            head.add_sibling(node)
            state.buffer.clear()

        if reset:
            state.reset_style()
