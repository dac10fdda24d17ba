"""Intermediate Representation for styled chat text.

This module defines the node tree the markup parser produces and the
renderers consume. Nodes never point back at their parent: whatever a
sibling appears to inherit is decided by the renderer walking the tree.
"""

from dataclasses import InitVar, dataclass, field
from enum import Enum, Flag, auto
from typing import Optional, Union

from chroma_text.formatting.palette import (
    DEFAULT_APPROXIMATOR,
    ColorApproximator,
    PaletteColor,
    Rgb,
)


# Character introducing every marker sequence
DEFAULT_ESCAPE_LEAD = "§"


# =============================================================================
# Formatting Flags
# =============================================================================

class TextFormatting(Flag):
    """Text formatting flags (combinable with |).

    Declaration order is the rendering order of the flags.
    """

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    STRIKETHROUGH = auto()
    OBFUSCATED = auto()

    @classmethod
    def flags(cls) -> tuple["TextFormatting", ...]:
        """The single flags, in declaration order."""
        return tuple(_MARKERS)

    @classmethod
    def from_marker(cls, char: str) -> Optional["TextFormatting"]:
        """Look up a flag by its legacy marker character."""
        return _MARKER_LOOKUP.get(char)

    @property
    def marker(self) -> str:
        """Legacy marker character of a single flag."""
        return _MARKERS[self]


_MARKERS = {
    TextFormatting.BOLD: "l",
    TextFormatting.ITALIC: "o",
    TextFormatting.UNDERLINED: "n",
    TextFormatting.STRIKETHROUGH: "m",
    TextFormatting.OBFUSCATED: "k",
}

_MARKER_LOOKUP = {marker: fmt for fmt, marker in _MARKERS.items()}


# =============================================================================
# Interaction Events
# =============================================================================

class ClickAction(Enum):
    """Actions executed when a chat message is clicked."""

    OPEN_URL = auto()
    RUN_COMMAND = auto()
    SUGGEST_COMMAND = auto()
    CHANGE_PAGE = auto()
    COPY_TO_CLIPBOARD = auto()


class HoverAction(Enum):
    """Actions executed when a chat message is hovered."""

    SHOW_TEXT = auto()
    SHOW_ITEM = auto()
    SHOW_ENTITY = auto()


@dataclass(frozen=True)
class ClickEvent:
    action: ClickAction
    value: str


@dataclass(frozen=True)
class HoverEvent:
    action: HoverAction
    value: "StyledNode"


# =============================================================================
# Gradients
# =============================================================================

@dataclass(frozen=True)
class GradientAnchor:
    """A fixed point of a linear gradient.

    Attributes:
        color: Color at this point
        offset: Position on the whole gradient, from 0 to 1
    """

    color: Rgb
    offset: float


# =============================================================================
# Nodes
# =============================================================================

@dataclass
class StyledNode:
    """A contiguous run of text sharing one style.

    Attributes:
        text: The text content, None for pure container nodes
        color: Exact color as supplied (#RRGGBB), case preserved
        formatting: Combined formatting flags
        click: What happens when the text is clicked
        hover: What happens when the text is hovered
        siblings: Following nodes, in render order
        approximated_color: Nearest palette entry of color, recomputed on
            every color assignment
    """

    text: Optional[str] = None
    color: InitVar[Optional[str]] = None
    formatting: TextFormatting = TextFormatting.NONE
    click: Optional[ClickEvent] = None
    hover: Optional[HoverEvent] = None
    siblings: list["StyledNode"] = field(default_factory=list)
    approximator: ColorApproximator = field(
        default=DEFAULT_APPROXIMATOR, repr=False, compare=False
    )
    approximated_color: Optional[PaletteColor] = field(init=False, default=None)
    _color: Optional[str] = field(init=False, default=None)

    def __post_init__(self, color: Optional[str]) -> None:
        self.set_color(color)

    def set_color(self, color: Optional[str]) -> None:
        """Set a new exact color and recompute its approximation."""
        self._color = color
        self.approximated_color = self.approximator.approximate_hex(color)

    def add_sibling(self, node: "StyledNode") -> None:
        """Append a node which is rendered after this node's own text."""
        self.siblings.append(node)

    def has_formatting(self, flag: TextFormatting) -> bool:
        return flag is not TextFormatting.NONE and flag in self.formatting

    def toggle_formatting(self, flag: TextFormatting, state: bool) -> None:
        """Enable or disable a formatting flag on this node."""
        if state:
            self.formatting |= flag
        else:
            self.formatting &= ~flag

    def set_click(self, action: ClickAction, value: str) -> None:
        self.click = ClickEvent(action, value)

    def clear_click(self) -> None:
        self.click = None

    def set_hover(
        self, action: HoverAction, value: Union[str, "StyledNode"]
    ) -> "StyledNode":
        """Set the hover payload.

        Args:
            action: Hover action to execute
            value: Either a node or plain text, which gets wrapped into a
                new unstyled node

        Returns:
            The node shown on hover, to allow styling it further
        """
        if isinstance(value, str):
            value = StyledNode(text=value, approximator=self.approximator)
        self.hover = HoverEvent(action, value)
        return value

    def clear_hover(self) -> None:
        self.hover = None

    @property
    def plain_text(self) -> str:
        """Get all text content without any styling."""
        own = self.text or ""
        return own + "".join(sibling.plain_text for sibling in self.siblings)


# Attached after decoration, a property in the class body would become the
# default of the color init argument
StyledNode.color = property(
    lambda self: self._color,
    StyledNode.set_color,
    doc="Exact color as supplied, assigning it recomputes approximated_color.",
)


@dataclass
class GradientNode(StyledNode):
    """Text materialized along a gradient, one colored child per character.

    The wrapper itself carries no text or color, only the formatting that
    applies to the whole run.

    Attributes:
        anchors: The gradient the children were colored from
    """

    anchors: tuple[GradientAnchor, ...] = ()
