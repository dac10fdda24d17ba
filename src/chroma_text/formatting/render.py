"""Renderers turning a styled node tree into its output representations."""

import json
from typing import Any, Optional

from rich.color import Color
from rich.style import Style
from rich.text import Text

from chroma_text.formatting.ir import DEFAULT_ESCAPE_LEAD, StyledNode, TextFormatting
from chroma_text.formatting.palette import Rgb


def to_structured_document(
    node: StyledNode, approximate_colors: bool = False
) -> dict[str, Any]:
    """Convert a node and its siblings to the attributed-text JSON schema.

    Args:
        node: Node to render
        approximate_colors: Emit palette names instead of exact hex colors

    Returns:
        JSON-ready dict (text, color, hoverEvent, clickEvent, flags, extra)
    """
    doc: dict[str, Any] = {"text": node.text if node.text is not None else ""}

    if approximate_colors:
        if node.approximated_color is not None:
            doc["color"] = node.approximated_color.json_name
    elif node.color is not None:
        doc["color"] = node.color

    if node.hover is not None:
        doc["hoverEvent"] = {
            "action": node.hover.action.name.lower(),
            "value": to_structured_document(node.hover.value, approximate_colors),
        }

    if node.click is not None:
        doc["clickEvent"] = {
            "action": node.click.action.name.lower(),
            "value": node.click.value,
        }

    for flag in TextFormatting.flags():
        if flag in node.formatting:
            doc[flag.name.lower()] = True

    if node.siblings:
        doc["extra"] = [
            to_structured_document(sibling, approximate_colors)
            for sibling in node.siblings
        ]

    return doc


def to_json(node: StyledNode, approximate_colors: bool = False) -> str:
    """Serialize a node tree to compact attributed-text JSON."""
    return json.dumps(
        to_structured_document(node, approximate_colors),
        ensure_ascii=False,
        separators=(",", ":"),
    )


def to_plain_text(node: StyledNode, escape_lead: str = DEFAULT_ESCAPE_LEAD) -> str:
    """Flatten a node tree into legacy escape sequences.

    Only palette colors can be expressed, so exact colors are replaced by
    their approximation. Every node emits its complete own state.
    """
    parts: list[str] = []

    if node.approximated_color is not None:
        parts.append(escape_lead + node.approximated_color.code)

    # A gradient wrapper writes its flags once, ahead of every child color code
    for flag in TextFormatting.flags():
        if flag in node.formatting:
            parts.append(escape_lead + flag.marker)

    if node.text is not None:
        parts.append(node.text)

    for sibling in node.siblings:
        parts.append(to_plain_text(sibling, escape_lead))

    return "".join(parts)


def to_rich_text(
    node: StyledNode,
    approximate_colors: bool = False,
    inherited: Optional[Style] = None,
) -> Text:
    """Render a node tree as styled terminal text.

    Unlike the other renderers, siblings inherit the style of the node they
    belong to: it is combined in while walking, never stored on the nodes.

    Args:
        node: Node to render
        approximate_colors: Show palette colors instead of exact colors
        inherited: Style accumulated from the enclosing nodes
    """
    style = (inherited or Style()) + _node_style(node, approximate_colors)

    text = Text()
    if node.text:
        text.append(node.text, style=style)

    for sibling in node.siblings:
        text.append_text(to_rich_text(sibling, approximate_colors, style))

    return text


def _node_style(node: StyledNode, approximate_colors: bool) -> Style:
    rgb: Optional[Rgb] = None
    if approximate_colors:
        if node.approximated_color is not None:
            rgb = node.approximated_color.rgb
    else:
        rgb = Rgb.from_hex(node.color)

    fmt = node.formatting
    return Style(
        color=Color.from_rgb(*rgb) if rgb is not None else None,
        bold=True if TextFormatting.BOLD in fmt else None,
        italic=True if TextFormatting.ITALIC in fmt else None,
        underline=True if TextFormatting.UNDERLINED in fmt else None,
        strike=True if TextFormatting.STRIKETHROUGH in fmt else None,
        blink=True if TextFormatting.OBFUSCATED in fmt else None,
    )
