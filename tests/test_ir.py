"""Tests for the styled node model."""

from chroma_text.formatting.ir import (
    ClickAction,
    ClickEvent,
    HoverAction,
    StyledNode,
    TextFormatting,
)
from chroma_text.formatting.palette import ColorApproximator, PaletteColor


class TestTextFormatting:
    def test_flags_in_declaration_order(self):
        assert TextFormatting.flags() == (
            TextFormatting.BOLD,
            TextFormatting.ITALIC,
            TextFormatting.UNDERLINED,
            TextFormatting.STRIKETHROUGH,
            TextFormatting.OBFUSCATED,
        )

    def test_markers(self):
        assert [f.marker for f in TextFormatting.flags()] == ["l", "o", "n", "m", "k"]

    def test_from_marker(self):
        assert TextFormatting.from_marker("l") is TextFormatting.BOLD
        assert TextFormatting.from_marker("k") is TextFormatting.OBFUSCATED
        assert TextFormatting.from_marker("a") is None
        assert TextFormatting.from_marker("L") is None


class TestStyledNode:
    def test_defaults(self):
        node = StyledNode()

        assert node.text is None
        assert node.color is None
        assert node.approximated_color is None
        assert node.formatting == TextFormatting.NONE
        assert node.siblings == []

    def test_color_approximated_on_construction(self):
        node = StyledNode(text="x", color="#FF0000")

        assert node.approximated_color is PaletteColor.DARK_RED

    def test_set_color_recomputes_approximation(self):
        node = StyledNode(text="x", color="#FF0000")
        node.set_color("#FFFFFF")

        assert node.color == "#FFFFFF"
        assert node.approximated_color is PaletteColor.WHITE

        node.set_color(None)
        assert node.approximated_color is None

    def test_assigning_color_recomputes_approximation(self):
        node = StyledNode(text="x")
        node.color = "#FF0000"

        assert node.color == "#FF0000"
        assert node.approximated_color is PaletteColor.DARK_RED

        node.color = None
        assert node.approximated_color is None

    def test_assigned_color_is_rendered(self):
        from chroma_text.formatting.render import to_plain_text

        node = StyledNode(text="x")
        node.color = "#FFFFFF"

        assert to_plain_text(node) == "§fx"

    def test_color_positional_argument(self):
        node = StyledNode("x", "#FF0000")

        assert node.color == "#FF0000"
        assert node.approximated_color is PaletteColor.DARK_RED

    def test_equal_nodes_compare_colors(self):
        assert StyledNode(text="x", color="#FF0000") == StyledNode(text="x", color="#FF0000")
        assert StyledNode(text="x", color="#FF0000") != StyledNode(text="x", color="#00FF00")

    def test_non_hex_color_has_no_approximation(self):
        node = StyledNode(text="x", color="red")

        assert node.color == "red"
        assert node.approximated_color is None

    def test_custom_approximator(self):
        approximator = ColorApproximator([PaletteColor.GOLD])
        node = StyledNode(text="x", color="#0000FF", approximator=approximator)

        assert node.approximated_color is PaletteColor.GOLD

    def test_toggle_formatting(self):
        node = StyledNode(text="x")
        node.toggle_formatting(TextFormatting.BOLD, True)
        node.toggle_formatting(TextFormatting.ITALIC, True)
        node.toggle_formatting(TextFormatting.BOLD, False)

        assert node.formatting == TextFormatting.ITALIC
        assert node.has_formatting(TextFormatting.ITALIC)
        assert not node.has_formatting(TextFormatting.BOLD)
        assert not node.has_formatting(TextFormatting.NONE)

    def test_siblings_keep_insertion_order(self):
        head = StyledNode()
        for text in ("a", "b", "c"):
            head.add_sibling(StyledNode(text=text))

        assert [n.text for n in head.siblings] == ["a", "b", "c"]
        assert head.plain_text == "abc"

    def test_click(self):
        node = StyledNode(text="x")
        node.set_click(ClickAction.RUN_COMMAND, "/help")

        assert node.click == ClickEvent(ClickAction.RUN_COMMAND, "/help")

        node.clear_click()
        assert node.click is None

    def test_hover_from_text(self):
        node = StyledNode(text="x")
        shown = node.set_hover(HoverAction.SHOW_TEXT, "tip")

        assert node.hover.action is HoverAction.SHOW_TEXT
        assert node.hover.value is shown
        assert shown.text == "tip"

        shown.set_color("#00FF00")
        assert node.hover.value.color == "#00FF00"

    def test_hover_from_node(self):
        node = StyledNode(text="x")
        payload = StyledNode(text="nested", color="#123456")

        assert node.set_hover(HoverAction.SHOW_TEXT, payload) is payload

        node.clear_hover()
        assert node.hover is None
