"""Markup compilation orchestrator."""

from typing import Any, Optional

from rich.text import Text

from chroma_text.config import Settings, get_settings
from chroma_text.formatting.gradient import GradientEngine
from chroma_text.formatting.ir import StyledNode
from chroma_text.formatting.palette import ColorApproximator
from chroma_text.formatting.parser import MarkupParser
from chroma_text.formatting import render


class MarkupCompiler:
    """Compiles markup strings into their rendered representations.

    Pipeline:
    1. Parse the markup into a styled node tree
    2. Render the tree as attributed-text JSON, plain legacy text or a
       terminal preview
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        approximator: Optional[ColorApproximator] = None,
    ) -> None:
        """Initialize the compiler.

        Args:
            settings: Settings to use, defaults to the global settings
            approximator: Color approximation policy, defaults to the legacy palette
        """
        self.settings = settings or get_settings()
        self.parser = MarkupParser(
            gradient_engine=GradientEngine() if self.settings.gradients_enabled else None,
            escape_lead=self.settings.escape_lead,
            approximator=approximator,
        )

    def _approximate(self, approximate_colors: Optional[bool]) -> bool:
        if approximate_colors is None:
            return self.settings.approximate_colors
        return approximate_colors

    def parse(self, text: str) -> StyledNode:
        """Parse markup into a node tree."""
        return self.parser.parse(text)

    def to_document(
        self, text: str, approximate_colors: Optional[bool] = None
    ) -> dict[str, Any]:
        """Compile markup to a JSON-ready attributed-text document."""
        return render.to_structured_document(
            self.parse(text), self._approximate(approximate_colors)
        )

    def to_json(self, text: str, approximate_colors: Optional[bool] = None) -> str:
        """Compile markup to compact attributed-text JSON."""
        return render.to_json(self.parse(text), self._approximate(approximate_colors))

    def to_plain_text(self, text: str) -> str:
        """Compile markup to legacy text using palette colors only."""
        return render.to_plain_text(self.parse(text), self.settings.escape_lead)

    def to_rich_text(self, text: str, approximate_colors: Optional[bool] = None) -> Text:
        """Compile markup to a styled terminal preview."""
        return render.to_rich_text(
            self.parse(text), self._approximate(approximate_colors)
        )
