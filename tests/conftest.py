"""Pytest fixtures for Chroma Text tests."""

import pytest

from chroma_text.config import Settings
from chroma_text.formatting.gradient import GradientEngine
from chroma_text.formatting.ir import GradientAnchor
from chroma_text.formatting.palette import Rgb
from chroma_text.formatting.parser import MarkupParser


@pytest.fixture
def engine() -> GradientEngine:
    """Create a gradient engine."""
    return GradientEngine()


@pytest.fixture
def parser(engine: GradientEngine) -> MarkupParser:
    """Create a parser which understands gradients."""
    return MarkupParser(gradient_engine=engine)


@pytest.fixture
def black_to_white() -> list[GradientAnchor]:
    """Two-anchor gradient spanning the whole range."""
    return [
        GradientAnchor(Rgb(0, 0, 0), 0.0),
        GradientAnchor(Rgb(255, 255, 255), 1.0),
    ]


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)
