"""Core compilation logic for Chroma Text."""

from chroma_text.core.compiler import MarkupCompiler

__all__ = [
    "MarkupCompiler",
]
