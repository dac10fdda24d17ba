"""Chroma Text - compiles legacy chat markup with hex colors and gradients."""

__version__ = "0.1.0"
