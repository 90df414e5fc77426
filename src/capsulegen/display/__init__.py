"""Display package - preview output for composed capsules."""

from capsulegen.display.preview import PreviewRenderer

__all__ = ["PreviewRenderer"]
