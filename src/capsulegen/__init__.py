"""Two-game capsule image composer.

Composes two backgrounds and two logos into a single output raster using
horizontal, vertical or diagonal split layouts with pan/zoom adjustment.
"""

__version__ = "0.1.0"
