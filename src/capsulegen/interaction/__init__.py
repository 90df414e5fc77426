"""Pointer interaction: hit testing and drag-to-offset mapping."""

from capsulegen.interaction.drag import DragSession
from capsulegen.interaction.mapper import (
    HitTarget,
    Viewport,
    apply_drag,
    frame_delta,
    hit_test,
    to_frame_space,
)

__all__ = [
    "DragSession",
    "HitTarget",
    "Viewport",
    "apply_drag",
    "frame_delta",
    "hit_test",
    "to_frame_space",
]
