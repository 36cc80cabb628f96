"""Input state - previous mouse position and drag tracking."""

from __future__ import annotations
from dataclasses import dataclass

from ..math_utils import Vec2, vec_sub


@dataclass
class InputState:
    """State for input handling."""
    mouse_pos: Vec2 = (0.0, 0.0)
    is_panning: bool = False

    def start_pan(self) -> None:
        self.is_panning = True

    def end_pan(self) -> bool:
        """End panning operation. Returns True if was panning."""
        was_panning = self.is_panning
        self.is_panning = False
        return was_panning

    def advance_mouse(self, pos: Vec2) -> Vec2:
        """Record this frame's mouse position; return delta since last frame."""
        delta = vec_sub(pos, self.mouse_pos)
        self.mouse_pos = pos
        return delta
