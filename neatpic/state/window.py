"""Window state - screen dimensions, reserved panel width, title."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import (
    APP_NAME, SIDE_PANEL_WIDTH, TOP_PANEL_HEIGHT, TOP_PANEL_MARGIN, ZOOM_SLIDER_WIDTH,
)
from ..view_math import available_size


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0
    side_panel_w: float = float(SIDE_PANEL_WIDTH)
    title: str = APP_NAME

    @property
    def size(self) -> Tuple[int, int]:
        """Get window size as tuple."""
        return (self.screen_w, self.screen_h)

    @property
    def available(self) -> Tuple[float, float]:
        """Viewport left for the image, excluding the side panel."""
        return available_size(self.screen_w, self.screen_h, self.side_panel_w)

    def is_over_panel(self, x: float, y: float) -> bool:
        """True if (x, y) is on the side panel or the zoom slider."""
        aw, _ = self.available
        on_slider = y < TOP_PANEL_HEIGHT and x < TOP_PANEL_MARGIN + ZOOM_SLIDER_WIDTH
        return x >= aw or on_slider
