"""View state - zoom factor, fit mode and pan offset."""

from __future__ import annotations
from dataclasses import dataclass

from ..math_utils import Vec2, vec_add
from ..view_math import (
    compute_fit_zoom, compute_fit_width_zoom, display_size, wheel_zoom_factor,
)


@dataclass
class ViewState:
    """State for view/zoom parameters of the current image.

    While ``dynamic_zoom`` is set the zoom is recomputed every frame to fit
    the window; any explicit zoom by the user clears it.
    """
    zoom: float = 1.0
    dynamic_zoom: bool = True
    offset: Vec2 = (0.0, 0.0)

    @property
    def zoom_percent(self) -> float:
        return self.zoom * 100.0

    def reset(self) -> None:
        """Back to fit-to-window mode with no pan."""
        self.zoom = 1.0
        self.dynamic_zoom = True
        self.offset = (0.0, 0.0)

    def update_fit(self, image_size: Vec2, avail: Vec2) -> Vec2:
        """Re-track the fit zoom if automatic; return the display size."""
        if self.dynamic_zoom:
            self.zoom = compute_fit_zoom(image_size, avail)
        return display_size(image_size, self.zoom)

    def apply_wheel(self, wheel_delta: float, image_size: Vec2, avail: Vec2) -> bool:
        """Exponential wheel zoom. Returns True if the zoom changed.

        A gesture in fit mode first snaps to the fit-width ratio so it
        starts from the currently rendered scale.
        """
        if wheel_delta == 0:
            return False
        if self.dynamic_zoom:
            self.zoom = compute_fit_width_zoom(image_size, avail)
            self.dynamic_zoom = False
        self.zoom *= wheel_zoom_factor(wheel_delta)
        return True

    def apply_drag(self, delta: Vec2) -> None:
        """Pan by a screen-pixel delta, independent of zoom."""
        self.offset = vec_add(self.offset, delta)

    def set_zoom_percent(self, percent: float) -> bool:
        """Set an explicit zoom from a percentage. Ignores non-positive values."""
        if percent <= 0:
            return False
        self.zoom = percent / 100.0
        self.dynamic_zoom = False
        return True
