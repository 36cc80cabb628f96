"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
import math

from .config import MIN_ZOOM, WHEEL_DELTA, WHEEL_ZOOM_BASE
from .math_utils import Vec2, clamp, vec_add, vec_scale, vec_sub


def available_size(screen_w: float, screen_h: float, side_panel_w: float) -> Vec2:
    """Viewport size left for the image once the side panel is reserved."""
    return (max(0.0, screen_w - side_panel_w), max(0.0, float(screen_h)))


def compute_max_fit_size(image_size: Vec2, avail: Vec2) -> Vec2:
    """Fit box per axis: the available size, never larger than native.

    Args:
        image_size: Image (width, height) in pixels.
        avail: Available viewport (width, height) in pixels.

    Returns:
        (width, height) of the box the image may occupy in fit mode.
    """
    iw, ih = image_size
    aw, ah = avail
    return (clamp(aw, 0.0, iw), min(ah, ih))


def _has_area(image_size: Vec2) -> bool:
    return image_size[0] > 0 and image_size[1] > 0


def compute_fit_zoom(image_size: Vec2, avail: Vec2) -> float:
    """Zoom that fits the image in the viewport without upscaling.

    Returns 1.0 for an image with a zero dimension. Never below MIN_ZOOM,
    so a collapsed viewport keeps the zoom positive.
    """
    if not _has_area(image_size):
        return 1.0
    mw, mh = compute_max_fit_size(image_size, avail)
    return max(MIN_ZOOM, min(mw / image_size[0], mh / image_size[1]))


def compute_fit_width_zoom(image_size: Vec2, avail: Vec2) -> float:
    """Width-only fit ratio; the starting point of a wheel gesture."""
    if not _has_area(image_size):
        return 1.0
    mw, _ = compute_max_fit_size(image_size, avail)
    return max(MIN_ZOOM, mw / image_size[0])


def display_size(image_size: Vec2, zoom: float) -> Vec2:
    return vec_scale(image_size, zoom)


def wheel_zoom_factor(wheel_delta: float) -> float:
    """Multiplier for a wheel delta in host units (WHEEL_DELTA per notch).

    Equal wheel increments give equal percentage changes.
    """
    return WHEEL_ZOOM_BASE ** (wheel_delta / WHEEL_DELTA)


def draw_offset(avail: Vec2, size: Vec2, pan: Vec2) -> Vec2:
    """Top-left corner of the image: centered, then displaced by pan."""
    return vec_add(vec_scale(vec_sub(avail, size), 0.5), pan)


# Zoom slider: percent values on a logarithmic track.

def percent_to_slider(percent: float, lo: float, hi: float) -> float:
    """Map a zoom percentage to a 0..1 slider position (log scale)."""
    if percent <= 0:
        return 0.0
    t = (math.log(percent) - math.log(lo)) / (math.log(hi) - math.log(lo))
    return clamp(t, 0.0, 1.0)


def slider_to_percent(t: float, lo: float, hi: float) -> float:
    """Inverse of percent_to_slider."""
    t = clamp(t, 0.0, 1.0)
    return math.exp(math.log(lo) + t * (math.log(hi) - math.log(lo)))
