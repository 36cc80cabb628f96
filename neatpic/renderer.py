"""Renderer - handles all drawing operations.

Image drawing only reads state. The side and top panels are raygui
immediate-mode widgets: they are declared every frame and any interaction
comes back as commands for the application to execute.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl, c_text, color_from,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    is_texture_valid,
)
from .commands import Command, SetZoomPercent
from .types import ImageLayout
from .view_math import percent_to_slider, slider_to_percent
from .config import (
    BG_COLOR,
    SIDE_PANEL_WIDTH, SIDE_PANEL_PADDING,
    TOP_PANEL_HEIGHT, TOP_PANEL_MARGIN, ZOOM_SLIDER_WIDTH,
    ZOOM_SLIDER_MIN_PCT, ZOOM_SLIDER_MAX_PCT,
    UI_FONT_SIZE, UI_LINE_HEIGHT,
)


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.begin_frame()
        renderer.draw_background()
        renderer.draw_image(layout)
        commands = renderer.draw_panels(state, layout)
        renderer.end_frame()
    """

    def setup_style(self) -> None:
        """Apply the raygui style once the window exists."""
        rl.GuiSetStyle(rl.DEFAULT, rl.TEXT_SIZE, UI_FONT_SIZE)

    def begin_frame(self) -> None:
        rl.BeginDrawing()

    def end_frame(self) -> None:
        rl.EndDrawing()

    def draw_background(self) -> None:
        rl.ClearBackground(color_from(BG_COLOR))

    # ═══════════════════════════════════════════════════════════════════════
    # Image rendering
    # ═══════════════════════════════════════════════════════════════════════

    def draw_image(self, layout: Optional[ImageLayout]) -> None:
        """Draw the current texture scaled into its layout rectangle."""
        if layout is None:
            return
        ti = layout.ti
        if not is_texture_valid(ti.tex):
            return
        rl.DrawTexturePro(
            ti.tex,
            RL_Rect(0, 0, ti.w, ti.h),
            RL_Rect(layout.x, layout.y, layout.w, layout.h),
            RL_V2(0, 0), 0.0, RL_Color(255, 255, 255, 255)
        )

    # ═══════════════════════════════════════════════════════════════════════
    # Panels
    # ═══════════════════════════════════════════════════════════════════════

    def draw_panels(self, state: "AppState", layout: Optional[ImageLayout]) -> List[Command]:
        """Declare the side and top panels; return commands from interactions."""
        self.draw_side_panel(state, layout)
        return self.draw_top_panel(state)

    def draw_side_panel(self, state: "AppState", layout: Optional[ImageLayout]) -> None:
        """Right-hand panel: path and pixel size of the current image."""
        sw, sh = state.window.size
        x = sw - SIDE_PANEL_WIDTH
        rl.GuiPanel(RL_Rect(x, 0, SIDE_PANEL_WIDTH, sh), rl.ffi.NULL)

        # Nothing to describe for an unselected or undecodable image
        if layout is None:
            return
        ti = layout.ti
        inner_x = x + SIDE_PANEL_PADDING
        inner_w = SIDE_PANEL_WIDTH - 2 * SIDE_PANEL_PADDING
        y = SIDE_PANEL_PADDING
        rl.GuiLabel(RL_Rect(inner_x, y, inner_w, UI_LINE_HEIGHT), c_text(ti.path))
        y += UI_LINE_HEIGHT
        rl.GuiLabel(RL_Rect(inner_x, y, inner_w, UI_LINE_HEIGHT),
                    c_text(f"size: {ti.w} x {ti.h}"))

    def draw_top_panel(self, state: "AppState") -> List[Command]:
        """Transparent top strip with the logarithmic zoom slider."""
        if not state.has_selection:
            return []
        percent = state.view.zoom_percent
        value = rl.ffi.new("float *", percent_to_slider(
            percent, ZOOM_SLIDER_MIN_PCT, ZOOM_SLIDER_MAX_PCT))
        before = value[0]
        bounds = RL_Rect(TOP_PANEL_MARGIN, TOP_PANEL_MARGIN,
                         ZOOM_SLIDER_WIDTH, TOP_PANEL_HEIGHT - 2 * TOP_PANEL_MARGIN)
        rl.GuiSlider(bounds, rl.ffi.NULL, c_text(f"{percent:.0f}%"), value, 0.0, 1.0)

        if math.isclose(value[0], before, abs_tol=1e-6):
            return []
        new_percent = slider_to_percent(value[0], ZOOM_SLIDER_MIN_PCT, ZOOM_SLIDER_MAX_PCT)
        return [SetZoomPercent(new_percent)]
