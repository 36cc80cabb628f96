"""Input Handler - maps raylib input events to commands.

Input is first captured into a FrameInput snapshot, then translated into
commands by a pure function, so the mapping can be exercised without a
window.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .state import AppState

from .commands import (
    Command,
    NavigateNext, NavigatePrev,
    WheelZoom, FitToWindow, Pan,
    CloseApp,
)
from .config import (
    WHEEL_DELTA, MOUSE_BUTTON_LEFT,
    KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT, KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT,
    KEY_FIT_ZOOM,
)


@dataclass
class FrameInput:
    """Raw input captured for one frame."""
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    left_pressed: bool = False
    left_down: bool = False
    wheel: float = 0.0          # in WHEEL_DELTA units (one notch = 120)
    next_pressed: bool = False
    prev_pressed: bool = False
    fit_pressed: bool = False
    close_requested: bool = False


def poll_frame_input() -> FrameInput:
    """Capture this frame's input from raylib."""
    from .rl_compat import rl, mouse_position

    def pressed(*keys: int) -> bool:
        return any(rl.IsKeyPressed(k) for k in keys)

    x, y = mouse_position()
    return FrameInput(
        mouse_x=x,
        mouse_y=y,
        left_pressed=bool(rl.IsMouseButtonPressed(MOUSE_BUTTON_LEFT)),
        left_down=bool(rl.IsMouseButtonDown(MOUSE_BUTTON_LEFT)),
        # raylib reports notches; scale to the host wheel units
        wheel=float(rl.GetMouseWheelMove()) * WHEEL_DELTA,
        next_pressed=pressed(KEY_NEXT_IMAGE, KEY_NEXT_IMAGE_ALT),
        prev_pressed=pressed(KEY_PREV_IMAGE, KEY_PREV_IMAGE_ALT),
        fit_pressed=pressed(KEY_FIT_ZOOM),
        close_requested=bool(rl.WindowShouldClose()),
    )


def pan_commands(state: "AppState", frame: FrameInput) -> List[Command]:
    """Drag handling: mouse delta since last frame while the button is held.

    A drag only pans if it started outside the panels, so dragging the
    zoom slider or the side panel leaves the image alone.
    """
    commands: List[Command] = []
    if frame.left_pressed and not state.window.is_over_panel(frame.mouse_x, frame.mouse_y):
        state.input.start_pan()
    if not frame.left_down:
        state.input.end_pan()

    dx, dy = state.input.advance_mouse((frame.mouse_x, frame.mouse_y))
    if state.input.is_panning and (dx or dy):
        commands.append(Pan(dx, dy))
    return commands


def key_commands(state: "AppState", frame: FrameInput) -> List[Command]:
    commands: List[Command] = []
    if frame.close_requested:
        commands.append(CloseApp())
        return commands
    if frame.next_pressed:
        commands.append(NavigateNext())
    if frame.prev_pressed:
        commands.append(NavigatePrev())
    if frame.fit_pressed:
        commands.append(FitToWindow())
    return commands


def wheel_commands(frame: FrameInput) -> List[Command]:
    if frame.wheel != 0:
        return [WheelZoom(frame.wheel)]
    return []
