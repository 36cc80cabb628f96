"""Per-frame view update: fit zoom, wheel zoom and the draw rectangle."""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from .state import AppState

from .commands import Command
from .types import ImageLayout
from .view_math import draw_offset


def update_view(state: "AppState", wheel: Iterable[Command] = ()) -> Optional[ImageLayout]:
    """Lay out the current image for this frame.

    The display size is taken before wheel commands run, so a wheel notch
    shows up on the next frame. Returns None when there is nothing to draw.
    """
    ti = state.current_texture()
    if ti is None:
        return None

    avail = state.window.available
    w, h = state.view.update_fit(ti.size, avail)

    for cmd in wheel:
        cmd.execute(state)

    x, y = draw_offset(avail, (w, h), state.view.offset)
    return ImageLayout(ti=ti, x=x, y=y, w=w, h=h)
