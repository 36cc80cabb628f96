"""Composite AppState - the application context passed through the frame loop."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .window import WindowState
from .images import ImageListState
from .view import ViewState
from .input import InputState
from ..image_utils import OpenContext
from ..settings import Settings
from ..texture_cache import TextureCache
from ..types import TextureInfo


@dataclass
class AppState:
    """
    Everything the renderer, input handler and commands read or mutate.

    Sub-states are used directly:
        state.window.screen_w
        state.images.index
        state.view.zoom
    """
    window: WindowState = field(default_factory=WindowState)
    images: ImageListState = field(default_factory=ImageListState)
    view: ViewState = field(default_factory=ViewState)
    input: InputState = field(default_factory=InputState)
    settings: Settings = field(default_factory=Settings)
    textures: Optional[TextureCache] = None

    @classmethod
    def from_open_context(cls, ctx: OpenContext, settings: Settings,
                          textures: Optional[TextureCache] = None) -> AppState:
        return cls(
            window=WindowState(
                screen_w=settings.window_width,
                screen_h=settings.window_height,
                title=ctx.window_title,
            ),
            images=ImageListState(entries=ctx.entries, index=ctx.index, dirpath=ctx.dirpath),
            settings=settings,
            textures=textures,
        )

    @property
    def has_selection(self) -> bool:
        return self.images.index is not None

    def current_texture(self) -> Optional[TextureInfo]:
        """Texture of the selected image, decoding it on first access.

        None if nothing is selected, no cache is attached, or decoding failed.
        """
        entry = self.images.current
        if entry is None or self.textures is None:
            return None
        return self.textures.try_get(entry)

    def track_window_size(self, screen_w: int, screen_h: int) -> None:
        """Record the live window size, both for layout and for persistence."""
        self.window.screen_w = screen_w
        self.window.screen_h = screen_h
        if screen_w <= 0 or screen_h <= 0:
            # minimized; keep the last real size for persistence
            return
        self.settings.window_width = screen_w
        self.settings.window_height = screen_h
