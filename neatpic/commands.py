"""Command Pattern for input handling.

Commands encapsulate actions that can be triggered by various inputs.
Each command has an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import AppState
    from .types import TextureInfo

from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


def _loaded_texture(state: "AppState") -> Optional["TextureInfo"]:
    """Texture of the current image if it has already been decoded."""
    entry = state.images.current
    return entry.texture if entry else None


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class NavigateToIndex(Command):
    """Select a specific image; the new image starts in fit mode."""
    target_index: int

    def can_execute(self, state: "AppState") -> bool:
        return (0 <= self.target_index < state.images.count and
                self.target_index != state.images.index)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] Navigate: {state.images.index} -> {self.target_index}")
        state.images.select(self.target_index)
        state.view.reset()
        return True


@dataclass
class NavigateNext(Command):
    """Navigate to next image."""

    def can_execute(self, state: "AppState") -> bool:
        return state.images.has_next

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        return NavigateToIndex(state.images.index + 1).execute(state)


@dataclass
class NavigatePrev(Command):
    """Navigate to previous image."""

    def can_execute(self, state: "AppState") -> bool:
        return state.images.has_prev

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        return NavigateToIndex(state.images.index - 1).execute(state)


# ═══════════════════════════════════════════════════════════════════════════
# Zoom Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class WheelZoom(Command):
    """Exponential zoom from the mouse wheel (delta in WHEEL_DELTA units)."""
    delta: float = 0.0

    def can_execute(self, state: "AppState") -> bool:
        return self.delta != 0 and _loaded_texture(state) is not None

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        ti = _loaded_texture(state)
        return state.view.apply_wheel(self.delta, ti.size, state.window.available)


@dataclass
class SetZoomPercent(Command):
    """Explicit zoom from the slider; leaves fit mode."""
    percent: float

    def can_execute(self, state: "AppState") -> bool:
        return state.has_selection and self.percent > 0

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] SetZoomPercent: {self.percent:.0f}%")
        return state.view.set_zoom_percent(self.percent)


@dataclass
class FitToWindow(Command):
    """Return to fit-to-window mode and drop the pan."""

    def can_execute(self, state: "AppState") -> bool:
        return state.has_selection

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] FitToWindow")
        state.view.reset()
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Pan Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Pan(Command):
    """Move the image by a screen-pixel delta."""
    dx: float = 0.0
    dy: float = 0.0

    def can_execute(self, state: "AppState") -> bool:
        return state.has_selection

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.view.apply_drag((self.dx, self.dy))
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Application Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class CloseApp(Command):
    """Request application close."""

    def execute(self, state: "AppState") -> bool:
        log("[CMD] CloseApp")
        return True
