"""State management submodules for NeatPic."""

from .window import WindowState
from .images import ImageListState
from .view import ViewState
from .input import InputState
from .app_state import AppState

__all__ = [
    'WindowState',
    'ImageListState',
    'ViewState',
    'InputState',
    'AppState',
]
