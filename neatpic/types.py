"""Core data types for NeatPic."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Union

from .errors import DecodeError


@dataclass(frozen=True)
class RasterImage:
    """A decoded RGBA8 raster as returned by the codec."""
    width: int
    height: int
    pixels: bytes  # width * height * 4 bytes, row-major RGBA

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    path: str = ""

    @property
    def size(self) -> tuple[float, float]:
        return (float(self.w), float(self.h))


@dataclass
class ImageLayout:
    """Where the current texture is drawn this frame."""
    ti: TextureInfo
    x: float
    y: float
    w: float
    h: float


LoadOutcome = Union[TextureInfo, DecodeError]


@dataclass
class ImageEntry:
    """One file of the browsed directory and its cached decode outcome.

    ``outcome`` stays None until the entry is first displayed, then holds
    either the uploaded texture or the decode error for the rest of the
    session.
    """
    path: str
    outcome: Optional[LoadOutcome] = None

    @property
    def texture(self) -> Optional[TextureInfo]:
        """The texture if decoding succeeded, else None."""
        if isinstance(self.outcome, TextureInfo):
            return self.outcome
        return None

    @property
    def error(self) -> Optional[DecodeError]:
        """The decode error if decoding failed, else None."""
        if isinstance(self.outcome, DecodeError):
            return self.outcome
        return None
