"""Raylib compatibility layer - struct and string helpers over python-raylib's CFFI API."""

from __future__ import annotations
from typing import Any, Tuple

import raylib as rl

from .types import RasterImage

RL_VERSION = "python-raylib"


def c_text(text: str) -> bytes:
    """Encode a Python string for a ``const char *`` parameter."""
    return text.encode('utf-8')


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle."""
    r = rl.ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2."""
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color."""
    c = rl.ffi.new("Color *")
    c[0].r, c[0].g, c[0].b, c[0].a = int(r), int(g), int(b), int(a)
    return c[0]


def color_from(rgba: Tuple[int, int, int, int]) -> Any:
    return make_color(*rgba)


def mouse_position() -> Tuple[float, float]:
    pos = rl.GetMousePosition()
    return (float(pos.x), float(pos.y))


def load_texture_rgba(width: int, height: int, pixels: bytes) -> Any:
    """Upload an RGBA8 pixel buffer as a GPU texture.

    The buffer only has to stay alive for the duration of the call; raylib
    copies it into the texture.
    """
    buf = rl.ffi.from_buffer(pixels)
    img = rl.ffi.new("Image *")
    img[0].data = rl.ffi.cast("void *", buf)
    img[0].width = int(width)
    img[0].height = int(height)
    img[0].mipmaps = 1
    img[0].format = rl.PIXELFORMAT_UNCOMPRESSED_R8G8B8A8
    return rl.LoadTextureFromImage(img[0])


def upload_raster(raster: RasterImage) -> Any:
    return load_texture_rgba(raster.width, raster.height, raster.pixels)


def unload_texture(tex: Any) -> None:
    if is_texture_valid(tex):
        rl.UnloadTexture(tex)


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return get_texture_id(tex) > 0


__all__ = [
    'rl',
    'RL_VERSION',
    'c_text',
    'make_rect',
    'make_vec2',
    'make_color',
    'color_from',
    'mouse_position',
    'load_texture_rgba',
    'upload_raster',
    'unload_texture',
    'get_texture_id',
    'is_texture_valid',
]
