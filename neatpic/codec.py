"""Image decoding via Pillow."""

from __future__ import annotations

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError
from .types import RasterImage


def decode_rgba(path: str) -> RasterImage:
    """Decode an image file into an 8-bit-per-channel RGBA raster.

    Multi-frame formats yield their first frame.

    Raises:
        DecodeError: if the file cannot be read or decoded.
    """
    try:
        with Image.open(path) as img:
            rgba = img.convert("RGBA")
            w, h = rgba.size
            pixels = rgba.tobytes()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(path, e) from e
    return RasterImage(width=w, height=h, pixels=pixels)
