from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from neatpic.logging import Logger, set_logger
from neatpic.types import ImageEntry, RasterImage
from neatpic.texture_cache import TextureCache


@pytest.fixture(autouse=True)
def quiet_logger():
    stream = io.StringIO()
    set_logger(Logger(stream))
    yield stream
    set_logger(None)


@pytest.fixture
def make_image(tmp_path: Path):
    """Write a small real image file and return its path."""
    def _make(name: str, size=(4, 3), color=(255, 0, 0), directory: Path = tmp_path) -> Path:
        path = directory / name
        fmt = {".jpg": "JPEG", ".jpeg": "JPEG", ".bmp": "BMP", ".png": "PNG"}.get(path.suffix.lower(), "PNG")
        Image.new("RGB", size, color).save(path, format=fmt)
        return path
    return _make


class FakeCodec:
    """Stands in for the Pillow codec and the GPU upload."""

    def __init__(self, sizes=None, failing=()):
        self.sizes = sizes or {}
        self.failing = set(failing)
        self.decode_calls: list[str] = []
        self.uploaded: list[RasterImage] = []
        self.unloaded: list[object] = []

    def decode(self, path: str) -> RasterImage:
        from neatpic.errors import DecodeError
        self.decode_calls.append(path)
        if path in self.failing:
            raise DecodeError(path, OSError("broken"))
        w, h = self.sizes.get(path, (800, 600))
        return RasterImage(width=w, height=h, pixels=b"\x00" * (w * h * 4))

    def upload(self, raster: RasterImage):
        self.uploaded.append(raster)
        return f"tex{len(self.uploaded)}"

    def unload(self, tex) -> None:
        self.unloaded.append(tex)

    def cache(self) -> TextureCache:
        return TextureCache(decode=self.decode, upload=self.upload, unload=self.unload)


@pytest.fixture
def codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture
def entries():
    return [ImageEntry(path=p) for p in ("a.png", "b.png", "c.png")]
