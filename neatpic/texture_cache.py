"""Lazy per-entry texture cache.

Each ImageEntry is decoded and uploaded the first time it is displayed. The
outcome (texture or decode error) is stored on the entry and never
recomputed, so a broken file costs one read and one codec call per session.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from .errors import DecodeError
from .logging import log
from .types import ImageEntry, LoadOutcome, RasterImage, TextureInfo

Decoder = Callable[[str], RasterImage]
Uploader = Callable[[RasterImage], Any]
Unloader = Callable[[Any], None]


@dataclass
class TextureCache:
    """Decode-on-first-access cache backed by the entries themselves."""
    decode: Decoder
    upload: Uploader
    unload: Optional[Unloader] = None

    def get(self, entry: ImageEntry) -> TextureInfo:
        """Return the entry's texture, loading it on first access.

        Raises:
            DecodeError: the cached failure, on this and every later call.
        """
        if entry.outcome is None:
            entry.outcome = self._load(entry.path)
        if isinstance(entry.outcome, DecodeError):
            raise entry.outcome
        return entry.outcome

    def try_get(self, entry: ImageEntry) -> Optional[TextureInfo]:
        """Frame-loop variant of get(): None for a failed entry."""
        try:
            return self.get(entry)
        except DecodeError:
            return None

    def _load(self, path: str) -> LoadOutcome:
        name = os.path.basename(path)
        try:
            raster = self.decode(path)
        except DecodeError as e:
            log(f"[LOAD][ERR] {name}: {e.cause!r}")
            return e
        tex = self.upload(raster)
        log(f"[LOAD] {name}: {raster.width}x{raster.height}")
        return TextureInfo(tex=tex, w=raster.width, h=raster.height, path=path)

    def release_all(self, entries: Iterable[ImageEntry]) -> int:
        """Unload every uploaded texture. Returns how many were released."""
        released = 0
        for entry in entries:
            ti = entry.texture
            if ti is None:
                continue
            if self.unload is not None:
                self.unload(ti.tex)
            released += 1
        return released
