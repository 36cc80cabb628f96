"""Image utilities - directory scanning and listing helpers."""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .config import IMG_EXTS, APP_NAME
from .errors import DirectoryUnreadable
from .types import ImageEntry


@dataclass
class OpenContext:
    """Result of scanning the browse root for an opened path."""
    entries: List[ImageEntry] = field(default_factory=list)
    index: Optional[int] = None
    dirpath: str = ""

    @property
    def paths(self) -> List[str]:
        return [e.path for e in self.entries]

    @property
    def window_title(self) -> str:
        """Browse root as given, or the app name when it is empty."""
        return self.dirpath or APP_NAME


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension (case-sensitive)."""
    ext = os.path.splitext(filepath)[1]
    return ext in IMG_EXTS


def resolve_browse_root(opened_path: str) -> tuple[str, Optional[str]]:
    """Split an opened path into (browse root, requested file or None).

    An empty path or a directory is browsed as-is with no file requested.
    """
    if not opened_path or os.path.isdir(opened_path):
        return opened_path, None
    return os.path.dirname(opened_path), opened_path


def list_images(dirpath: str) -> List[str]:
    """List supported regular files in directory, sorted by name.

    Args:
        dirpath: Directory path to scan. Empty means the current directory.

    Returns:
        List of paths joined onto ``dirpath``.

    Raises:
        DirectoryUnreadable: if the directory cannot be listed.
    """
    try:
        with os.scandir(dirpath or os.curdir) as it:
            # Symlinks are skipped, as are subdirectories.
            names = [e.name for e in it if e.is_file(follow_symlinks=False)]
    except OSError as e:
        raise DirectoryUnreadable(dirpath, e) from e

    return [
        os.path.join(dirpath, name)
        for name in sorted(names)
        if is_supported_image(name)
    ]


def _same_file(a: str, b: str) -> bool:
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))


def scan_directory(opened_path: str) -> OpenContext:
    """Build the image set for an opened path.

    The index points at the requested file when it is in the listing,
    otherwise at the first entry, or is None for an empty listing.

    Raises:
        DirectoryUnreadable: if the browse root cannot be listed.
    """
    dirpath, requested = resolve_browse_root(opened_path)
    paths = list_images(dirpath)

    index: Optional[int] = None
    if requested is not None:
        for i, p in enumerate(paths):
            if _same_file(p, requested):
                index = i
                break
    if index is None and paths:
        index = 0

    return OpenContext(
        entries=[ImageEntry(path=p) for p in paths],
        index=index,
        dirpath=dirpath,
    )
