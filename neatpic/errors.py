"""Exception types raised by NeatPic."""

from __future__ import annotations
from typing import Optional


class NeatPicError(Exception):
    """Base class for all NeatPic errors."""


class DirectoryUnreadable(NeatPicError):
    """The browse root could not be listed. Fatal at startup."""

    def __init__(self, dirpath: str, cause: Optional[BaseException] = None):
        self.dirpath = dirpath
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"cannot read directory {dirpath!r}{detail}")


class DecodeError(NeatPicError):
    """An image file could not be decoded.

    Cached on its entry for the rest of the session; never retried.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"cannot decode {path!r}{detail}")
