"""Image list state - current directory entries and selection."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from ..types import ImageEntry


@dataclass
class ImageListState:
    """State for the image set and the selected index.

    ``index`` is None when nothing is selected, otherwise always a valid
    position in ``entries``.
    """
    entries: List[ImageEntry] = field(default_factory=list)
    index: Optional[int] = None
    dirpath: str = ""

    def __post_init__(self) -> None:
        if self.index is not None and not 0 <= self.index < len(self.entries):
            raise ValueError(f"index {self.index} out of range for {len(self.entries)} entries")

    @property
    def count(self) -> int:
        """Total number of images."""
        return len(self.entries)

    @property
    def current(self) -> Optional[ImageEntry]:
        """Currently selected entry or None."""
        if self.index is None:
            return None
        return self.entries[self.index]

    @property
    def current_path(self) -> Optional[str]:
        entry = self.current
        return entry.path if entry else None

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous image."""
        return self.index is not None and self.index > 0

    @property
    def has_next(self) -> bool:
        """Check if there's a next image."""
        return self.index is not None and self.index < len(self.entries) - 1

    def select(self, idx: int) -> bool:
        """Select an index. Returns False if it is out of range."""
        if not 0 <= idx < len(self.entries):
            return False
        self.index = idx
        return True
