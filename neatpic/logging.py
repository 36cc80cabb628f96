"""Logging utilities with timing and frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Application logger with timestamps and frame counts."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self._stream = stream

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    def increment_frame(self) -> None:
        """Increment frame counter."""
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def log(self, msg: str) -> None:
        """Log a message with timestamp and frame number."""
        line = f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"
        stream = self._stream or sys.stdout
        try:
            stream.write(line)
            stream.flush()
        except (OSError, ValueError):
            # stdout can be closed or detached under a GUI launcher
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass

    def __call__(self, msg: str) -> None:
        """Shorthand for log()."""
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def set_logger(logger: Optional[Logger]) -> None:
    """Replace the global logger (None resets to a fresh stdout logger)."""
    global _logger
    _logger = logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def get_frame() -> int:
    """Get current frame count."""
    return get_logger().frame


def increment_frame() -> None:
    """Increment frame counter."""
    get_logger().increment_frame()
