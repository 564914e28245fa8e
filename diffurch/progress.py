"""A one-line text progress bar with elapsed and estimated total time."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable
from typing import TextIO

_PROGRESS_CHARS = "`0123456789@"
_MAX_LENGTH = 100


def format_hms(seconds: int) -> str:
    """Format a number of seconds as ``h:m:s`` without padding."""
    seconds = int(seconds)
    return f"{seconds // 3600}:{(seconds // 60) % 60}:{seconds % 60}"


class ProgressBar:
    """Tracks completed units of work out of ``volume`` and draws a bar."""

    def __init__(
        self,
        volume: int,
        stream: TextIO | None = None,
        clock: Callable[[], float] | None = None,
    ):
        if volume <= 0:
            raise ValueError("volume must be positive")
        self.volume = volume
        self.length = min(volume, _MAX_LENGTH)
        self.progress = 0
        self._chars = ["`"] * self.length
        self._stream = stream
        self._clock = clock or time.monotonic
        self._begin = self._clock()
        self._lock = threading.Lock()

    @property
    def bar(self) -> str:
        """The current bar characters."""
        return "".join(self._chars)

    def increment(self) -> None:
        """Record one more completed unit and refresh the bar."""
        with self._lock:
            self.progress += 1
        self.update()

    def update(self) -> None:
        """Refresh the bar characters from the current progress."""
        with self._lock:
            position = self.progress / self.volume * self.length
            whole = int(position)
            if whole > 0:
                self._chars[whole - 1] = "@"
            if whole < self.length:
                fraction = position - whole
                self._chars[whole] = _PROGRESS_CHARS[int(len(_PROGRESS_CHARS) * fraction)]

    def render(self) -> str:
        """Return the line showing the bar, elapsed and estimated total time."""
        passed = int(self._clock() - self._begin)
        if self.progress > 0:
            total = passed * self.volume // self.progress
        else:
            total = passed
        return f"\r{self.bar} {format_hms(passed)} / {format_hms(total)}" + " " * 41

    def show(self) -> None:
        """Write the rendered line to the stream and flush it."""
        stream = self._stream or sys.stdout
        stream.write(self.render())
        stream.flush()