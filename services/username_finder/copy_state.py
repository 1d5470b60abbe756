"""
Per-suggestion copy-to-clipboard state.

A suggestion reads as JUST_COPIED for two seconds after its most recent copy
and as IDLE otherwise. State is derived from activation timestamps against a
monotonic clock, so reactivation restarts the window and nothing can stay
stuck in JUST_COPIED.
"""

from __future__ import annotations

import enum
import time
from typing import Callable, Dict, Protocol

COPY_RESET_SECONDS = 2.0


class CopyState(enum.Enum):
    IDLE = "idle"
    JUST_COPIED = "just_copied"


class Clipboard(Protocol):
    def write_text(self, text: str) -> None:
        ...


class CopyTracker:
    def __init__(
        self,
        clipboard: Clipboard,
        *,
        clock: Callable[[], float] = time.monotonic,
        reset_after: float = COPY_RESET_SECONDS,
    ) -> None:
        self._clipboard = clipboard
        self._clock = clock
        self._reset_after = reset_after
        self._copied_at: Dict[str, float] = {}

    def copy(self, username: str) -> CopyState:
        """Write `username` to the clipboard and restart its copied window."""
        self._clipboard.write_text(username)
        self._copied_at[username] = self._clock()
        return CopyState.JUST_COPIED

    def state_of(self, username: str) -> CopyState:
        copied_at = self._copied_at.get(username)
        if copied_at is None:
            return CopyState.IDLE
        if self._clock() - copied_at >= self._reset_after:
            del self._copied_at[username]
            return CopyState.IDLE
        return CopyState.JUST_COPIED

    def clear(self) -> None:
        self._copied_at.clear()
