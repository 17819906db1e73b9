"""
Clipboard History - Bounded, de-duplicated list of copied texts.

The history is filled by an external poller calling push() with whatever
text is currently on the clipboard. The newest entry is always first. Text
already present anywhere in the history is ignored, and once the capacity
(20) is exceeded the oldest entry is dropped.

The router only ever reads snapshot().
"""

import time
from dataclasses import dataclass
from typing import Optional

from loguru import logger

CAPACITY = 20


@dataclass(frozen=True)
class ClipboardEntry:
    text: str
    captured_at: float


class ClipboardHistory:
    """Most-recent-first clipboard history."""

    def __init__(self, capacity: int = CAPACITY):
        self.capacity = capacity
        self._entries: list[ClipboardEntry] = []

    def push(self, text: str, captured_at: Optional[float] = None) -> bool:
        """
        Record a copied text.

        Args:
            text: Current clipboard contents
            captured_at: Capture time (defaults to now)

        Returns:
            True if the text was added, False if empty or already present
        """
        if not text or any(entry.text == text for entry in self._entries):
            return False

        entry = ClipboardEntry(text=text, captured_at=time.time() if captured_at is None else captured_at)
        self._entries.insert(0, entry)
        if len(self._entries) > self.capacity:
            self._entries.pop()

        logger.debug(f"Clipboard history: {len(self._entries)} entries")
        return True

    def snapshot(self) -> tuple[ClipboardEntry, ...]:
        """Immutable copy of the history, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
