"""Mechanical shutter overlay that slides down over the banner and back up.

The offset is the y coordinate of the shutter's top edge: 0 means the
banner is fully covered, -height means the shutter is parked above it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Tuple

from config import (
    SHUTTER_RIVETS_X,
    SHUTTER_RIVETS_Y,
    SHUTTER_SPEED,
    SHUTTER_STRUT_COUNT,
    SHUTTER_STRUT_HEIGHT,
)

logger = logging.getLogger(__name__)


class ShutterState(str, Enum):
    IDLE = "idle"
    CLOSING = "closing"
    OPENING = "opening"


class Shutter:
    def __init__(self, height: int, speed: float = SHUTTER_SPEED, offset: float | None = None) -> None:
        self.height = height
        self.speed = speed
        # Starts fully open (hidden above the surface)
        self.offset = float(-height if offset is None else offset)
        self.offset = max(-float(height), min(0.0, self.offset))
        self.state = ShutterState.IDLE

    @property
    def is_closed(self) -> bool:
        return self.offset >= 0

    @property
    def is_open(self) -> bool:
        return self.offset <= -self.height

    def close(self) -> None:
        if not self.is_closed:
            self.state = ShutterState.CLOSING
            logger.debug("Shutter closing from %.1f", self.offset)

    def open(self) -> None:
        if not self.is_open:
            self.state = ShutterState.OPENING
            logger.debug("Shutter opening from %.1f", self.offset)

    def toggle(self) -> None:
        # Reverse a closing shutter, otherwise close unless already shut
        if self.state is ShutterState.CLOSING or self.is_closed:
            self.open()
        else:
            self.close()

    def update(self) -> None:
        if self.state is ShutterState.CLOSING:
            self.offset += self.speed
            if self.offset >= 0:
                self.offset = 0.0
                self.state = ShutterState.IDLE
        elif self.state is ShutterState.OPENING:
            self.offset -= self.speed
            if self.offset <= -self.height:
                self.offset = -float(self.height)
                self.state = ShutterState.IDLE


def strut_rects(width: float, height: float, offset: float) -> List[Tuple[float, float, float, float]]:
    """Rects (x, y, w, h) of the horizontal struts, evenly spaced from the top edge."""
    spacing = height / SHUTTER_STRUT_COUNT
    return [
        (0.0, offset + i * spacing, float(width), float(SHUTTER_STRUT_HEIGHT))
        for i in range(SHUTTER_STRUT_COUNT)
    ]


def rivet_centers(width: float, height: float, offset: float) -> List[Tuple[float, float]]:
    """Rivet centres on an evenly spaced grid, none touching the edges."""
    return [
        (
            (i + 1) * (width / (SHUTTER_RIVETS_X + 1)),
            offset + (j + 1) * (height / (SHUTTER_RIVETS_Y + 1)),
        )
        for i in range(SHUTTER_RIVETS_X)
        for j in range(SHUTTER_RIVETS_Y)
    ]
