from __future__ import annotations

from dataclasses import dataclass

from config import PLAYER_COLOR, PLAYER_ICON, PLAYER_START


@dataclass
class Player:
    """The explorer: a glyph on the grid plus the access level it carries."""

    x: int = PLAYER_START[0]
    y: int = PLAYER_START[1]
    access_level: int = 0
    icon: str = PLAYER_ICON
    color: str = PLAYER_COLOR

    def __post_init__(self):
        if self.access_level < 0:
            raise ValueError(f"Invalid access level: {self.access_level} (must be >= 0)")

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y
