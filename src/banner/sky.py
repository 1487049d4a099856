"""Background sky entities: twinkling stars and recycled shooting stars."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from config import STAR_BLUE_CHANCE, STAR_RED_CHANCE


@dataclass
class Star:
    """A fixed point of light whose brightness oscillates with `phase`.

    Only `phase` changes after construction. It grows without bound; the
    brightness is periodic in it so no wrapping is needed.
    """

    x: float
    y: float
    size: float
    color: str
    phase: float
    twinkle_speed: float

    @classmethod
    def random(cls, width: int, height: int, rng: random.Random) -> "Star":
        x = rng.random() * width
        y = rng.random() * height
        size = rng.random() * 2 + 1
        # Two separate draws: red is rare, blue only competes for the rest
        if rng.random() < STAR_RED_CHANCE:
            color = "red"
        elif rng.random() < STAR_BLUE_CHANCE:
            color = "blue"
        else:
            color = "white"
        twinkle_speed = rng.random() * 0.05 + 0.01
        phase = rng.random() * math.pi * 2
        return cls(x, y, size, color, phase, twinkle_speed)

    @property
    def alpha(self) -> float:
        return 0.5 + math.sin(self.phase) * 0.5

    def update(self) -> None:
        self.phase += self.twinkle_speed


class ShootingStar:
    """Streak crossing the surface in a straight line.

    Enters from the left or right edge aimed at the bottom corner of the
    opposite side. Once its head leaves the surface it is reset to a fresh
    edge position instead of being discarded.
    """

    def __init__(self, width: int, height: int, rng: random.Random) -> None:
        self.width = width
        self.height = height
        self._rng = rng
        self.reset()

    def reset(self) -> None:
        rng = self._rng
        self.side = "left" if rng.random() < 0.5 else "right"
        self.x = 0.0 if self.side == "left" else float(self.width)
        self.y = rng.random() * self.height
        self.length = rng.random() * 80 + 10
        self.speed = rng.random() * 3 + 1
        far_x = self.width if self.side == "left" else 0
        self.angle = math.atan2(self.height - self.y, far_x - self.x)

    def tail(self) -> tuple[float, float]:
        """End point of the trail, `length` pixels behind the head."""
        return (
            self.x - math.cos(self.angle) * self.length,
            self.y - math.sin(self.angle) * self.length,
        )

    def in_bounds(self) -> bool:
        return 0 <= self.x <= self.width and 0 <= self.y <= self.height

    def update(self) -> None:
        self.x += math.cos(self.angle) * self.speed
        self.y += math.sin(self.angle) * self.speed
        if not self.in_bounds():
            self.reset()
