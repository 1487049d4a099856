"""Planet and moons: a toy orbital model for the banner.

Moons follow circular orbits squashed vertically by ORBIT_SQUASH so the
orbit reads as an inclined ellipse. The period follows a Kepler-like
relation (period ~ r^1.5) scaled by MOON_SPEED_FACTOR; it is a look, not
physics.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from config import (
    MOON_RADIUS_SCALE,
    MOON_SHADE_AMOUNT,
    MOON_SPEED_FACTOR,
    ORBIT_K,
    ORBIT_SQUASH,
    PLANET_INSET_X,
    PLANET_INSET_Y,
    PLANET_RADIUS,
)


@dataclass(frozen=True)
class Planet:
    x: float
    y: float
    radius: float = PLANET_RADIUS

    @classmethod
    def for_surface(cls, width: int, height: int) -> "Planet":
        return cls(width - PLANET_INSET_X, height - PLANET_INSET_Y)

    @property
    def center(self) -> Vector2:
        return Vector2(self.x, self.y)


def moon_radius(mass: float) -> float:
    """Radius of a sphere of the given mass at unit density, scaled for display."""
    return (mass / (4 / 3 * math.pi)) ** (1 / 3) * MOON_RADIUS_SCALE


def angular_velocity(
    orbital_radius: float, k: float = ORBIT_K, speed_factor: float = MOON_SPEED_FACTOR
) -> float:
    """Radians per frame for a moon at `orbital_radius`."""
    period = math.sqrt(k * orbital_radius**3)
    return speed_factor * (2 * math.pi) / period


def darker_shade(color: str, amount: int = MOON_SHADE_AMOUNT) -> str:
    """Return `color` with every RGB channel lowered by `amount` (floored at 0)."""
    c = pygame.Color(color)
    r, g, b = (max(0, ch - amount) for ch in (c.r, c.g, c.b))
    return f"#{r:02x}{g:02x}{b:02x}"


class Moon:
    def __init__(
        self, planet: Planet, mass: float, orbital_radius: float, color: str, angle: float = 0.0
    ) -> None:
        self.planet = planet
        self.mass = mass
        self.orbital_radius = orbital_radius
        self.color = color
        self.edge_color = darker_shade(color)
        self.radius = moon_radius(mass)
        self.angular_velocity = angular_velocity(orbital_radius)
        self.angle = angle
        # Placed on the first update; until then it sits at the origin so the
        # first update always reports rightward motion.
        self.position = Vector2(0.0, 0.0)
        self.last_x = 0.0

    def position_at(self, angle: float) -> Vector2:
        return Vector2(
            self.planet.x + math.cos(angle) * self.orbital_radius,
            self.planet.y + math.sin(angle) * self.orbital_radius * ORBIT_SQUASH,
        )

    def update(self) -> bool:
        """Move to the current angle, then advance it.

        Returns True when the moon moved rightward this frame, which is the
        half of the orbit drawn behind the planet.
        """
        self.last_x = self.position.x
        self.position = self.position_at(self.angle)
        self.angle += self.angular_velocity
        return self.position.x > self.last_x
