"""Banner state and its per-frame update.

BannerState owns every entity of one banner. `step()` advances them by one
frame; rendering is done elsewhere from the resulting state only.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from banner.orbit import Moon, Planet
from banner.shutter import Shutter
from banner.sky import ShootingStar, Star
from config import MOONS, SHOOTING_STAR_COUNT, STAR_COUNT
from core.drawable import Updatable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BannerConfig:
    name: str
    width: int
    height: int
    shutter: bool = False
    star_count: int = STAR_COUNT
    shooting_star_count: int = SHOOTING_STAR_COUNT


# The banner ships in a few sizes; they are one engine with different settings
BANNER_VARIANTS: Dict[str, BannerConfig] = {
    "classic": BannerConfig("classic", 1200, 300),
    "wide": BannerConfig("wide", 1600, 150),
    "shutter": BannerConfig("shutter", 1200, 300, shutter=True),
}


class BannerState:
    def __init__(
        self,
        config: BannerConfig,
        rng: Optional[random.Random] = None,
        moons: Sequence[Tuple[float, float, str]] = MOONS,
    ) -> None:
        self.config = config
        self.width = config.width
        self.height = config.height
        rng = rng or random.Random()

        self.stars: List[Star] = [
            Star.random(self.width, self.height, rng) for _ in range(config.star_count)
        ]
        self.shooting_stars: List[ShootingStar] = [
            ShootingStar(self.width, self.height, rng) for _ in range(config.shooting_star_count)
        ]
        self.planet = Planet.for_surface(self.width, self.height)
        self.moons: List[Moon] = [
            Moon(self.planet, mass, orbital_radius, color, angle=rng.random() * math.pi * 2)
            for mass, orbital_radius, color in moons
        ]
        # Rightward flags from the latest moon update, index-aligned with moons
        self.moving_right: List[bool] = [False] * len(self.moons)
        self.shutter: Optional[Shutter] = Shutter(self.height) if config.shutter else None
        self.frame = 0
        logger.debug(
            "Banner %r: %d stars, %d shooting stars, %d moons, shutter=%s",
            config.name,
            len(self.stars),
            len(self.shooting_stars),
            len(self.moons),
            config.shutter,
        )

    def sky_entities(self) -> List[Updatable]:
        return [*self.stars, *self.shooting_stars]

    def step(self) -> None:
        for entity in self.sky_entities():
            entity.update()
        self.moving_right = [moon.update() for moon in self.moons]
        if self.shutter is not None:
            self.shutter.update()
        self.frame += 1

    def moon_layers(self) -> Tuple[List[Moon], List[Moon]]:
        """Split moons into (behind planet, in front of planet).

        Moons moving rightward are on the far half of their orbit. This
        two-bucket split is the whole depth model; moons are never sorted
        against each other.
        """
        behind = [m for m, right in zip(self.moons, self.moving_right) if right]
        front = [m for m, right in zip(self.moons, self.moving_right) if not right]
        return behind, front

    def resize(self) -> None:
        # The surface is pinned; a resize only reasserts the configured size.
        # The shutter offset is deliberately left where it is.
        self.width = self.config.width
        self.height = self.config.height
