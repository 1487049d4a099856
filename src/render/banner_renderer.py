"""Draws a BannerState. Reads state only; never advances it.

Draw order per frame: background, stars, shooting stars, moons behind the
planet, planet, moons in front, shutter. Everything is clipped to the
banner rectangle; the planet and outer moons overhang the bottom edge.
"""

from __future__ import annotations

from typing import Tuple

from banner.shutter import rivet_centers, strut_rects
from banner.state import BannerState
from config import (
    BACKGROUND_COLOR,
    PLANET_INNER_COLOR,
    PLANET_OUTER_COLOR,
    SHOOTING_STAR_WIDTH,
    SHUTTER_GRADIENT,
    SHUTTER_RIVET_COLOR,
    SHUTTER_RIVET_OUTLINE,
    SHUTTER_RIVET_RADIUS,
    SHUTTER_STRUT_COLOR,
)
from render.primitives import (
    clipped,
    fill_disc,
    fill_rect,
    fill_rect_vertical_gradient,
    gradient_line,
    rgba,
    stroke_circle,
    translated,
)


class BannerRenderer:
    def __init__(self, state: BannerState) -> None:
        self.state = state

    def draw(self, origin: Tuple[float, float] = (0.0, 0.0)) -> None:
        state = self.state
        with clipped(origin[0], origin[1], state.width, state.height), translated(*origin):
            fill_rect(0, 0, state.width, state.height, BACKGROUND_COLOR)
            self._draw_stars()
            self._draw_shooting_stars()

            behind, front = state.moon_layers()
            for moon in behind:
                fill_disc(moon.position.x, moon.position.y, moon.radius, moon.color, moon.edge_color)
            planet = state.planet
            fill_disc(planet.x, planet.y, planet.radius, PLANET_INNER_COLOR, PLANET_OUTER_COLOR)
            for moon in front:
                fill_disc(moon.position.x, moon.position.y, moon.radius, moon.color, moon.edge_color)

            if state.shutter is not None:
                self._draw_shutter()

    def _draw_stars(self) -> None:
        for star in self.state.stars:
            fill_rect(star.x, star.y, star.size, star.size, star.color, star.alpha)

    def _draw_shooting_stars(self) -> None:
        head_color = rgba("white", 1.0)
        tail_color = rgba("white", 0.0)
        for shooting_star in self.state.shooting_stars:
            gradient_line(
                (shooting_star.x, shooting_star.y),
                shooting_star.tail(),
                head_color,
                tail_color,
                SHOOTING_STAR_WIDTH,
            )

    def _draw_shutter(self) -> None:
        width = self.state.width
        shutter = self.state.shutter
        height, offset = shutter.height, shutter.offset
        if shutter.is_open:
            return
        fill_rect_vertical_gradient(0, offset, width, height, SHUTTER_GRADIENT)
        for x, y, w, h in strut_rects(width, height, offset):
            fill_rect(x, y, w, h, SHUTTER_STRUT_COLOR)
        for x, y in rivet_centers(width, height, offset):
            fill_disc(x, y, SHUTTER_RIVET_RADIUS, SHUTTER_RIVET_COLOR)
            stroke_circle(x, y, SHUTTER_RIVET_RADIUS, SHUTTER_RIVET_OUTLINE)
