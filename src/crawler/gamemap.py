"""ASCII-art map parsing and door discovery.

A map is a list of equally long rows. Box-drawing glyphs are walls, blanks
are floor and a digit marks a door whose value is the access level needed to
operate it. Door orientation is read from the blanks around the digit:
blanks left and right mean the door sits in a vertical wall, blanks above
and below mean it sits in a horizontal wall.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

WALL_GLYPHS = frozenset("║═╦╩╠╣╬╔╗╚╝")
FLOOR_GLYPH = " "
DOOR_GLYPHS = frozenset("0123456789")

DEFAULT_MAP_ROWS: Tuple[str, ...] = (
    "╔════╦═════╦═══════╦═════╦═════╦══════╗",
    "║    ║     ║       ║     ║     ║      ║",
    "║    ║     ║       ║     ║     ║      ║",
    "║    0     2       0     3     1      ║",
    "║    ║     ║       ║     ║     ║      ║",
    "║    ║     ║       ║     ║     ║      ║",
    "╠═0══╩═════╬═══2═══╬══0══╬══1═════════╣",
    "║          ║       ║     ║            ║",
    "║          ║       ║     ║            ║",
    "║          3       1     2            ║",
    "║          ║       ║     ║            ║",
    "║          ║       ║     ║            ║",
    "╠════╦══0══╬═══════╬══3══╬══1══╦══════╣",
    "║    ║     ║       ║     ║     ║      ║",
    "║    ║     ║       ║     ║     ║      ║",
    "║    2     1       0     3     2      ║",
    "║    ║     ║       ║     ║     ║      ║",
    "║    ║     ║       ║     ║     ║      ║",
    "╠═0══╩═════╬══2════╬══0══╬══1══╩══════╣",
    "║          ║       ║     ║            ║",
    "║          ║       ║     ║            ║",
    "║          0       1     2            ║",
    "║          ║       ║     ║            ║",
    "╚══════════╩═══════╩═════╩════════════╝",
)


class MapError(ValueError):
    """Raised when a map cannot be loaded (bad shape or misplaced door)."""


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(eq=False)
class Door:
    x: int
    y: int
    access_level: int
    orientation: Orientation
    is_open: bool = False

    def __setattr__(self, name, value):
        if name == "orientation" and "orientation" in self.__dict__:
            raise AttributeError("door orientation is fixed once the map is parsed")
        super().__setattr__(name, value)

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def distance_to(self, x: int, y: int) -> int:
        return abs(self.x - x) + abs(self.y - y)

    def is_adjacent(self, x: int, y: int) -> bool:
        return self.distance_to(x, y) == 1


@dataclass
class GameMap:
    rows: Tuple[str, ...]
    doors: List[Door] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def glyph_at(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        return self.glyph_at(x, y) in WALL_GLYPHS

    def door_at(self, x: int, y: int) -> Optional[Door]:
        return next((d for d in self.doors if d.x == x and d.y == y), None)

    def adjacent_doors(self, x: int, y: int) -> List[Door]:
        """Doors orthogonally next to (x, y), in door list order."""
        return [d for d in self.doors if d.is_adjacent(x, y)]

    def __iter__(self):
        # Allows `grid, doors = game_map`
        return iter((self.rows, self.doors))


def _door_orientation(rows: Sequence[str], x: int, y: int) -> Orientation:
    if rows[y][x - 1] == FLOOR_GLYPH and rows[y][x + 1] == FLOOR_GLYPH:
        return Orientation.VERTICAL
    if rows[y - 1][x] == FLOOR_GLYPH and rows[y + 1][x] == FLOOR_GLYPH:
        return Orientation.HORIZONTAL
    raise MapError(f"door at ({x}, {y}) is not flanked by floor on either axis")


def parse_map(rows: Iterable[str]) -> GameMap:
    """Validate `rows` and collect its doors in row-major scan order."""
    rows = tuple(rows)
    if not rows:
        raise MapError("map has no rows")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapError(f"row {y} has length {len(row)}, expected {width}")

    height = len(rows)
    doors: List[Door] = []
    for y, row in enumerate(rows):
        for x, glyph in enumerate(row):
            if glyph not in DOOR_GLYPHS:
                continue
            if x in (0, width - 1) or y in (0, height - 1):
                raise MapError(f"door at ({x}, {y}) lies on the map border")
            doors.append(Door(x, y, int(glyph), _door_orientation(rows, x, y)))

    logger.debug("Parsed %dx%d map with %d doors", width, height, len(doors))
    return GameMap(rows, doors)
