"""Crawler package: map/door engine for the tile exploration toy.

    from crawler import GameState, try_move, interact
"""

from .gamemap import (
    DEFAULT_MAP_ROWS,
    Door,
    GameMap,
    MapError,
    Orientation,
    WALL_GLYPHS,
    parse_map,
)
from .player import Player
from .messages import MessageBoard
from .actions import (
    ActionResult,
    GameState,
    handle_key,
    increase_access_level,
    interact,
    try_move,
)
from .view import Cell, build_cells, stats_lines

__all__ = [
    "DEFAULT_MAP_ROWS",
    "Door",
    "GameMap",
    "MapError",
    "Orientation",
    "WALL_GLYPHS",
    "parse_map",
    "Player",
    "MessageBoard",
    "ActionResult",
    "GameState",
    "handle_key",
    "increase_access_level",
    "interact",
    "try_move",
    "Cell",
    "build_cells",
    "stats_lines",
]
