"""View model for the crawler grid: what glyph each cell shows and how.

Pure functions of GameState so the GL grid renderer only has to paint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from crawler.actions import GameState
from crawler.gamemap import Door, Orientation, WALL_GLYPHS

OPEN_DOOR_GLYPH = "·"
CLOSED_DOOR_GLYPHS = {Orientation.VERTICAL: "‖", Orientation.HORIZONTAL: "="}

STYLE_FLOOR = "floor"
STYLE_WALL = "wall"
STYLE_PLAYER = "player"
STYLE_DOOR = "door"
STYLE_DOOR_ADJACENT = "door_adjacent"


@dataclass(frozen=True)
class Cell:
    glyph: str
    style: str


def door_glyph(door: Door) -> str:
    return OPEN_DOOR_GLYPH if door.is_open else CLOSED_DOOR_GLYPHS[door.orientation]


def build_cells(state: GameState) -> List[List[Cell]]:
    player = state.player
    game_map = state.game_map
    doors = {door.position: door for door in game_map.doors}
    grid: List[List[Cell]] = []
    for y, row in enumerate(game_map.rows):
        cells: List[Cell] = []
        for x, glyph in enumerate(row):
            door = doors.get((x, y))
            if (x, y) == player.position:
                cells.append(Cell(player.icon, STYLE_PLAYER))
            elif door is not None:
                style = STYLE_DOOR_ADJACENT if door.is_adjacent(*player.position) else STYLE_DOOR
                cells.append(Cell(door_glyph(door), style))
            elif glyph in WALL_GLYPHS:
                cells.append(Cell(glyph, STYLE_WALL))
            else:
                cells.append(Cell(glyph, STYLE_FLOOR))
        grid.append(cells)
    return grid


def stats_lines(state: GameState) -> List[str]:
    return ["Stats/Resources", f"Access Level: {state.player.access_level}"]
