"""Paints a grid of styled glyph cells (see crawler.view) in screen space."""

from __future__ import annotations

from typing import Dict, Sequence

from config import CELL_HEIGHT, CELL_WIDTH, DOOR_ADJACENT_COLOR, DOOR_COLOR, PLAYER_COLOR, TEXT_COLOR, WALL_COLOR
from crawler.view import (
    Cell,
    STYLE_DOOR,
    STYLE_DOOR_ADJACENT,
    STYLE_FLOOR,
    STYLE_PLAYER,
    STYLE_WALL,
)
from ui.text_renderer import TextRenderer

STYLE_COLORS: Dict[str, str] = {
    STYLE_FLOOR: TEXT_COLOR,
    STYLE_WALL: WALL_COLOR,
    STYLE_PLAYER: PLAYER_COLOR,
    STYLE_DOOR: DOOR_COLOR,
    STYLE_DOOR_ADJACENT: DOOR_ADJACENT_COLOR,
}


def grid_size(columns: int, rows: int) -> tuple[int, int]:
    return columns * CELL_WIDTH, rows * CELL_HEIGHT


class GridRenderer:
    def __init__(self, text: TextRenderer) -> None:
        self.text = text

    def draw(self, cells: Sequence[Sequence[Cell]], x: float, y: float) -> None:  # pragma: no cover - visual
        self.text.begin()
        for row_index, row in enumerate(cells):
            cy = y + row_index * CELL_HEIGHT
            for col_index, cell in enumerate(row):
                self.text.draw_glyph(
                    cell.glyph, x + col_index * CELL_WIDTH, cy, STYLE_COLORS[cell.style]
                )
        self.text.end()
