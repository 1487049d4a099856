"""Scene hosting the crawler: stats panel on the left, map grid on the right
and the transient message line under the grid.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Tuple

import pygame

from config import (
    BUTTON_SIZE,
    CELL_HEIGHT,
    CRAWLER_BACKGROUND,
    MESSAGE_COLOR,
    PANEL_PADDING,
    PANEL_WIDTH,
    TEXT_COLOR,
)
from core.scene import Scene
from crawler.actions import GameState, handle_key, increase_access_level
from crawler.view import build_cells, stats_lines
from render.primitives import fill_rect, translated
from ui.button import Button
from ui.grid_renderer import GridRenderer, grid_size
from ui.text_renderer import TextRenderer

logger = logging.getLogger(__name__)


def crawler_size(state: GameState) -> Tuple[int, int]:
    """Pixel size of the crawler area for the given map."""
    grid_w, grid_h = grid_size(state.game_map.width, state.game_map.height)
    # One extra text row under the grid for messages
    return PANEL_WIDTH + grid_w + 2 * PANEL_PADDING, grid_h + CELL_HEIGHT + 3 * PANEL_PADDING


class CrawlerScene(Scene):
    def __init__(self, state: Optional[GameState] = None, origin: Tuple[int, int] = (0, 0)) -> None:
        start_time = time.perf_counter()
        self.state = state or GameState.new()
        super().__init__(size=crawler_size(self.state))
        # Where this scene sits inside the window, for mouse hit-testing
        self.origin = origin

        self.text = TextRenderer()
        self.grid = GridRenderer(self.text)
        button_y = PANEL_PADDING + 3 * CELL_HEIGHT + PANEL_PADDING
        self.access_button = Button(
            pygame.Rect((PANEL_PADDING, button_y), BUTTON_SIZE),
            "Increase Access Level",
            lambda: increase_access_level(self.state),
        )
        self.updaters.append(self.state.messages.update)
        self.log_timing("Building crawler scene", start_time)

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN and event.unicode:
            result = handle_key(self.state, event.unicode.lower())
            if result is not None:
                logger.debug("Key %r -> %s", event.unicode, result)
        else:
            self.access_button.handle_event(event, self.origin)

    def render(self, origin: Tuple[float, float] = (0.0, 0.0)) -> None:  # pragma: no cover - visual
        width, height = self.size
        grid_x = PANEL_WIDTH + PANEL_PADDING
        grid_y = PANEL_PADDING
        with translated(*origin):
            fill_rect(0, 0, width, height, CRAWLER_BACKGROUND)

            self.text.begin()
            for i, line in enumerate(stats_lines(self.state)):
                self.text.draw_text(
                    line, PANEL_PADDING, PANEL_PADDING + i * CELL_HEIGHT, TEXT_COLOR, key=f"stats:{i}"
                )
            self.text.end()
            self.access_button.draw(self.text)

            self.grid.draw(build_cells(self.state), grid_x, grid_y)

            _, grid_h = grid_size(self.state.game_map.width, self.state.game_map.height)
            self.text.begin()
            self.text.draw_text(
                self.state.messages.text,
                grid_x,
                grid_y + grid_h + PANEL_PADDING,
                MESSAGE_COLOR,
                key="message",
            )
            self.text.end()
