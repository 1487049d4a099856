"""Combined page: a shutter banner stacked above the crawler.

`f` toggles the banner shutter; every other input goes to the crawler.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

import pygame

from banner.bannerscene import BannerScene
from banner.state import BANNER_VARIANTS, BannerConfig
from core.scene import Scene
from crawler.actions import GameState
from crawler.crawlerscene import CrawlerScene, crawler_size

SHUTTER_KEY = "f"


def combined_size(config: BannerConfig, state: GameState) -> Tuple[int, int]:
    crawler_w, crawler_h = crawler_size(state)
    return max(config.width, crawler_w), config.height + crawler_h


class CombinedScene(Scene):
    def __init__(
        self,
        config: BannerConfig = BANNER_VARIANTS["shutter"],
        state: Optional[GameState] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        state = state or GameState.new()
        super().__init__(size=combined_size(config, state))
        self.banner = BannerScene(config, rng=rng)
        self.crawler = CrawlerScene(state, origin=(0, config.height))
        self.updaters.extend([self.banner.update, self.crawler.update])

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN and event.unicode.lower() == SHUTTER_KEY:
            self.banner.toggle_shutter()
        else:
            self.crawler.handle_event(event)

    def on_resize(self) -> None:
        self.banner.on_resize()

    def render(self, origin: Tuple[float, float] = (0.0, 0.0)) -> None:  # pragma: no cover - visual
        x, y = origin
        self.banner.render((x, y))
        self.crawler.render((x, y + self.banner.size[1]))
