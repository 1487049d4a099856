"""Scene hosting one animated banner."""

from __future__ import annotations

import logging
import random
import time
from typing import Optional, Tuple

from banner.state import BannerConfig, BannerState
from core.drawable import Drawable
from core.scene import Scene
from render.banner_renderer import BannerRenderer

logger = logging.getLogger(__name__)


class BannerScene(Scene):
    def __init__(self, config: BannerConfig, rng: Optional[random.Random] = None) -> None:
        super().__init__(size=(config.width, config.height))
        start_time = time.perf_counter()
        self.state = BannerState(config, rng=rng)
        self.renderer: Drawable = BannerRenderer(self.state)
        self.log_timing("Building banner state", start_time)
        # One animation step per frame regardless of dt
        self.updaters.append(lambda dt: self.state.step())

    def toggle_shutter(self) -> None:
        if self.state.shutter is None:
            logger.debug("Banner %r has no shutter", self.state.config.name)
            return
        self.state.shutter.toggle()

    def on_resize(self) -> None:
        self.state.resize()

    def render(self, origin: Tuple[float, float] = (0.0, 0.0)) -> None:  # pragma: no cover - visual
        self.renderer.draw(origin)
