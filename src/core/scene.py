"""Scene base: owns per-frame updaters, input hooks and rendering.

Engine hosts exactly one scene. Scenes that stack others (the combined
banner + crawler page) forward events and updates to their children.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    # Pixel size of the area this scene draws into
    size: Tuple[int, int] = (0, 0)
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Called when the host window reported a resize; the surface is pinned so
    # scenes only reassert their fixed dimensions here.
    def on_resize(self) -> None:
        pass

    def render(self, origin: Tuple[float, float] = (0.0, 0.0)) -> None:  # pragma: no cover - visual
        pass

    def log_timing(self, message: str, start_time: float, end_time: float | None = None):
        """Logs timing information for scene setup phases."""
        end_time = time.perf_counter() if end_time is None else end_time
        logger.debug("%s took %.6f seconds", message, end_time - start_time)
