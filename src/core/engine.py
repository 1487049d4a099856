"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, 2D GL state and the main loop.
- Scene: holds demo state & update/draw logic (banner, crawler or both).

Everything is drawn with the legacy fixed-function pipeline in a single
orthographic projection whose origin is the top-left corner of the window.
"""

from __future__ import annotations

import logging
from typing import Callable

import pygame
from OpenGL.GL import (
    glEnable,
    glDisable,
    glBlendFunc,
    glClear,
    glClearColor,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glViewport,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_LINE_SMOOTH,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_SRC_ALPHA,
)

from config import FPS, VSYNC, WINDOW_TITLE
from core.scene import Scene

logger = logging.getLogger(__name__)

SceneFactory = Callable[[], Scene]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self, width: int, height: int, make_scene: SceneFactory, title: str = WINDOW_TITLE):
        self.width = width
        self.height = height
        pygame.init()
        pygame.display.set_caption(title)
        self._flags = pygame.DOUBLEBUF | pygame.OPENGL | pygame.RESIZABLE
        self._set_mode()
        self.clock = pygame.time.Clock()

        # Scene is created after the GL context exists so it can upload textures
        self.scene = make_scene()
        logger.info("Engine ready: %dx%d, scene=%s", width, height, type(self.scene).__name__)

    def _set_mode(self) -> None:
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode(
                (self.width, self.height), self._flags, vsync=(1 if VSYNC else 0)
            )
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was requested but unavailable on this system/driver.
            pygame.display.set_mode((self.width, self.height), self._flags)
        self._setup_gl()

    def _setup_gl(self) -> None:
        glViewport(0, 0, self.width, self.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_LINE_SMOOTH)
        glClearColor(0.0, 0.0, 0.0, 1.0)

    # ------------------------------------------------------------------
    def handle_resize(self, size) -> None:
        """Pin the surface to its fixed dimensions whatever the host asked for."""
        if tuple(size) != (self.width, self.height):
            logger.debug("Resize to %s ignored; restoring %dx%d", size, self.width, self.height)
            self._set_mode()
        else:
            self._setup_gl()
        self.scene.on_resize()

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.handle_resize(event.size)
                continue
            # Forward events to the active scene; a broken handler must not
            # take the whole loop down.
            try:
                self.scene.handle_event(event)
            except Exception:
                logger.exception("Scene failed to handle %s", pygame.event.event_name(event.type))
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        # Scene owns all per-frame updates
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)
        glLoadIdentity()
        self.scene.render()
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # The animation advances a fixed step per frame, so the frame
            # rate is always capped even when vsync is honoured.
            dt = self.clock.tick(FPS) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.update(dt)
            self.render()
        logger.info("Engine shutting down")
        pygame.quit()
