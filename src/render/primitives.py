"""Immediate-mode 2D drawing helpers.

All coordinates are pixels in the engine's top-left orthographic projection.
Gradients are produced with per-vertex colours: a radial gradient is a
triangle fan whose centre vertex carries the inner colour, a linear gradient
is a strip of quads with one colour per stop.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Sequence, Tuple

import numpy as np
import pygame
from OpenGL.GL import (
    glBegin,
    glColor4f,
    glDisable,
    glEnable,
    glEnd,
    glGetIntegerv,
    glLineWidth,
    glPopMatrix,
    glPushMatrix,
    glScissor,
    glTranslatef,
    glVertex2f,
    GL_LINE_LOOP,
    GL_LINES,
    GL_QUADS,
    GL_SCISSOR_TEST,
    GL_TRIANGLE_FAN,
    GL_VIEWPORT,
)

RGBA = Tuple[float, float, float, float]

CIRCLE_SEGMENTS = 48
_angles = np.linspace(0.0, 2.0 * np.pi, CIRCLE_SEGMENTS + 1)
UNIT_CIRCLE = np.column_stack((np.cos(_angles), np.sin(_angles)))


def rgba(color, alpha: float = 1.0) -> RGBA:
    """Convert any pygame colour spec (name, '#rrggbb', tuple) to GL floats."""
    c = pygame.Color(color)
    return c.r / 255.0, c.g / 255.0, c.b / 255.0, alpha


def circle_points(cx: float, cy: float, radius: float) -> np.ndarray:
    return UNIT_CIRCLE * radius + (cx, cy)


@contextmanager
def translated(x: float, y: float) -> Iterator[None]:
    glPushMatrix()
    glTranslatef(x, y, 0.0)
    try:
        yield
    finally:
        glPopMatrix()


def scissor_box(x: float, y: float, w: float, h: float, viewport_height: float) -> Tuple[int, int, int, int]:
    """Top-left pixel rect to the bottom-left box glScissor expects."""
    return int(x), int(viewport_height - y - h), int(w), int(h)


@contextmanager
def clipped(x: float, y: float, w: float, h: float) -> Iterator[None]:
    """Discard drawing outside a window-space rect. Not nestable."""
    viewport = glGetIntegerv(GL_VIEWPORT)
    glScissor(*scissor_box(x, y, w, h, viewport[3]))
    glEnable(GL_SCISSOR_TEST)
    try:
        yield
    finally:
        glDisable(GL_SCISSOR_TEST)


def fill_rect(x: float, y: float, w: float, h: float, color, alpha: float = 1.0) -> None:  # pragma: no cover - visual
    glColor4f(*rgba(color, alpha))
    glBegin(GL_QUADS)
    glVertex2f(x, y)
    glVertex2f(x + w, y)
    glVertex2f(x + w, y + h)
    glVertex2f(x, y + h)
    glEnd()


def fill_rect_vertical_gradient(
    x: float, y: float, w: float, h: float, stops: Sequence[Tuple[float, str]]
) -> None:  # pragma: no cover - visual
    """Fill a rect with a top-to-bottom gradient through (t, colour) stops."""
    glBegin(GL_QUADS)
    for (t0, c0), (t1, c1) in zip(stops, stops[1:]):
        y0 = y + h * t0
        y1 = y + h * t1
        glColor4f(*rgba(c0))
        glVertex2f(x, y0)
        glVertex2f(x + w, y0)
        glColor4f(*rgba(c1))
        glVertex2f(x + w, y1)
        glVertex2f(x, y1)
    glEnd()


def fill_disc(cx: float, cy: float, radius: float, inner, outer=None) -> None:  # pragma: no cover - visual
    """Filled circle, optionally with a radial gradient from centre to rim."""
    glBegin(GL_TRIANGLE_FAN)
    glColor4f(*rgba(inner))
    glVertex2f(cx, cy)
    glColor4f(*rgba(inner if outer is None else outer))
    for px, py in circle_points(cx, cy, radius):
        glVertex2f(px, py)
    glEnd()


def stroke_circle(cx: float, cy: float, radius: float, color, width: float = 1.0) -> None:  # pragma: no cover - visual
    glLineWidth(width)
    glColor4f(*rgba(color))
    glBegin(GL_LINE_LOOP)
    # Last point repeats the first; the loop closes itself
    for px, py in circle_points(cx, cy, radius)[:-1]:
        glVertex2f(px, py)
    glEnd()


def gradient_line(
    start: Tuple[float, float], end: Tuple[float, float], start_color: RGBA, end_color: RGBA, width: float = 1.0
) -> None:  # pragma: no cover - visual
    glLineWidth(width)
    glBegin(GL_LINES)
    glColor4f(*start_color)
    glVertex2f(*start)
    glColor4f(*end_color)
    glVertex2f(*end)
    glEnd()
