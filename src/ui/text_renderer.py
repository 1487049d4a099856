"""Text and glyph rendering for OpenGL with pygame fonts.

Text is rasterised by pygame.font, uploaded once as an RGBA texture and then
drawn as a textured quad in the engine's screen-space projection. Labels
that change (message line, stats) reuse a keyed texture slot; single glyphs
used by the map grid are cached per (glyph, colour).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame
from OpenGL.GL import (
    glBegin,
    glBindTexture,
    glColor4f,
    glDisable,
    glEnable,
    glEnd,
    glGenTextures,
    glTexCoord2f,
    glTexImage2D,
    glTexParameteri,
    glVertex2f,
    GL_LINEAR,
    GL_QUADS,
    GL_RGBA,
    GL_TEXTURE_2D,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_MIN_FILTER,
    GL_UNSIGNED_BYTE,
)

from config import FONT_NAMES, FONT_SIZE

logger = logging.getLogger(__name__)

ColorKey = Tuple[int, int, int, int]


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: str | None = None


def color_key(color) -> ColorKey:
    c = pygame.Color(color)
    return c.r, c.g, c.b, c.a


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    - Wrap a batch of draw calls in begin()/end() so texturing is toggled once.
    - draw_text() with a `key` reuses a texture slot and only re-uploads when
      the text changes.
    - draw_glyph() caches one texture per (glyph, colour) pair.
    """

    def __init__(self, font: Optional[pygame.font.Font] = None, size: int = FONT_SIZE) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        # Box-drawing glyphs need a font that actually carries them
        self.font = font or pygame.font.SysFont(FONT_NAMES, size)
        self._glyphs: Dict[Tuple[str, ColorKey], _TexSlot] = {}
        self._slots: Dict[str, _TexSlot] = {}
        self._active = False
        logger.debug("TextRenderer using font height %d", self.font.get_height())

    # --------------------------- batch state ----------------------------
    def begin(self) -> None:  # pragma: no cover - visual
        if self._active:
            return
        glEnable(GL_TEXTURE_2D)
        self._active = True

    def end(self) -> None:  # pragma: no cover - visual
        if not self._active:
            return
        glDisable(GL_TEXTURE_2D)
        self._active = False

    # --------------------------- textures -------------------------------
    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _slot_for_key(self, key: str) -> _TexSlot:
        slot = self._slots.get(key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0))
            self._slots[key] = slot
        return slot

    def _slot_for_glyph(self, glyph: str, color: ColorKey) -> _TexSlot:
        cache_key = (glyph, color)
        slot = self._glyphs.get(cache_key)
        if slot is None:
            slot = _TexSlot(id=glGenTextures(1), size=(0, 0), last_text=glyph)
            self._upload_surface(slot, self.font.render(glyph, True, color))
            self._glyphs[cache_key] = slot
        return slot

    def _quad(self, slot: _TexSlot, x: float, y: float) -> None:  # pragma: no cover - visual
        w, h = slot.size
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v runs bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()

    # --------------------------- drawing --------------------------------
    def draw_text(self, text: str, x: float, y: float, color="white", *, key: str, align: str = "topleft") -> Tuple[int, int]:
        """Draw a single line at screen coords; returns (w, h).

        align: 'topleft' | 'center'
        """
        if not text:
            return 0, 0
        slot = self._slot_for_key(key)
        if slot.last_text != text:
            self._upload_surface(slot, self.font.render(text, True, color_key(color)))
            slot.last_text = text
        w, h = slot.size
        if align == "center":
            x, y = x - w / 2, y - h / 2
        self._quad(slot, x, y)
        return w, h

    def draw_glyph(self, glyph: str, x: float, y: float, color) -> None:
        """Draw one grid glyph with its top-left corner at (x, y)."""
        if glyph == " ":
            return
        slot = self._slot_for_glyph(glyph, color_key(color))
        self._quad(slot, x, y)
