"""Clickable push button drawn with GL primitives and a text label."""

from __future__ import annotations

from typing import Callable

import pygame

from config import BUTTON_COLOR, BUTTON_HOVER_COLOR, TEXT_COLOR
from render.primitives import fill_rect
from ui.text_renderer import TextRenderer


class Button:
    def __init__(self, rect: pygame.Rect, label: str, on_click: Callable[[], object]) -> None:
        self.rect = pygame.Rect(rect)
        self.label = label
        self.on_click = on_click
        self.hovered = False

    def handle_event(self, event, origin=(0, 0)) -> bool:
        """Returns True when the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.move(origin).collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.move(origin).collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, text: TextRenderer) -> None:  # pragma: no cover - visual
        fill_rect(*self.rect, BUTTON_HOVER_COLOR if self.hovered else BUTTON_COLOR)
        text.begin()
        text.draw_text(
            self.label, *self.rect.center, TEXT_COLOR, key=f"button:{self.label}", align="center"
        )
        text.end()
