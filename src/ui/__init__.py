from .text_renderer import TextRenderer
from .grid_renderer import GridRenderer, grid_size
from .button import Button

__all__ = ["TextRenderer", "GridRenderer", "grid_size", "Button"]
