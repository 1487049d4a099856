from typing import Protocol


class Drawable(Protocol):
    def draw(self) -> None: ...  # noqa: D401


class Updatable(Protocol):
    """Advances its own state by one frame.

    The return value is entity specific (moons report whether they moved
    rightward, everything else returns None).
    """

    def update(self) -> object: ...
