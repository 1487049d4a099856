"""Player actions on the crawler state: move, interact, raise access.

Each action mutates a GameState in place, posts its message (if any) to the
state's MessageBoard and returns an ActionResult describing what happened.
Blocked moves and denied doors are ordinary outcomes, not errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from crawler.gamemap import DEFAULT_MAP_ROWS, Door, GameMap, parse_map
from crawler.messages import MessageBoard
from crawler.player import Player

logger = logging.getLogger(__name__)

MSG_DOOR_CLOSED = "Door is closed. Can't walk through!"
MSG_DOOR_OPENED = "Door opened!"
MSG_DOOR_SHUT = "Door closed!"
MSG_ACCESS_DENIED = "Access denied! Required level: {level}"
MSG_ACCESS_RAISED = "Access level increased to {level}!"

MOVE_KEYS: Dict[str, Tuple[int, int]] = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}
INTERACT_KEY = "e"


@dataclass
class GameState:
    game_map: GameMap
    player: Player = field(default_factory=Player)
    messages: MessageBoard = field(default_factory=MessageBoard)

    @classmethod
    def new(cls, rows: Iterable[str] = DEFAULT_MAP_ROWS, player: Optional[Player] = None) -> "GameState":
        return cls(parse_map(rows), player or Player())

    @property
    def doors(self):
        return self.game_map.doors


@dataclass(frozen=True)
class ActionResult:
    changed: bool
    message: Optional[str] = None
    door: Optional[Door] = None


def _emit(state: GameState, changed: bool, message: Optional[str] = None, door: Optional[Door] = None) -> ActionResult:
    if message is not None:
        state.messages.show(message)
    return ActionResult(changed, message, door)


def try_move(state: GameState, dx: int, dy: int) -> ActionResult:
    player = state.player
    x, y = player.x + dx, player.y + dy
    game_map = state.game_map
    # Off-grid cells count as walls
    if not game_map.in_bounds(x, y) or game_map.is_wall(x, y):
        return _emit(state, False)

    door = game_map.door_at(x, y)
    if door is not None and not door.is_open:
        return _emit(state, False, MSG_DOOR_CLOSED, door)

    player.x, player.y = x, y
    return _emit(state, True)


def interact(state: GameState) -> ActionResult:
    """Toggle the first door next to the player, if access allows.

    When two doors are adjacent the one earlier in the door list (row-major
    scan order) wins.
    """
    player = state.player
    door = next(iter(state.game_map.adjacent_doors(player.x, player.y)), None)
    if door is None:
        return _emit(state, False)

    if player.access_level < door.access_level:
        return _emit(state, False, MSG_ACCESS_DENIED.format(level=door.access_level), door)

    door.is_open = not door.is_open
    logger.debug("Door at %s is now %s", door.position, "open" if door.is_open else "closed")
    return _emit(state, True, MSG_DOOR_OPENED if door.is_open else MSG_DOOR_SHUT, door)


def increase_access_level(state: GameState) -> ActionResult:
    # Unbounded and free: a debug-style lever, not a balanced mechanic
    state.player.access_level += 1
    return _emit(state, True, MSG_ACCESS_RAISED.format(level=state.player.access_level))


def handle_key(state: GameState, key: str) -> Optional[ActionResult]:
    """Dispatch a key identifier; returns None for keys the crawler ignores."""
    if key in MOVE_KEYS:
        return try_move(state, *MOVE_KEYS[key])
    if key == INTERACT_KEY:
        return interact(state)
    return None
