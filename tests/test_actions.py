"""Tests for player movement, door interaction and access level."""

import pytest

from crawler.actions import (
    GameState,
    MSG_DOOR_CLOSED,
    handle_key,
    increase_access_level,
    interact,
    try_move,
)
from crawler.gamemap import DEFAULT_MAP_ROWS
from crawler.player import Player

from conftest import SMALL_MAP

# Door at (2, 20) requiring level 0, and a level-2 door at (2, 22)
DOOR_ROWS = (
    "╔═══╗",
    *["║   ║"] * 19,
    "╠═0═╣",
    "║   ║",
    "╠═2═╣",
    "║   ║",
    "╚═══╝",
)


def test_move_into_floor_commits(small_state):
    result = try_move(small_state, 1, 0)
    assert result.changed
    assert small_state.player.position == (3, 3)
    assert small_state.messages.text == ""


def test_move_into_wall_is_silent_noop(small_state):
    small_state.player.x, small_state.player.y = 1, 1
    result = try_move(small_state, -1, 0)
    assert not result.changed
    assert result.message is None
    assert small_state.player.position == (1, 1)
    assert small_state.messages.text == ""


def test_move_into_closed_door_blocked_with_message(small_state):
    result = try_move(small_state, 0, -1)
    assert not result.changed
    assert result.message == MSG_DOOR_CLOSED
    assert small_state.messages.text == "Door is closed. Can't walk through!"
    assert small_state.player.position == (2, 3)


def test_move_through_open_door(small_state):
    small_state.game_map.door_at(2, 2).is_open = True
    assert try_move(small_state, 0, -1).changed
    assert small_state.player.position == (2, 2)
    assert try_move(small_state, 0, -1).changed
    assert small_state.player.position == (2, 1)


def test_move_off_grid_is_blocked():
    state = GameState.new([" "], Player(x=0, y=0))
    assert not try_move(state, -1, 0).changed
    assert state.player.position == (0, 0)


def test_interact_opens_door_with_enough_access():
    state = GameState.new(DOOR_ROWS, Player(x=2, y=21))
    result = interact(state)
    door = state.game_map.door_at(2, 20)
    assert result.changed
    assert result.door is door
    assert door.is_open
    assert state.messages.text == "Door opened!"


def test_interact_twice_closes_door():
    state = GameState.new(DOOR_ROWS, Player(x=2, y=19))
    interact(state)
    result = interact(state)
    assert not state.game_map.door_at(2, 20).is_open
    assert result.message == "Door closed!"


def test_interact_denied_without_access():
    state = GameState.new(DOOR_ROWS, Player(x=2, y=23))
    result = interact(state)
    assert not result.changed
    assert state.messages.text == "Access denied! Required level: 2"
    assert not state.game_map.door_at(2, 22).is_open


def test_interact_picks_first_door_in_list_order():
    # Player at (2, 21) touches both doors; the upper one comes first
    state = GameState.new(DOOR_ROWS, Player(x=2, y=21, access_level=5))
    interact(state)
    assert state.game_map.door_at(2, 20).is_open
    assert not state.game_map.door_at(2, 22).is_open


def test_interact_toggles_at_most_one_door():
    state = GameState.new(DOOR_ROWS, Player(x=2, y=21, access_level=5))
    for _ in range(5):
        interact(state)
        assert sum(door.is_open for door in state.doors) <= 1


def test_interact_without_adjacent_door_does_nothing(small_state):
    small_state.player.x, small_state.player.y = 8, 5
    result = interact(small_state)
    assert not result.changed
    assert result.message is None
    assert small_state.messages.text == ""
    assert not any(door.is_open for door in small_state.doors)


def test_increase_access_level_is_unbounded(small_state):
    for expected in range(1, 13):
        result = increase_access_level(small_state)
        assert small_state.player.access_level == expected
        assert result.message == f"Access level increased to {expected}!"


def test_access_level_unaffected_by_move_and_interact(small_state):
    increase_access_level(small_state)
    for key in "wasdewasde":
        handle_key(small_state, key)
    assert small_state.player.access_level == 1


def test_raised_access_unlocks_denied_door():
    state = GameState.new(DOOR_ROWS, Player(x=2, y=23))
    interact(state)
    increase_access_level(state)
    increase_access_level(state)
    interact(state)
    assert state.game_map.door_at(2, 22).is_open


@pytest.mark.parametrize(
    "key, expected",
    [("w", (2, 2)), ("s", (2, 4)), ("a", (1, 3)), ("d", (3, 3))],
)
def test_handle_key_movement(key, expected):
    state = GameState.new(SMALL_MAP, Player(x=2, y=3))
    state.game_map.door_at(2, 2).is_open = True
    handle_key(state, key)
    assert state.player.position == expected


def test_handle_key_ignores_unknown_keys(small_state):
    assert handle_key(small_state, "q") is None
    assert small_state.player.position == (2, 3)


def test_default_state_starts_at_spawn_point():
    state = GameState.new()
    assert state.game_map.rows == DEFAULT_MAP_ROWS
    assert state.player.position == (2, 21)
    assert state.player.access_level == 0
    assert state.player.icon == "π"


def test_negative_access_level_rejected():
    with pytest.raises(ValueError):
        Player(access_level=-1)
