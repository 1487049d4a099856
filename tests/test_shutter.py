"""Tests for the shutter state machine and its layout."""

import pytest

from banner.shutter import Shutter, ShutterState, rivet_centers, strut_rects


def run(shutter, frames):
    for _ in range(frames):
        shutter.update()
        assert -shutter.height <= shutter.offset <= 0


def test_starts_open_and_idle():
    shutter = Shutter(300)
    assert shutter.offset == -300
    assert shutter.is_open
    assert shutter.state is ShutterState.IDLE


def test_close_reaches_zero_then_idles():
    shutter = Shutter(300, speed=10)
    shutter.close()
    assert shutter.state is ShutterState.CLOSING
    run(shutter, 29)
    assert shutter.state is ShutterState.CLOSING
    run(shutter, 1)
    assert shutter.offset == 0
    assert shutter.state is ShutterState.IDLE
    run(shutter, 10)
    assert shutter.offset == 0


def test_open_reaches_minus_height_then_idles():
    shutter = Shutter(300, speed=10, offset=0)
    shutter.open()
    run(shutter, 40)
    assert shutter.offset == -300
    assert shutter.state is ShutterState.IDLE


def test_speed_overshoot_is_clamped():
    shutter = Shutter(150, speed=40)
    shutter.close()
    run(shutter, 4)
    assert shutter.offset == 0
    shutter.open()
    run(shutter, 4)
    assert shutter.offset == -150


def test_close_when_closed_and_open_when_open_are_ignored():
    shutter = Shutter(300, offset=0)
    shutter.close()
    assert shutter.state is ShutterState.IDLE
    shutter = Shutter(300)
    shutter.open()
    assert shutter.state is ShutterState.IDLE


def test_reversing_mid_transition():
    shutter = Shutter(300, speed=10)
    shutter.close()
    run(shutter, 10)
    assert shutter.offset == -200
    shutter.open()
    run(shutter, 10)
    assert shutter.offset == -300
    assert shutter.state is ShutterState.IDLE


@pytest.mark.parametrize(
    "offset, closing, expected",
    [
        (-300, False, ShutterState.CLOSING),  # open -> close
        (0, False, ShutterState.OPENING),  # closed -> open
        (-150, True, ShutterState.OPENING),  # closing -> reverse
        (-150, False, ShutterState.CLOSING),  # half open, idle or opening -> close
    ],
)
def test_toggle(offset, closing, expected):
    shutter = Shutter(300, offset=offset)
    if closing:
        shutter.state = ShutterState.CLOSING
    shutter.toggle()
    assert shutter.state is expected


def test_out_of_range_offset_is_clamped():
    assert Shutter(300, offset=50).offset == 0
    assert Shutter(300, offset=-900).offset == -300


def test_layout_moves_with_offset():
    struts = strut_rects(1200, 300, -100)
    assert len(struts) == 5
    assert struts[0] == (0.0, -100.0, 1200.0, 20.0)
    assert struts[1][1] == pytest.approx(-40.0)
    rivets = rivet_centers(1200, 300, 0)
    assert len(rivets) == 60
    xs = {x for x, _ in rivets}
    ys = {y for _, y in rivets}
    assert min(xs) > 0 and max(xs) < 1200
    assert min(ys) > 0 and max(ys) < 300
