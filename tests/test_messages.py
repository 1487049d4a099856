"""Tests for the transient message line and its clear timers."""

from crawler.messages import MessageBoard


def test_message_clears_after_duration():
    board = MessageBoard(duration_ms=2000)
    board.show("Door opened!")
    board.update(1.75)
    assert board.text == "Door opened!"
    board.update(0.25)
    assert board.text == ""
    assert board.pending == 0


def test_each_show_schedules_its_own_timer():
    board = MessageBoard(duration_ms=2000)
    board.show("first")
    board.show("second")
    assert board.pending == 2


def test_stale_timer_clears_newer_message():
    board = MessageBoard(duration_ms=2000)
    board.show("first")
    board.update(1.5)
    board.show("second")
    # The first message's timer fires at 2.0s and wipes "second" early
    board.update(0.5)
    assert board.text == ""
    assert board.pending == 1


def test_message_after_stale_clear_survives_until_own_timer():
    board = MessageBoard(duration_ms=2000)
    board.show("first")
    board.update(1.5)
    board.show("second")
    board.update(0.5)
    board.show("third")
    # "second"'s timer fires at 3.5s
    board.update(1.25)
    assert board.text == "third"
    board.update(0.25)
    assert board.text == ""
