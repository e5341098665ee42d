"""Tests for cursor movement keys and boundary clamping."""

import pytest

from red.model import Position


def test_up_at_top_stays_at_zero(make_editor):
    editor = make_editor(["abc", "def"])

    editor.move_cursor('up')

    assert editor.cursor == Position(0, 0)


def test_down_stops_at_past_end_sentinel(make_editor):
    editor = make_editor(["one", "two"])

    for _ in range(5):
        editor.move_cursor('down')

    assert editor.cursor.y == 2


def test_down_on_empty_document_stays_put(make_editor):
    editor = make_editor()

    editor.move_cursor('down')

    assert editor.cursor == Position(0, 0)


@pytest.mark.parametrize("start_y, expected", [(0, Position(0, 1)), (9, Position(0, 10))])
def test_right_wraps_from_end_of_line(make_editor, start_y, expected):
    editor = make_editor(["hello"] * 10)
    editor.cursor = Position(5, start_y)

    editor.move_cursor('right')

    assert editor.cursor == expected


def test_right_at_past_end_sentinel_is_noop(make_editor):
    editor = make_editor(["hello"])
    editor.cursor = Position(0, 1)

    editor.move_cursor('right')

    assert editor.cursor == Position(0, 1)


def test_right_within_line(make_editor):
    editor = make_editor(["hello"])

    editor.move_cursor('right')

    assert editor.cursor == Position(1, 0)


def test_left_at_line_start_wraps_to_previous_line_end(make_editor):
    editor = make_editor(["hello", "hi"])
    editor.cursor = Position(0, 1)

    editor.move_cursor('left')

    assert editor.cursor == Position(5, 0)


def test_left_at_origin_is_noop(make_editor):
    editor = make_editor(["hello"])

    editor.move_cursor('left')

    assert editor.cursor == Position(0, 0)


def test_home_and_end(make_editor):
    editor = make_editor(["hello world"])
    editor.cursor = Position(3, 0)

    editor.move_cursor('end')
    assert editor.cursor == Position(11, 0)

    editor.move_cursor('home')
    assert editor.cursor == Position(0, 0)


def test_vertical_move_clamps_column_to_shorter_line(make_editor):
    editor = make_editor(["a long first line", "short", "another long line"])
    editor.cursor = Position(15, 0)

    editor.move_cursor('down')
    assert editor.cursor == Position(5, 1)

    # Column is not remembered across the short line
    editor.move_cursor('down')
    assert editor.cursor == Position(5, 2)


def test_down_to_sentinel_resets_column(make_editor):
    editor = make_editor(["hello"])
    editor.cursor = Position(4, 0)

    editor.move_cursor('down')

    assert editor.cursor == Position(0, 1)


def test_page_down_and_page_up(make_editor):
    editor = make_editor([f"line {i}" for i in range(100)], height=24)
    editor.cursor = Position(0, 50)

    editor.move_cursor('page_down')
    assert editor.cursor.y == 74

    editor.move_cursor('page_up')
    assert editor.cursor.y == 50


def test_page_down_stops_at_document_length(make_editor):
    editor = make_editor([f"line {i}" for i in range(30)], height=24)
    editor.cursor = Position(0, 10)

    editor.move_cursor('page_down')

    assert editor.cursor.y == 30


def test_page_up_near_top_goes_to_zero(make_editor):
    editor = make_editor([f"line {i}" for i in range(100)], height=24)
    editor.cursor = Position(0, 24)

    editor.move_cursor('page_up')

    assert editor.cursor.y == 0


def test_unknown_movement_is_noop(make_editor):
    editor = make_editor(["hello", "world"])
    editor.cursor = Position(2, 1)

    editor.move_cursor('sideways')

    assert editor.cursor == Position(2, 1)


def test_move_replaces_cursor_instead_of_mutating(make_editor):
    editor = make_editor(["hello"])
    before = editor.cursor

    editor.move_cursor('right')

    assert before == Position(0, 0)
    assert editor.cursor is not before
