"""Tests for Cursor trivia skipping and backtracking."""

from luasv_core.cursor import Cursor


def test_skip_whitespace():
    c = Cursor(" \t\r\n x")
    c.skip_trivia()
    assert c.peek() == "x"


def test_skip_line_comment():
    c = Cursor("-- a comment\n  x")
    c.skip_trivia()
    assert c.peek() == "x"


def test_skip_consecutive_comments():
    c = Cursor("-- one\n-- two\n\tx -- trailing")
    c.skip_trivia()
    assert c.offset == c.text.index("x")


def test_comment_at_end_of_input():
    c = Cursor("  -- nothing after")
    c.skip_trivia()
    assert c.at_end()
    assert c.peek() is None


def test_single_dash_is_not_trivia():
    c = Cursor("  -5")
    c.skip_trivia()
    assert c.peek() == "-"


def test_mark_and_reset():
    c = Cursor("abc")
    m = c.mark()
    c.advance(2)
    assert c.peek() == "c"
    c.reset(m)
    assert c.offset == 0


def test_advance_clamps_to_end():
    c = Cursor("ab")
    c.advance(10)
    assert c.offset == 2
    assert c.at_end()
