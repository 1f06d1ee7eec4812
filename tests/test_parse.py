import pytest

from aocsolve.parse import ParseError, Scanner


def test_try_consume_advances_on_match():
    s = Scanner("abc")
    assert s.try_consume("ab")
    assert s.advance() == "c"
    assert s.at_end()


def test_try_consume_leaves_position_on_mismatch():
    s = Scanner("abc")
    assert not s.try_consume("x")
    assert s.rest == "abc"


def test_consume_raises_on_mismatch():
    s = Scanner("abc")
    with pytest.raises(ParseError):
        s.consume("b")


def test_advance_past_end_raises():
    s = Scanner("a")
    s.advance()
    with pytest.raises(ParseError):
        s.advance()


def test_advance_many_returns_chunk():
    s = Scanner("hello world")
    assert s.advance(5) == "hello"
    assert s.rest == " world"


def test_ints_and_separators():
    s = Scanner("42,7\n")
    assert s.consume_int() == 42
    s.consume(",")
    assert s.consume_int() == 7
    s.consume_newline()
    assert s.at_end()


def test_int_skips_whitespace_and_sign():
    s = Scanner(" -12x")
    assert s.try_consume_int() == -12
    assert s.rest == "x"


def test_int_without_digits_does_not_move():
    s = Scanner(" x")
    assert s.try_consume_int() is None
    assert s.rest == " x"


def test_consume_int_raises():
    s = Scanner("abc")
    with pytest.raises(ParseError):
        s.consume_int()


def test_newline_helpers():
    s = Scanner("\nz")
    assert s.try_consume_newline()
    assert not s.try_consume_newline()
    with pytest.raises(ParseError):
        s.consume_newline()
    assert s.rest == "z"