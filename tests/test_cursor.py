"""Tests for the bidirectional cursor."""

from __future__ import annotations

import pytest

from algot.cursor import Cursor
from algot.errors import CursorRangeError
from algot.tokens import Token


@pytest.fixture
def abc():
    return Cursor(["a", "b", "c"])


class TestCursorForward:
    def test_next_in_order(self, abc):
        assert abc.next() == "a"
        assert abc.next() == "b"
        assert abc.next() == "c"
        assert abc.next() is None

    def test_exhausted_stays_exhausted(self, abc):
        for _ in range(3):
            abc.next()
        for _ in range(5):
            assert abc.next() is None
        assert abc.current_position() == 3
        assert abc.exhausted

    def test_position_counts_consumed(self, abc):
        assert abc.current_position() == 0
        abc.next()
        assert abc.current_position() == 1
        abc.next()
        assert abc.position == 2

    def test_empty(self):
        cursor = Cursor([])
        assert cursor.next() is None
        assert cursor.prev() is None
        assert cursor.peek() is None
        assert cursor.recall() is None
        assert cursor.current_position() == 0

    def test_iterator_protocol(self, abc):
        assert list(abc) == ["a", "b", "c"]
        assert list(abc) == []
        abc.seek(0)
        assert list(abc) == ["a", "b", "c"]

    def test_remaining(self, abc):
        abc.next()
        assert abc.remaining() == ("b", "c")


class TestCursorBackward:
    def test_prev_returns_element_before_last(self):
        cursor = Cursor([1, 2, 3])
        assert cursor.next() == 1
        assert cursor.next() == 2
        assert cursor.prev() == 1

    def test_prev_after_exhausting(self, abc):
        for _ in range(3):
            abc.next()
        assert abc.prev() == "b"
        assert abc.current_position() == 2
        assert abc.recall() == "b"
        assert abc.next() == "c"

    def test_prev_at_start_does_not_underflow(self, abc):
        assert abc.prev() is None
        assert abc.current_position() == 0
        assert abc.prev() is None
        assert abc.current_position() == 0
        assert abc.next() == "a"

    def test_prev_to_start(self, abc):
        abc.next()
        assert abc.prev() is None
        assert abc.current_position() == 0
        assert abc.next() == "a"


class TestCursorSeek:
    def test_seek_then_next(self):
        cursor = Cursor([1, 2, 3, 4])
        assert cursor.next() == 1
        cursor.seek(2)
        assert cursor.next() == 3

    def test_seek_restarts(self, abc):
        list(abc)
        abc.seek(0)
        assert abc.next() == "a"

    def test_seek_to_end(self, abc):
        abc.seek(3)
        assert abc.exhausted
        assert abc.next() is None
        assert abc.recall() == "c"

    def test_seek_out_of_range(self, abc):
        abc.next()
        for bad in [-1, 4, 100]:
            with pytest.raises(CursorRangeError) as exc:
                abc.seek(bad)
            assert exc.value.position == bad
            assert exc.value.length == 3
        assert abc.current_position() == 1

    def test_seek_out_of_range_is_index_error(self, abc):
        with pytest.raises(IndexError):
            abc.seek(-1)

    def test_seek_requires_int(self, abc):
        with pytest.raises(TypeError):
            abc.seek(1.0)
        with pytest.raises(TypeError):
            abc.seek(True)


class TestCursorLookaround:
    def test_peek_skips_one(self, abc):
        assert abc.peek() == "b"
        assert abc.current_position() == 0
        abc.next()
        assert abc.peek() == "c"
        abc.next()
        assert abc.peek() is None

    def test_peek_at_end(self, abc):
        list(abc)
        assert abc.peek() is None

    def test_recall(self, abc):
        assert abc.recall() is None
        abc.next()
        assert abc.recall() == "a"
        abc.next()
        abc.next()
        assert abc.recall() == "c"
        assert abc.current_position() == 3

    def test_lookaround_does_not_move(self, abc):
        abc.next()
        abc.peek()
        abc.recall()
        assert abc.current_position() == 1


class TestCursorOwnership:
    def test_copies_source(self):
        values = [1, 2]
        cursor = Cursor(values)
        values.append(3)
        assert len(cursor) == 2

    def test_accepts_any_iterable(self):
        cursor = Cursor(x * 2 for x in range(3))
        assert list(cursor) == [0, 2, 4]

    def test_over_tokens(self):
        tokens = [Token.classify(t) for t in ["(", "x", "+", "1.5", ")"]]
        cursor = Cursor(tokens)
        assert cursor.next().is_paren()
        assert cursor.peek() == Token.classify("+")
        assert cursor.next() == Token.variable("x")

    def test_repr(self, abc):
        abc.next()
        assert repr(abc) == "Cursor(position=1, length=3)"
