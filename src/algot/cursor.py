"""Bidirectional cursor over a fixed sequence.

The cursor owns a copy of its elements and a single position counter.
``position`` counts the elements already handed out by :meth:`Cursor.next`,
so after the k-th element has been returned the position is k. The
counter always stays within ``[0, len(cursor)]``.

Running off either end is not an error: :meth:`next` and :meth:`prev`
return ``None``. Only :meth:`seek` rejects a position.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from algot.errors import CursorRangeError

T = TypeVar("T")


class Cursor(Generic[T]):
    """Drives a lexer or parser forward and backward over its elements."""

    def __init__(self, values: Iterable[T]) -> None:
        self._values: tuple[T, ...] = tuple(values)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Cursor(position={self._pos}, length={len(self._values)})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._pos >= len(self._values):
            raise StopIteration
        return self.next()

    @property
    def position(self) -> int:
        return self._pos

    @property
    def exhausted(self) -> bool:
        return self._pos == len(self._values)

    def current_position(self) -> int:
        return self._pos

    def _get(self, idx: int) -> T | None:
        if 0 <= idx < len(self._values):
            return self._values[idx]
        return None

    # ── Movement ─────────────────────────────────────────────────

    def next(self) -> T | None:
        """Return the next element and move past it, or None at the end.

        The position stops at the sequence length once exhausted; call
        ``seek(0)`` to walk again.
        """
        if self._pos >= len(self._values):
            self._pos = len(self._values)
            return None
        val = self._values[self._pos]
        self._pos += 1
        return val

    def prev(self) -> T | None:
        """Step back one position and return the element now behind it.

        After ``next()`` has returned 1 then 2 from ``[1, 2, 3]``, ``prev()``
        returns 1. At position 0 nothing moves and None is returned.
        """
        if self._pos == 0:
            return None
        self._pos -= 1
        return self._get(self._pos - 1)

    def seek(self, new_pos: int) -> None:
        """Jump to an absolute position in ``[0, len(self)]``."""
        if isinstance(new_pos, bool) or not isinstance(new_pos, int):
            raise TypeError(f"cursor position must be an int, got {type(new_pos).__name__}")
        if not 0 <= new_pos <= len(self._values):
            raise CursorRangeError(new_pos, len(self._values))
        self._pos = new_pos

    # ── Inspection ───────────────────────────────────────────────

    def peek(self) -> T | None:
        """Look at the element after the one ``next()`` would return."""
        return self._get(self._pos + 1)

    def recall(self) -> T | None:
        """Look at the element most recently returned by ``next()``."""
        return self._get(self._pos - 1)

    def remaining(self) -> tuple[T, ...]:
        """Elements not yet handed out by ``next()``."""
        return self._values[self._pos:]
