"""A doubly ended sequence of decimal digits used as a big-number operand."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

_EMPTY_MESSAGE = "INFO : List is empty\n"


class DigitList:
    """Decimal digits, most significant first.

    A negative number keeps its sign on the leading digit, so ``-123`` is
    stored as ``[-1, 2, 3]``.
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: Iterable[int] = ()) -> None:
        self._digits: deque[int] = deque(digits)

    @classmethod
    def from_int(cls, num: int) -> DigitList:
        """Split ``num`` into digits; zero yields an empty list."""
        result = cls()
        magnitude = abs(num)
        while magnitude:
            magnitude, digit = divmod(magnitude, 10)
            result.push_front(digit)
        if num < 0:
            result._digits[0] = -result._digits[0]
        return result

    def push_front(self, digit: int) -> None:
        """Insert ``digit`` before the current leading digit."""
        self._digits.appendleft(digit)

    def pop_front(self) -> int:
        """Remove and return the leading digit."""
        if not self._digits:
            raise IndexError("pop from an empty digit list")
        return self._digits.popleft()

    def strip_leading_zeros(self) -> None:
        """Drop zero digits from the front; an all-zero list becomes empty."""
        while self._digits and self._digits[0] == 0:
            self._digits.popleft()

    def clear(self) -> None:
        """Remove every digit."""
        if not self._digits:
            raise IndexError("clear of an empty digit list")
        self._digits.clear()

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._digits)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitList):
            return NotImplemented
        return self._digits == other._digits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DigitList({list(self._digits)!r})"

    def render(self) -> str:
        """Return the list drawn as ``Head -> d <-> d <- Tail``."""
        if not self._digits:
            return _EMPTY_MESSAGE
        body = "> ".join(f"{digit} <-" for digit in self._digits)
        return f"\nHead -> {body} Tail\n"