"""Checking and converting the command-line operands."""

from __future__ import annotations

from collections.abc import Sequence

OPERATORS = ("+", "-", "x", "/")
_DIGITS = "0123456789"


class ValidationError(ValueError):
    """Raised when the command-line arguments are not a valid expression."""


def is_number(text: str) -> bool:
    """Return True if ``text`` is an optional sign followed only by digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return all(ch in _DIGITS for ch in body)


def parse_int(text: str) -> int:
    """Read an optional sign and the digits that follow, stopping at the first non-digit."""
    negative = text[:1] == "-"
    body = text[1:] if text[:1] in ("+", "-") else text
    value = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return -value if negative else value


def validate_args(argv: Sequence[str]) -> tuple[int, str, int]:
    """Validate ``[operand, operator, operand]`` and return the parsed triple."""
    if len(argv) != 3:
        raise ValidationError("expected exactly three arguments: NUM OPERATOR NUM")
    first, operator, second = argv
    if not (is_number(first) and is_number(second)):
        raise ValidationError("operands must be integers")
    if operator not in OPERATORS:
        raise ValidationError(f"unknown operator {operator!r}")
    return parse_int(first), operator, parse_int(second)