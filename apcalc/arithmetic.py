"""Digit-by-digit arithmetic on :class:`DigitList` operands."""

from __future__ import annotations

from itertools import zip_longest

from apcalc.digits import DigitList


def _trunc_divmod(value: int) -> tuple[int, int]:
    """Split ``value`` by ten, truncating the quotient toward zero."""
    quotient = -(-value // 10) if value < 0 else value // 10
    return quotient, value - 10 * quotient


def _digits_of(operand: DigitList, name: str) -> list[int]:
    digits = list(operand)
    if not digits:
        raise ValueError(f"{name} operand has no digits")
    return digits


def _negate_head(digits: list[int]) -> list[int]:
    return [-digits[0], *digits[1:]]


def _add_columns(first: list[int], second: list[int]) -> list[int]:
    columns = []
    carry = 0
    for d1, d2 in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = _trunc_divmod(d1 + d2 + carry)
        columns.append(digit)
    if carry:
        columns.append(carry)
    columns.reverse()
    return columns


def _subtract_columns(first: list[int], second: list[int]) -> list[int]:
    columns = []
    borrow = 0
    for d1, d2 in zip_longest(reversed(first), reversed(second), fillvalue=0):
        d1 -= borrow
        borrow = 0
        if d1 < d2:
            d1 += 10
            borrow = 1
        columns.append(d1 - d2)
    columns.reverse()
    return columns


def add(a: DigitList, b: DigitList) -> DigitList:
    """Add column by column; operands of opposite sign go through :func:`subtract`."""
    first = _digits_of(a, "first")
    second = _digits_of(b, "second")
    if first[0] < 0 and second[0] < 0:
        columns = _add_columns(first, second)
        if columns[0] != 0:
            columns[0] = -columns[0]
        return DigitList(columns)
    if (first[0] > 0 and second[0] < 0) or (first[0] < 0 and second[0] > 0):
        return subtract(a, b)
    return DigitList(_add_columns(first, second))


def subtract(a: DigitList, b: DigitList) -> DigitList:
    """Subtract column by column with borrowing.

    Leading zeros are kept, and a borrow left over at the end is dropped.
    Operands of opposite sign are added as magnitudes.
    """
    first = _digits_of(a, "first")
    second = _digits_of(b, "second")
    if first[0] < 0 and second[0] < 0:
        first = _negate_head(first)
        second = _negate_head(second)
    elif first[0] > 0 and second[0] < 0:
        return add(a, DigitList(_negate_head(second)))
    elif first[0] < 0 and second[0] > 0:
        return add(DigitList(_negate_head(first)), b)
    return DigitList(_subtract_columns(first, second))


def multiply(a: DigitList, b: DigitList) -> DigitList:
    """Long multiplication: one shifted partial product per digit of ``b``."""
    first = _digits_of(a, "first")
    second = _digits_of(b, "second")
    result = DigitList()
    carry = 0
    for shift, multiplier in enumerate(reversed(second)):
        partial = DigitList()
        for position, multiplicand in enumerate(reversed(first)):
            carry, digit = _trunc_divmod(multiplier * multiplicand + carry)
            if shift == 0:
                result.push_front(digit)
            else:
                if position == 0:
                    for _ in range(shift):
                        partial.push_front(0)
                partial.push_front(digit)
        if carry:
            partial.push_front(carry)
            carry = 0
        if partial:
            result = add(result, partial)
    return result


def divide(a: DigitList, b: DigitList) -> DigitList:
    """Count how many times ``b`` can be subtracted from ``a``.

    Subtraction goes on while the dividend is longer than the divisor, or of
    equal length with a leading digit no smaller than the divisor's.
    """
    dividend = DigitList(_digits_of(a, "first"))
    divisor_digits = _digits_of(b, "second")
    if any(digit < 0 for digit in dividend) or any(digit < 0 for digit in divisor_digits):
        raise ValueError("division operands must be non-negative")
    if not any(divisor_digits):
        raise ZeroDivisionError("division by zero")
    divisor = DigitList(divisor_digits)

    count = 0
    while dividend:
        if len(dividend) == len(divisor):
            if next(iter(dividend)) < divisor_digits[0]:
                break
        elif len(dividend) < len(divisor):
            break
        dividend = subtract(dividend, divisor)
        dividend.strip_leading_zeros()
        count += 1

    return DigitList.from_int(count) if count else DigitList([0])