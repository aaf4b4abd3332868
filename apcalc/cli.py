"""Command-line front end: parse ``NUM OP NUM``, compute and print the digit list."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from apcalc.arithmetic import add, divide, multiply, subtract
from apcalc.digits import DigitList
from apcalc.validation import ValidationError, validate_args

_OPERATIONS = {"+": add, "-": subtract, "x": multiply, "/": divide}

_USAGE = (
    "\nERROR : apcalc INVALID ARGUMENTS\n"
    "\nTo perform Addition please pass like apcalc 50 + 10"
    "\nTo perform Subtraction please pass like apcalc 50 - 10"
    "\nTo perform Multiplication please pass like apcalc 10 x 50"
    "\nTo perform Division please pass like apcalc 50 / 10\n"
)


class CalculationError(ArithmeticError):
    """Raised when an expression has no result."""


def _zero() -> DigitList:
    return DigitList([0])


def _operand(num: int) -> DigitList:
    return DigitList.from_int(num) if num else _zero()


def calculate(num1: int, operator: str, num2: int) -> DigitList:
    """Evaluate ``num1 operator num2`` and return the result as digits.

    Signs are normalised before the digit arithmetic runs, and the sign of
    the result is applied to its leading digit afterwards.
    """
    if operator not in _OPERATIONS:
        raise CalculationError("Invalid Input: Try again...")

    negate = False
    if operator == "-":
        if num1 < 0 and num2 < 0:
            if num1 == num2:
                return _zero()
            if -num1 < -num2:
                num1, num2 = num2, num1
            negate = True
        elif num1 > 0 and num2 > 0:
            if num1 == num2:
                return _zero()
            if num1 < num2:
                num1, num2 = num2, num1
                negate = True
        elif num1 < 0 and num2 > 0:
            negate = True
        elif num1 == 0 and num2 == 0:
            return _zero()
        elif num1 == 0 and num2 > 0:
            num1, num2 = num2, num1
    elif operator == "x" or (operator == "/" and (num1 <= 0 or num2 <= 0)):
        if operator == "/" and num2 == 0:
            if num1:
                raise CalculationError("CANNOT DIVIDE BY ZERO")
            raise CalculationError("RESULT IS UNDEFINED")
        if operator == "x" and (num1 == 0 or num2 == 0):
            return _zero()
        if num1 < 0 and num2 < 0:
            num1, num2 = -num1, -num2
        elif num2 < 0:
            num2 = -num2
            negate = True
        elif num1 < 0:
            num1 = -num1
            negate = True
    elif operator == "+":
        if num2 < 0 and num1 > 0:
            if -num2 == num1:
                return _zero()
            if -num2 > num1:
                num1, num2 = num2, num1
                negate = True
        elif num2 > 0 and num1 < 0:
            if -num1 == num2:
                return _zero()
            if -num1 > num2:
                negate = True
            else:
                num1, num2 = num2, num1

    result = _OPERATIONS[operator](_operand(num1), _operand(num2))
    if negate:
        result.push_front(-result.pop_front())
    return result


def format_output(result: DigitList) -> str:
    """Return the text printed for a result."""
    return f"\nOutput:{result.render()}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        num1, operator, num2 = validate_args(args)
    except ValidationError:
        sys.stdout.write(_USAGE)
        return 0

    try:
        result = calculate(num1, operator, num2)
    except CalculationError as exc:
        sys.stdout.write(f"\n{exc}\n")
        sys.stdout.write(_USAGE)
        return 0

    sys.stdout.write(format_output(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())