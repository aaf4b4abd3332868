# apcalc

`apcalc` is a small command-line calculator for integers. It does addition,
subtraction, multiplication and division one decimal digit at a time. Each
operand is held as a sequence of digits, the way you would work the problem
out on paper.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Command-line use

Give exactly three arguments: the first operand, an operator, and the second
operand.

```
apcalc 50 + 10
apcalc 50 - 10
apcalc 10 x 50
apcalc 50 / 10
```

The allowed operators are `+`, `-`, `x` (multiplication) and `/` (integer
division). An operand is a run of decimal digits and may start with a single
`+` or `-`. Any other input prints a usage message.

The result is printed as its chain of digits, from head to tail. For
`apcalc 50 + 10`:

```
Output:
Head -> 6 <-> 0 <- Tail
```

A negative result carries its sign on the leading digit, so `-305` is shown
as `Head -> -3 <-> 0 <-> 5 <- Tail`. Dividing a non-zero number by zero
prints `CANNOT DIVIDE BY ZERO`. Dividing zero by zero prints
`RESULT IS UNDEFINED`. Both messages are followed by the usage text. The
command always exits with status 0.

## Library use

The parts behind the command can also be called from Python:

```python
from apcalc.digits import DigitList
from apcalc.arithmetic import add, subtract, multiply, divide
from apcalc.validation import validate_args, ValidationError
from apcalc.cli import calculate, format_output, main, CalculationError

digits = DigitList.from_int(-305)    # digits -3, 0, 5
print(digits.render())

num1, operator, num2 = validate_args(["1234", "x", "56"])
result = calculate(num1, operator, num2)   # a DigitList
print(format_output(result))
```

- `DigitList` holds digits with the most significant digit first. It supports
  `push_front`, `pop_front`, `strip_leading_zeros`, `clear`, `len()`,
  iteration, equality and `render()`. `DigitList.from_int(0)` gives an empty
  list.
- `add`, `subtract`, `multiply` and `divide` take two non-empty `DigitList`
  operands and return a new `DigitList`. They do no sign handling of their
  own beyond what the column arithmetic needs. `divide` counts how many times
  the divisor can be subtracted. It raises `ValueError` for negative operands
  and `ZeroDivisionError` for a zero divisor.
- `validate_args` takes the three arguments `[operand, operator, operand]`,
  without the program name. It returns `(int, operator, int)`, or raises
  `ValidationError` when they are malformed. `is_number` and `parse_int` are
  the helpers it uses.
- `calculate` adjusts the signs, runs the digit arithmetic and applies the
  sign of the result to its leading digit. It raises `CalculationError` for a
  division by zero, for zero divided by zero, and for an unknown operator.
- `main(argv=None)` is the command itself. It reads `sys.argv[1:]` when no
  arguments are given.