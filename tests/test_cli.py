import pytest

from apcalc.cli import CalculationError, calculate, format_output, main
from apcalc.digits import DigitList


def _value(result: DigitList) -> int:
    digits = list(result)
    sign = -1 if digits[0] < 0 else 1
    return sign * int("".join(str(abs(d)) for d in digits))


@pytest.mark.parametrize(
    "num1, num2",
    [(50, 10), (999, 1), (123456789, 987654321), (7, 0), (0, 0), (1, 99999)],
)
def test_addition_of_non_negatives(num1, num2):
    assert _value(calculate(num1, "+", num2)) == num1 + num2


@pytest.mark.parametrize(
    "num1, num2",
    [(50, 10), (100, 1), (3, 5), (-5, 3), (5, -3), (-5, -3), (1000, 999)],
)
def test_subtraction_value(num1, num2):
    assert _value(calculate(num1, "-", num2)) == num1 - num2


@pytest.mark.parametrize(
    "num1, num2",
    [(10, 50), (12, 34), (123, 3), (25, 21), (-4, 2), (-12, -3), (12, -3)],
)
def test_multiplication_value(num1, num2):
    assert _value(calculate(num1, "x", num2)) == num1 * num2


@pytest.mark.parametrize(
    "num1, num2, quotient",
    [(50, 10, 5), (100, 7, 14), (81, 9, 9), (1000, 25, 40), (123, 4, 30), (50, -10, -5)],
)
def test_division_value(num1, num2, quotient):
    assert _value(calculate(num1, "/", num2)) == quotient


@pytest.mark.parametrize(
    "num1, operator, num2",
    [(5, "-", 5), (-5, "-", -5), (0, "-", 0), (-5, "+", 5), (5, "+", -5), (0, "x", 7), (7, "x", 0)],
)
def test_zero_results(num1, operator, num2):
    assert calculate(num1, operator, num2) == DigitList([0])


def test_dividend_smaller_than_divisor_gives_zero():
    assert calculate(3, "/", 40) == DigitList([0])
    assert calculate(0, "/", 5) == DigitList([0])


def test_subtraction_keeps_leading_zeros():
    assert calculate(100, "-", 1) == DigitList([0, 9, 9])


def test_divide_by_zero_raises():
    with pytest.raises(CalculationError, match="CANNOT DIVIDE BY ZERO"):
        calculate(5, "/", 0)


def test_zero_by_zero_is_undefined():
    with pytest.raises(CalculationError, match="UNDEFINED"):
        calculate(0, "/", 0)


def test_unknown_operator_raises():
    with pytest.raises(CalculationError):
        calculate(1, "%", 2)


def test_format_output_of_result():
    assert format_output(DigitList([6, 0])) == "\nOutput:\nHead -> 6 <-> 0 <- Tail\n\n"


def test_format_output_of_empty_list():
    assert format_output(DigitList()) == "\nOutput:INFO : List is empty\n\n"


def test_main_prints_result(capsys):
    assert main(["50", "+", "10"]) == 0
    out = capsys.readouterr().out
    assert out == format_output(calculate(50, "+", 10))


def test_main_negative_result(capsys):
    assert main(["3", "-", "5"]) == 0
    out = capsys.readouterr().out
    assert out == format_output(DigitList([-2]))


def test_main_rejects_bad_operand(capsys):
    assert main(["5a", "+", "1"]) == 0
    assert "INVALID ARGUMENTS" in capsys.readouterr().out


def test_main_rejects_wrong_argument_count(capsys):
    assert main(["5", "+"]) == 0
    assert "INVALID ARGUMENTS" in capsys.readouterr().out


def test_main_rejects_unknown_operator(capsys):
    assert main(["5", "*", "2"]) == 0
    out = capsys.readouterr().out
    assert "INVALID ARGUMENTS" in out
    assert "Output" not in out


def test_main_reports_division_by_zero(capsys):
    assert main(["5", "/", "0"]) == 0
    out = capsys.readouterr().out
    assert "CANNOT DIVIDE BY ZERO" in out
    assert "INVALID ARGUMENTS" in out


def test_main_reports_undefined(capsys):
    assert main(["0", "/", "0"]) == 0
    assert "RESULT IS UNDEFINED" in capsys.readouterr().out