"""Test numeric domains FloatDomain and Int32Domain."""
import math

import pytest

from equation.api import evaluate
from equation.common.errors import EvaluationError
from equation.common.settings import AngleUnit, EvaluatorSettings, NumericMode
from equation.evaluator.numeric import INT32_MAX, INT32_MIN, FloatDomain, Int32Domain, build_domain


INT32 = EvaluatorSettings(numeric_mode=NumericMode.INT32)
DEGREES = EvaluatorSettings(angle_unit=AngleUnit.DEGREES)


def test_build_domain_follows_settings() -> None:
    """The numeric mode selects the domain class."""
    assert isinstance(build_domain("1", EvaluatorSettings()), FloatDomain)
    assert isinstance(build_domain("1", INT32), Int32Domain)


def test_float_literal_overflow_is_an_evaluation_error() -> None:
    """A literal that cannot be held by a 64-bit float is signalled, not turned into inf."""
    expr = "1" + "0" * 400
    with pytest.raises(EvaluationError) as excinfo:
        evaluate(expr)
    assert excinfo.value.position == 0
    assert excinfo.value.expression == expr


def test_float_literal_overflow_is_located() -> None:
    """The error points at the offending literal."""
    with pytest.raises(EvaluationError) as excinfo:
        evaluate("2 + " + "9" * 400)
    assert excinfo.value.position == 4


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("1 / 0", math.inf),
        ("-1 / 0", -math.inf),
        ("sinh(1000)", math.inf),
        ("10 ^ 400", math.inf),
    ],
)
def test_float_mode_propagates_infinities(expr: str, expected: float) -> None:
    """Floating-point failure modes produce non-finite results instead of errors."""
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr", ["0 / 0", "5 % 0", "asin(2)", "acosh(0.5)", "(1 / 0) - (1 / 0)"])
def test_float_mode_propagates_nan(expr: str) -> None:
    """Undefined results come back as NaN."""
    assert math.isnan(evaluate(expr))


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("1 + 2 * 3", 7),
        ("7 / 2", 3),
        ("-7 / 2", -3),
        ("7 / -2", -3),
        ("-7 % 3", -1),
        ("7 % -3", 1),
        ("2 ^ 10", 1024),
        ("2 exp 30", 1073741824),
        ("1 ^ 1000000", 1),
        ("-1 ^ 1000001", -1),
        ("0 ^ 0", 1),
        ("-2147483647 - 1", INT32_MIN),
        ("2147483647", INT32_MAX),
        ("0" * 5000 + "7", 7),            # Leading zeros beyond the int() digit limit
        ("000000000002147483647", INT32_MAX),
        ("sin(45)", 0),
        ("sinh(10)", 11013),
        ("-sinh(10)", -11013),
    ],
)
def test_int32_mode(expr: str, expected: int) -> None:
    """Integer mode truncates toward zero and returns ints."""
    result = evaluate(expr, INT32)
    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize(
    "expr,position",
    [
        ("1.5", 0),                       # Decimal literal
        ("2147483648", 0),                # Literal out of range
        ("1" * 50, 0),                    # Very long literal
        ("2147483647 + 1", 11),           # Overflowing addition
        ("-(-2147483647 - 1)", 0),        # Overflowing negation
        ("65536 * 65536", 6),             # Overflowing multiplication
        ("1 / 0", 2),                     # Division by zero
        ("1 mod 0", 2),                   # Modulo by zero
        ("2 ^ -1", 2),                    # Negative exponent
        ("2 ^ 31", 2),                    # Power out of range
        ("2 ^ 100", 2),                   # Power far out of range
        ("asin(2)", 0),                   # Non-finite function result
        ("cosh(100)", 0),                 # Function result out of range
    ],
)
def test_int32_mode_errors(expr: str, position: int) -> None:
    """Values that a 32-bit integer cannot represent raise an evaluation error."""
    with pytest.raises(EvaluationError) as excinfo:
        evaluate(expr, INT32)
    assert excinfo.value.position == position


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("sin(90)", 1.0),
        ("sin(30)", 0.5),
        ("cos(60)", 0.5),
        ("tan(45)", 1.0),
        ("asin(1)", math.asin(math.radians(1))),
        ("sinh(180)", math.sinh(math.pi)),
    ],
)
def test_degrees_convert_every_function_argument(expr: str, expected: float) -> None:
    """In degrees mode the argument of every function, inverse ones included, is converted."""
    assert evaluate(expr, DEGREES) == pytest.approx(expected, rel=1e-12)


def test_radians_are_the_default_unit() -> None:
    """Without settings, function arguments are used as given."""
    assert evaluate("sin(45)") == pytest.approx(math.sin(45), rel=1e-15)
