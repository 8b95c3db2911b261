"""Test classes EvaluationResult and EvaluationFailure."""
from pydantic import ValidationError
import pytest

from equation.common.errors import ErrorKind, EvaluationError, ExpressionSyntaxError
from equation.common.models import EvaluationFailure, EvaluationResult


def test_evaluation_result_valid() -> None:
    """Test that a valid EvaluationResult can be created."""
    res = EvaluationResult(expression="2 + 2 * 3", result=8.0)
    assert res.expression == "2 + 2 * 3"
    assert res.result == 8.0
    assert isinstance(res.result, float)


def test_evaluation_result_keeps_integers() -> None:
    """Integer results from the int32 mode are not turned into floats."""
    res = EvaluationResult(expression="7 / 2", result=3)
    assert res.result == 3
    assert isinstance(res.result, int)


def test_evaluation_result_accepts_non_finite_values() -> None:
    """Infinities are legitimate results of floating-point evaluation."""
    res = EvaluationResult(expression="1 / 0", result=float("inf"))
    assert res.result == float("inf")


def test_evaluation_result_invalid_expression_type() -> None:
    """Test that invalid expression type raises a validation error."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression=42, result=8.0)


def test_evaluation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        EvaluationResult(expression="2 + 2", result="not a float")


def test_evaluation_result_is_frozen() -> None:
    """Results cannot be modified after creation."""
    res = EvaluationResult(expression="1", result=1.0)
    with pytest.raises(ValidationError):
        res.result = 2.0


def test_evaluation_failure_from_syntax_error() -> None:
    """Position and expected alternatives are copied from a syntax error."""
    error = ExpressionSyntaxError("Unexpected input", "1 2", 2, ("EOI", "add"))
    failure = EvaluationFailure.from_error("1 2", error)

    assert failure.kind is ErrorKind.SYNTAX
    assert failure.message == "Unexpected input"
    assert failure.position == 2
    assert failure.expected == ("EOI", "add")


def test_evaluation_failure_from_evaluation_error() -> None:
    """Evaluation errors have no expected alternatives."""
    error = EvaluationError("Division by zero", "1 / 0", position=2)
    failure = EvaluationFailure.from_error("1 / 0", error)

    assert failure.kind is ErrorKind.EVALUATION
    assert failure.position == 2
    assert failure.expected == ()


def test_evaluation_failure_rejects_negative_position() -> None:
    """Positions are offsets into the expression."""
    with pytest.raises(ValidationError):
        EvaluationFailure(expression="1", kind=ErrorKind.SYNTAX, message="bad", position=-1)


def test_evaluation_failure_invalid_kind() -> None:
    """Only the known error kinds are accepted."""
    with pytest.raises(ValidationError):
        EvaluationFailure(expression="1", kind="fatal", message="bad")
