"""Numeric domains: how literals are read and how results are represented."""
from abc import ABC, abstractmethod
from collections.abc import Callable
import math
from typing import Dict, Union

from equation.common.errors import EvaluationError
from equation.common.settings import AngleUnit, EvaluatorSettings, NumericMode
from equation.evaluator.functions import Function
from equation.evaluator.operations import Operation
from equation.grammar.tree import ParseNode


Number = Union[int, float]

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1


class NumericDomain(ABC):
    """
    Arithmetic used by the precedence climber.

    Every method receives the node being reduced so that a failure can point at the
    offending part of the expression.
    """

    def __init__(self, expression: str, angle_unit: AngleUnit = AngleUnit.RADIANS) -> None:
        self.expression = expression
        self.angle_unit = angle_unit

    @abstractmethod
    def literal(self, node: ParseNode) -> Number:
        """Convert a ``number`` node's text into a value."""

    @abstractmethod
    def negate(self, value: Number, node: ParseNode) -> Number:
        """Apply unary minus."""

    @abstractmethod
    def apply(self, operation: Operation, lhs: Number, rhs: Number, node: ParseNode) -> Number:
        """Apply a binary operation; ``node`` is the operator node."""

    @abstractmethod
    def call(self, function: Function, arg: Number, node: ParseNode) -> Number:
        """Apply a named function; ``node`` is the call node."""

    def _angle(self, arg: float) -> float:
        # Uniform for all functions, inverse ones included
        if self.angle_unit is AngleUnit.DEGREES:
            return math.radians(arg)
        return arg

    def _error(self, message: str, node: ParseNode) -> EvaluationError:
        return EvaluationError(message, self.expression, position=node.start)


class FloatDomain(NumericDomain):
    """64-bit floats throughout. Only literals that overflow to infinity are errors."""

    def literal(self, node: ParseNode) -> float:
        value = float(node.text)
        if math.isinf(value):
            raise self._error(f"Literal {node.text[:32]!r} is too large for a 64-bit float", node)
        return value

    def negate(self, value: float, node: ParseNode) -> float:
        return -value

    def apply(self, operation: Operation, lhs: float, rhs: float, node: ParseNode) -> float:
        return operation.run(lhs, rhs)

    def call(self, function: Function, arg: float, node: ParseNode) -> float:
        return function.run(self._angle(arg))


def _truncated_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _truncated_mod(lhs: int, rhs: int) -> int:
    return lhs - rhs * _truncated_div(lhs, rhs)


_INTEGER_OPERATIONS: Dict[Operation, Callable[[int, int], int]] = {
    Operation.ADD: lambda lhs, rhs: lhs + rhs,
    Operation.SUBTRACT: lambda lhs, rhs: lhs - rhs,
    Operation.MULTIPLY: lambda lhs, rhs: lhs * rhs,
    Operation.DIVIDE: _truncated_div,
    Operation.EXPONENT: lambda lhs, rhs: lhs**rhs,
    Operation.MODULO: _truncated_mod,
}


class Int32Domain(NumericDomain):
    """
    32-bit signed integers.

    Every intermediate result is range checked. Division truncates toward zero and
    modulo keeps the sign of the dividend. Functions are computed on floats and their
    result truncated toward zero.
    """

    def literal(self, node: ParseNode) -> int:
        if "." in node.text:
            raise self._error(f"Literal {node.text!r} is not an integer", node)
        # int() refuses very long digit strings, leading zeros included
        digits = node.text.lstrip("0") or "0"
        if len(digits) > len(str(INT32_MAX)):
            raise self._error(f"Literal {node.text[:32]!r} does not fit in 32 bits", node)
        return self._checked(int(digits), node)

    def negate(self, value: int, node: ParseNode) -> int:
        return self._checked(-value, node)

    def apply(self, operation: Operation, lhs: int, rhs: int, node: ParseNode) -> int:
        if operation in (Operation.DIVIDE, Operation.MODULO) and rhs == 0:
            raise self._error(f"{operation.value.capitalize()} by zero", node)
        if operation is Operation.EXPONENT:
            if rhs < 0:
                raise self._error(f"Negative exponent {rhs} has no integer result", node)
            # Any base other than -1, 0 or 1 leaves the 32-bit range well before this
            if abs(lhs) > 1 and rhs > 32:
                raise self._error(f"Result of {lhs} ^ {rhs} does not fit in 32 bits", node)
        return self._checked(_INTEGER_OPERATIONS[operation](lhs, rhs), node)

    def call(self, function: Function, arg: int, node: ParseNode) -> int:
        result = function.run(self._angle(float(arg)))
        if not math.isfinite(result):
            raise self._error(f"{function.value}({arg}) has no finite value", node)
        return self._checked(math.trunc(result), node)

    def _checked(self, value: int, node: ParseNode) -> int:
        if not INT32_MIN <= value <= INT32_MAX:
            raise self._error(f"Value {value} does not fit in 32 bits", node)
        return value


def build_domain(expression: str, settings: EvaluatorSettings) -> NumericDomain:
    """
    Create the numeric domain selected by ``settings``.

    :param str expression: Expression being evaluated, attached to any error
    :param EvaluatorSettings settings: Active settings

    :return: A fresh domain for one evaluation
    :rtype: NumericDomain
    """
    if settings.numeric_mode is NumericMode.INT32:
        return Int32Domain(expression, settings.angle_unit)
    return FloatDomain(expression, settings.angle_unit)
