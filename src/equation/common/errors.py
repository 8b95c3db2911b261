"""Error taxonomy raised while recognizing and evaluating expressions."""
from enum import Enum
from typing import Optional, Tuple


class ErrorKind(str, Enum):
    """Classification of a failed evaluation."""

    SYNTAX = "syntax"
    EVALUATION = "evaluation"
    LIMIT = "limit"
    INTERNAL = "internal"


class EquationError(Exception):
    """Base class for every error raised by the equation package."""

    kind: ErrorKind

    def __init__(self, message: str, expression: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.expression = expression


class ExpressionSyntaxError(EquationError, ValueError):
    """
    The input does not match the expression grammar.

    Raised before any arithmetic happens. ``position`` is the character offset of the
    furthest point the recognizer reached, ``expected`` the grammar alternatives that
    would have been accepted there.
    """

    kind = ErrorKind.SYNTAX

    def __init__(
        self,
        message: str,
        expression: str,
        position: int,
        expected: Tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, expression)
        self.position = position
        self.expected = expected

    @property
    def line(self) -> int:
        """1-based line of ``position``."""
        return self.expression.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        """1-based column of ``position``."""
        return self.position - (self.expression.rfind("\n", 0, self.position) + 1) + 1

    def __str__(self) -> str:
        location = f"{self.line}:{self.column}"
        if self.expected:
            return f"{self.message} at {location}, expected one of: {', '.join(self.expected)}"
        return f"{self.message} at {location}"


class EvaluationError(EquationError, ValueError):
    """A syntactically valid expression whose value cannot be represented."""

    kind = ErrorKind.EVALUATION

    def __init__(self, message: str, expression: str = "", position: Optional[int] = None) -> None:
        super().__init__(message, expression)
        self.position = position


class NestingLimitError(EquationError, ValueError):
    """A well-formed expression nested deeper than the configured limit."""

    kind = ErrorKind.LIMIT

    def __init__(self, message: str, expression: str, position: int, max_depth: int) -> None:
        super().__init__(message, expression)
        self.position = position
        self.max_depth = max_depth


class InternalConsistencyError(EquationError, RuntimeError):
    """The parse tree holds a rule the evaluator has no handler for."""

    kind = ErrorKind.INTERNAL
