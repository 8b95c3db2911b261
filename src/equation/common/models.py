"""Pydantic models describing the outcome of an evaluation."""
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from equation.common.errors import EquationError, ErrorKind


class EvaluationResult(BaseModel):
    """Represents a successfully evaluated expression."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Union[int, float] = Field(..., description="Evaluated numeric result of the expression")


class EvaluationFailure(BaseModel):
    """Represents an expression that could not be evaluated."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    kind: ErrorKind = Field(..., description="Which stage failed and why: syntax, evaluation, limit or internal")
    message: str = Field(..., description="Short description of the failure")
    position: Optional[int] = Field(default=None, ge=0, description="Character offset of the failure")
    expected: Tuple[str, ...] = Field(default=(), description="Grammar alternatives accepted at position")

    @classmethod
    def from_error(cls, expression: str, error: EquationError) -> "EvaluationFailure":
        """
        Build a failure model from a raised equation error.

        :param str expression: Expression that failed
        :param EquationError error: Error raised while evaluating it

        :return: The failure model
        :rtype: EvaluationFailure
        """
        return cls(
            expression=expression,
            kind=error.kind,
            message=error.message,
            position=getattr(error, "position", None),
            expected=getattr(error, "expected", ()),
        )
