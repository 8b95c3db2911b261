"""Evaluator configuration."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NumericMode(str, Enum):
    """Numeric representation used for literals and intermediate results."""

    FLOAT = "float"
    INT32 = "int32"


class AngleUnit(str, Enum):
    """Unit in which function arguments are interpreted."""

    RADIANS = "radians"
    DEGREES = "degrees"


class EvaluatorSettings(BaseModel):
    """
    Options controlling how an expression is evaluated.

    The defaults reproduce the canonical behaviour: 64-bit floats throughout and
    function arguments taken as radians.
    """

    # Settings are shared by reference between recognizer and evaluator, keep them read-only
    model_config = ConfigDict(frozen=True)

    numeric_mode: NumericMode = Field(default=NumericMode.FLOAT, description="Numeric representation")
    angle_unit: AngleUnit = Field(default=AngleUnit.RADIANS, description="Unit of function arguments")
    max_depth: int = Field(default=64, ge=1, le=100, description="Maximum nesting of parentheses and calls")


DEFAULT_SETTINGS = EvaluatorSettings()
