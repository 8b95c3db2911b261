"""Named unary functions callable from expressions."""
from collections.abc import Callable
from enum import Enum
import math
from typing import Dict

import numpy as np

from equation.common.errors import InternalConsistencyError
from equation.grammar.rules import FUNCTION_NAMES


class Function(str, Enum):
    """Trigonometric and hyperbolic functions, keyed by their name in the grammar."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"

    def run(self, arg: float) -> float:
        """
        Evaluate the function at ``arg``.

        Finite results come from the platform math library. Inputs outside the domain
        (``asin(2)``) or results too large to represent (``sinh(1000)``) produce the
        IEEE-754 NaN or infinity instead of raising.

        :param float arg: Function argument
        :return: Function value
        :rtype: float
        """
        try:
            return _MATH[self](arg)
        except (ValueError, OverflowError):
            with np.errstate(all="ignore"):
                return float(_UFUNCS[self](np.float64(arg)))


_MATH: Dict[Function, Callable[[float], float]] = {
    Function.SIN: math.sin,
    Function.COS: math.cos,
    Function.TAN: math.tan,
    Function.ASIN: math.asin,
    Function.ACOS: math.acos,
    Function.ATAN: math.atan,
    Function.SINH: math.sinh,
    Function.COSH: math.cosh,
    Function.TANH: math.tanh,
    Function.ASINH: math.asinh,
    Function.ACOSH: math.acosh,
    Function.ATANH: math.atanh,
}

_UFUNCS: Dict[Function, np.ufunc] = {
    Function.SIN: np.sin,
    Function.COS: np.cos,
    Function.TAN: np.tan,
    Function.ASIN: np.arcsin,
    Function.ACOS: np.arccos,
    Function.ATAN: np.arctan,
    Function.SINH: np.sinh,
    Function.COSH: np.cosh,
    Function.TANH: np.tanh,
    Function.ASINH: np.arcsinh,
    Function.ACOSH: np.arccosh,
    Function.ATANH: np.arctanh,
}

# The recognizer only accepts FUNCTION_NAMES, every one of them must dispatch here
if {function.value for function in Function} != set(FUNCTION_NAMES):
    raise InternalConsistencyError(
        f"Function table {sorted(f.value for f in Function)} does not match grammar {sorted(FUNCTION_NAMES)}"
    )
