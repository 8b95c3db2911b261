"""Binary arithmetic operations on 64-bit floats."""
from enum import Enum
from typing import Dict

import numpy as np


class Operation(str, Enum):
    """
    Binary arithmetic operations.

    ``run`` follows IEEE-754 float64 semantics: division by zero yields an infinity or NaN,
    an overflowing power yields an infinity and a negative base raised to a fractional
    power yields NaN. Nothing raises. Modulo is the truncated remainder, so the result
    takes the sign of the dividend (``-7 % 3 == -1``).
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    EXPONENT = "exponent"
    MODULO = "modulo"

    def run(self, lhs: float, rhs: float) -> float:
        """
        Apply the operation to two operands.

        :param float lhs: Left-hand operand
        :param float rhs: Right-hand operand

        :return: Result of the operation
        :rtype: float
        """
        # Non-finite results are expected values here, not errors
        with np.errstate(all="ignore"):
            return float(_UFUNCS[self](np.float64(lhs), np.float64(rhs)))


_UFUNCS: Dict[Operation, np.ufunc] = {
    Operation.ADD: np.add,
    Operation.SUBTRACT: np.subtract,
    Operation.MULTIPLY: np.multiply,
    Operation.DIVIDE: np.true_divide,
    Operation.EXPONENT: np.power,
    Operation.MODULO: np.fmod,
}
