"""Grammar rule tags and the lexical vocabulary of the expression language."""
from enum import Enum
from typing import Dict, Tuple


class Rule(str, Enum):
    """Tag naming the syntactic construct a parse node represents."""

    EQUATION = "equation"
    EXPRESSION = "expression"
    TERM = "term"
    NUMBER = "number"
    GROUP = "group"
    FUNCTION_CALL = "function_call"
    FUNCTION_NAME = "function_name"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    EXPONENT = "exponent"
    MODULO = "modulo"
    UNARY_MINUS = "unary_minus"
    # Only ever reported in syntax errors, never carried by a node
    EOI = "EOI"

    def __str__(self) -> str:
        return self.value


# Spellings accepted for each infix operator. Keyword aliases sit beside their symbol.
ADDITIVE_OPERATORS: Dict[Rule, Tuple[str, ...]] = {
    Rule.ADD: ("+",),
    Rule.SUBTRACT: ("-",),
}

MULTIPLICATIVE_OPERATORS: Dict[Rule, Tuple[str, ...]] = {
    Rule.MULTIPLY: ("*",),
    Rule.DIVIDE: ("/",),
    Rule.EXPONENT: ("^", "exp"),
    Rule.MODULO: ("%", "mod"),
}

UNARY_MINUS_SYMBOL: str = "-"

# Case-sensitive names of the callable functions. Longest names first so that
# "sinh" is never read as "sin" followed by a stray "h".
FUNCTION_NAMES: Tuple[str, ...] = tuple(
    sorted(
        (
            "sin", "cos", "tan",
            "asin", "acos", "atan",
            "sinh", "cosh", "tanh",
            "asinh", "acosh", "atanh",
        ),
        key=len,
        reverse=True,
    )
)
