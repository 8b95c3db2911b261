"""Precedence-climbing evaluation of a parse tree."""
from enum import Enum
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

from equation.common.errors import InternalConsistencyError
from equation.common.logger import logger
from equation.common.settings import DEFAULT_SETTINGS, EvaluatorSettings
from equation.evaluator.functions import Function
from equation.evaluator.numeric import Number, build_domain
from equation.evaluator.operations import Operation
from equation.grammar.rules import Rule
from equation.grammar.tree import ParseNode


class Associativity(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class InfixOperator(NamedTuple):
    """Binding strength and behaviour of an infix operator rule."""

    tier: int
    associativity: Associativity
    operation: Operation


# Higher tiers bind tighter. Exponent shares the multiplicative tier and
# is left associative: 2 ^ 3 ^ 2 == (2 ^ 3) ^ 2.
INFIX_OPERATORS: Dict[Rule, InfixOperator] = {
    Rule.ADD: InfixOperator(1, Associativity.LEFT, Operation.ADD),
    Rule.SUBTRACT: InfixOperator(1, Associativity.LEFT, Operation.SUBTRACT),
    Rule.MULTIPLY: InfixOperator(2, Associativity.LEFT, Operation.MULTIPLY),
    Rule.DIVIDE: InfixOperator(2, Associativity.LEFT, Operation.DIVIDE),
    Rule.EXPONENT: InfixOperator(2, Associativity.LEFT, Operation.EXPONENT),
    Rule.MODULO: InfixOperator(2, Associativity.LEFT, Operation.MODULO),
}

PREFIX_OPERATORS: Dict[Rule, int] = {
    Rule.UNARY_MINUS: 3,
}

LOOSEST_TIER: int = min(operator.tier for operator in INFIX_OPERATORS.values())

# _operand binds prefixes directly to the next operand, which needs them above every infix tier
if min(PREFIX_OPERATORS.values()) <= max(operator.tier for operator in INFIX_OPERATORS.values()):
    raise InternalConsistencyError("Prefix operators must bind tighter than every infix operator")


class PrecedenceClimber:
    """
    Fold a parse tree into a single number.

    The children of an ``expression`` or ``term`` node are a flat sequence of operands,
    infix operators and prefix markers. They are reduced with precedence climbing:

        1. Read an operand, applying any prefix operator to it.
        2. While the next infix operator binds at least as tightly as the current
           minimum tier, climb its right-hand side with the minimum raised past the
           operator's tier (left associative) and combine.

    Nested nodes (groups, function arguments, terms) are reduced recursively as operands.
    A rule without a handler means the grammar and this evaluator disagree, which is
    reported as an ``InternalConsistencyError`` rather than a user error.
    """

    def __init__(self, expression: str, settings: EvaluatorSettings = DEFAULT_SETTINGS) -> None:
        self._expression = expression
        self._domain = build_domain(expression, settings)

    def evaluate(self, root: ParseNode) -> Number:
        """
        Evaluate a tree produced by the recognizer.

        :param ParseNode root: Node tagged ``Rule.EQUATION``

        :return: Value of the expression
        :rtype: int | float
        :raises EvaluationError: If a value cannot be represented in the numeric domain
        :raises InternalConsistencyError: If the tree holds a rule with no handler
        """
        if root.rule is not Rule.EQUATION or len(root.children) != 1:
            raise self._unhandled(root)
        return self._reduce(root.children[0])

    def _reduce(self, node: ParseNode) -> Number:
        # Groups and single-operand wrappers carry no arithmetic, step through them
        # without recursing so nesting depth costs as few frames as possible
        while True:
            if node.rule is Rule.GROUP:
                if node.rules != (Rule.EXPRESSION,):
                    raise self._unhandled(node)
                node = node.children[0]
            elif node.rule in (Rule.EXPRESSION, Rule.TERM) and len(node.children) == 1:
                node = node.children[0]
            else:
                break

        if node.rule in (Rule.EXPRESSION, Rule.TERM):
            value, index = self._climb(node.children, 0, LOOSEST_TIER)
            if index != len(node.children):
                raise self._unhandled(node.children[index])
            return value
        if node.rule is Rule.NUMBER:
            return self._domain.literal(node)
        if node.rule is Rule.FUNCTION_CALL:
            function = self._function(node)
            return self._domain.call(function, self._reduce(node.children[1]), node)
        raise self._unhandled(node)

    def _climb(self, nodes: Sequence[ParseNode], index: int, min_tier: int) -> Tuple[Number, int]:
        lhs, index = self._operand(nodes, index)
        while index < len(nodes):
            operator_node = nodes[index]
            infix = INFIX_OPERATORS.get(operator_node.rule)
            if infix is None:
                raise self._unhandled(operator_node)
            if infix.tier < min_tier:
                break

            next_tier = infix.tier + 1 if infix.associativity is Associativity.LEFT else infix.tier
            rhs, index = self._climb(nodes, index + 1, next_tier)
            lhs = self._domain.apply(infix.operation, lhs, rhs, operator_node)
        return lhs, index

    def _operand(self, nodes: Sequence[ParseNode], index: int) -> Tuple[Number, int]:
        # Prefix operators outrank every infix tier, so each one applies to the
        # single operand that follows the run of prefixes
        prefixes = []
        while index < len(nodes) and nodes[index].rule in PREFIX_OPERATORS:
            prefixes.append(nodes[index])
            index += 1
        if index >= len(nodes):
            anchor = nodes[-1] if nodes else None
            raise self._unhandled(anchor, "operator is missing its right-hand operand")

        value = self._reduce(nodes[index])
        for prefix in reversed(prefixes):
            if prefix.rule is not Rule.UNARY_MINUS:
                raise self._unhandled(prefix)
            value = self._domain.negate(value, prefix)
        return value, index + 1

    def _function(self, node: ParseNode) -> Function:
        if node.rules != (Rule.FUNCTION_NAME, Rule.EXPRESSION):
            raise self._unhandled(node)
        name = node.children[0]
        try:
            return Function(name.text)
        except ValueError:
            raise self._unhandled(name, f"unknown function {name.text!r}") from None

    def _unhandled(self, node: Optional[ParseNode], reason: str = "") -> InternalConsistencyError:
        rule = node.rule if node is not None else None
        detail = reason or f"no handler for rule {rule}"
        logger.error(f"🧩❌ Parse tree does not match the evaluator: {detail} in {self._expression!r}")
        return InternalConsistencyError(f"Internal consistency failure: {detail}", self._expression)


def evaluate_tree(root: ParseNode, expression: str, settings: EvaluatorSettings = DEFAULT_SETTINGS) -> Number:
    """
    Evaluate an already recognized tree.

    :param ParseNode root: Root node returned by ``recognize``
    :param str expression: Source text of the tree, attached to errors
    :param EvaluatorSettings settings: Numeric mode and angle unit to use

    :return: Value of the expression
    :rtype: int | float
    """
    return PrecedenceClimber(expression, settings).evaluate(root)
