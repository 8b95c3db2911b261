"""Public entry points: evaluate an expression string."""
from typing import Optional, Union

from equation.common.errors import EquationError
from equation.common.logger import logger
from equation.common.models import EvaluationFailure, EvaluationResult
from equation.common.settings import DEFAULT_SETTINGS, EvaluatorSettings
from equation.evaluator.climber import evaluate_tree
from equation.evaluator.numeric import Number
from equation.grammar.recognizer import recognize


def evaluate(expression: str, settings: Optional[EvaluatorSettings] = None) -> Number:
    """
    Evaluate an arithmetic expression.

    The expression is recognized in full before any arithmetic happens, so a syntax error
    never comes with a partial result. The call is pure: nothing is cached or shared
    between calls.

    :param str expression: Arithmetic expression, e.g. ``"(1 + 2) * sin(45)"``
    :param EvaluatorSettings settings: Numeric mode, angle unit and nesting limit

    :return: Value of the expression, a float (or an int in ``int32`` mode)
    :rtype: int | float
    :raises ExpressionSyntaxError: If the expression does not match the grammar
    :raises NestingLimitError: If groups and calls nest deeper than ``settings.max_depth``
    :raises EvaluationError: If a literal or result cannot be represented
    """
    settings = settings or DEFAULT_SETTINGS
    root = recognize(expression, max_depth=settings.max_depth)
    result = evaluate_tree(root, expression, settings)
    logger.debug(f"🧮 {expression!r} = {result}")
    return result


def evaluate_result(
    expression: str,
    settings: Optional[EvaluatorSettings] = None,
) -> Union[EvaluationResult, EvaluationFailure]:
    """
    Evaluate an arithmetic expression and wrap the outcome instead of raising.

    :param str expression: Arithmetic expression
    :param EvaluatorSettings settings: Numeric mode, angle unit and nesting limit

    :return: The result, or a failure describing what went wrong
    :rtype: EvaluationResult | EvaluationFailure
    """
    try:
        result = evaluate(expression, settings)
    except EquationError as exc:
        logger.info(f"🧮❌ Could not evaluate {expression!r}: {exc}")
        return EvaluationFailure.from_error(expression, exc)
    return EvaluationResult(expression=expression, result=result)
