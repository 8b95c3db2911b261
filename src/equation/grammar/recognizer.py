"""Recognize expression text and build its parse tree."""
import re
from typing import Dict, List, Optional, Set, Tuple

from equation.common.errors import ExpressionSyntaxError, NestingLimitError
from equation.grammar.rules import (
    ADDITIVE_OPERATORS,
    FUNCTION_NAMES,
    MULTIPLICATIVE_OPERATORS,
    UNARY_MINUS_SYMBOL,
    Rule,
)
from equation.grammar.tree import ParseNode


NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")
WHITESPACE_PATTERN = re.compile(r"\s*")

OPEN_PAREN: str = "("
CLOSE_PAREN: str = ")"


class ExpressionRecognizer:
    """
    Recursive-descent recognizer for the expression grammar.

    Grammar, loosest to tightest binding:
        equation      := expression EOI
        expression    := term ((add | subtract) term)*
        term          := unary ((multiply | divide | exponent | modulo) unary)*
        unary         := unary_minus? primary
        primary       := number | "(" expression ")" | function_call
        function_call := function_name "(" expression ")"

    Whitespace may appear between any two tokens. On failure the recognizer reports the
    furthest offset it reached together with every alternative it tried there, so the
    error points at the real culprit instead of the start of the enclosing rule.

    An instance holds the scanning cursor and is meant for a single ``recognize`` call.
    """

    def __init__(self, text: str, max_depth: int = 64) -> None:
        self._text = text
        self._max_depth = max_depth
        self._pos = 0
        self._depth = 0
        self._furthest = 0
        self._expected: Set[str] = set()

    def recognize(self) -> ParseNode:
        """
        Recognize the whole input as a single equation.

        :return: Root node tagged ``Rule.EQUATION`` wrapping one expression
        :rtype: ParseNode
        :raises ExpressionSyntaxError: If the input is not a complete, valid expression
        :raises NestingLimitError: If groups and calls nest deeper than the limit
        """
        expression = self._expression()
        if expression is not None:
            self._skip_whitespace()
            if self._pos == len(self._text):
                return ParseNode(
                    rule=Rule.EQUATION,
                    text=self._text,
                    start=0,
                    end=len(self._text),
                    children=(expression,),
                )
            self._expect(str(Rule.EOI))

        message = "Unexpected end of input" if self._furthest >= len(self._text) else "Unexpected input"
        raise ExpressionSyntaxError(message, self._text, self._furthest, tuple(sorted(self._expected)))

    def _expression(self) -> Optional[ParseNode]:
        self._skip_whitespace()
        start = self._pos
        first = self._term()
        if first is None:
            return None

        children: List[ParseNode] = [first]
        while True:
            checkpoint = self._pos
            operator = self._operator(ADDITIVE_OPERATORS)
            if operator is None:
                self._pos = checkpoint
                break
            operand = self._term()
            if operand is None:
                self._pos = checkpoint
                break
            children += [operator, operand]

        return self._node(Rule.EXPRESSION, start, children)

    def _term(self) -> Optional[ParseNode]:
        self._skip_whitespace()
        start = self._pos
        first = self._unary()
        if first is None:
            return None

        children: List[ParseNode] = list(first)
        while True:
            checkpoint = self._pos
            operator = self._operator(MULTIPLICATIVE_OPERATORS)
            if operator is None:
                self._pos = checkpoint
                break
            operand = self._unary()
            if operand is None:
                self._pos = checkpoint
                break
            children.append(operator)
            children.extend(operand)

        return self._node(Rule.TERM, start, children)

    def _unary(self) -> Optional[List[ParseNode]]:
        """Optional prefix minus followed by a primary, returned as a flat node list."""
        checkpoint = self._pos
        nodes: List[ParseNode] = []

        minus_start = self._match(UNARY_MINUS_SYMBOL, str(Rule.UNARY_MINUS))
        if minus_start is not None:
            nodes.append(self._node(Rule.UNARY_MINUS, minus_start))

        primary = self._primary()
        if primary is None:
            self._pos = checkpoint
            return None
        nodes.append(primary)
        return nodes

    def _primary(self) -> Optional[ParseNode]:
        self._skip_whitespace()
        start = self._pos

        number = NUMBER_PATTERN.match(self._text, start)
        if number is not None:
            self._pos = number.end()
            return self._node(Rule.NUMBER, start)
        self._expect(str(Rule.NUMBER))

        if self._match(OPEN_PAREN, f'"{OPEN_PAREN}"') is not None:
            return self._enclosed(Rule.GROUP, start, [])

        return self._function_call()

    def _function_call(self) -> Optional[ParseNode]:
        self._skip_whitespace()
        start = self._pos

        for name in FUNCTION_NAMES:
            if self._text.startswith(name, start):
                self._pos = start + len(name)
                name_node = self._node(Rule.FUNCTION_NAME, start)
                break
        else:
            self._expect(str(Rule.FUNCTION_NAME))
            return None

        if self._match(OPEN_PAREN, f'"{OPEN_PAREN}"') is None:
            self._pos = start
            return None
        return self._enclosed(Rule.FUNCTION_CALL, start, [name_node])

    def _enclosed(self, rule: Rule, start: int, children: List[ParseNode]) -> Optional[ParseNode]:
        """Recognize ``expression ")"`` after an opening parenthesis has been consumed."""
        if self._depth >= self._max_depth:
            raise NestingLimitError(
                f"Nesting deeper than {self._max_depth} levels",
                self._text,
                start,
                self._max_depth,
            )

        self._depth += 1
        try:
            expression = self._expression()
        finally:
            self._depth -= 1

        if expression is None or self._match(CLOSE_PAREN, f'"{CLOSE_PAREN}"') is None:
            self._pos = start
            return None
        return self._node(rule, start, children + [expression])

    def _operator(self, table: Dict[Rule, Tuple[str, ...]]) -> Optional[ParseNode]:
        self._skip_whitespace()
        start = self._pos
        for rule, spellings in table.items():
            for spelling in spellings:
                if self._text.startswith(spelling, start):
                    self._pos = start + len(spelling)
                    return self._node(rule, start)
            self._expect(str(rule))
        return None

    def _match(self, literal: str, label: str) -> Optional[int]:
        """Consume ``literal`` after optional whitespace and return its offset, or record a miss."""
        self._skip_whitespace()
        if self._text.startswith(literal, self._pos):
            start = self._pos
            self._pos += len(literal)
            return start
        self._expect(label)
        return None

    def _skip_whitespace(self) -> None:
        self._pos = WHITESPACE_PATTERN.match(self._text, self._pos).end()

    def _expect(self, label: str) -> None:
        if self._pos > self._furthest:
            self._furthest = self._pos
            self._expected = {label}
        elif self._pos == self._furthest:
            self._expected.add(label)

    def _node(self, rule: Rule, start: int, children: Optional[List[ParseNode]] = None) -> ParseNode:
        return ParseNode(
            rule=rule,
            text=self._text[start:self._pos],
            start=start,
            end=self._pos,
            children=tuple(children or ()),
        )


def recognize(text: str, max_depth: int = 64) -> ParseNode:
    """
    Recognize ``text`` against the expression grammar.

    :param str text: Expression source
    :param int max_depth: Maximum nesting of parentheses and function calls

    :return: Root parse node tagged ``Rule.EQUATION``
    :rtype: ParseNode
    :raises ExpressionSyntaxError: If ``text`` is not a valid expression
    :raises NestingLimitError: If groups and calls nest deeper than ``max_depth``
    """
    return ExpressionRecognizer(text, max_depth=max_depth).recognize()
