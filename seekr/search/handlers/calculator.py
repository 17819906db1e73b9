"""
Calculator Handler - Inline arithmetic evaluation in search.

Triggers when the query contains only digits, whitespace and + - * / ( ) % .
Expressions are evaluated by a small recursive-descent parser, so nothing
typed into the launcher is ever executed as code.

Grammar:
    expr    := term (("+" | "-") term)*
    term    := unary (("*" | "/" | "%") unary)*
    unary   := ("+" | "-") unary | power
    power   := primary ("**" unary)?
    primary := NUMBER | "(" expr ")"

Division follows IEEE rules (1/0 is inf) and % is a truncated remainder;
any result that is not a finite number is discarded.
"""

import math
import re
from typing import Optional

from loguru import logger

from seekr.search.handlers.base import SearchHandler
from seekr.search.results import CalculatorResult, ResultItem

TOKEN_PATTERN = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|(\*\*|[-+*/%()]))")


class CalculationError(ValueError):
    """The expression could not be parsed or evaluated."""


def tokenize(expr: str) -> list[str]:
    tokens = []
    pos = 0
    expr = expr.rstrip()
    while pos < len(expr):
        match = TOKEN_PATTERN.match(expr, pos)
        if not match:
            raise CalculationError(f"unexpected character at {pos}: {expr[pos]!r}")
        tokens.append(match.group(1) or match.group(2))
        pos = match.end()
    return tokens


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> str:
        token = self.peek()
        if token is None:
            raise CalculationError("unexpected end of expression")
        self.pos += 1
        return token

    def parse(self) -> float:
        value = self.expr()
        if self.peek() is not None:
            raise CalculationError(f"unexpected token {self.peek()!r}")
        return value

    def expr(self) -> float:
        value = self.term()
        while self.peek() in ("+", "-"):
            if self.take() == "+":
                value = value + self.term()
            else:
                value = value - self.term()
        return value

    def term(self) -> float:
        value = self.unary()
        while self.peek() in ("*", "/", "%"):
            op = self.take()
            rhs = self.unary()
            if op == "*":
                value = value * rhs
            elif op == "/":
                value = _divide(value, rhs)
            else:
                value = _remainder(value, rhs)
        return value

    def unary(self) -> float:
        if self.peek() == "-":
            self.take()
            return -self.unary()
        if self.peek() == "+":
            self.take()
            return self.unary()
        return self.power()

    def power(self) -> float:
        base = self.primary()
        if self.peek() == "**":
            self.take()
            return _power(base, self.unary())
        return base

    def primary(self) -> float:
        token = self.take()
        if token == "(":
            value = self.expr()
            if self.take() != ")":
                raise CalculationError("missing closing parenthesis")
            return value
        if token[0].isdigit() or token[0] == ".":
            return float(token)
        raise CalculationError(f"unexpected token {token!r}")


def evaluate(expr: str) -> float:
    """
    Evaluate an arithmetic expression.

    Raises:
        CalculationError: On any syntax error, empty input or nesting too
            deep for the parser
    """
    tokens = tokenize(expr)
    if not tokens:
        raise CalculationError("empty expression")
    try:
        return _Parser(tokens).parse()
    except RecursionError:
        raise CalculationError("expression nested too deeply") from None


def format_number(value: float) -> str:
    """Render whole numbers below 1e21 as plain digits, without a trailing .0."""
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class CalculatorHandler(SearchHandler):
    """Evaluate plain arithmetic queries."""

    name = "calculator"

    async def get_results(self, query: str) -> list[ResultItem]:
        try:
            value = evaluate(query)
        except CalculationError as e:
            logger.debug(f"Not a calculation '{query}': {e}")
            return []

        if not math.isfinite(value):
            return []

        display = format_number(value)
        return [CalculatorResult(
            title=f"= {display}",
            description="Calculation result",
            value=display,
        )]
