"""
Recursive descent evaluator for arithmetic expressions.

Each precedence level is one method. The methods consume tokens from a
Tokenizer and fold them straight into a float, so no syntax tree is built.

Grammar (highest to lowest binding):

    value      := ['+' | '-'] ( NUMBER | '(' expression ')' | '|' expression '|' )
    power      := value ['^' power]
    product    := power (('*' | '/') power)*
    expression := product (('+' | '-') product)*
"""

import math

from ..core.logging import get_context_logger
from .errors import EvalError, UnexpectedEnd, UnexpectedToken
from .tokenizer import Token, TokenType, Tokenizer

logger = get_context_logger(__name__, component="evaluator")


def divide(left: float, right: float) -> float:
    """Divide with IEEE semantics: x/0 is a signed infinity, 0/0 is nan."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def power(base: float, exponent: float) -> float:
    """Raise to a power, returning nan or infinity instead of raising."""
    try:
        result = base**exponent
    except ZeroDivisionError:
        # 0 ** negative; -0 keeps its sign for odd integer exponents
        if _is_odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf
    except OverflowError:
        if base < 0:
            if exponent != int(exponent):
                return math.nan
            if _is_odd_integer(exponent):
                return -math.inf
        return math.inf

    # Check if result is complex (e.g., (-1)^0.5)
    if isinstance(result, complex):
        return math.nan
    return result


class Evaluator:
    """
    Evaluates the token stream of one expression.

    Lookahead is done with peek(); a token is only consumed with next() once
    the method has committed to it.
    """

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer

    def evaluate(self) -> float:
        """
        Evaluate a complete expression and require the input to be exhausted.

        Raises:
            EvalError: On the first lexical or syntax error
        """
        value = self.parse_expression()

        # Ensure we consumed all tokens
        token = self.tokenizer.next()
        if token is not None:
            raise UnexpectedToken(token)

        return value

    def _expect_next(self) -> Token:
        token = self.tokenizer.next()
        if token is None:
            raise UnexpectedEnd()
        return token

    def _next_is(self, *symbols: str) -> bool:
        token = self.tokenizer.peek()
        return token is not None and token.is_operator(*symbols)

    def parse_expression(self) -> float:
        """Parse sums and differences (left-associative)."""
        result = self.parse_product()

        while self._next_is("+", "-"):
            op = self.tokenizer.next().value
            right = self.parse_product()
            if op == "+":
                result += right
            else:
                result -= right

        return result

    def parse_product(self) -> float:
        """Parse products and quotients (left-associative)."""
        result = self.parse_power()

        while self._next_is("*", "/"):
            op = self.tokenizer.next().value
            right = self.parse_power()
            if op == "*":
                result *= right
            else:
                result = divide(result, right)

        return result

    def parse_power(self) -> float:
        """
        Parse exponentiation.

        The right-hand side recurses into parse_power, which makes '^'
        right-associative: 2^3^2 is 2^(3^2).
        """
        base = self.parse_value()

        if self._next_is("^"):
            self.tokenizer.next()
            return power(base, self.parse_power())

        return base

    def parse_value(self) -> float:
        """
        Parse an atom with an optional leading sign.

        An atom is a number, a bracketed expression or an absolute value
        group. The sign applies to the whole atom, and only one sign is
        allowed.
        """
        sign = 1.0
        if self._next_is("+", "-"):
            if self.tokenizer.next().value == "-":
                sign = -1.0

        token = self._expect_next()

        if token.type == TokenType.NUMBER:
            return sign * token.value

        if token.is_operator("("):
            result = self.parse_expression()
            self._expect_closing(")")
            return sign * result

        if token.is_operator("|"):
            result = abs(self.parse_expression())
            self._expect_closing("|")
            return sign * result

        raise UnexpectedToken(token)

    def _expect_closing(self, symbol: str) -> None:
        token = self._expect_next()
        if not token.is_operator(symbol):
            raise UnexpectedToken(token)


def evaluate(source: str) -> float:
    """
    Evaluate an arithmetic expression.

    Args:
        source: The expression, e.g. "2.3 * -(2.4 + 2.5)"

    Returns:
        The value of the expression

    Raises:
        EvalError: UnexpectedEnd, UnknownSymbol, UnexpectedSymbol or
            UnexpectedToken, for the first error in the input
    """
    logger.debug("Evaluating expression", extra_data={"source": source})

    try:
        value = Evaluator(Tokenizer(source)).evaluate()
    except EvalError as error:
        logger.debug(
            f"Evaluation failed: {error}",
            extra_data={"source": source, "error_type": type(error).__name__},
        )
        raise

    logger.debug("Evaluated expression", extra_data={"source": source, "value": value})
    return value
