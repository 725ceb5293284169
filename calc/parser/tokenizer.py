"""
Tokenizer for arithmetic expressions.

The tokenizer scans its input lazily: each call to next() reads just enough
characters to produce one token. A single buffered slot gives one token of
lookahead through peek().
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from typing import Iterator, Union

from .errors import LexError, UnexpectedSymbol, UnknownSymbol

OPERATORS = "()|^*/+-"
DIGITS = "0123456789"


class TokenType(Enum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()
    OPERATOR = auto()


@dataclass(frozen=True)
class Token:
    """
    A single token of the expression.

    Attributes:
        type: The token type
        value: The float value of a number, or the symbol of an operator
    """

    type: TokenType
    value: Union[float, str]

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        if symbol not in OPERATORS:
            raise ValueError(f"Not an operator: {symbol!r}")
        return cls(TokenType.OPERATOR, symbol)

    def is_operator(self, *symbols: str) -> bool:
        """Check if this is an operator token with one of the given symbols."""
        return self.type == TokenType.OPERATOR and self.value in symbols

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        return f"'{self.value}'"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


def format_number(value: float) -> str:
    """
    Format a number in plain decimal notation.

    Integers lose their trailing .0, the sign of -0 is kept and no exponent
    is used: 1e-07 is written 0.0000001.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Tokenizer:
    """
    Lazy tokenizer with one token of lookahead.

    The tokenizer handles:
    - Numbers (digits with at most one decimal point)
    - The operators and brackets ( ) | ^ * / + -
    - Whitespace between tokens, which is skipped
    """

    def __init__(self, source: str):
        self.source = source
        self._pos = 0
        # Lookahead slot: filled by peek(), drained by next()
        self._buffered = False
        self._peeked: Token | LexError | None = None

    @property
    def position(self) -> int:
        """Index of the first character not yet scanned."""
        return self._pos

    def peek(self) -> Token | None:
        """
        Look at the next token without consuming it.

        Returns:
            The next token, or None at the end of the input

        Raises:
            LexError: If the next characters are not a valid token
        """
        if not self._buffered:
            try:
                self._peeked = self._scan()
            except LexError as error:
                self._peeked = error
            self._buffered = True

        if isinstance(self._peeked, LexError):
            raise self._peeked
        return self._peeked

    def next(self) -> Token | None:
        """
        Consume and return the next token.

        Returns:
            The next token, or None at the end of the input

        Raises:
            LexError: If the next characters are not a valid token
        """
        if not self._buffered:
            return self._scan()

        item = self._peeked
        self._buffered = False
        self._peeked = None
        if isinstance(item, LexError):
            raise item
        return item

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    def _scan(self) -> Token | None:
        source = self.source

        while self._pos < len(source) and source[self._pos].isspace():
            self._pos += 1

        if self._pos >= len(source):
            return None

        char = source[self._pos]

        if char in OPERATORS:
            self._pos += 1
            return Token(TokenType.OPERATOR, char)

        if char in DIGITS or char == ".":
            return Token(TokenType.NUMBER, self._read_number())

        self._pos += 1
        raise UnknownSymbol(char)

    def _read_number(self) -> float:
        """
        Read a decimal literal starting at the cursor.

        Digits are accumulated into an integer numerator. The divisor stays 0
        until the decimal point is seen, then grows by 10 with every digit.
        """
        source = self.source
        numerator = 0
        divisor = 0

        while self._pos < len(source):
            char = source[self._pos]
            if char in DIGITS:
                self._pos += 1
                numerator = numerator * 10 + int(char)
                divisor *= 10
            elif char == ".":
                self._pos += 1
                if divisor:
                    raise UnexpectedSymbol(char)
                divisor = 1
            else:
                break

        try:
            if divisor:
                return numerator / divisor
            return float(numerator)
        except OverflowError:
            return math.inf


def tokenize(source: str) -> list[Token]:
    """
    Tokenize a whole expression.

    Args:
        source: The expression to tokenize

    Returns:
        List of tokens

    Raises:
        LexError: At the first invalid character
    """
    return list(Tokenizer(source))
