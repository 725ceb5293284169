"""
Expression parsing.

Tokenization and recursive descent evaluation of arithmetic expressions.
"""

from .errors import (
    EvalError,
    LexError,
    UnexpectedEnd,
    UnexpectedSymbol,
    UnexpectedToken,
    UnknownSymbol,
)
from .tokenizer import OPERATORS, Token, TokenType, Tokenizer, format_number, tokenize
from .evaluator import Evaluator, evaluate

__all__ = [
    "EvalError",
    "LexError",
    "UnexpectedEnd",
    "UnexpectedSymbol",
    "UnexpectedToken",
    "UnknownSymbol",
    "OPERATORS",
    "Token",
    "TokenType",
    "Tokenizer",
    "format_number",
    "tokenize",
    "Evaluator",
    "evaluate",
]
