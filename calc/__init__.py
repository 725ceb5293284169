"""
calc - arithmetic expression evaluator.

    >>> from calc import evaluate
    >>> evaluate("2^3^2")
    512.0
"""

from .parser import (
    EvalError,
    Evaluator,
    LexError,
    Token,
    TokenType,
    Tokenizer,
    UnexpectedEnd,
    UnexpectedSymbol,
    UnexpectedToken,
    UnknownSymbol,
    evaluate,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "EvalError",
    "Evaluator",
    "LexError",
    "Token",
    "TokenType",
    "Tokenizer",
    "UnexpectedEnd",
    "UnexpectedSymbol",
    "UnexpectedToken",
    "UnknownSymbol",
    "evaluate",
    "tokenize",
]
