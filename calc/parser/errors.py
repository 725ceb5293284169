"""
Evaluation errors.

Every failure raised while tokenizing or evaluating an expression is an
EvalError. There are exactly four concrete kinds; the first one raised aborts
the evaluation.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import Token


class EvalError(Exception):
    """Base exception for expression errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.details == other.details

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self.details.items()))))


class UnexpectedEnd(EvalError):
    """Raised when the input ends where a token was required"""

    def __init__(self):
        super().__init__(message="Unexpected end")


class LexError(EvalError):
    """Raised by the tokenizer for characters it cannot turn into a token"""

    def __init__(self, message: str, symbol: str):
        self.symbol = symbol
        super().__init__(message=message, details={"symbol": symbol})


class UnknownSymbol(LexError):
    """Raised for a character outside the operator set, digits and '.'"""

    def __init__(self, symbol: str):
        super().__init__(f"Unknown symbol '{symbol}'", symbol)


class UnexpectedSymbol(LexError):
    """Raised for a second decimal point inside one number"""

    def __init__(self, symbol: str):
        super().__init__(f"Unexpected symbol '{symbol}'", symbol)


class UnexpectedToken(EvalError):
    """Raised when a token does not fit the grammar at its position"""

    def __init__(self, token: "Token"):
        self.token = token
        super().__init__(
            message=f"Unexpected token {token}",
            details={"token": token}
        )
