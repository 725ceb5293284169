"""Tests for the lazy tokenizer."""

import pytest

from calc.parser import (
    LexError,
    Token,
    TokenType,
    Tokenizer,
    UnexpectedSymbol,
    UnknownSymbol,
    format_number,
    tokenize,
)


class TestToken:
    """Test Token construction and rendering."""

    def test_number_token(self):
        """Test Token.number stores a float."""
        token = Token.number(2)
        assert token.type == TokenType.NUMBER
        assert token.value == 2.0
        assert isinstance(token.value, float)

    def test_operator_token(self):
        """Test Token.operator stores the symbol."""
        token = Token.operator("^")
        assert token.type == TokenType.OPERATOR
        assert token.value == "^"

    def test_operator_rejects_unknown_symbol(self):
        """Test that % is not an operator."""
        with pytest.raises(ValueError):
            Token.operator("%")

    def test_tokens_compare_by_value(self):
        """Test equality and hashing."""
        assert Token.number(1.5) == Token(TokenType.NUMBER, 1.5)
        assert Token.operator("+") != Token.operator("-")
        assert len({Token.operator("+"), Token.operator("+")}) == 1

    def test_tokens_are_immutable(self):
        """Test that tokens cannot be changed."""
        token = Token.number(1)
        with pytest.raises(AttributeError):
            token.value = 2.0

    def test_str(self):
        """Test rendering used in error messages."""
        assert str(Token.number(2.0)) == "2"
        assert str(Token.number(4.5)) == "4.5"
        assert str(Token.operator("-")) == "'-'"

    def test_str_small_number(self):
        """Test that small numbers are not written with an exponent."""
        assert str(Token.number(1e-7)) == "0.0000001"

    def test_is_operator(self):
        """Test matching specific operator symbols."""
        assert Token.operator("*").is_operator("*", "/")
        assert not Token.operator("+").is_operator("*", "/")
        assert not Token.number(1).is_operator("*")


class TestTokenize:
    """Test tokenizing whole strings."""

    def test_symbols(self):
        """Test every operator symbol, with whitespace skipped."""
        assert tokenize("()| ^ */ +-") == [
            Token.operator("("),
            Token.operator(")"),
            Token.operator("|"),
            Token.operator("^"),
            Token.operator("*"),
            Token.operator("/"),
            Token.operator("+"),
            Token.operator("-"),
        ]

    def test_numbers(self):
        """Test integer and decimal literals."""
        assert tokenize("1 23 4.5 67.89") == [
            Token.number(1.0),
            Token.number(23.0),
            Token.number(4.5),
            Token.number(67.89),
        ]

    def test_symbols_and_numbers(self):
        """Test numbers and operators without separating spaces."""
        assert tokenize("23+67.89") == [
            Token.number(23.0),
            Token.operator("+"),
            Token.number(67.89),
        ]

    def test_leading_and_trailing_points(self):
        """Test literals that start or end with a decimal point."""
        assert tokenize(".5 3.") == [Token.number(0.5), Token.number(3.0)]

    def test_empty_and_blank_input(self):
        """Test that blank input has no tokens."""
        assert tokenize("") == []
        assert tokenize(" \t\n ") == []

    def test_backslash_is_not_division(self):
        """Test that backslash is an unknown symbol."""
        with pytest.raises(UnknownSymbol):
            tokenize("1 \\ 2")


class TestLexErrors:
    """Test lexical errors."""

    def test_unexpected_symbol(self):
        """Test a second decimal point in one literal."""
        with pytest.raises(UnexpectedSymbol) as exc_info:
            tokenize("1.2.3")
        assert exc_info.value.symbol == "."
        assert str(exc_info.value) == "Unexpected symbol '.'"

    def test_unknown_symbol(self):
        """Test a character outside the alphabet."""
        with pytest.raises(UnknownSymbol) as exc_info:
            tokenize("!")
        assert exc_info.value.symbol == "!"
        assert str(exc_info.value) == "Unknown symbol '!'"

    def test_tokens_before_error_are_produced(self):
        """Test that iteration yields tokens up to the first error."""
        tokenizer = Tokenizer("1 + $")
        assert next(tokenizer) == Token.number(1)
        assert next(tokenizer) == Token.operator("+")
        with pytest.raises(LexError):
            next(tokenizer)

    def test_percent_is_unknown(self):
        """Test that % is not part of the operator set."""
        with pytest.raises(UnknownSymbol):
            tokenize("5 % 2")


class TestLookahead:
    """Test peek() and next()."""

    def test_peek_does_not_consume(self):
        """Test peek followed by next returns the same token."""
        tokenizer = Tokenizer("12 + 3")
        assert tokenizer.peek() == Token.number(12)
        assert tokenizer.next() == Token.number(12)
        assert tokenizer.next() == Token.operator("+")

    def test_peek_is_idempotent(self):
        """Test repeated peeks return one token and advance the cursor once."""
        tokenizer = Tokenizer("12 + 3")
        first = tokenizer.peek()
        position = tokenizer.position
        assert tokenizer.peek() == first
        assert tokenizer.position == position == 2

        direct = Tokenizer("12 + 3")
        assert tokenizer.next() == direct.next()
        assert tokenizer.position == direct.position

    def test_peek_at_end(self):
        """Test peek and next return None once the input is exhausted."""
        tokenizer = Tokenizer("7  ")
        tokenizer.next()
        assert tokenizer.peek() is None
        assert tokenizer.peek() is None
        assert tokenizer.next() is None

    def test_peek_error_is_idempotent(self):
        """Test a peeked error is raised again without rescanning."""
        tokenizer = Tokenizer("!")
        with pytest.raises(UnknownSymbol) as first:
            tokenizer.peek()
        position = tokenizer.position
        with pytest.raises(UnknownSymbol) as second:
            tokenizer.peek()
        assert first.value == second.value
        assert tokenizer.position == position

        with pytest.raises(UnknownSymbol):
            tokenizer.next()

    def test_tokenizer_is_lazy(self):
        """Test that only the requested token is scanned."""
        tokenizer = Tokenizer("1 !")
        assert tokenizer.next() == Token.number(1)
        assert tokenizer.position == 1


class TestFormatNumber:
    """Test plain decimal rendering of values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (72.0, "72"),
            (-3.0, "-3"),
            (0.75, "0.75"),
            (-0.0, "-0"),
            (0.0, "0"),
            (1e-7, "0.0000001"),
            (1.5e20, "150000000000000000000"),
            (float("inf"), "inf"),
            (float("-inf"), "-inf"),
            (float("nan"), "NaN"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected
