"""Algot: numeric values, token classification and a bidirectional cursor."""

from algot.cursor import Cursor
from algot.errors import (
    CursorRangeError,
    ExpressionError,
    InvalidOperatorSymbol,
    LexError,
    MalformedNumericLiteral,
)
from algot.lexer import Lexer, tokenize
from algot.numbers import Decimal, Integer
from algot.tokens import OperatorKind, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "CursorRangeError",
    "Decimal",
    "ExpressionError",
    "Integer",
    "InvalidOperatorSymbol",
    "LexError",
    "Lexer",
    "MalformedNumericLiteral",
    "OperatorKind",
    "Token",
    "TokenKind",
    "tokenize",
]
