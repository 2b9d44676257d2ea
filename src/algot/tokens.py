"""Operator and token classification for Algot expressions."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from algot.errors import InvalidOperatorSymbol, MalformedNumericLiteral
from algot.numbers import DECIMAL_LITERAL, Number, format_float

if TYPE_CHECKING:
    from algot.source import Span


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    @classmethod
    def classify(cls, symbol: str) -> OperatorKind:
        """Map a single operator character to its kind.

        Raises InvalidOperatorSymbol for anything outside ``+ - * / % ^``.
        """
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOperatorSymbol(symbol) from None

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, lhs: Number, rhs: Number) -> Number:
        """Evaluate ``lhs <op> rhs`` on two values of the same kind."""
        return _OPERATIONS[self](lhs, rhs)


_OPERATIONS = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUB: operator.sub,
    OperatorKind.MUL: operator.mul,
    OperatorKind.DIV: operator.truediv,
    OperatorKind.MOD: operator.mod,
    OperatorKind.POW: operator.pow,
}

OPERATOR_SYMBOLS: frozenset[str] = frozenset(kind.value for kind in OperatorKind)


class TokenKind(Enum):
    LPAREN = auto()
    RPAREN = auto()
    CONSTANT = auto()
    VARIABLE = auto()
    OPERATOR = auto()


@dataclass(frozen=True)
class Token:
    """One classified lexical unit.

    ``value`` is the payload for the kind: a float for CONSTANT, the name
    for VARIABLE, an OperatorKind for OPERATOR and the paren text for
    LPAREN/RPAREN. ``span`` does not take part in equality.
    """

    kind: TokenKind
    value: float | str | OperatorKind
    span: Span | None = field(default=None, compare=False)

    @classmethod
    def classify(cls, raw: str, *, legacy_integers: bool = False,
                 span: Span | None = None) -> Token:
        """Classify one token string. First match wins:

        1. ``(`` and ``)``
        2. a single operator symbol
        3. text containing ``.`` parsed as a float
        4. a run of ASCII digits as a float, unless ``legacy_integers``
        5. anything else as a variable name

        Raises MalformedNumericLiteral when rule 3 applies but the text
        does not parse.
        """
        if raw == "(":
            return cls(TokenKind.LPAREN, raw, span)
        if raw == ")":
            return cls(TokenKind.RPAREN, raw, span)
        if raw in OPERATOR_SYMBOLS:
            return cls(TokenKind.OPERATOR, OperatorKind.classify(raw), span)
        if "." in raw:
            if not DECIMAL_LITERAL.fullmatch(raw):
                raise MalformedNumericLiteral(raw)
            return cls(TokenKind.CONSTANT, float(raw), span)
        if not legacy_integers and raw.isascii() and raw.isdigit():
            return cls(TokenKind.CONSTANT, float(raw), span)
        return cls(TokenKind.VARIABLE, raw, span)

    @classmethod
    def constant(cls, value: float) -> Token:
        return cls(TokenKind.CONSTANT, float(value))

    @classmethod
    def variable(cls, name: str) -> Token:
        return cls(TokenKind.VARIABLE, name)

    @classmethod
    def operator(cls, kind: OperatorKind) -> Token:
        return cls(TokenKind.OPERATOR, kind)

    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LPAREN, TokenKind.RPAREN)

    def is_operand(self) -> bool:
        return self.kind in (TokenKind.CONSTANT, TokenKind.VARIABLE)

    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    def __str__(self) -> str:
        if self.kind == TokenKind.CONSTANT:
            return format_float(self.value)
        if self.kind == TokenKind.OPERATOR:
            return self.value.symbol
        return self.value
