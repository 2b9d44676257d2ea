"""Lexer for Algot expressions.

Splits expression text into token strings, classifies each one and
returns the tokens wrapped in a :class:`~algot.cursor.Cursor`.
Classification failures are collected as diagnostics and raised
together once the whole source has been scanned. Warnings do not
stop lexing and stay on ``Lexer.diagnostics``.
"""

from __future__ import annotations

from algot.cursor import Cursor
from algot.errors import (
    Diagnostic,
    DiagnosticLabel,
    ExpressionError,
    InvalidOperatorSymbol,
    MalformedNumericLiteral,
    Severity,
    Suggestion,
)
from algot.source import Span
from algot.tokens import OperatorKind, Token, TokenKind

_PARENS = {"(": TokenKind.LPAREN, ")": TokenKind.RPAREN}

# Typographic look-alikes of the ASCII operators.
_OPERATOR_LOOKALIKES = {
    "\u00d7": "*",  # multiplication sign
    "\u00b7": "*",  # middle dot
    "\u00f7": "/",  # division sign
    "\u2212": "-",  # minus sign
    "\u2013": "-",  # en dash
    "\u2215": "/",  # division slash
}

_OPERATOR_NOTE = "supported operators are " + " ".join(k.symbol for k in OperatorKind)


class Lexer:
    """Tokenizes Algot expression source."""

    def __init__(self, source: str, filename: str = "<stdin>", *,
                 legacy_integers: bool = False, start_line: int = 1) -> None:
        self.source = source
        self.filename = filename
        self.legacy_integers = legacy_integers
        self.pos = 0
        self.line = start_line
        self.col = 1
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []

    def lex(self) -> Cursor[Token]:
        """Tokenize the entire source and return a cursor over the tokens."""
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if ch.isspace():
                self._advance()
            elif ch in _PARENS:
                self._lex_paren()
            elif _is_word_char(ch):
                self._lex_word()
            else:
                self._lex_operator()

        if any(d.severity == Severity.ERROR for d in self.diagnostics):
            raise ExpressionError(self.diagnostics)
        return Cursor(self.tokens)

    # ── Helpers ───────────────────────────────────────────────────

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _span(self, start_line: int, start_col: int) -> Span:
        end_col = self.col - 1 if self.col > 1 else 1
        return Span(self.filename, start_line, start_col, self.line, end_col)

    def _report(self, severity: Severity, code: str, message: str, span: Span,
                label: str = "", *, notes: list[str] | None = None,
                suggestions: list[Suggestion] | None = None) -> None:
        self.diagnostics.append(
            Diagnostic(
                severity=severity,
                code=code,
                message=message,
                labels=[DiagnosticLabel(span=span, message=label)],
                notes=notes or [],
                suggestions=suggestions or [],
            )
        )

    # ── Pieces ────────────────────────────────────────────────────

    def _lex_paren(self) -> None:
        start_line, start_col = self.line, self.col
        ch = self._advance()
        span = self._span(start_line, start_col)
        self.tokens.append(Token(_PARENS[ch], ch, span))

    def _lex_operator(self) -> None:
        start_line, start_col = self.line, self.col
        ch = self._advance()
        span = self._span(start_line, start_col)
        try:
            kind = OperatorKind.classify(ch)
        except InvalidOperatorSymbol as e:
            suggestions = []
            if ch in _OPERATOR_LOOKALIKES:
                suggestions.append(
                    Suggestion("use the ASCII operator", _OPERATOR_LOOKALIKES[ch])
                )
            self._report(Severity.ERROR, e.code, str(e), span, "not an operator",
                         notes=[_OPERATOR_NOTE], suggestions=suggestions)
            return
        self.tokens.append(Token(TokenKind.OPERATOR, kind, span))

    def _lex_word(self) -> None:
        start_line, start_col = self.line, self.col
        text = []
        while self.pos < len(self.source) and _is_word_char(self.source[self.pos]):
            text.append(self._advance())
        word = ''.join(text)
        span = self._span(start_line, start_col)
        try:
            tok = Token.classify(word, legacy_integers=self.legacy_integers, span=span)
        except MalformedNumericLiteral as e:
            notes = []
            if word[-1] in 'eE' and self.source[self.pos:self.pos + 1] in ('+', '-'):
                notes.append(
                    "a signed exponent cannot be written inline; "
                    "`+` and `-` always lex as operators"
                )
            self._report(Severity.ERROR, e.code, str(e), span, "not a number",
                         notes=notes)
            return
        if self.legacy_integers and tok.kind == TokenKind.VARIABLE and word.isascii() and word.isdigit():
            self._report(
                Severity.WARNING, "W001", f"digit string {word!r} lexed as a variable",
                span, notes=["legacy integer mode is enabled"],
                suggestions=[Suggestion("write a decimal constant", f"{word}.0")],
            )
        self.tokens.append(tok)


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in '_.'


def tokenize(source: str, filename: str = "<stdin>", *,
             legacy_integers: bool = False) -> Cursor[Token]:
    """Lex ``source`` and return a cursor over its tokens."""
    return Lexer(source, filename, legacy_integers=legacy_integers).lex()
