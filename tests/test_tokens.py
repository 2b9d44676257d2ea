"""Tests for operator and token classification."""

from __future__ import annotations

import pytest

from algot.errors import InvalidOperatorSymbol, LexError, MalformedNumericLiteral
from algot.numbers import Decimal, Integer
from algot.source import Span
from algot.tokens import OperatorKind, Token, TokenKind


class TestOperatorKind:
    def test_classify_every_symbol(self):
        expected = {
            "+": OperatorKind.ADD,
            "-": OperatorKind.SUB,
            "*": OperatorKind.MUL,
            "/": OperatorKind.DIV,
            "%": OperatorKind.MOD,
            "^": OperatorKind.POW,
        }
        for symbol, kind in expected.items():
            assert OperatorKind.classify(symbol) is kind
            assert kind.symbol == symbol

    def test_classify_invalid(self):
        for symbol in ["_", "=", "a", "1", "", "++", "**"]:
            with pytest.raises(InvalidOperatorSymbol) as exc:
                OperatorKind.classify(symbol)
            assert exc.value.symbol == symbol

    def test_invalid_is_recoverable_lex_error(self):
        with pytest.raises(LexError):
            OperatorKind.classify("$")
        with pytest.raises(ValueError):
            OperatorKind.classify("$")

    def test_apply(self):
        assert OperatorKind.ADD.apply(Integer(2), Integer(3)) == Integer(5)
        assert OperatorKind.MOD.apply(Integer(7), Integer(4)) == Integer(3)
        assert OperatorKind.DIV.apply(Decimal(1.0), Decimal(4.0)) == Decimal(0.25)
        assert OperatorKind.POW.apply(Decimal(2.0), Decimal(0.5)) == Decimal(2.0 ** 0.5)


class TestTokenClassify:
    def test_parens(self):
        assert Token.classify("(").kind == TokenKind.LPAREN
        assert Token.classify(")").kind == TokenKind.RPAREN

    def test_operator(self):
        assert Token.classify("+") == Token.operator(OperatorKind.ADD)
        assert Token.classify("^") == Token.operator(OperatorKind.POW)

    def test_decimal_constant(self):
        assert Token.classify("3.14") == Token.constant(3.14)
        assert Token.classify(".5") == Token.constant(0.5)
        assert Token.classify("2.") == Token.constant(2.0)
        assert Token.classify("1.5e3") == Token.constant(1500.0)

    def test_variable(self):
        assert Token.classify("abc") == Token.variable("abc")
        assert Token.classify("x_1") == Token.variable("x_1")

    def test_integer_literal_is_constant(self):
        tok = Token.classify("3")
        assert tok == Token(TokenKind.CONSTANT, 3.0)
        assert isinstance(tok.value, float)

    def test_integer_literal_legacy_is_variable(self):
        assert Token.classify("3", legacy_integers=True) == Token.variable("3")

    def test_legacy_flag_leaves_decimals_alone(self):
        assert Token.classify("3.0", legacy_integers=True) == Token.constant(3.0)

    def test_non_ascii_digits_are_variables(self):
        assert Token.classify("٣").kind == TokenKind.VARIABLE

    def test_non_ascii_digit_decimal_is_malformed(self):
        for raw in ["\u0661.\u0665", "1.\u0665", "\uff11.5"]:
            with pytest.raises(MalformedNumericLiteral):
                Token.classify(raw)

    def test_malformed_numeric_literal(self):
        for raw in ["1.2.3", "a.b", "1_0.5", ".", "1.5x"]:
            with pytest.raises(MalformedNumericLiteral) as exc:
                Token.classify(raw)
            assert exc.value.text == raw

    def test_span_not_part_of_equality(self):
        span = Span("<test>", 1, 1, 1, 3)
        tok = Token.classify("abc", span=span)
        assert tok.span == span
        assert tok == Token.variable("abc")


class TestTokenHelpers:
    def test_predicates(self):
        assert Token.classify("(").is_paren()
        assert Token.classify("x").is_operand()
        assert Token.classify("1.5").is_operand()
        assert Token.classify("*").is_operator()
        assert not Token.classify("x").is_operator()

    def test_str(self):
        assert str(Token.classify("(")) == "("
        assert str(Token.classify("2.50")) == "2.5"
        assert str(Token.classify("4")) == "4"
        assert str(Token.classify("%")) == "%"
        assert str(Token.classify("rate")) == "rate"
