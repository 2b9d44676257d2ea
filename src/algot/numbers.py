"""Exact numeric value wrappers.

``Decimal`` wraps a 64-bit float and ``Integer`` a signed 64-bit integer.
Both are immutable; arithmetic returns a new value of the same kind and
mixing kinds is a ``TypeError``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal as _Exact

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Float literal grammar accepted by the classifier; underscores and
# surrounding whitespace are rejected, and only ASCII digits count.
DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)

_SPECIAL_FLOATS = {"inf": math.inf, "-inf": -math.inf, "NaN": math.nan}


def format_float(value: float) -> str:
    """Render a float as a bare literal: shortest round-trip digits,
    no exponent, no trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text:
        text = format(_Exact(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _check_int64(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise OverflowError(f"integer {value} does not fit in 64 bits")
    return value


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _float_div(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _float_pow(base: float, exp: float) -> float:
    try:
        return math.pow(base, exp)
    except OverflowError:
        if base < 0 and exp.is_integer() and int(exp) % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # 0 to a negative power, or a negative base to a fractional power
        if base != 0:
            return math.nan
        if exp.is_integer() and int(exp) % 2 == 1:
            return math.copysign(math.inf, base)
        return math.inf


@dataclass(frozen=True)
class Decimal:
    """A 64-bit floating point value compared exactly."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Decimal expects a float, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, text: str) -> Decimal:
        if text in _SPECIAL_FLOATS:
            return cls(_SPECIAL_FLOATS[text])
        if not DECIMAL_LITERAL.fullmatch(text):
            raise ValueError(f"not a decimal literal: {text!r}")
        return cls(float(text))

    def __str__(self) -> str:
        return format_float(self.value)

    def __float__(self) -> float:
        return self.value

    def __neg__(self) -> Decimal:
        return Decimal(-self.value)

    def __add__(self, other: object) -> Decimal:
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal(self.value + other.value)

    def __sub__(self, other: object) -> Decimal:
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal(self.value - other.value)

    def __mul__(self, other: object) -> Decimal:
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal(self.value * other.value)

    def __truediv__(self, other: object) -> Decimal:
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal(_float_div(self.value, other.value))

    def __mod__(self, other: object) -> Decimal:
        if not isinstance(other, Decimal):
            return NotImplemented
        if other.value == 0 or math.isinf(self.value):
            return Decimal(math.nan)
        return Decimal(math.fmod(self.value, other.value))

    def __pow__(self, other: object) -> Decimal:
        if not isinstance(other, Decimal):
            return NotImplemented
        return Decimal(_float_pow(self.value, other.value))


@dataclass(frozen=True)
class Integer:
    """A signed 64-bit integer value.

    Division truncates toward zero and the remainder takes the sign of
    the dividend. Results outside the 64-bit range raise ``OverflowError``.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer expects an int, got {type(self.value).__name__}")
        _check_int64(self.value)

    @classmethod
    def parse(cls, text: str) -> Integer:
        if not INTEGER_LITERAL.fullmatch(text):
            raise ValueError(f"not an integer literal: {text!r}")
        return cls(int(text))

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __neg__(self) -> Integer:
        return Integer(-self.value)

    def __add__(self, other: object) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer(self.value + other.value)

    def __sub__(self, other: object) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer(self.value - other.value)

    def __mul__(self, other: object) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer(self.value * other.value)

    def __truediv__(self, other: object) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer(_trunc_div(self.value, other.value))

    def __mod__(self, other: object) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        return Integer(self.value - other.value * _trunc_div(self.value, other.value))

    def __pow__(self, other: object) -> Integer:
        if not isinstance(other, Integer):
            return NotImplemented
        base, exp = self.value, other.value
        if exp < 0:
            raise ValueError("negative exponent for Integer")
        if abs(base) > 1 and exp >= 64:
            raise OverflowError(f"integer {base}^{exp} does not fit in 64 bits")
        return Integer(base**exp)


Number = Decimal | Integer
