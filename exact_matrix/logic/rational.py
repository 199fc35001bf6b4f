from __future__ import annotations
import numbers
import operator
import re
from fractions import Fraction

import sympy

from exact_matrix.logic.errors import DivisionByZero, ParseError

_INT = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"([+-]?)(\d*)\.(\d*)")


class Rational:
    """Exact fraction n/d, a thin wrapper around ``sympy.Rational``.

    sympy keeps the value reduced with d > 0 (zero is 0/1); the wrapper adds
    the zero-denominator checks and the engine's method names. Instances are
    never modified, every operation returns a new value.
    """

    __slots__ = ("_value",)

    def __init__(self, numerator: int = 0, denominator: int = 1):
        n = operator.index(numerator)
        d = operator.index(denominator)
        if d == 0:
            raise DivisionByZero(f"zero denominator in {n}/{d}")
        self._value = sympy.Rational(n, d)

    @classmethod
    def _of(cls, value: sympy.Rational) -> Rational:
        r = cls.__new__(cls)
        r._value = value
        return r

    @classmethod
    def from_integer_pair(cls, n: int, d: int) -> Rational:
        return cls(n, d)

    @classmethod
    def zero(cls) -> Rational:
        return cls(0, 1)

    @classmethod
    def one(cls) -> Rational:
        return cls(1, 1)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read an integer ("-12"), decimal ("3.1400", ".5") or fraction ("7/-2") literal."""
        s = text.strip()
        if not s:
            raise ParseError("empty numeric literal")
        if "/" in s:
            parts = [p.strip() for p in s.split("/")]
            if len(parts) != 2 or not all(_INT.fullmatch(p) for p in parts):
                raise ParseError(f"malformed fraction: {s!r}")
            return cls(int(parts[0]), int(parts[1]))
        if "." in s:
            m = _DECIMAL.fullmatch(s)
            if m is None or not (m.group(2) or m.group(3)):
                raise ParseError(f"malformed decimal: {s!r}")
            sign, whole, frac = m.groups()
            num = int((whole or "0") + frac)
            return cls(-num if sign == "-" else num, 10 ** len(frac))
        if not _INT.fullmatch(s):
            raise ParseError(f"not a number: {s!r}")
        return cls(int(s), 1)

    @classmethod
    def coerce(cls, value) -> Rational:
        r = _operand(value)
        if r is not None:
            return r
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"cannot use {type(value).__name__} as an exact rational")

    @property
    def numerator(self) -> int:
        return int(self._value.p)

    @property
    def denominator(self) -> int:
        return int(self._value.q)

    def is_zero(self) -> bool:
        return self._value.is_zero

    def is_one(self) -> bool:
        return self._value == 1

    def is_integer(self) -> bool:
        return self._value.q == 1

    # Arithmetic

    def add(self, other: Rational) -> Rational:
        return Rational._of(self._value + other._value)

    def sub(self, other: Rational) -> Rational:
        return Rational._of(self._value - other._value)

    def mul(self, other: Rational) -> Rational:
        return Rational._of(self._value * other._value)

    def div(self, other: Rational) -> Rational:
        if other._value.is_zero:
            raise DivisionByZero(f"division of {self} by zero")
        return Rational._of(self._value / other._value)

    def negate(self) -> Rational:
        return Rational._of(-self._value)

    def reciprocal(self) -> Rational:
        return Rational.one().div(self)

    def __add__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _operand(other)
        return NotImplemented if other is None else other.div(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational._of(abs(self._value))

    # Comparison: exact operands through sympy, floats by value through Fraction

    def _compare(self, other, op):
        r = _operand(other)
        if r is not None:
            return bool(op(self._value, r._value))
        if isinstance(other, float):
            return op(self.to_fraction(), other)
        return NotImplemented

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __hash__(self):
        # same hash as an equal int or Fraction, since == accepts both
        return hash(self.to_fraction())

    def __bool__(self):
        return not self._value.is_zero

    def __float__(self):
        return float(self._value)

    # Conversion

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_sympy(self) -> sympy.Rational:
        return self._value

    def _sympy_(self):
        return self._value

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"Rational({self.numerator}, {self.denominator})"


def _operand(value):
    # Exact operands: Rationals, any integral (int, numpy integers), Fractions, sympy rationals.
    if isinstance(value, Rational):
        return value
    if isinstance(value, sympy.Rational):
        return Rational._of(value)
    if isinstance(value, numbers.Integral):
        return Rational(operator.index(value), 1)
    if isinstance(value, Fraction):
        return Rational(value.numerator, value.denominator)
    return None


ZERO = Rational(0, 1)
ONE = Rational(1, 1)

__all__ = ['Rational', 'ZERO', 'ONE']
