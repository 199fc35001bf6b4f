from __future__ import annotations


class MatrixError(Exception):
    """Base class for every failure raised by the exact matrix engine."""


class ParseError(MatrixError, ValueError):
    """Malformed numeric literal or empty token during ingestion."""


class DivisionByZero(MatrixError, ZeroDivisionError):
    """Zero denominator constructed, or division by a zero Rational."""


class DimensionMismatch(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation."""

    @classmethod
    def for_shapes(cls, what: str, left, right) -> "DimensionMismatch":
        return cls(f"{what}: {left[0]}x{left[1]} vs {right[0]}x{right[1]}")


class NotSquare(MatrixError, ValueError):
    """Square-only operation invoked on a non-square matrix."""

    @classmethod
    def for_shape(cls, what: str, shape) -> "NotSquare":
        return cls(f"{what} requires a square matrix, got {shape[0]}x{shape[1]}")


class Singular(MatrixError, ArithmeticError):
    """Inverse requested on a non-invertible matrix."""


class SingularAdjugateUnsupported(MatrixError, ArithmeticError):
    """Adjugate requested on a singular matrix.

    adj(A) exists for singular A as well (cofactors), but it is computed here
    as det(A) * inverse(A), which needs det(A) != 0.
    """


__all__ = [
    'MatrixError', 'ParseError', 'DivisionByZero', 'DimensionMismatch',
    'NotSquare', 'Singular', 'SingularAdjugateUnsupported',
]
