from __future__ import annotations
import logging
import operator

from exact_matrix.logic.errors import DimensionMismatch, NotSquare
from exact_matrix.logic.matrix import Matrix
from exact_matrix.logic.rational import ZERO

LOG = logging.getLogger(__name__)


def _same_shape(what: str, A: Matrix, B: Matrix):
    if A.shape != B.shape:
        raise DimensionMismatch.for_shapes(f"{what} needs equal shapes", A.shape, B.shape)


def add(A: Matrix, B: Matrix) -> Matrix:
    _same_shape("A + B", A, B)
    return Matrix._wrap([[a.add(b) for a, b in zip(ra, rb)] for ra, rb in zip(A, B)])


def sub(A: Matrix, B: Matrix) -> Matrix:
    _same_shape("A - B", A, B)
    return Matrix._wrap([[a.sub(b) for a, b in zip(ra, rb)] for ra, rb in zip(A, B)])


def mul(A: Matrix, B: Matrix) -> Matrix:
    """Matrix product; each cell summed left to right over k."""
    if A.cols != B.rows:
        raise DimensionMismatch.for_shapes("A·B needs cols(A) == rows(B)", A.shape, B.shape)
    r, n = A.shape
    c = B.cols
    out = []
    for i in range(r):
        row = []
        for j in range(c):
            acc = ZERO
            for k in range(n):
                acc = acc.add(A[i, k].mul(B[k, j]))
            row.append(acc)
        out.append(row)
    return Matrix._wrap(out)


def transpose(A: Matrix) -> Matrix:
    return Matrix._wrap([A.column(j) for j in range(A.cols)])


def identity(n: int) -> Matrix:
    return Matrix.identity(n)


def power(A: Matrix, n: int) -> Matrix:
    """A**n by square-and-multiply; negative n goes through inverse(A)."""
    if not A.is_square():
        raise NotSquare.for_shape("A^n", A.shape)
    n = operator.index(n)
    if n == 0:
        return identity(A.rows)
    if n < 0:
        from exact_matrix.logic.elimination import inverse
        LOG.debug("power: negative exponent %d, inverting first", n)
        return power(inverse(A), -n)
    result = identity(A.rows)
    base = A
    exp = n
    while exp > 0:
        if exp & 1:
            result = mul(result, base)
        exp >>= 1
        if exp:
            base = mul(base, base)
    return result


__all__ = ['add', 'sub', 'mul', 'transpose', 'identity', 'power']
