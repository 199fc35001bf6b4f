from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from exact_matrix.logic.config import ARROW, MINUS, TIMES
from exact_matrix.logic.errors import NotSquare, Singular, SingularAdjugateUnsupported
from exact_matrix.logic.matrix import Matrix
from exact_matrix.logic.rational import Rational, ZERO, ONE

LOG = logging.getLogger(__name__)


class StepKind(enum.Enum):
    SWAP = "swap"
    SCALE = "scale"
    COMBINE = "combine"


@dataclass(frozen=True)
class Step:
    """One elementary row operation and the matrix right after it.

    Row indices are 0-based; ``description`` uses 1-based rows as shown to
    people. ``factor`` is the pivot divided out (SCALE) or the multiple of
    ``source`` subtracted from ``target`` (COMBINE); None for SWAP.
    """
    description: str
    matrix: Matrix
    kind: StepKind
    target: int
    source: Optional[int] = None
    factor: Optional[Rational] = None


@dataclass(frozen=True)
class RrefResult:
    matrix: Matrix
    pivot_columns: Tuple[int, ...]
    steps: Tuple[Step, ...] = ()
    split: Optional[int] = None  # column where the right block starts, for [A | B]


@dataclass(frozen=True)
class InverseResult:
    inverse: Matrix
    steps: Tuple[Step, ...]


@dataclass(frozen=True)
class DeterminantResult:
    value: Rational
    steps: Tuple[Step, ...]


class _Workspace:
    """Private working copy that row operations are applied to in place."""

    def __init__(self, A: Matrix, record: bool):
        self.m = A.to_lists()
        self.steps: Optional[List[Step]] = [] if record else None

    def _log(self, description, kind, target, source=None, factor=None):
        if self.steps is not None:
            self.steps.append(Step(description, Matrix._wrap(self.m), kind, target, source, factor))

    def swap(self, r: int, i: int):
        m = self.m
        m[r], m[i] = m[i], m[r]
        self._log(f"swap row {r + 1} and row {i + 1}", StepKind.SWAP, r, i)

    def scale(self, r: int, pivot: Rational):
        self.m[r] = [x.div(pivot) for x in self.m[r]]
        self._log(f"scale row {r + 1} by {pivot.reciprocal()}", StepKind.SCALE, r, None, pivot)

    def combine(self, target: int, factor: Rational, source: int):
        src = self.m[source]
        self.m[target] = [x.sub(factor.mul(y)) for x, y in zip(self.m[target], src)]
        if factor < 0:
            op, shown = "+", factor.negate()
        else:
            op, shown = MINUS, factor
        self._log(f"row {target + 1} {ARROW} row {target + 1} {op} {shown} {TIMES} row {source + 1}",
                  StepKind.COMBINE, target, source, factor)

    def result(self) -> Matrix:
        return Matrix._wrap(self.m)

    def recorded(self) -> Tuple[Step, ...]:
        return tuple(self.steps or ())


def rref(A: Matrix, record_steps: bool = False) -> RrefResult:
    """Gauss-Jordan elimination to reduced row-echelon form.

    The pivot of each row is the first non-zero entry at or below it in the
    current column; columns without one are skipped.
    """
    ws = _Workspace(A, record_steps)
    m = ws.m
    rows, cols = A.shape
    pivots = []
    lead = 0
    r = 0
    while r < rows and lead < cols:
        i = r
        while i < rows and m[i][lead].is_zero():
            i += 1
        if i == rows:
            lead += 1
            continue
        if i != r:
            ws.swap(r, i)
        pivot = m[r][lead]
        if not pivot.is_one():
            ws.scale(r, pivot)
        for rr in range(rows):
            if rr != r and not m[rr][lead].is_zero():
                ws.combine(rr, m[rr][lead], r)
        pivots.append(lead)
        lead += 1
        r += 1
    LOG.debug("rref: %dx%d, pivot columns %s, %d steps", rows, cols, pivots,
              len(ws.steps) if ws.steps is not None else 0)
    return RrefResult(ws.result(), tuple(pivots), ws.recorded())


def rref_augmented(A: Matrix, B: Matrix) -> RrefResult:
    """Recorded RREF of [A | B]; ``split`` marks where B's columns start."""
    res = rref(A.hstack(B), record_steps=True)
    return RrefResult(res.matrix, res.pivot_columns, res.steps, split=A.cols)


def _determinant(A: Matrix, record: bool) -> DeterminantResult:
    if not A.is_square():
        raise NotSquare.for_shape("det(A)", A.shape)
    ws = _Workspace(A, record)
    m = ws.m
    n = A.rows
    negate = False
    for i in range(n):
        p = i
        while p < n and m[p][i].is_zero():
            p += 1
        if p == n:
            LOG.debug("det: column %d has no pivot, determinant is zero", i + 1)
            return DeterminantResult(ZERO, ws.recorded())
        if p != i:
            ws.swap(i, p)
            negate = not negate
        for r in range(i + 1, n):
            if not m[r][i].is_zero():
                ws.combine(r, m[r][i].div(m[i][i]), i)
    value = ONE.negate() if negate else ONE
    for i in range(n):
        value = value.mul(m[i][i])
    return DeterminantResult(value, ws.recorded())


def det(A: Matrix) -> Rational:
    return _determinant(A, False).value


def det_with_steps(A: Matrix) -> DeterminantResult:
    """Determinant plus the swaps and row combinations of the triangularization."""
    return _determinant(A, True)


def rank(A: Matrix) -> Rational:
    """Number of non-zero rows of rref(A), as an exact scalar like det."""
    reduced = rref(A).matrix
    return Rational(sum(1 for i in range(reduced.rows) if not reduced.is_zero_row(i)))


def _invert(A: Matrix, record: bool) -> InverseResult:
    if not A.is_square():
        raise NotSquare.for_shape("A^-1", A.shape)
    n = A.rows
    res = rref(A.hstack(Matrix.identity(n)), record_steps=record)
    if res.matrix.left_block(n) != Matrix.identity(n):
        left_rank = sum(1 for c in res.pivot_columns if c < n)
        raise Singular(f"matrix is not invertible (rank {left_rank} < {n})")
    return InverseResult(res.matrix.right_block(n), res.steps)


def inverse(A: Matrix) -> Matrix:
    return _invert(A, False).inverse


def inverse_with_steps(A: Matrix) -> InverseResult:
    return _invert(A, True)


def adjugate(A: Matrix) -> Matrix:
    """adj(A) = det(A) * A^-1; only invertible A is supported."""
    d = det(A)
    if d.is_zero():
        raise SingularAdjugateUnsupported("det(A) = 0: adjugate via the inverse is undefined")
    return inverse(A).scale(d)


__all__ = [
    'StepKind', 'Step', 'RrefResult', 'InverseResult', 'DeterminantResult',
    'rref', 'rref_augmented', 'det', 'det_with_steps', 'rank',
    'inverse', 'inverse_with_steps', 'adjugate',
]
