from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple

import sympy

from exact_matrix.logic.config import PARAMETER_PREFIX, VARIABLE_PREFIX
from exact_matrix.logic.elimination import Step, det, rref
from exact_matrix.logic.errors import DimensionMismatch, NotSquare, Singular
from exact_matrix.logic.matrix import Matrix
from exact_matrix.logic.rational import Rational, ZERO, ONE

LOG = logging.getLogger(__name__)


class SolveStatus(enum.Enum):
    UNIQUE = "unique"
    INCONSISTENT = "inconsistent"
    INFINITE = "infinite"


@dataclass(frozen=True)
class SolveResult:
    """Common part of every outcome of ``solve``: the RREF of [A | B] and how it was reached."""
    status: ClassVar[SolveStatus]
    rref: Matrix
    pivot_columns: Tuple[int, ...]
    steps: Tuple[Step, ...]


@dataclass(frozen=True)
class UniqueSolution(SolveResult):
    status: ClassVar[SolveStatus] = SolveStatus.UNIQUE
    solution: Matrix


@dataclass(frozen=True)
class InconsistentSystem(SolveResult):
    status: ClassVar[SolveStatus] = SolveStatus.INCONSISTENT
    # 0-based rows of the RREF reading 0 = c with c != 0
    contradictions: Tuple[int, ...]


@dataclass(frozen=True)
class ParametricSolution:
    """x = particular + sum(t_k * directions[k]) for free parameters t_k."""
    free_columns: Tuple[int, ...]
    parameters: Tuple[sympy.Symbol, ...]
    particular: Matrix
    directions: Tuple[Matrix, ...]

    @property
    def variables(self) -> Tuple[sympy.Symbol, ...]:
        return sympy.symbols(f"{VARIABLE_PREFIX}1:{self.particular.rows + 1}")

    @property
    def expressions(self) -> Tuple[sympy.Expr, ...]:
        out = []
        for j in range(self.particular.rows):
            expr = self.particular[j, 0].to_sympy()
            for t, d in zip(self.parameters, self.directions):
                if not d[j, 0].is_zero():
                    expr += d[j, 0].to_sympy() * t
            out.append(expr)
        return tuple(out)

    def evaluate(self, values: Sequence) -> Matrix:
        """Exact solution vector for concrete parameter values."""
        if len(values) != len(self.parameters):
            raise DimensionMismatch(
                f"expected {len(self.parameters)} parameter values, got {len(values)}")
        x = self.particular
        for v, d in zip(values, self.directions):
            x = x + d.scale(v)
        return x


@dataclass(frozen=True)
class InfiniteSolutions(SolveResult):
    status: ClassVar[SolveStatus] = SolveStatus.INFINITE
    free_columns: Tuple[int, ...]
    # None when B has more than one column
    parameterization: Optional[ParametricSolution]


def solve(A: Matrix, B: Matrix) -> SolveResult:
    """Solve A·X = B by Gauss-Jordan elimination of [A | B].

    Classified as inconsistent if some row reads 0 = c (c != 0), else as
    infinite if a column of A has no pivot, else unique.
    """
    if A.rows != B.rows:
        raise DimensionMismatch.for_shapes("solve needs rows(A) == rows(B)", A.shape, B.shape)
    n = A.cols
    res = rref(A.hstack(B), record_steps=True)
    M = res.matrix
    bad = tuple(i for i in range(M.rows) if M.is_zero_row(i, n) and not M.is_zero_row(i))
    if bad:
        LOG.info("solve: inconsistent system, contradiction in row(s) %s", [i + 1 for i in bad])
        return InconsistentSystem(M, res.pivot_columns, res.steps, bad)
    if len(res.pivot_columns) < n:
        free = tuple(c for c in range(n) if c not in res.pivot_columns)
        LOG.info("solve: infinitely many solutions, %d free variable(s)", len(free))
        param = parameterize(M, n, res.pivot_columns) if B.cols == 1 else None
        return InfiniteSolutions(M, res.pivot_columns, res.steps, free, param)
    LOG.info("solve: unique solution")
    return UniqueSolution(M, res.pivot_columns, res.steps, M.right_block(n))


def parameterize(reduced: Matrix, n: int, pivot_columns: Sequence[int]) -> ParametricSolution:
    """Express the solution set of a consistent reduced system [R | b] in free parameters.

    ``reduced`` holds n coefficient columns followed by a single constant column.
    """
    if reduced.cols != n + 1:
        raise DimensionMismatch("parameterization needs exactly one right-hand column")
    pivots = list(pivot_columns)
    if len(pivots) > reduced.rows or any(not 0 <= pc < n for pc in pivots) or pivots != sorted(set(pivots)):
        raise DimensionMismatch(f"pivot columns {pivots} do not fit {n} unknowns in {reduced.rows} rows")
    free = [c for c in range(n) if c not in pivot_columns]
    params = tuple(sympy.Symbol(f"{PARAMETER_PREFIX}{k + 1}") for k in range(len(free)))
    particular = [ZERO] * n
    directions = [[ZERO] * n for _ in free]
    for k, fc in enumerate(free):
        directions[k][fc] = ONE
    for r, pc in enumerate(pivot_columns):
        row = reduced.row(r)
        particular[pc] = row[n]
        for k, fc in enumerate(free):
            if not row[fc].is_zero():
                directions[k][pc] = row[fc].negate()
    return ParametricSolution(
        tuple(free), params, Matrix.column_vector(particular),
        tuple(Matrix.column_vector(d) for d in directions))


@dataclass(frozen=True)
class CramerResult:
    solution: Matrix
    determinant: Rational
    column_determinants: Tuple[Rational, ...]


def cramer(A: Matrix, b: Matrix) -> CramerResult:
    """Solve A·x = b by Cramer's rule: x_i = det(A_i) / det(A), A_i having b as column i."""
    if not A.is_square():
        raise NotSquare.for_shape("Cramer's rule", A.shape)
    if b.cols != 1 or b.rows != A.rows:
        raise DimensionMismatch.for_shapes("b must be a single column with rows(A) entries",
                                           A.shape, b.shape)
    d = det(A)
    if d.is_zero():
        raise Singular("det(A) = 0: Cramer's rule needs a unique solution")
    rhs = b.column(0)
    col_dets = []
    for idx in range(A.cols):
        Ai = Matrix._wrap([row[:idx] + (rhs[i],) + row[idx + 1:] for i, row in enumerate(A)])
        col_dets.append(det(Ai))
    solution = Matrix.column_vector(x.div(d) for x in col_dets)
    return CramerResult(solution, d, tuple(col_dets))


__all__ = [
    'SolveStatus', 'SolveResult', 'UniqueSolution', 'InconsistentSystem',
    'InfiniteSolutions', 'ParametricSolution', 'CramerResult',
    'solve', 'parameterize', 'cramer',
]
