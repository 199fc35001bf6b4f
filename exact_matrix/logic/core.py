from __future__ import annotations

from exact_matrix.logic.errors import (
    MatrixError, ParseError, DivisionByZero, DimensionMismatch,
    NotSquare, Singular, SingularAdjugateUnsupported,
)
from exact_matrix.logic.rational import Rational
from exact_matrix.logic.matrix import Matrix
from exact_matrix.logic.parsing import parse_rational, parse_matrix, parse_vector
from exact_matrix.logic.ops import add, sub, mul, transpose, identity, power
from exact_matrix.logic.elimination import (
    Step, StepKind, RrefResult, InverseResult, DeterminantResult,
    rref, rref_augmented, det, det_with_steps, rank,
    inverse, inverse_with_steps, adjugate,
)
from exact_matrix.logic.solver import (
    SolveStatus, SolveResult, UniqueSolution, InconsistentSystem, InfiniteSolutions,
    ParametricSolution, CramerResult, solve, parameterize, cramer,
)

__all__ = [
    'MatrixError', 'ParseError', 'DivisionByZero', 'DimensionMismatch',
    'NotSquare', 'Singular', 'SingularAdjugateUnsupported',
    'Rational', 'Matrix',
    'parse_rational', 'parse_matrix', 'parse_vector',
    'add', 'sub', 'mul', 'transpose', 'identity', 'power',
    'Step', 'StepKind', 'RrefResult', 'InverseResult', 'DeterminantResult',
    'rref', 'rref_augmented', 'det', 'det_with_steps', 'rank',
    'inverse', 'inverse_with_steps', 'adjugate',
    'SolveStatus', 'SolveResult', 'UniqueSolution', 'InconsistentSystem', 'InfiniteSolutions',
    'ParametricSolution', 'CramerResult', 'solve', 'parameterize', 'cramer',
]
