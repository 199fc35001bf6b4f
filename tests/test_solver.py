"""Linear system classification, parameterization and Cramer's rule."""
import logging

import pytest
import sympy

from exact_matrix.logic.core import (
    Matrix, Rational, DimensionMismatch, NotSquare, Singular,
    SolveStatus, UniqueSolution, InconsistentSystem, InfiniteSolutions,
    solve, parameterize, cramer, mul, rref,
)


def test_unique():
    A = Matrix([[2, 1], [1, 3]])
    B = Matrix([[3], [5]])
    res = solve(A, B)
    assert isinstance(res, UniqueSolution)
    assert res.status is SolveStatus.UNIQUE
    assert res.solution == Matrix([["4/5"], ["7/5"]])
    assert mul(A, res.solution) == B
    assert res.pivot_columns == (0, 1)
    assert res.steps
    assert res.steps[-1].matrix == res.rref


def test_unique_multiple_right_hand_sides():
    A = Matrix([[1, 2], [3, 4]])
    B = Matrix([[1, 0], [0, 1]])
    res = solve(A, B)
    assert isinstance(res, UniqueSolution)
    assert res.solution == Matrix([[-2, 1], ["3/2", "-1/2"]])


def test_infinite_scenario():
    res = solve(Matrix([[1, 1], [2, 2]]), Matrix([[3], [6]]))
    assert isinstance(res, InfiniteSolutions)
    assert res.status is SolveStatus.INFINITE
    assert res.free_columns == (1,)
    param = res.parameterization
    assert param.free_columns == (1,)
    t = sympy.Symbol("t1")
    assert param.parameters == (t,)
    assert param.expressions == (3 - t, t)
    assert param.variables == sympy.symbols("x1 x2")
    assert param.particular == Matrix([[3], [0]])
    assert param.directions == (Matrix([[-1], [1]]),)


def test_parameterization_satisfies_system():
    A = Matrix([[1, 2, 0, 3], [0, 0, 1, -1], [1, 2, 1, 2]])
    B = Matrix([[4], [1], [5]])
    res = solve(A, B)
    assert isinstance(res, InfiniteSolutions)
    assert res.free_columns == (1, 3)
    param = res.parameterization
    t1, t2 = param.parameters
    assert param.expressions == (4 - 2 * t1 - 3 * t2, t1, 1 + t2, t2)
    for values in ([0, 0], [1, -2], [Rational(1, 3), 7]):
        x = param.evaluate(values)
        assert mul(A, x) == B
    with pytest.raises(DimensionMismatch):
        param.evaluate([1])


def test_infinite_multiple_right_hand_sides():
    res = solve(Matrix([[1, 1], [2, 2]]), Matrix([[1, 2], [2, 4]]))
    assert isinstance(res, InfiniteSolutions)
    assert res.parameterization is None
    assert res.free_columns == (1,)
    assert res.rref == Matrix([[1, 1, 1, 2], [0, 0, 0, 0]])


def test_inconsistent_scenario():
    res = solve(Matrix([[1, 0], [0, 0]]), Matrix([[1], [1]]))
    assert isinstance(res, InconsistentSystem)
    assert res.status is SolveStatus.INCONSISTENT
    assert res.contradictions == (1,)
    assert res.pivot_columns == (0, 2)


def test_inconsistent_wins_over_free_variables():
    # 3 unknowns, 2 equations that contradict each other
    res = solve(Matrix([[1, 1, 1], [2, 2, 2]]), Matrix([[1], [3]]))
    assert isinstance(res, InconsistentSystem)


def test_solve_dimension_mismatch():
    with pytest.raises(DimensionMismatch):
        solve(Matrix([[1, 2], [3, 4]]), Matrix([[1], [2], [3]]))


def test_parameterize_needs_single_column():
    reduced = rref(Matrix([[1, 1, 1, 2], [2, 2, 2, 4]]))
    with pytest.raises(DimensionMismatch):
        parameterize(reduced.matrix, 2, reduced.pivot_columns)


def test_cramer():
    res = cramer(Matrix([[2, 1], [1, 3]]), Matrix([[3], [5]]))
    assert res.determinant == 5
    assert res.column_determinants == (Rational(4), Rational(7))
    assert res.solution == Matrix([["4/5"], ["7/5"]])


def test_cramer_agrees_with_solve():
    A = Matrix([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
    b = Matrix([[1], ["1/2"], [-3]])
    assert cramer(A, b).solution == solve(A, b).solution


def test_cramer_errors():
    with pytest.raises(NotSquare):
        cramer(Matrix([[1, 2, 3]]), Matrix([[1]]))
    with pytest.raises(DimensionMismatch):
        cramer(Matrix([[1, 0], [0, 1]]), Matrix([[1, 2], [3, 4]]))
    with pytest.raises(Singular):
        cramer(Matrix([[1, 2], [2, 4]]), Matrix([[1], [2]]))


def test_solve_logs_classification(caplog):
    caplog.set_level(logging.INFO, logger="exact_matrix.logic.solver")
    solve(Matrix([[1, 0], [0, 0]]), Matrix([[1], [1]]))
    assert "inconsistent" in caplog.text


def test_solve_quiet_when_logging_disabled(logging_disabled, caplog):
    caplog.set_level(logging.INFO, logger="exact_matrix.logic.solver")
    solve(Matrix([[1, 0], [0, 1]]), Matrix([[1], [1]]))
    assert caplog.records == []


def test_parameterize_rejects_out_of_range_pivots():
    # RREF of an inconsistent system: the second pivot sits in the constant column
    reduced = rref(Matrix([[1, 0, 1], [0, 0, 1]]))
    assert reduced.pivot_columns == (0, 2)
    with pytest.raises(DimensionMismatch):
        parameterize(reduced.matrix, 2, reduced.pivot_columns)
    with pytest.raises(DimensionMismatch):
        parameterize(reduced.matrix, 2, (1, 0))
