from __future__ import annotations
from typing import Iterable, Sequence, Tuple

import numpy as np
from sympy import Matrix as SMatrix

from exact_matrix.logic.errors import DimensionMismatch, ParseError
from exact_matrix.logic.rational import Rational, ZERO, ONE

Shape = Tuple[int, int]


class Matrix:
    """Immutable rectangular matrix of Rational cells.

    Rows are stored as tuples; nothing ever writes into them after
    construction. Operations that transform a matrix work on a private list
    copy (see ``to_lists``) and wrap the outcome in a new Matrix.
    """

    __slots__ = ("_rows", "_shape")

    def __init__(self, rows: Iterable[Iterable]):
        data = tuple(tuple(Rational.coerce(x) for x in row) for row in rows)
        if not data:
            raise DimensionMismatch("a matrix needs at least one row")
        width = len(data[0])
        if width == 0:
            raise DimensionMismatch("a matrix needs at least one column")
        for i, row in enumerate(data):
            if len(row) != width:
                raise DimensionMismatch(
                    f"row {i + 1} has {len(row)} entries, expected {width}")
        self._rows = data
        self._shape = (len(data), width)

    @classmethod
    def _wrap(cls, rows: Sequence[Sequence[Rational]]) -> Matrix:
        # Rows already hold Rationals and are rectangular.
        m = cls.__new__(cls)
        m._rows = tuple(tuple(row) for row in rows)
        m._shape = (len(m._rows), len(m._rows[0]))
        return m

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        if rows < 1 or cols < 1:
            raise DimensionMismatch(f"invalid shape {rows}x{cols}")
        return cls._wrap([[ZERO] * cols for _ in range(rows)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        if n < 1:
            raise DimensionMismatch(f"identity size must be at least 1, got {n}")
        return cls._wrap([[ONE if i == j else ZERO for j in range(n)] for i in range(n)])

    @classmethod
    def column_vector(cls, values: Iterable) -> Matrix:
        return cls([[v] for v in values])

    # numpy / sympy interchange

    @classmethod
    def from_array(cls, arr) -> Matrix:
        """Build from a 2-D array-like; float cells are read as their shortest decimal."""
        a = np.asarray(arr)
        if a.ndim != 2:
            raise DimensionMismatch(f"expected a 2-D array, got {a.ndim}-D")
        return cls([[_array_cell(x) for x in row] for row in a.tolist()])

    def to_array(self) -> np.ndarray:
        out = np.empty(self._shape, dtype=object)
        for i, row in enumerate(self._rows):
            for j, x in enumerate(row):
                out[i, j] = x
        return out

    def to_float_array(self) -> np.ndarray:
        return np.array([[float(x) for x in row] for row in self._rows], dtype=float)

    def to_sympy(self) -> SMatrix:
        return SMatrix([[x.to_sympy() for x in row] for row in self._rows])

    # Shape and access

    @property
    def rows(self) -> int:
        return self._shape[0]

    @property
    def cols(self) -> int:
        return self._shape[1]

    @property
    def shape(self) -> Shape:
        return self._shape

    def is_square(self) -> bool:
        return self._shape[0] == self._shape[1]

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self._rows[key]

    def row(self, i: int) -> Tuple[Rational, ...]:
        return self._rows[i]

    def column(self, j: int) -> Tuple[Rational, ...]:
        return tuple(row[j] for row in self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __len__(self):
        return self._shape[0]

    def to_lists(self) -> list:
        """Fresh list-of-lists copy, safe for in-place row operations."""
        return [list(row) for row in self._rows]

    def is_zero_row(self, i: int, upto: int = None) -> bool:
        row = self._rows[i] if upto is None else self._rows[i][:upto]
        return all(x.is_zero() for x in row)

    # Block helpers

    def hstack(self, other: Matrix) -> Matrix:
        if self.rows != other.rows:
            raise DimensionMismatch.for_shapes("augmentation needs equal row counts",
                                               self.shape, other.shape)
        return Matrix._wrap([a + b for a, b in zip(self._rows, other._rows)])

    def left_block(self, k: int) -> Matrix:
        if not 0 < k <= self.cols:
            raise DimensionMismatch(f"cannot take {k} columns of a {self.rows}x{self.cols} matrix")
        return Matrix._wrap([row[:k] for row in self._rows])

    def right_block(self, k: int) -> Matrix:
        """Columns k..end."""
        if not 0 <= k < self.cols:
            raise DimensionMismatch(f"no columns right of {k} in a {self.rows}x{self.cols} matrix")
        return Matrix._wrap([row[k:] for row in self._rows])

    def scale(self, factor) -> Matrix:
        c = Rational.coerce(factor)
        return Matrix._wrap([[x.mul(c) for x in row] for row in self._rows])

    # Operators delegate to ops

    def __add__(self, other):
        from exact_matrix.logic import ops
        return ops.add(self, other) if isinstance(other, Matrix) else NotImplemented

    def __sub__(self, other):
        from exact_matrix.logic import ops
        return ops.sub(self, other) if isinstance(other, Matrix) else NotImplemented

    def __matmul__(self, other):
        from exact_matrix.logic import ops
        return ops.mul(self, other) if isinstance(other, Matrix) else NotImplemented

    def __pow__(self, n):
        from exact_matrix.logic import ops
        return ops.power(self, n)

    def __neg__(self):
        return Matrix._wrap([[x.negate() for x in row] for row in self._rows])

    # Value semantics

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return "[" + "\n ".join("[" + ", ".join(str(x) for x in row) + "]" for row in self._rows) + "]"

    def __repr__(self):
        body = ", ".join("[" + ", ".join(str(x) for x in row) + "]" for row in self._rows)
        return f"Matrix([{body}])"


def _array_cell(x) -> Rational:
    if isinstance(x, float):
        if not np.isfinite(x):
            raise ParseError(f"non-finite value {x!r}")
        return Rational.parse(np.format_float_positional(x, unique=True, trim='-'))
    if isinstance(x, complex):
        raise TypeError("complex entries are not supported")
    return Rational.coerce(x)


__all__ = ['Matrix', 'Shape']
