from __future__ import annotations
import re

from exact_matrix.logic.config import CELL_SEPARATORS, ROW_SEPARATORS
from exact_matrix.logic.errors import ParseError
from exact_matrix.logic.matrix import Matrix
from exact_matrix.logic.rational import Rational

_BRACKET_ROW = re.compile(r"\[([^\[\]]*)\]")
# whole input: [[..], [..], ...] or a single [..]
_BRACKET_MATRIX = re.compile(r"\[\s*(?:\[[^\[\]]*\]\s*,?\s*)*\]|\[[^\[\]]*\]")


def parse_rational(text: str) -> Rational:
    return Rational.parse(text)


def _split_rows(text: str) -> list:
    s = text.strip()
    if not s:
        raise ParseError("empty input")
    if s.startswith("["):
        # [[1, 2], [3, 4]] or [1, 2, 3]
        if not _BRACKET_MATRIX.fullmatch(s):
            raise ParseError(f"malformed bracketed matrix: {s!r}")
        return _BRACKET_ROW.findall(s)
    return [part.strip() for part in re.split(ROW_SEPARATORS, s)]


def _cells(line: str) -> list:
    return [t for t in re.split(CELL_SEPARATORS, line.strip()) if t]


def parse_matrix(text: str) -> Matrix:
    """Read a matrix: rows split by newlines or ';', cells by blanks or commas."""
    rows = []
    for i, line in enumerate(_split_rows(text)):
        tokens = _cells(line)
        if not tokens:
            # a trailing ';' leaves one empty part behind; anything else is an empty row
            if not line and i > 0:
                continue
            raise ParseError(f"row {i + 1} is empty")
        rows.append([Rational.parse(t) for t in tokens])
    if not rows:
        raise ParseError("could not read a matrix")
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ParseError(f"row {i + 1} has {len(row)} entries, expected {width}")
    return Matrix(rows)


def parse_vector(text: str) -> Matrix:
    """Read a column vector from a single row of cells or one cell per row."""
    m = parse_matrix(text)
    if m.rows == 1:
        return Matrix.column_vector(m.row(0))
    if m.cols != 1:
        raise ParseError(f"expected a vector, got a {m.rows}x{m.cols} matrix")
    return m


__all__ = ['parse_rational', 'parse_matrix', 'parse_vector']
