"""Determinants, cofactor matrices and inverses of square matrices."""

from __future__ import annotations

from .matrix import CalculationError, IncorrectMatrixError, Matrix

_SINGULAR_THRESHOLD = 1e-12


def _require_square(matrix: object) -> Matrix:
    if not isinstance(matrix, Matrix):
        raise IncorrectMatrixError(f"not a matrix: {matrix!r}")
    if matrix.rows != matrix.columns:
        raise CalculationError(f"matrix is not square: {matrix.shape}")
    return matrix


def minor(matrix: Matrix, excluded_row: int, excluded_column: int) -> float:
    """Determinant of the matrix with one row and one column removed.

    The minor of a 1x1 matrix is 1.0.
    """
    matrix = _require_square(matrix)
    size = matrix.rows
    if not 0 <= excluded_row < size or not 0 <= excluded_column < size:
        raise IndexError(
            f"position ({excluded_row}, {excluded_column}) is outside a "
            f"{size}x{size} matrix"
        )
    if size == 1:
        return 1.0
    reduced = Matrix.from_rows(
        [value for j, value in enumerate(row) if j != excluded_column]
        for i, row in enumerate(matrix)
        if i != excluded_row
    )
    return determinant(reduced)


def determinant(matrix: Matrix) -> float:
    """Determinant of a square matrix."""
    matrix = _require_square(matrix)
    size = matrix.rows
    m = matrix.to_list()

    if size == 1:
        return m[0][0]
    if size == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]
    if size == 3:
        return (
            m[0][0] * m[1][1] * m[2][2]
            + m[0][1] * m[1][2] * m[2][0]
            + m[0][2] * m[1][0] * m[2][1]
            - m[0][2] * m[1][1] * m[2][0]
            - m[0][1] * m[1][0] * m[2][2]
            - m[0][0] * m[1][2] * m[2][1]
        )

    result = 0.0
    for j, value in enumerate(m[0]):
        sign = 1.0 if j % 2 == 0 else -1.0
        result += sign * value * minor(matrix, 0, j)
    return result


def calc_complements(matrix: Matrix) -> Matrix:
    """Matrix of algebraic complements (cofactors)."""
    matrix = _require_square(matrix)
    size = matrix.rows
    if size == 1:
        return Matrix.from_rows([[1.0]])
    return Matrix.from_rows(
        [
            (1.0 if (i + j) % 2 == 0 else -1.0) * minor(matrix, i, j)
            for j in range(size)
        ]
        for i in range(size)
    )


def inverse(matrix: Matrix) -> Matrix:
    """Inverse of a square, non-singular matrix."""
    matrix = _require_square(matrix)
    det = determinant(matrix)
    if abs(det) < _SINGULAR_THRESHOLD:
        raise CalculationError("matrix is singular")
    if matrix.rows == 1:
        return Matrix.from_rows([[1.0 / matrix[0, 0]]])
    adjugate = calc_complements(matrix).transpose()
    return adjugate.mult_number(1.0 / det)