"""Dense real matrices with element-wise and matrix arithmetic."""

from __future__ import annotations

import math
from numbers import Real
from typing import Callable, Iterable, Iterator, Sequence

EPS = 1e-7


class MatrixError(Exception):
    """Base class for matrix errors."""


class IncorrectMatrixError(MatrixError):
    """The matrix is missing or has non-positive dimensions."""


class CalculationError(MatrixError):
    """The operation cannot be carried out on the given operands."""


def _require_matrix(value: object, role: str) -> "Matrix":
    if not isinstance(value, Matrix):
        raise IncorrectMatrixError(f"{role} is not a matrix: {value!r}")
    return value


class Matrix:
    """A rows x columns matrix of floats, zero-filled on creation."""

    __slots__ = ("_rows", "_columns", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int) -> None:
        if not isinstance(rows, int) or not isinstance(columns, int):
            raise IncorrectMatrixError("dimensions must be integers")
        if rows <= 0 or columns <= 0:
            raise IncorrectMatrixError(
                f"dimensions must be positive, got {rows}x{columns}"
            )
        try:
            data = [[0.0] * columns for _ in range(rows)]
        except MemoryError as exc:
            raise CalculationError(
                f"cannot allocate a {rows}x{columns} matrix"
            ) from exc
        self._rows = rows
        self._columns = columns
        self._data = data

    @classmethod
    def from_rows(cls, values: Iterable[Iterable[float]]) -> "Matrix":
        """Build a matrix from an iterable of equally long rows."""
        if values is None:
            raise IncorrectMatrixError("no rows given")
        data = [[float(item) for item in row] for row in values]
        if not data or not data[0]:
            raise IncorrectMatrixError("a matrix needs at least one element")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise IncorrectMatrixError("rows have different lengths")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def to_list(self) -> list[list[float]]:
        """Return a copy of the elements as a list of row lists."""
        return [list(row) for row in self._data]

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, column = index
            return self._data[row][column]
        if isinstance(index, int):
            return tuple(self._data[index])
        raise TypeError("index must be an int or a (row, column) pair")

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, column = index
            self._data[row][column] = float(value)
            return
        if isinstance(index, int):
            new_row = [float(item) for item in value]
            if len(new_row) != self._columns:
                raise ValueError(
                    f"row must have {self._columns} elements, got {len(new_row)}"
                )
            self._data[index] = new_row
            return
        raise TypeError("index must be an int or a (row, column) pair")

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def equals(self, other: object) -> bool:
        """True when shapes match and every element differs by at most EPS."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= EPS
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def __eq__(self, other: object):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def _elementwise(
        self, other: object, op: Callable[[float, float], float]
    ) -> "Matrix":
        other = _require_matrix(other, "operand")
        if self.shape != other.shape:
            raise CalculationError(
                f"shapes differ: {self.shape} and {other.shape}"
            )
        return Matrix.from_rows(
            [op(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )

    def sum(self, other: "Matrix") -> "Matrix":
        """Element-wise sum of two matrices of the same shape."""
        return self._elementwise(other, lambda a, b: a + b)

    def sub(self, other: "Matrix") -> "Matrix":
        """Element-wise difference of two matrices of the same shape."""
        return self._elementwise(other, lambda a, b: a - b)

    def mult_number(self, number: float) -> "Matrix":
        """Multiply every element by a finite number."""
        number = float(number)
        if math.isnan(number) or math.isinf(number):
            raise CalculationError("factor must be finite")
        return Matrix.from_rows([a * number for a in row] for row in self._data)

    def mult_matrix(self, other: "Matrix") -> "Matrix":
        """Matrix product; the column count must equal the other's row count."""
        other = _require_matrix(other, "operand")
        if self._columns != other._rows:
            raise CalculationError(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        other_columns: list[Sequence[float]] = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in other_columns]
            for row in self._data
        )

    def transpose(self) -> "Matrix":
        """Return the transposed matrix."""
        return Matrix.from_rows(zip(*self._data))

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, number):
        if isinstance(number, bool) or not isinstance(number, Real):
            return NotImplemented
        return self.mult_number(number)

    def __rmul__(self, number):
        return self.__mul__(number)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mult_matrix(other)