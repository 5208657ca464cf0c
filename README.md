# matrixkit

A small pure-Python library for dense real matrices: creation, comparison,
element-wise arithmetic, matrix products, transposition, determinants,
algebraic complements (cofactors) and inverses. It has no dependencies
outside the standard library.

## Creating matrices

```python
from matrixkit.matrix import Matrix

zeros = Matrix(2, 3)                  # a 2x3 matrix filled with 0.0
a = Matrix.from_rows([[1, 2], [3, 4]])

a.rows, a.columns                     # (2, 2)
a.shape                               # (2, 2)
a[0, 1]                               # 2.0
a[1]                                  # (3.0, 4.0) - a row, as a tuple
a[1, 0] = 5.0
a[0] = [7, 8]                         # replace a whole row
a.to_list()                           # [[7.0, 8.0], [5.0, 4.0]]
list(a)                               # [(7.0, 8.0), (5.0, 4.0)]
```

Elements are stored as floats. `Matrix(rows, columns)` requires two positive
integers, and `Matrix.from_rows` requires at least one non-empty row with all
rows of equal length; otherwise `IncorrectMatrixError` is raised. Assigning a
row of the wrong length raises `ValueError`.

## Arithmetic

```python
a = Matrix.from_rows([[1, 2], [3, 4]])
b = Matrix.from_rows([[5, 6], [7, 8]])

a.sum(b)           # or a + b   -> [[6, 8], [10, 12]]
a.sub(b)           # or a - b   -> [[-4, -4], [-4, -4]]
a.mult_number(2)   # or a * 2, 2 * a
a.mult_matrix(b)   # or a @ b   -> [[19, 22], [43, 50]]
a.transpose()      # [[1, 3], [2, 4]]
```

Every operation returns a new matrix and leaves its operands unchanged.
`CalculationError` is raised when the shapes differ for `sum`/`sub`, when the
column count of the left operand differs from the row count of the right one
for `mult_matrix`, and when `mult_number` is given NaN or infinity. Passing
something that is not a `Matrix` to `sum`, `sub` or `mult_matrix` raises
`IncorrectMatrixError`.

## Comparison

`a.equals(b)` and `a == b` are true when the shapes match and every pair of
elements differs by at most `1e-7` (`matrixkit.matrix.EPS`). `equals` returns
`False` for anything that is not a `Matrix`. Matrices are mutable and
therefore not hashable.

## Linear algebra

```python
from matrixkit.linalg import calc_complements, determinant, inverse, minor

m = Matrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])

determinant(m)        # -1.0
minor(m, 0, 0)        # determinant with row 0 and column 0 removed: -1.0
calc_complements(m)   # matrix of algebraic complements
inverse(m)            # [[1, -1, 1], [-38, 41, -34], [27, -29, 24]]
```

These functions require a square `Matrix`: a non-square one raises
`CalculationError`, and anything that is not a `Matrix` raises
`IncorrectMatrixError`. Determinants of size 1 to 3 are computed directly;
larger ones by cofactor expansion along the first row. The minor of a 1x1
matrix, and its matrix of complements, is `1.0`. `minor` raises `IndexError`
for a position outside the matrix. `inverse` raises `CalculationError` when
the absolute value of the determinant is below `1e-12`.

## Errors

All errors derive from `matrixkit.matrix.MatrixError`:

- `IncorrectMatrixError` - the matrix is malformed (non-positive or
  non-integer dimensions, no elements, rows of unequal length) or an operand
  is not a matrix.
- `CalculationError` - the operation cannot be carried out on these operands
  (mismatched shapes, non-square or singular matrix, non-finite factor).

## What it does not do

matrixkit is a library only: it has no command-line tool, and it does not
read or write matrices from files. Computations use plain Python floats and
cofactor expansion, so it is meant for small matrices rather than large
numerical work.

## Running the tests

```
pip install -e ".[test]"
pytest
```