"""
Primitive Axis Iterators

Four leaf generators, each walking a half-open range ``[start, start + length)``
along one axis while the index on the other axis stays fixed:

    down_column(m, col, start, length)        values m[i, col]
    down_column_cells(m, col, start, length)  Cell(m[i, col], i, col)
    across_row(m, row, start, length)         values m[row, j]
    across_row_cells(m, row, start, length)   Cell(m[row, j], row, j)

Ranges are not re-validated here; callers pass spans taken from a resolved
``Region``.

``scalar`` optionally post-processes every value read (see ``to_python``).
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

import numpy as np

from ._types import Cell
from ._typing import MatrixLike

ScalarFn = Optional[Callable[[Any], Any]]


def to_python(value: Any) -> Any:
    """Convert a numpy scalar to the matching Python scalar."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def down_column(matrix: MatrixLike, col: int, start: int, length: int,
                scalar: ScalarFn = None) -> Iterator[Any]:
    for i in range(start, start + length):
        value = matrix[i, col]
        yield value if scalar is None else scalar(value)


def down_column_cells(matrix: MatrixLike, col: int, start: int, length: int,
                      scalar: ScalarFn = None) -> Iterator[Cell]:
    for i in range(start, start + length):
        value = matrix[i, col]
        yield Cell(value if scalar is None else scalar(value), i, col)


def across_row(matrix: MatrixLike, row: int, start: int, length: int,
               scalar: ScalarFn = None) -> Iterator[Any]:
    for j in range(start, start + length):
        value = matrix[row, j]
        yield value if scalar is None else scalar(value)


def across_row_cells(matrix: MatrixLike, row: int, start: int, length: int,
                     scalar: ScalarFn = None) -> Iterator[Cell]:
    for j in range(start, start + length):
        value = matrix[row, j]
        yield Cell(value if scalar is None else scalar(value), row, j)


__all__ = [
    "to_python",
    "down_column",
    "down_column_cells",
    "across_row",
    "across_row_cells",
]
