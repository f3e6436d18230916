"""
Cell Iteration Engine

Flat traversal of every cell in a region, in row-major or column-major
order, as plain values or as position-tagged ``Cell`` objects.

One engine serves all four flat operations. The outer loop walks
``region.outer(order)`` and each inner run is delegated to the primitive
iterator registered for ``(order, indexed)``:

    ROW_MAJOR  -> across_row / across_row_cells     (fixed row)
    COL_MAJOR  -> down_column / down_column_cells   (fixed column)

Arguments are validated eagerly by the public functions; the sequence they
return is a generator that reads nothing until iterated.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from ._config import config
from ._iterators import (
    ScalarFn,
    across_row,
    across_row_cells,
    down_column,
    down_column_cells,
    to_python,
)
from ._slice import Region, resolve_parameters
from ._types import Cell, Order
from ._typing import MatrixInput, MatrixLike, as_matrix

Primitive = Callable[..., Iterator[Any]]

_PRIMITIVES: Dict[Tuple[Order, bool], Primitive] = {
    (Order.ROW_MAJOR, False): across_row,
    (Order.ROW_MAJOR, True): across_row_cells,
    (Order.COL_MAJOR, False): down_column,
    (Order.COL_MAJOR, True): down_column_cells,
}


def primitive_for(order: Order, indexed: bool) -> Primitive:
    """Primitive iterator producing one inner run for ``order``."""
    return _PRIMITIVES[(order, indexed)]


def prepare(matrix: MatrixInput, row_skip: int, row_take: Optional[int],
            col_skip: int, col_take: Optional[int]) -> Tuple[MatrixLike, Region, ScalarFn]:
    """
    Coerce, validate and capture configuration for one traversal call.

    Returns:
        Tuple of (array, region, scalar conversion or None)

    Raises:
        NullInputError, ShapeError, OutOfRangeError
    """
    arr = as_matrix(matrix)
    region = resolve_parameters(arr, row_skip, row_take, col_skip, col_take, config.slice)
    scalar = to_python if config.cell.python_scalars else None
    return arr, region, scalar


def iterate_cells(matrix: MatrixLike, region: Region, order: Order,
                  indexed: bool = False, scalar: ScalarFn = None) -> Iterator[Any]:
    """
    Yield every cell of ``region`` exactly once in ``order``.

    Args:
        matrix: Two dimensional array
        region: Resolved region (not re-validated)
        order: Traversal order
        indexed: Yield ``Cell`` objects instead of plain values
        scalar: Optional conversion applied to each value
    """
    if region.is_empty:
        return
    inner = primitive_for(order, indexed)
    start, length = region.inner(order)
    for fixed in region.outer(order):
        yield from inner(matrix, fixed, start, length, scalar)


# =============================================================================
# Public API
# =============================================================================

def enumerate_cells(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                    col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Any]:
    """
    Lazily enumerate the values of a matrix in row-major order.

    Slicing uses skip/take on each axis. Leave a take unspecified (None or 0)
    to use the whole axis; its skip is then ignored.

    Args:
        matrix: Two dimensional array-like
        row_skip: First row to include (0 based)
        row_take: Number of rows to include after the skipped rows
        col_skip: First column to include (0 based)
        col_take: Number of columns to include after the skipped columns

    Returns:
        Generator of values

    Raises:
        NullInputError: If matrix is None
        ShapeError: If matrix is not two dimensional
        OutOfRangeError: If a skip or take lies outside the matrix

    Example:
        >>> list(enumerate_cells([[0, 1, 2], [3, 4, 5]], col_skip=1, col_take=2))
        [1, 2, 4, 5]
    """
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return iterate_cells(arr, region, Order.ROW_MAJOR, False, scalar)


def transpose_cells(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                    col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Any]:
    """
    Lazily enumerate the values of a matrix in column-major order.

    Slice parameters refer to the source matrix, not the transposed one.
    See ``enumerate_cells`` for arguments and errors.
    """
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return iterate_cells(arr, region, Order.COL_MAJOR, False, scalar)


def indexed_cells(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                  col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Cell]:
    """Row-major ``Cell`` sequence; see ``enumerate_cells``."""
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return iterate_cells(arr, region, Order.ROW_MAJOR, True, scalar)


def indexed_transpose_cells(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                            col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Cell]:
    """
    Column-major ``Cell`` sequence.

    Cells keep their coordinates in the source matrix: only the emission
    order differs from ``indexed_cells``.
    """
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return iterate_cells(arr, region, Order.COL_MAJOR, True, scalar)


__all__ = [
    "primitive_for",
    "prepare",
    "iterate_cells",
    "enumerate_cells",
    "transpose_cells",
    "indexed_cells",
    "indexed_transpose_cells",
]
