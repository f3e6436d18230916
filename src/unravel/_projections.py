"""
Projection Layer

Per-row and per-column views of a region: a lazy outer sequence whose
elements are themselves lazy inner sequences.

    enumerate_rows / enumerate_cols   inner sequences of values
    indexed_rows   / indexed_cols     inner sequences of Cells
    grouped_rows   / grouped_cols     Groupings keyed by row/column index

Rows are projected with ``Order.ROW_MAJOR`` (fixed row, walk columns) and
columns with ``Order.COL_MAJOR`` (fixed column, walk rows), reusing the same
region decomposition and primitive table as the flat engine. Every inner
generator captures its own index and span, so inner sequences may be
consumed in any order, or not at all.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from ._engine import prepare, primitive_for
from ._iterators import ScalarFn
from ._slice import Region
from ._types import Cell, Grouping, Order
from ._typing import MatrixInput, MatrixLike


def project(matrix: MatrixLike, region: Region, order: Order, indexed: bool = False,
            grouped: bool = False, scalar: ScalarFn = None) -> Iterator[Any]:
    """
    Yield one inner sequence per outer index of ``region``.

    Args:
        matrix: Two dimensional array
        region: Resolved region
        order: ROW_MAJOR projects rows, COL_MAJOR projects columns
        indexed: Inner sequences yield Cells
        grouped: Wrap each inner Cell sequence in a Grouping (implies indexed)
        scalar: Optional conversion applied to each value
    """
    inner = primitive_for(order, indexed or grouped)
    start, length = region.inner(order)
    for fixed in region.outer(order):
        members = inner(matrix, fixed, start, length, scalar)
        yield Grouping(fixed, members) if grouped else members


# =============================================================================
# Rows
# =============================================================================

def enumerate_rows(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                   col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Iterator[Any]]:
    """
    Lazily enumerate a matrix as a sequence of row sequences.

    Args:
        matrix: Two dimensional array-like
        row_skip: First row to include (0 based)
        row_take: Number of rows; None (or 0) for all rows
        col_skip: First column to include (0 based)
        col_take: Number of columns; None (or 0) for all columns

    Returns:
        Generator yielding one generator of values per row

    Raises:
        NullInputError, ShapeError, OutOfRangeError: at call time
    """
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return project(arr, region, Order.ROW_MAJOR, scalar=scalar)


def indexed_rows(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                 col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Iterator[Cell]]:
    """Sequence of row sequences of ``Cell``; see ``enumerate_rows``."""
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return project(arr, region, Order.ROW_MAJOR, indexed=True, scalar=scalar)


def grouped_rows(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                 col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Grouping]:
    """
    Sequence of ``Grouping`` objects keyed by row index.

    Example:
        >>> [(g.key, sum(c.value for c in g)) for g in grouped_rows([[1, 2], [3, 4]])]
        [(0, 3), (1, 7)]
    """
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return project(arr, region, Order.ROW_MAJOR, grouped=True, scalar=scalar)


# =============================================================================
# Columns
# =============================================================================

def enumerate_cols(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                   col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Iterator[Any]]:
    """Sequence of column sequences of values; see ``enumerate_rows``."""
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return project(arr, region, Order.COL_MAJOR, scalar=scalar)


def indexed_cols(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                 col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Iterator[Cell]]:
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return project(arr, region, Order.COL_MAJOR, indexed=True, scalar=scalar)


def grouped_cols(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                 col_skip: int = 0, col_take: Optional[int] = None) -> Iterator[Grouping]:
    """Sequence of ``Grouping`` objects keyed by column index."""
    arr, region, scalar = prepare(matrix, row_skip, row_take, col_skip, col_take)
    return project(arr, region, Order.COL_MAJOR, grouped=True, scalar=scalar)


__all__ = [
    "project",
    "enumerate_rows",
    "indexed_rows",
    "grouped_rows",
    "enumerate_cols",
    "indexed_cols",
    "grouped_cols",
]
