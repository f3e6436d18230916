"""
Slice Resolution

Turns the four raw slice parameters of a traversal call

    (row_skip, row_take, col_skip, col_take)

into a validated ``Region``. Each axis request is first converted into an
explicit option, either ``FULL_EXTENT`` or ``AxisSpan(skip, take)``, and only
then resolved against the matrix extents:

    both takes given        -> validate both axes
    only the row take       -> validate rows, full extent on columns
    only the column take    -> full extent on rows, validate columns
    neither                 -> full extent on both axes

Validation of an axis with extent 0 is skipped: an empty matrix always
resolves to the empty region and is never an error.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ._config import SliceConfig, config
from ._errors import OutOfRangeError
from ._types import Axis, Order
from ._typing import MatrixInput, MatrixLike, as_matrix, extents

logger = logging.getLogger("unravel.slice")


# =============================================================================
# Axis Requests
# =============================================================================

class FullExtent:
    """Request for the whole axis. Use the ``FULL_EXTENT`` singleton."""

    _instance: Optional["FullExtent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FULL_EXTENT"


FULL_EXTENT = FullExtent()


@dataclass(frozen=True)
class AxisSpan:
    """Explicit request for ``take`` indices starting at ``skip``."""
    skip: int
    take: int


AxisRequest = Union[FullExtent, AxisSpan]


def axis_request(axis: Axis, skip: int = 0, take: Optional[int] = None,
                 slice_config: Optional[SliceConfig] = None) -> AxisRequest:
    """
    Convert raw skip/take parameters into an axis request.

    ``take=None`` is always "unspecified". ``take=0`` is "unspecified" too
    unless ``slice_config.zero_take_is_default`` is False, in which case it
    becomes an explicit zero length span that fails validation against any
    non-empty axis. A skip given without a take is ignored.

    Raises:
        TypeError: skip or take is not an integer
    """
    skip = operator.index(skip)
    if take is not None:
        take = operator.index(take)

    if slice_config is None:
        slice_config = config.slice

    if take == 0 and not slice_config.zero_take_is_default:
        return AxisSpan(skip, 0)

    if take is None or take == 0:
        if skip:
            logger.debug(f"{axis.prefix}_skip={skip} ignored: {axis.prefix}_take is unspecified")
        return FULL_EXTENT
    return AxisSpan(skip, take)


# =============================================================================
# Region
# =============================================================================

@dataclass(frozen=True)
class Region:
    """
    A validated rectangular sub-range of a matrix.

    Properties:
        row_start: First included row
        row_count: Number of included rows
        col_start: First included column
        col_count: Number of included columns
    """

    row_start: int
    row_count: int
    col_start: int
    col_count: int

    @property
    def row_stop(self) -> int:
        return self.row_start + self.row_count

    @property
    def col_stop(self) -> int:
        return self.col_start + self.col_count

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_count, self.col_count)

    @property
    def size(self) -> int:
        """Number of cells in the region."""
        return self.row_count * self.col_count

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def rows(self) -> range:
        return range(self.row_start, self.row_stop)

    def cols(self) -> range:
        return range(self.col_start, self.col_stop)

    def outer(self, order: Order) -> range:
        """Indices of the axis held fixed by each inner run."""
        return self.rows() if order.outer_axis is Axis.ROW else self.cols()

    def inner(self, order: Order) -> Tuple[int, int]:
        """``(start, length)`` of each inner run."""
        if order.outer_axis is Axis.ROW:
            return self.col_start, self.col_count
        return self.row_start, self.row_count


EMPTY_REGION = Region(0, 0, 0, 0)


# =============================================================================
# Resolution
# =============================================================================

def check_axis(axis: Axis, extent: int, skip: int, take: int) -> Tuple[int, int]:
    """
    Validate one axis span against its extent.

    Returns:
        ``(start, count)`` for the axis; ``(0, 0)`` when extent is 0

    Raises:
        OutOfRangeError: skip outside ``[0, extent - 1]``, or take < 1, or
            ``skip + take > extent``
    """
    if extent == 0:
        return (0, 0)

    if skip < 0 or skip > extent - 1:
        raise OutOfRangeError(axis, "skip", skip, extent)
    if take < 1 or skip + take > extent:
        raise OutOfRangeError(axis, "take", take, extent)

    return (skip, take)


def _resolve_axis(axis: Axis, extent: int, request: AxisRequest) -> Tuple[int, int]:
    if isinstance(request, FullExtent):
        return (0, extent)
    return check_axis(axis, extent, request.skip, request.take)


def resolve_requests(matrix: MatrixLike, rows: AxisRequest, cols: AxisRequest) -> Region:
    """
    Resolve two axis requests against the matrix extents.

    Raises:
        OutOfRangeError: If an explicit span does not fit the matrix
    """
    row_extent, col_extent = extents(matrix)

    row_start, row_count = _resolve_axis(Axis.ROW, row_extent, rows)
    col_start, col_count = _resolve_axis(Axis.COL, col_extent, cols)

    if row_extent == 0 or col_extent == 0:
        region = EMPTY_REGION
    else:
        region = Region(row_start, row_count, col_start, col_count)

    logger.debug(f"Resolved {region.shape} region at ({region.row_start}, {region.col_start}) "
                 f"for matrix shape ({row_extent}, {col_extent})")
    return region


def resolve_parameters(matrix: MatrixLike, row_skip: int, row_take: Optional[int],
                       col_skip: int, col_take: Optional[int], slice_config: SliceConfig) -> Region:
    """Resolve raw slice parameters against an already coerced matrix."""
    rows = axis_request(Axis.ROW, row_skip, row_take, slice_config)
    cols = axis_request(Axis.COL, col_skip, col_take, slice_config)
    return resolve_requests(matrix, rows, cols)


def resolve_region(matrix: MatrixInput, row_skip: int = 0, row_take: Optional[int] = None,
                   col_skip: int = 0, col_take: Optional[int] = None,
                   slice_config: Optional[SliceConfig] = None) -> Region:
    """
    Validate raw slice parameters and produce a ``Region``.

    Args:
        matrix: Two dimensional array-like
        row_skip: First row to include
        row_take: Number of rows; None (or 0) for all rows
        col_skip: First column to include
        col_take: Number of columns; None (or 0) for all columns
        slice_config: Slice configuration; defaults to ``config.slice``

    Returns:
        The resolved region

    Raises:
        NullInputError: If matrix is None
        ShapeError: If matrix is not two dimensional
        OutOfRangeError: If a skip or take is out of range
    """
    if slice_config is None:
        slice_config = config.slice
    return resolve_parameters(as_matrix(matrix), row_skip, row_take, col_skip, col_take, slice_config)


__all__ = [
    "FullExtent",
    "FULL_EXTENT",
    "AxisSpan",
    "AxisRequest",
    "axis_request",
    "Region",
    "EMPTY_REGION",
    "check_axis",
    "resolve_requests",
    "resolve_parameters",
    "resolve_region",
]
