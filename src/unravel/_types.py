"""
Value Types

Immutable carriers produced while enumerating a matrix:

    Cell      - a value tagged with its (row, col) position
    Grouping  - a row or column index plus the lazy sequence of its cells

and the two small enums the engine is parameterized by:

    Axis      - ROW (axis 0) or COL (axis 1)
    Order     - ROW_MAJOR or COL_MAJOR traversal

Cells carry coordinates of the *original* matrix. A column-major traversal
changes the order in which cells are emitted, never their coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class Axis(IntEnum):
    """Matrix axis; the value is the numpy axis number."""
    ROW = 0
    COL = 1

    @property
    def prefix(self) -> str:
        """Prefix used in parameter names (``row_skip``, ``col_take``)."""
        return "row" if self == Axis.ROW else "col"

    @property
    def label(self) -> str:
        return "row" if self == Axis.ROW else "column"


class Order(Enum):
    """Traversal order of a flat cell sequence."""
    ROW_MAJOR = "row_major"    # rows outer, columns inner
    COL_MAJOR = "col_major"    # columns outer, rows inner ("transpose")

    @property
    def outer_axis(self) -> Axis:
        """Axis held fixed by each inner run."""
        return Axis.ROW if self is Order.ROW_MAJOR else Axis.COL


@dataclass(frozen=True)
class Cell(Generic[T]):
    """
    A matrix value with its position.

    Unpacks like a tuple::

        for value, row, col in unravel.indexed_cells(m):
            ...

    Properties:
        value: Element read from the matrix
        row: Row index in the original matrix
        col: Column index in the original matrix
    """

    value: T
    row: int
    col: int

    def __iter__(self) -> Iterator[Any]:
        return iter((self.value, self.row, self.col))


class Grouping(Generic[T]):
    """
    A row or column index paired with the lazy sequence of its cells.

    Iterating a grouping iterates its members. Members are single-pass:
    once consumed, iterating again yields nothing.
    """

    __slots__ = ("_key", "_members")

    def __init__(self, key: int, members: Iterator[Cell[T]]):
        self._key = key
        self._members = members

    @property
    def key(self) -> int:
        return self._key

    @property
    def members(self) -> Iterator[Cell[T]]:
        return self._members

    def __iter__(self) -> Iterator[Cell[T]]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"Grouping(key={self._key})"


__all__ = [
    "Axis",
    "Order",
    "Cell",
    "Grouping",
]
