"""
Matrix Type Definitions and Input Coercion.

Traversal functions accept any of:

    - NumPy arrays (ndarray with ndim == 2), used as-is
    - Objects implementing ``__array__`` (converted with numpy.asarray)
    - Other ``MatrixLike`` objects with a two element ``shape``, used as-is
    - Rectangular nested Python sequences (List[List[T]], tuples, ...)

Nested sequences are copied cell by cell into an object array, so each
element keeps its Python identity and type, including elements that are
themselves sequences. The caller's object is never modified.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple, TypeVar, Union, runtime_checkable

import numpy as np

from ._errors import NullInputError, ShapeError

T = TypeVar("T")


# =============================================================================
# Protocol Definitions
# =============================================================================

@runtime_checkable
class MatrixLike(Protocol):
    """Protocol for two dimensional array-like objects.

    Anything with a ``shape`` and tuple indexing (``m[i, j]``) qualifies.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """Shape of the array."""
        ...

    def __getitem__(self, key: Any) -> Any:
        """Element access."""
        ...


MatrixInput = Union[MatrixLike, np.ndarray, Sequence[Sequence[Any]]]


# =============================================================================
# Coercion
# =============================================================================

def _is_row(obj: Any) -> bool:
    return hasattr(obj, "__len__") and hasattr(obj, "__iter__") and not isinstance(obj, (str, bytes))


def _from_nested(matrix: Any) -> np.ndarray:
    if not _is_row(matrix):
        raise ShapeError(f"matrix must be two dimensional, got {type(matrix).__name__}")

    rows = list(matrix)
    if not rows:
        return np.empty((0, 0), dtype=object)

    for i, row in enumerate(rows):
        if not _is_row(row):
            raise ShapeError(
                f"matrix must be two dimensional, row {i} is {type(row).__name__}",
                shape=(len(rows),),
            )

    n_cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_cols:
            raise ShapeError(f"matrix is not rectangular: row {i} has {len(row)} cells, expected {n_cols}")

    arr = np.empty((len(rows), n_cols), dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            arr[i, j] = value
    return arr


def as_matrix(matrix: MatrixInput) -> MatrixLike:
    """
    Coerce input to a two dimensional matrix without copying array inputs.

    Args:
        matrix: Array-like input

    Returns:
        The ndarray or ``MatrixLike`` itself, or a 2D object ndarray built
        from a nested sequence

    Raises:
        NullInputError: If matrix is None
        ShapeError: If the input is not a rectangular 2D array
    """
    if matrix is None:
        raise NullInputError("matrix")

    if isinstance(matrix, np.ndarray):
        arr = matrix
    elif hasattr(matrix, "__array__"):
        arr = np.asarray(matrix)
    elif isinstance(matrix, MatrixLike):
        shape = tuple(matrix.shape)
        if len(shape) != 2:
            raise ShapeError(
                f"matrix must be two dimensional, got ndim={len(shape)} (shape={shape})",
                shape=shape,
            )
        return matrix
    else:
        return _from_nested(matrix)

    if arr.ndim != 2:
        raise ShapeError(
            f"matrix must be two dimensional, got ndim={arr.ndim} (shape={arr.shape})",
            shape=arr.shape,
        )
    return arr


def extents(matrix: MatrixLike) -> Tuple[int, int]:
    """Return ``(row_count, col_count)``."""
    rows, cols = matrix.shape
    return int(rows), int(cols)


__all__ = [
    "MatrixLike",
    "MatrixInput",
    "as_matrix",
    "extents",
]
