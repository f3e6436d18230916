"""
Unravel - Lazy traversal of two dimensional arrays

Streams the cells of a fixed-shape 2D array without materializing
intermediate collections:

- Flat cell sequences in row-major or column-major ("transpose") order
- Position-tagged cells (value, row, col)
- Row and column projections, plain, indexed or grouped by index
- Optional rectangular sub-region on every call via skip/take slicing

Arguments are validated eagerly; elements are produced only when iterated.

Example:
    >>> import unravel
    >>> m = [[0, 1, 2], [3, 4, 5], [6, 7, 8]]
    >>> list(unravel.transpose_cells(m))
    [0, 3, 6, 1, 4, 7, 2, 5, 8]
    >>> list(unravel.enumerate_cells(m, row_skip=0, row_take=2, col_skip=1, col_take=2))
    [1, 2, 4, 5]
    >>> next(unravel.indexed_cells(m))
    Cell(value=0, row=0, col=0)
"""

__version__ = '0.1.0'

from ._errors import (
    UnravelError,
    NullInputError,
    OutOfRangeError,
    ShapeError,
)

from ._config import (
    SliceConfig,
    CellConfig,
    UnravelConfig,
    config,
    get_config,
    set_strict_slicing,
    set_python_scalars,
)

from ._types import Axis, Order, Cell, Grouping
from ._typing import MatrixLike, as_matrix

from ._slice import (
    FullExtent,
    FULL_EXTENT,
    AxisSpan,
    axis_request,
    Region,
    resolve_region,
)

# Flat traversal
from ._engine import (
    enumerate_cells,
    transpose_cells,
    indexed_cells,
    indexed_transpose_cells,
)

# Row / column projections
from ._projections import (
    enumerate_rows,
    enumerate_cols,
    indexed_rows,
    indexed_cols,
    grouped_rows,
    grouped_cols,
)

__all__ = [
    # Version
    '__version__',
    # Errors
    'UnravelError',
    'NullInputError',
    'OutOfRangeError',
    'ShapeError',
    # Configuration
    'SliceConfig',
    'CellConfig',
    'UnravelConfig',
    'config',
    'get_config',
    'set_strict_slicing',
    'set_python_scalars',
    # Types
    'Axis',
    'Order',
    'Cell',
    'Grouping',
    'MatrixLike',
    'as_matrix',
    # Slicing
    'FullExtent',
    'FULL_EXTENT',
    'AxisSpan',
    'axis_request',
    'Region',
    'resolve_region',
    # Flat traversal
    'enumerate_cells',
    'transpose_cells',
    'indexed_cells',
    'indexed_transpose_cells',
    # Projections
    'enumerate_rows',
    'enumerate_cols',
    'indexed_rows',
    'indexed_cols',
    'grouped_rows',
    'grouped_cols',
]
