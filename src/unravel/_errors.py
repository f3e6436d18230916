"""
Error handling for unravel.

Every failure is raised synchronously, at call time, before any element of a
lazy sequence is produced. Error codes follow a small fixed table so callers
can branch on ``err.code`` as well as on the exception class.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import Axis


# =============================================================================
# Error Codes
# =============================================================================

# General errors (1-9)
UNRAVEL_ERROR_NULL_INPUT = 4

# Argument errors (10-19)
UNRAVEL_ERROR_SHAPE = 11
UNRAVEL_ERROR_OUT_OF_RANGE = 14


_ERROR_MESSAGES = {
    UNRAVEL_ERROR_NULL_INPUT: "Null input",
    UNRAVEL_ERROR_SHAPE: "Not a two dimensional array",
    UNRAVEL_ERROR_OUT_OF_RANGE: "Argument out of range",
}


# =============================================================================
# Exception Classes
# =============================================================================

class UnravelError(Exception):
    """
    Base exception for all unravel errors.

    Attributes:
        code: One of the ``UNRAVEL_ERROR_*`` codes
        message: Human readable detail
    """

    ERROR_NULL_INPUT = UNRAVEL_ERROR_NULL_INPUT
    ERROR_SHAPE = UNRAVEL_ERROR_SHAPE
    ERROR_OUT_OF_RANGE = UNRAVEL_ERROR_OUT_OF_RANGE

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"Unravel Error {code}: {message}")


class NullInputError(UnravelError, TypeError):
    """Raised when the matrix argument is missing (``None``)."""

    def __init__(self, parameter: str = "matrix"):
        self.parameter = parameter
        super().__init__(
            UNRAVEL_ERROR_NULL_INPUT,
            f"{parameter}: value cannot be None",
        )


class OutOfRangeError(UnravelError, IndexError):
    """
    Raised when a skip or take value falls outside the matrix extent.

    Attributes:
        axis: Axis the offending parameter belongs to
        parameter: ``"skip"`` or ``"take"``
        value: The rejected value
        extent: Length of the matrix along ``axis``
        name: Full parameter name, e.g. ``"row_take"``
    """

    def __init__(self, axis: "Axis", parameter: str, value: int, extent: int):
        self.axis = axis
        self.parameter = parameter
        self.value = value
        self.extent = extent
        self.name = f"{axis.prefix}_{parameter}"
        super().__init__(
            UNRAVEL_ERROR_OUT_OF_RANGE,
            f"{self.name}={value} is out of range for {axis.label} extent {extent}",
        )


class ShapeError(UnravelError, ValueError):
    """Raised when the input is not a rectangular two dimensional array."""

    def __init__(self, message: str, shape: Optional[tuple] = None):
        self.shape = shape
        super().__init__(UNRAVEL_ERROR_SHAPE, message)


__all__ = [
    "UNRAVEL_ERROR_NULL_INPUT",
    "UNRAVEL_ERROR_SHAPE",
    "UNRAVEL_ERROR_OUT_OF_RANGE",
    "UnravelError",
    "NullInputError",
    "OutOfRangeError",
    "ShapeError",
]
