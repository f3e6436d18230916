"""
Tests for slice resolution: axis requests, Region, validation.
"""

import dataclasses

import pytest
import numpy as np

import unravel
from unravel import (
    Axis, AxisSpan, FULL_EXTENT, FullExtent, Region, OutOfRangeError,
    NullInputError, SliceConfig, axis_request, resolve_region,
)
import unravel._engine
import unravel._slice
import unravel._typing
from unravel._slice import EMPTY_REGION, check_axis, resolve_parameters
from unravel._types import Order


class TestAxisRequest:
    """Raw skip/take to tagged option."""

    def test_none_take_is_full_extent(self):
        assert axis_request(Axis.ROW, 0, None) is FULL_EXTENT

    def test_zero_take_is_full_extent_by_default(self):
        assert axis_request(Axis.ROW, 0, 0) is FULL_EXTENT

    def test_skip_ignored_without_take(self):
        assert axis_request(Axis.COL, 2, None) is FULL_EXTENT

    def test_explicit_span(self):
        assert axis_request(Axis.ROW, 1, 2) == AxisSpan(1, 2)

    def test_strict_zero_take_is_explicit(self):
        strict = SliceConfig(zero_take_is_default=False)
        assert axis_request(Axis.ROW, 0, 0, strict) == AxisSpan(0, 0)

    def test_numpy_integers_accepted(self):
        assert axis_request(Axis.ROW, np.int64(1), np.int32(2)) == AxisSpan(1, 2)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            axis_request(Axis.ROW, 0, 1.5)

    def test_full_extent_singleton(self):
        assert FullExtent() is FULL_EXTENT
        assert repr(FULL_EXTENT) == "FULL_EXTENT"


class TestCheckAxis:
    """Per-axis validation."""

    def test_valid_span(self):
        assert check_axis(Axis.ROW, 3, 1, 2) == (1, 2)

    def test_full_span(self):
        assert check_axis(Axis.ROW, 3, 0, 3) == (0, 3)

    def test_zero_extent_skips_validation(self):
        assert check_axis(Axis.COL, 0, 5, -3) == (0, 0)

    @pytest.mark.parametrize("skip", [-1, 3, 10])
    def test_bad_skip(self, skip):
        with pytest.raises(OutOfRangeError) as exc:
            check_axis(Axis.ROW, 3, skip, 1)
        assert exc.value.parameter == "skip"
        assert exc.value.name == "row_skip"
        assert exc.value.value == skip

    @pytest.mark.parametrize("skip,take", [(0, 0), (0, -1), (0, 4), (2, 2)])
    def test_bad_take(self, skip, take):
        with pytest.raises(OutOfRangeError) as exc:
            check_axis(Axis.COL, 3, skip, take)
        assert exc.value.parameter == "take"
        assert exc.value.name == "col_take"
        assert exc.value.extent == 3

    def test_skip_checked_before_take(self):
        with pytest.raises(OutOfRangeError) as exc:
            check_axis(Axis.ROW, 3, -1, 0)
        assert exc.value.parameter == "skip"


class TestResolveRegion:
    """Resolution of both axes against a matrix."""

    def test_defaults_full_extent(self, rect_matrix):
        assert resolve_region(rect_matrix) == Region(0, 3, 0, 4)

    def test_both_axes_explicit(self, rect_matrix):
        assert resolve_region(rect_matrix, 1, 2, 1, 3) == Region(1, 2, 1, 3)

    def test_only_rows_explicit(self, rect_matrix):
        assert resolve_region(rect_matrix, 1, 1) == Region(1, 1, 0, 4)

    def test_only_cols_explicit(self, rect_matrix):
        assert resolve_region(rect_matrix, col_skip=2, col_take=2) == Region(0, 3, 2, 2)

    def test_column_skip_ignored_without_take(self, rect_matrix):
        assert resolve_region(rect_matrix, 0, 2, 3, 0) == Region(0, 2, 0, 4)

    def test_row_take_too_large(self, square_matrix):
        with pytest.raises(OutOfRangeError) as exc:
            resolve_region(square_matrix, 0, 4, 0, 3)
        assert exc.value.axis == Axis.ROW
        assert exc.value.parameter == "take"
        assert "row_take" in str(exc.value)

    def test_column_checked_when_rows_valid(self, square_matrix):
        with pytest.raises(OutOfRangeError) as exc:
            resolve_region(square_matrix, 0, 3, 3, 1)
        assert exc.value.axis == Axis.COL
        assert exc.value.parameter == "skip"

    def test_exact_fit(self, square_matrix):
        assert resolve_region(square_matrix, 0, 3, 0, 3) == Region(0, 3, 0, 3)

    def test_empty_matrix_is_empty_region(self, empty_matrix):
        assert resolve_region(empty_matrix) == EMPTY_REGION

    def test_empty_axis_never_validated(self):
        m = np.zeros((0, 0))
        assert resolve_region(m, 5, 7, -2, 9) == EMPTY_REGION

    def test_non_empty_axis_still_validated(self):
        m = np.zeros((3, 0))
        with pytest.raises(OutOfRangeError):
            resolve_region(m, 0, 4)

    def test_strict_slicing_rejects_zero_take(self, square_matrix):
        unravel.set_strict_slicing()
        with pytest.raises(OutOfRangeError) as exc:
            resolve_region(square_matrix, 0, 0)
        assert exc.value.parameter == "take"

    def test_strict_slicing_allows_none(self, square_matrix):
        unravel.set_strict_slicing()
        assert resolve_region(square_matrix) == Region(0, 3, 0, 3)

    def test_null_matrix(self):
        with pytest.raises(NullInputError):
            resolve_region(None)


class TestResolveParameters:
    """Resolution against a matrix that is already coerced."""

    def test_matches_resolve_region(self, rect_matrix):
        strict = SliceConfig(zero_take_is_default=False)
        assert resolve_parameters(rect_matrix, 1, 2, 1, 3, strict) == Region(1, 2, 1, 3)
        assert resolve_parameters(rect_matrix, 0, None, 0, None, SliceConfig()) == resolve_region(rect_matrix)

    def test_uses_given_config(self, square_matrix):
        with pytest.raises(OutOfRangeError):
            resolve_parameters(square_matrix, 0, 0, 0, None, SliceConfig(zero_take_is_default=False))

    def test_traversal_coerces_once(self, monkeypatch):
        calls = []
        real = unravel._typing.as_matrix

        def counting(matrix):
            calls.append(matrix)
            return real(matrix)

        monkeypatch.setattr(unravel._engine, "as_matrix", counting)
        monkeypatch.setattr(unravel._slice, "as_matrix", counting)
        list(unravel.enumerate_cells([[1, 2], [3, 4]], 0, 1))
        assert len(calls) == 1


class TestRegion:
    """Region helpers."""

    def test_stops_and_size(self):
        r = Region(1, 2, 3, 4)
        assert r.row_stop == 3
        assert r.col_stop == 7
        assert r.shape == (2, 4)
        assert r.size == 8
        assert not r.is_empty

    def test_empty(self):
        assert EMPTY_REGION.is_empty
        assert list(EMPTY_REGION.rows()) == []

    def test_outer_inner_row_major(self):
        r = Region(1, 2, 0, 3)
        assert list(r.outer(Order.ROW_MAJOR)) == [1, 2]
        assert r.inner(Order.ROW_MAJOR) == (0, 3)

    def test_outer_inner_col_major(self):
        r = Region(1, 2, 0, 3)
        assert list(r.outer(Order.COL_MAJOR)) == [0, 1, 2]
        assert r.inner(Order.COL_MAJOR) == (1, 2)

    def test_frozen(self):
        r = Region(0, 1, 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.row_start = 2
