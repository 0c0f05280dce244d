"""
Separable 2-D Fourier Transform

Forward: 1-D transform of every row, then of every resulting column.
Inverse: columns first, then rows.

Both orders agree in exact arithmetic but round differently, so the order is
fixed. Each axis is planned on its own by the mixed-radix transform, which
falls back to radix-2 or the direct DFT as the axis length dictates.
"""

import numbers
import operator
from typing import List, Optional, Sequence

import numpy as np

from src.gmath.complex import Complex
from src.gmath.errors import DimensionMismatch, InvalidLength
from .mixed_radix import forward_transform, inverse_transform
from .sequence import as_complex_sequence

ComplexArray = List[List[Complex]]


def _as_rows(array) -> ComplexArray:
    """Validate a rectangular 2-D input and promote it to rows of Complex."""
    if isinstance(array, np.ndarray):
        if array.ndim != 2:
            raise DimensionMismatch(f"Expected a 2-D array, got shape {array.shape}")
        if array.size == 0:
            raise InvalidLength(f"Cannot transform an empty array of shape {array.shape}")

    rows = []
    for row in array:
        if isinstance(row, (Complex, numbers.Complex)):
            raise DimensionMismatch("Expected a 2-D array of rows, got a 1-D sequence")
        rows.append(as_complex_sequence(row))
    if not rows or not rows[0]:
        raise InvalidLength("Cannot transform an empty array")

    n_cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_cols:
            raise DimensionMismatch(
                f"Row {i} has {len(row)} elements, expected {n_cols} (array is not rectangular)"
            )
    return rows


def _resolve_shape(rows: ComplexArray, n_rows: Optional[int], n_cols: Optional[int]):
    actual_rows, actual_cols = len(rows), len(rows[0])
    target_rows = actual_rows if n_rows is None else operator.index(n_rows)
    target_cols = actual_cols if n_cols is None else operator.index(n_cols)

    if target_rows <= 0 or target_cols <= 0:
        raise InvalidLength(f"Target shape must be positive, got ({target_rows}, {target_cols})")
    if target_rows < actual_rows or target_cols < actual_cols:
        raise DimensionMismatch(
            f"Target shape ({target_rows}, {target_cols}) is smaller than "
            f"the array shape ({actual_rows}, {actual_cols})"
        )
    return target_rows, target_cols


def _columns(rows: ComplexArray) -> ComplexArray:
    return [list(column) for column in zip(*rows)]


def forward_transform_2d(array: Sequence, rows: Optional[int] = None, cols: Optional[int] = None) -> ComplexArray:
    """
    Forward 2-D DFT: rows first, then columns.

    Parameters
    ----------
    array : list of rows or 2-D np.ndarray
        Rectangular input.
    rows, cols : int, optional
        Output shape; the input is zero-padded up to it.

    Returns
    -------
    list of list of Complex
        Spectrum of shape (rows, cols).
    """
    data = _as_rows(array)
    n_rows, n_cols = _resolve_shape(data, rows, cols)

    transformed = [forward_transform(row, n_cols) for row in data]
    transformed.extend([Complex.zero()] * n_cols for _ in range(n_rows - len(data)))

    columns = [forward_transform(column, n_rows) for column in _columns(transformed)]
    return _columns(columns)


def inverse_transform_2d(array: Sequence, rows: Optional[int] = None, cols: Optional[int] = None) -> ComplexArray:
    """
    Inverse 2-D DFT: columns first, then rows. Normalized by 1/(rows·cols).
    """
    data = _as_rows(array)
    n_rows, n_cols = _resolve_shape(data, rows, cols)

    columns = [inverse_transform(column, n_rows) for column in _columns(data)]
    columns.extend([Complex.zero()] * n_rows for _ in range(n_cols - len(columns)))

    return [inverse_transform(row, n_cols) for row in _columns(columns)]


fft2 = forward_transform_2d
ifft2 = inverse_transform_2d
