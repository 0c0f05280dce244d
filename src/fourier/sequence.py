"""
Complex sequence helpers shared by every transform.

A complex sequence is a plain list of ``Complex``. Inputs are always copied
into a fresh list, so a transform never mutates the caller's container; the
only resizing ever applied is zero-padding up to a target length.
"""

import math
import numbers
import operator
from typing import Iterable, List, Optional, Sequence

import numpy as np

from src.gmath.complex import Complex
from src.gmath.errors import DimensionMismatch, InvalidLength

ComplexSequence = List[Complex]

FORWARD = -1
INVERSE = 1


def as_complex_sequence(values: Iterable) -> ComplexSequence:
    """
    Promote a 1-D iterable of numbers (or a 1-D numpy array) to a new list of
    Complex. Real values get a zero imaginary part.
    """
    if isinstance(values, np.ndarray) and values.ndim != 1:
        raise DimensionMismatch(f"Expected a 1-D array, got shape {values.shape}")

    sequence = []
    for value in values:
        if isinstance(value, Complex):
            sequence.append(value)
        elif isinstance(value, numbers.Complex):
            sequence.append(Complex.from_value(value))
        elif isinstance(value, (list, tuple, np.ndarray)):
            raise DimensionMismatch("Expected a 1-D sequence, got a nested sequence")
        else:
            raise TypeError(f"Cannot convert {type(value).__name__} to Complex")
    return sequence


def resolve_length(length: int, size: Optional[int] = None) -> int:
    """
    Target transform length for an input of ``length`` elements.

    ``None`` keeps the input length. A target shorter than the input is
    rejected since sequences are only ever padded.
    """
    if length == 0:
        raise InvalidLength("Cannot transform an empty sequence")
    if size is None:
        return length

    size = operator.index(size)
    if size <= 0:
        raise InvalidLength(f"Target length must be positive, got {size}")
    if size < length:
        raise InvalidLength(
            f"Target length {size} is shorter than the input length {length}; "
            "sequences are zero-padded, never truncated"
        )
    return size


def zero_pad(sequence: Sequence[Complex], length: int) -> ComplexSequence:
    """Copy of ``sequence`` extended with exact zeros up to ``length``."""
    padded = list(sequence)
    if length > len(padded):
        padded.extend(Complex.zero() for _ in range(length - len(padded)))
    return padded


def prepare(values: Iterable, size: Optional[int] = None) -> ComplexSequence:
    """Promote ``values`` and zero-pad to the resolved target length."""
    sequence = as_complex_sequence(values)
    return zero_pad(sequence, resolve_length(len(sequence), size))


def unit_root(k: int, n: int, sign: int) -> Complex:
    """
    Twiddle factor e^{sign·i2πk/N}.

    k is reduced modulo N first so the angle stays within one turn.
    """
    return Complex.from_polar(1.0, sign * 2.0 * math.pi * (k % n) / n)


def scale_sequence(sequence: Sequence[Complex], factor: float) -> ComplexSequence:
    return [value * factor for value in sequence]


def energy(sequence: Iterable) -> float:
    """Sum of squared magnitudes."""
    total = 0.0
    for value in as_complex_sequence(sequence):
        total += value.real * value.real + value.imag * value.imag
    return total


def max_abs_error(a: Iterable, b: Iterable) -> float:
    """Largest component-wise absolute difference between two sequences."""
    a = as_complex_sequence(a)
    b = as_complex_sequence(b)
    if len(a) != len(b):
        raise DimensionMismatch(f"Length mismatch: {len(a)} != {len(b)}")
    if not a:
        return 0.0
    return max(max(abs(x.real - y.real), abs(x.imag - y.imag)) for x, y in zip(a, b))


def to_numpy(sequence: Iterable) -> np.ndarray:
    """Complex sequence (or nested rows) as a complex128 array."""
    if isinstance(sequence, np.ndarray):
        return sequence.astype(np.complex128)
    rows = list(sequence)
    if rows and isinstance(rows[0], (list, tuple)):
        return np.array([[complex(v) for v in row] for row in rows], dtype=np.complex128)
    return np.array([complex(v) for v in rows], dtype=np.complex128)


def from_numpy(array: np.ndarray):
    """complex128 array (1-D or 2-D) back to Complex lists."""
    array = np.asarray(array, dtype=np.complex128)
    if array.ndim == 1:
        return [Complex(v.real, v.imag) for v in array]
    if array.ndim == 2:
        return [[Complex(v.real, v.imag) for v in row] for row in array]
    raise DimensionMismatch(f"Expected a 1-D or 2-D array, got shape {array.shape}")
