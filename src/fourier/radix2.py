"""
Radix-2 Cooley-Tukey FFT

Recursive decimation-in-time transform, valid for power-of-two lengths:

    E = FFT(x[0::2]),  O = FFT(x[1::2]),  t_k = e^{∓i2πk/N}
    X[k]       = E[k] + t_k·O[k]
    X[k + N/2] = E[k] - t_k·O[k]        for k in [0, N/2)

A target length that is not a power of two is rounded up to the next power of
two and the input zero-padded. This is visible to the caller: the output is
longer than requested, and bin k corresponds to frequency k/N_padded.
"""

import logging
from typing import Iterable, Optional

from src.gmath.numbers import is_power_of_two, next_power_of_two
from .sequence import (
    FORWARD,
    INVERSE,
    ComplexSequence,
    as_complex_sequence,
    resolve_length,
    scale_sequence,
    unit_root,
    zero_pad,
)

logger = logging.getLogger(__name__)


def _radix2_core(x: ComplexSequence, sign: int) -> ComplexSequence:
    """Unnormalized recursive FFT; len(x) must be a power of two."""
    n = len(x)
    if n == 1:
        return [x[0]]

    even = _radix2_core(x[0::2], sign)
    odd = _radix2_core(x[1::2], sign)

    half = n // 2
    result = [None] * n
    for k in range(half):
        t = unit_root(k, n, sign) * odd[k]
        result[k] = even[k] + t
        result[k + half] = even[k] - t
    return result


def _prepare_power_of_two(sequence: Iterable, size: Optional[int]) -> ComplexSequence:
    x = as_complex_sequence(sequence)
    n = resolve_length(len(x), size)
    if not is_power_of_two(n):
        padded = next_power_of_two(n)
        logger.debug("Radix-2 length %d is not a power of two, padding to %d", n, padded)
        n = padded
    return zero_pad(x, n)


def fft_radix2(sequence: Iterable, size: Optional[int] = None) -> ComplexSequence:
    """
    Forward radix-2 FFT.

    Parameters
    ----------
    sequence : iterable of numbers or Complex
        Input samples.
    size : int, optional
        Requested length, rounded up to a power of two. Defaults to len(sequence).

    Returns
    -------
    list of Complex
        Spectrum whose length is the power-of-two-rounded target.
    """
    return _radix2_core(_prepare_power_of_two(sequence, size), FORWARD)


def ifft_radix2(sequence: Iterable, size: Optional[int] = None, scale: bool = True) -> ComplexSequence:
    """
    Inverse radix-2 FFT.

    Only this outermost call divides by N (when ``scale`` is true); the
    recursive sub-transforms stay unnormalized.
    """
    x = _prepare_power_of_two(sequence, size)
    result = _radix2_core(x, INVERSE)
    if scale:
        result = scale_sequence(result, 1.0 / len(x))
    return result
