"""
Direct (reference) Discrete Fourier Transform.

    X[k] = Σ_{t=0}^{N-1} x[t]·e^{-i2πkt/N}
    x[t] = (1/N)·Σ_{k=0}^{N-1} X[k]·e^{+i2πkt/N}

O(N²) time. Used as the correctness oracle for the fast transforms and as the
recursion terminal of the mixed-radix planner for prime lengths.
"""

from typing import Iterable, Optional

from src.gmath.complex import Complex
from .sequence import (
    FORWARD,
    INVERSE,
    ComplexSequence,
    prepare,
    scale_sequence,
    unit_root,
)


def _dft_core(x: ComplexSequence, sign: int) -> ComplexSequence:
    """Unnormalized DFT with twiddle sign ``sign`` (-1 forward, +1 inverse)."""
    n = len(x)
    result = []
    for k in range(n):
        acc = Complex.zero()
        for t in range(n):
            acc = acc + x[t] * unit_root(k * t, n, sign)
        result.append(acc)
    return result


def dft(sequence: Iterable, size: Optional[int] = None) -> ComplexSequence:
    """
    Compute the forward DFT directly.

    Parameters
    ----------
    sequence : iterable of numbers or Complex
        Input samples; real values are promoted to complex.
    size : int, optional
        Transform length. Shorter input is zero-padded. Defaults to len(sequence).

    Returns
    -------
    list of Complex
        Unnormalized spectrum of length ``size``.
    """
    return _dft_core(prepare(sequence, size), FORWARD)


def idft(sequence: Iterable, size: Optional[int] = None, scale: bool = True) -> ComplexSequence:
    """
    Compute the inverse DFT directly.

    With ``scale=False`` the 1/N normalization is skipped.
    """
    x = prepare(sequence, size)
    result = _dft_core(x, INVERSE)
    if scale:
        result = scale_sequence(result, 1.0 / len(x))
    return result
