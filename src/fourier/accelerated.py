"""
Array FFT Backend using Numba JIT

numpy-array counterpart of the Complex-sequence transforms, for long signals.
Optimizations:
1. Numba JIT compilation (nopython mode)
2. Iterative (non-recursive) radix-2 - stack usage does not grow with N
3. Bit-reversal permutation from a reversed counter
4. One twiddle table per call, shared by every stage
5. Cache compiled functions

Power-of-two lengths use the iterative butterfly; every other length uses a
JIT-compiled direct DFT. Length rules match ``forward_transform``: input is
zero-padded up to ``n`` and never truncated.
"""

from typing import Optional

import numpy as np
from numba import jit

from src.gmath.errors import DimensionMismatch
from .sequence import resolve_length


@jit(nopython=True, cache=True)
def _bit_reversal_permutation(N: int) -> np.ndarray:
    """Index table p with p[i] = i with its log2(N) bits reversed."""
    perm = np.zeros(N, dtype=np.int64)
    j = 0
    for i in range(1, N):
        # Increment j as a bit-reversed counter
        bit = N >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        perm[i] = j
    return perm


@jit(nopython=True, cache=True)
def _fft_radix2_iter(x: np.ndarray, sign: float) -> np.ndarray:
    """
    Iterative Cooley-Tukey radix-2 DIT FFT (Numba JIT).

    Same butterflies as the recursive transform, applied stage by stage
    (spans 2, 4, ..., N) to the bit-reversed input. Twiddles come from one
    table of N/2 roots e^{sign·i2πj/N}; a stage of span s reads every
    (N/s)-th entry.
    """
    N = len(x)
    perm = _bit_reversal_permutation(N)
    X = np.empty(N, dtype=np.complex128)
    for i in range(N):
        X[perm[i]] = x[i]

    half_n = N // 2
    table = np.empty(half_n, dtype=np.complex128)
    for j in range(half_n):
        angle = sign * 2.0 * np.pi * j / N
        table[j] = np.cos(angle) + 1j * np.sin(angle)

    span = 2
    while span <= N:
        half = span // 2
        stride = N // span
        for start in range(0, N, span):
            for j in range(half):
                lo = start + j
                hi = lo + half
                t = table[j * stride] * X[hi]
                X[hi] = X[lo] - t
                X[lo] = X[lo] + t
        span *= 2

    return X


@jit(nopython=True, cache=True)
def _dft_naive_jit(x: np.ndarray, sign: float) -> np.ndarray:
    """Direct DFT for non-power-of-2 lengths (JIT compiled)."""
    N = len(x)
    X = np.empty(N, dtype=np.complex128)

    for k in range(N):
        s = 0j
        for t in range(N):
            angle = sign * 2.0 * np.pi * ((k * t) % N) / N
            s += x[t] * (np.cos(angle) + 1j * np.sin(angle))
        X[k] = s

    return X


@jit(nopython=True, cache=True)
def _fft_core(x: np.ndarray, sign: float) -> np.ndarray:
    N = len(x)
    if N & (N - 1) == 0:
        return _fft_radix2_iter(x, sign)
    return _dft_naive_jit(x, sign)


def _prepare(x: np.ndarray, n: Optional[int]) -> np.ndarray:
    x = np.asarray(x)
    if x.ndim != 1:
        raise DimensionMismatch(f"Expected a 1-D array, got shape {x.shape}")
    n = resolve_length(x.shape[0], n)

    x = x.astype(np.complex128)
    if x.shape[0] < n:
        x = np.pad(x, (0, n - x.shape[0]), mode='constant', constant_values=0)
    return x


def fft_array(x: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """
    Compute the 1-D DFT of a numpy array.

    Parameters
    ----------
    x : np.ndarray
        1-D input array (real or complex)
    n : int, optional
        Transform length; the input is zero-padded up to it.

    Returns
    -------
    np.ndarray
        complex128 spectrum of length n

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5, -0.5])
    >>> X = fft_array(x)
    >>> # Should match numpy.fft.fft(x)
    """
    return _fft_core(_prepare(x, n), -1.0)


def ifft_array(x: np.ndarray, n: Optional[int] = None) -> np.ndarray:
    """
    Compute the 1-D inverse DFT of a numpy array.

    Runs the same kernels with positive-sign twiddles, then divides by N.
    """
    X = _prepare(x, n)
    return _fft_core(X, 1.0) / X.shape[0]


def fft2_array(x: np.ndarray) -> np.ndarray:
    """2-D DFT of a numpy array: rows first, then columns."""
    x = np.asarray(x)
    if x.ndim != 2:
        raise DimensionMismatch(f"Expected a 2-D array, got shape {x.shape}")

    rows = np.array([fft_array(row) for row in x])
    return np.array([fft_array(col) for col in rows.T]).T


def ifft2_array(x: np.ndarray) -> np.ndarray:
    """2-D inverse DFT of a numpy array: columns first, then rows."""
    x = np.asarray(x)
    if x.ndim != 2:
        raise DimensionMismatch(f"Expected a 2-D array, got shape {x.shape}")

    cols = np.array([ifft_array(col) for col in x.T]).T
    return np.array([ifft_array(row) for row in cols])
