"""
Mixed-Radix FFT

Generalizes Cooley-Tukey to any length N >= 1 by splitting on the prime
factors of N:

    p = largest remaining factor, M = N / p
    P_i = FFT_M(x[i::p])                          for i in [0, p)
    X[k] = Σ_{i=0}^{p-1} P_i[k mod M]·e^{∓i2πki/N}  for k in [0, N)

Factors are peeled largest first. The order changes the operation count and
the intermediate layout, not the result; forward and inverse use the same
order. Power-of-two lengths go straight to the radix-2 transform, and a
length equal to its single remaining prime factor goes to the direct DFT.

This module also exposes the public 1-D API (``forward_transform`` and
``inverse_transform``, aliased as ``fft`` and ``ifft``).
"""

import logging
import math
from typing import Iterable, List, Optional

from src.gmath.complex import Complex
from src.gmath.errors import IncompleteFactorization
from src.gmath.numbers import factorize, is_power_of_two
from .dft import _dft_core
from .radix2 import _radix2_core
from .sequence import (
    FORWARD,
    INVERSE,
    ComplexSequence,
    prepare,
    scale_sequence,
    unit_root,
)

logger = logging.getLogger(__name__)


def plan_factors(n: int) -> List[int]:
    """
    Prime factors of n, largest first.

    Raises IncompleteFactorization if the factors do not multiply back to n,
    rather than decomposing the transform incorrectly.
    """
    factors = factorize(n)
    if math.prod(factors) != n:
        raise IncompleteFactorization(
            f"Factors {factors} of {n} multiply to {math.prod(factors)}"
        )
    factors.sort(reverse=True)
    logger.debug("Mixed-radix plan for N=%d: %s", n, factors)
    return factors


def _mixed_radix_core(x: ComplexSequence, factors: List[int], sign: int) -> ComplexSequence:
    """Unnormalized mixed-radix FFT of x over the (descending) factor list."""
    n = len(x)
    if n == 1:
        return [x[0]]
    if is_power_of_two(n):
        return _radix2_core(x, sign)
    if len(factors) == 1:
        return _dft_core(x, sign)

    p = factors[0]
    m = n // p
    remaining = factors[1:]
    partials = [_mixed_radix_core(x[i::p], remaining, sign) for i in range(p)]

    result = []
    for k in range(n):
        index = k % m
        acc = Complex.zero()
        for i in range(p):
            acc = acc + partials[i][index] * unit_root(k * i, n, sign)
        result.append(acc)
    return result


def forward_transform(sequence: Iterable, size: Optional[int] = None) -> ComplexSequence:
    """
    Forward DFT of any length through the mixed-radix planner.

    Parameters
    ----------
    sequence : iterable of numbers or Complex
        Input samples; real values are promoted to complex.
    size : int, optional
        Transform length. Shorter input is zero-padded. Defaults to len(sequence).

    Returns
    -------
    list of Complex
        Unnormalized spectrum of exactly ``size`` elements.

    Examples
    --------
    >>> X = forward_transform([1.0, 2.0, 1.0, -1.0, 1.5, 1.0])
    >>> len(X)
    6
    """
    x = prepare(sequence, size)
    return _mixed_radix_core(x, plan_factors(len(x)), FORWARD)


def inverse_transform(sequence: Iterable, size: Optional[int] = None, scale: bool = True) -> ComplexSequence:
    """
    Inverse DFT of any length through the mixed-radix planner.

    The 1/N normalization is applied once, here, when ``scale`` is true.
    """
    x = prepare(sequence, size)
    result = _mixed_radix_core(x, plan_factors(len(x)), INVERSE)
    if scale:
        result = scale_sequence(result, 1.0 / len(x))
    return result


fft = forward_transform
ifft = inverse_transform
