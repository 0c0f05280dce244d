"""
Fourier Module - Hand-written DFT, FFT and 2-D transforms

Every transform works on lists of ``Complex`` (real input is promoted) and
returns a new list; inputs are zero-padded to the requested length, never
truncated.

Modules:
    - dft: direct O(N²) reference transform
    - radix2: recursive power-of-two Cooley-Tukey FFT
    - mixed_radix: Cooley-Tukey over the prime factors of any length
    - transform2d: separable 2-D transform (rows, then columns)
    - accelerated: numba-compiled numpy-array backend
"""

from .sequence import (
    as_complex_sequence,
    zero_pad,
    energy,
    max_abs_error,
    to_numpy,
    from_numpy,
)
from .dft import dft, idft
from .radix2 import fft_radix2, ifft_radix2
from .mixed_radix import (
    plan_factors,
    forward_transform,
    inverse_transform,
    fft,
    ifft,
)
from .transform2d import (
    forward_transform_2d,
    inverse_transform_2d,
    fft2,
    ifft2,
)
from .accelerated import fft_array, ifft_array, fft2_array, ifft2_array

__all__ = [
    # Sequence helpers
    'as_complex_sequence',
    'zero_pad',
    'energy',
    'max_abs_error',
    'to_numpy',
    'from_numpy',
    # Direct transform
    'dft',
    'idft',
    # Radix-2
    'fft_radix2',
    'ifft_radix2',
    # Mixed-radix (public 1-D API)
    'plan_factors',
    'forward_transform',
    'inverse_transform',
    'fft',
    'ifft',
    # 2-D
    'forward_transform_2d',
    'inverse_transform_2d',
    'fft2',
    'ifft2',
    # Array backend
    'fft_array',
    'ifft_array',
    'fft2_array',
    'ifft2_array',
]

__version__ = '1.0.0'
