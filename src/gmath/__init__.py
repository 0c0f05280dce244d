"""
General math primitives for the transform engine.

Modules:
    - complex: immutable complex number value type
    - numbers: primes, factorization and power-of-two helpers
    - errors: error kinds shared with the fourier package
"""

from .complex import Complex
from .numbers import (
    primes_up_to,
    is_prime,
    factorize,
    gcd,
    lcm,
    is_power_of_two,
    next_power_of_two,
)
from .errors import (
    FourierError,
    InvalidLength,
    DimensionMismatch,
    DivisionByZero,
    IncompleteFactorization,
)

__all__ = [
    'Complex',
    # Number theory
    'primes_up_to',
    'is_prime',
    'factorize',
    'gcd',
    'lcm',
    'is_power_of_two',
    'next_power_of_two',
    # Errors
    'FourierError',
    'InvalidLength',
    'DimensionMismatch',
    'DivisionByZero',
    'IncompleteFactorization',
]
