"""
Integer helpers: trial-division primes and the factorization used to plan
mixed-radix transforms.
"""

import math
import operator
from typing import List

from .errors import InvalidLength


def primes_up_to(limit: int) -> List[int]:
    """
    Ascending list of primes <= limit.

    2 is seeded first; every odd candidate is then tested against the primes
    found so far.
    """
    limit = operator.index(limit)
    if limit < 2:
        return []

    primes = [2]
    candidate = 3
    while candidate <= limit:
        is_candidate_prime = True
        for prime in primes:
            if prime * prime > candidate:
                break
            if candidate % prime == 0:
                is_candidate_prime = False
                break
        if is_candidate_prime:
            primes.append(candidate)
        candidate += 2
    return primes


def is_prime(n: int) -> bool:
    """Trial division by the primes up to sqrt(n)."""
    n = operator.index(n)
    if n < 2:
        return False
    for prime in primes_up_to(math.isqrt(n)):
        if n % prime == 0:
            return False
    return True


def factorize(n: int) -> List[int]:
    """
    Prime factors of n with multiplicity, in ascending order.

    Divides out every prime up to sqrt(n) + 1; whatever quotient is left above
    1 is itself prime and is appended last, so the product of the result is
    always n.

    >>> factorize(12)
    [2, 2, 3]
    >>> factorize(14)
    [2, 7]
    >>> factorize(1)
    []
    """
    n = operator.index(n)
    if n < 1:
        raise InvalidLength(f"Cannot factorize {n}: expected a positive integer")

    factors = []
    remaining = n
    for prime in primes_up_to(math.isqrt(n) + 1):
        if prime * prime > remaining:
            break
        while remaining % prime == 0:
            factors.append(prime)
            remaining //= prime
    if remaining > 1:
        factors.append(remaining)
    return factors


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
