"""
Unit Tests for the gmath Module

Validates the Complex value type against Python's cmath and the
trial-division number theory helpers that plan mixed-radix transforms.

Run:
    pytest tests/test_gmath.py -v
"""

import sys
import os
import cmath
import math

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from src.gmath import (
    Complex,
    primes_up_to,
    is_prime,
    factorize,
    gcd,
    lcm,
    is_power_of_two,
    next_power_of_two,
    DivisionByZero,
    InvalidLength,
)


def assert_close(z: Complex, expected: complex, tol: float = 1e-12):
    assert abs(z.real - expected.real) < tol, f"real: {z!r} vs {expected}"
    assert abs(z.imag - expected.imag) < tol, f"imag: {z!r} vs {expected}"


class TestComplexArithmetic:
    """Test suite for Complex construction and arithmetic."""

    def test_construction(self):
        """Rectangular, polar and promoted construction."""
        assert Complex(1, 2) == Complex(1.0, 2.0)
        assert Complex(3) == Complex(3.0, 0.0)
        assert_close(Complex.from_polar(2.0, math.pi / 2), 2j)
        assert Complex.from_value(1 + 2j) == Complex(1.0, 2.0)
        assert Complex.from_value(np.float64(2.5)) == Complex(2.5, 0.0)
        assert Complex.from_value(np.complex128(1 - 1j)) == Complex(1.0, -1.0)
        assert Complex.i() * Complex.i() == Complex(-1.0, 0.0)

        with pytest.raises(TypeError):
            Complex.from_value("1+2j")

    def test_operators(self):
        """Exact results for small integer components."""
        a = Complex(1, 2)
        b = Complex(3, -1)

        assert a + b == Complex(4, 1)
        assert a - b == Complex(-2, 3)
        assert a * b == Complex(5, 5)
        assert Complex(5, 5) / b == a
        assert -a == Complex(-1, -2)
        assert a.conjugate() == Complex(1, -2)

    def test_mixed_operands(self):
        """Plain numbers are promoted on either side."""
        z = Complex(1, 1)

        assert 2 * z == Complex(2, 2)
        assert z * 2.0 == Complex(2, 2)
        assert z + 1 == Complex(2, 1)
        assert 1 - z == Complex(0, -1)
        assert 2 / Complex(0, 1) == Complex(0, -2)
        assert Complex(1, 0) == 1.0
        assert Complex(0, 1) == 1j

    def test_division_by_zero(self):
        """Division by an exact zero is a checked error."""
        with pytest.raises(DivisionByZero):
            Complex(1, 1) / Complex.zero()
        with pytest.raises(ZeroDivisionError):
            Complex(1, 1) / 0

    def test_magnitude_and_phase(self):
        z = Complex(3, 4)

        assert z.magnitude == 5.0
        assert abs(z) == 5.0
        assert z.phase == math.atan2(4, 3)
        assert z.to_polar() == (5.0, math.atan2(4, 3))
        assert complex(z) == 3 + 4j

    def test_value_semantics(self):
        """Immutable, unhashable, compared by components."""
        z = Complex(1, 2)

        with pytest.raises(AttributeError):
            z.real = 5.0
        with pytest.raises(TypeError):
            hash(z)
        assert z == Complex(1, 2)
        assert z != Complex(1, -2)
        assert Complex.zero().is_zero()
        assert not Complex(0, 1e-300).is_zero()

    def test_text_forms(self):
        assert repr(Complex(1, -2)) == "Complex(1.0, -2.0)"
        assert str(Complex(1, -2)) == "1.0 - 2.0i"
        assert str(Complex(1, 2)) == "1.0 + 2.0i"


class TestComplexFunctions:
    """Powers and transcendental functions against cmath."""

    SAMPLES = [0.3 + 0.4j, -1.2 + 0.7j, 0.5 - 1.5j, 2.0 + 0.0j]

    def test_powers(self):
        for w in self.SAMPLES:
            z = Complex.from_value(w)
            assert_close(z.powi(3), w ** 3)
            assert_close(z ** 3, w ** 3)
            assert_close(z.powi(-2), w ** -2)
            assert_close(z.powf(0.5), cmath.sqrt(w))
            assert_close(z ** 0.5, cmath.sqrt(w))
            assert_close(z ** -1.5, w ** -1.5)
            assert_close(z.sqrt(), cmath.sqrt(w))

        assert Complex.zero().powi(0) == Complex.one()
        assert Complex.zero().powi(3) == Complex.zero()
        with pytest.raises(DivisionByZero):
            Complex.zero().powi(-1)

    def test_exp_and_logs(self):
        for w in self.SAMPLES:
            z = Complex.from_value(w)
            assert_close(z.exp(), cmath.exp(w))
            assert_close(z.ln(), cmath.log(w))
            assert_close(z.log(10.0), cmath.log(w, 10))

    def test_circular(self):
        for w in self.SAMPLES:
            z = Complex.from_value(w)
            assert_close(z.sin(), cmath.sin(w))
            assert_close(z.cos(), cmath.cos(w))
            assert_close(z.tan(), cmath.tan(w))

    def test_hyperbolic(self):
        for w in self.SAMPLES:
            z = Complex.from_value(w)
            assert_close(z.sinh(), cmath.sinh(w))
            assert_close(z.cosh(), cmath.cosh(w))
            assert_close(z.tanh(), cmath.tanh(w))

    def test_inverse_functions(self):
        """Principal branches agree with cmath away from the branch cuts."""
        for w in [0.3 + 0.4j, -0.6 + 0.2j, 0.5 - 0.7j]:
            z = Complex.from_value(w)
            assert_close(z.asin(), cmath.asin(w))
            assert_close(z.acos(), cmath.acos(w))
            assert_close(z.atan(), cmath.atan(w))
            assert_close(z.asinh(), cmath.asinh(w))
            assert_close(z.acosh(), cmath.acosh(w))
            assert_close(z.atanh(), cmath.atanh(w))

    def test_tan_singularity(self, monkeypatch):
        """tan/tanh raise when the denominator is exactly zero."""
        monkeypatch.setattr(Complex, 'cos', lambda self: Complex.zero())
        monkeypatch.setattr(Complex, 'cosh', lambda self: Complex.zero())

        with pytest.raises(DivisionByZero):
            Complex(1.0, 0.0).tan()
        with pytest.raises(DivisionByZero):
            Complex(0.0, 1.0).tanh()


class TestNumbers:
    """Test suite for primes and factorization."""

    def test_primes_up_to(self):
        assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        assert primes_up_to(2) == [2]
        assert primes_up_to(1) == []
        assert primes_up_to(0) == []

    def test_is_prime(self):
        primes = [n for n in range(50) if is_prime(n)]
        assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
        assert is_prime(7919)
        assert not is_prime(7917)

    def test_factorize_fixtures(self):
        """Ascending order, with multiplicity."""
        assert factorize(1) == []
        assert factorize(2) == [2]
        assert factorize(7) == [7]
        assert factorize(12) == [2, 2, 3]
        assert factorize(360) == [2, 2, 2, 3, 3, 5]
        assert factorize(1024) == [2] * 10

    def test_factorize_keeps_large_cofactor(self):
        """Prime factors above sqrt(n) are appended, not dropped."""
        assert factorize(14) == [2, 7]
        assert factorize(2 * 3 * 97) == [2, 3, 97]
        assert factorize(2 * 9973) == [2, 9973]

    def test_factorize_product(self):
        """Product of the factors equals n for every n in [2, 10000]."""
        for n in range(2, 10001):
            factors = factorize(n)
            assert math.prod(factors) == n, f"factorize({n}) = {factors}"
            assert factors == sorted(factors)
            assert all(is_prime(p) for p in factors)

    def test_factorize_invalid(self):
        with pytest.raises(InvalidLength):
            factorize(0)
        with pytest.raises(InvalidLength):
            factorize(-6)

    def test_helpers(self):
        assert gcd(12, 18) == 6
        assert lcm(4, 6) == 12
        assert lcm(0, 5) == 0
        assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]
        assert next_power_of_two(1) == 1
        assert next_power_of_two(5) == 8
        assert next_power_of_two(8) == 8
        assert next_power_of_two(1000) == 1024
