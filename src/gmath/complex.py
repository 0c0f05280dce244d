"""
Complex Number Primitive

Immutable value type for a + bi used by every transform in this repository.
All powers and transcendental functions are defined through the polar form or
the exponential identities, e.g.

    sin(z) = sin(re)·cosh(im) + i·cos(re)·sinh(im)

Plain Python numbers (int, float, complex) and numpy scalars are promoted on
either side of an arithmetic operator, so ``2 * z`` and ``z + 1.5`` both work.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Tuple, Union

from .errors import DivisionByZero

Number = Union[int, float, complex, "Complex"]


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Complex number with float components.

    Equality compares components exactly; instances are neither ordered nor
    hashable.
    """

    real: float
    imag: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'real', float(self.real))
        object.__setattr__(self, 'imag', float(self.imag))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> "Complex":
        """Build r·e^{iθ} from magnitude r and phase θ (radians)."""
        return cls(magnitude * math.cos(phase), magnitude * math.sin(phase))

    @classmethod
    def from_value(cls, value: Number) -> "Complex":
        """
        Promote a number to Complex.

        Real values get a zero imaginary part. Raises TypeError for anything
        that is not a number.
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, numbers.Complex):
            value = complex(value)
            return cls(value.real, value.imag)
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")

    @classmethod
    def zero(cls) -> "Complex":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Complex":
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> "Complex":
        return cls(0.0, 1.0)

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    @property
    def magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    @property
    def phase(self) -> float:
        return math.atan2(self.imag, self.real)

    def to_polar(self) -> Tuple[float, float]:
        return self.magnitude, self.phase

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def is_zero(self) -> bool:
        return self.real == 0.0 and self.imag == 0.0

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __abs__(self) -> float:
        return self.magnitude

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imag!r})"

    def __str__(self) -> str:
        sign = '-' if math.copysign(1.0, self.imag) < 0 else '+'
        return f"{self.real} {sign} {abs(self.imag)}i"

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> "Complex":
        return self

    def __add__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    __radd__ = __add__

    def __sub__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __rsub__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        denom = other.real * other.real + other.imag * other.imag
        if denom == 0.0:
            raise DivisionByZero(f"Division of {self!r} by zero complex value {other!r}")
        return Complex(
            (self.real * other.real + self.imag * other.imag) / denom,
            (self.imag * other.real - self.real * other.imag) / denom,
        )

    def __rtruediv__(self, other) -> "Complex":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __pow__(self, exponent) -> "Complex":
        if isinstance(exponent, numbers.Integral):
            return self.powi(int(exponent))
        if isinstance(exponent, numbers.Real):
            return self.powf(float(exponent))
        return NotImplemented

    # ------------------------------------------------------------------
    # Powers (polar form)
    # ------------------------------------------------------------------
    def powi(self, exponent: int) -> "Complex":
        """Integer power: (r^k, θ·k)."""
        r = self.magnitude
        if r == 0.0:
            if exponent < 0:
                raise DivisionByZero(f"Zero raised to negative power {exponent}")
            return Complex.one() if exponent == 0 else Complex.zero()
        return Complex.from_polar(r ** exponent, self.phase * exponent)

    def powf(self, exponent: float) -> "Complex":
        """Real power: (r^x, θ·x)."""
        r = self.magnitude
        if r == 0.0:
            if exponent < 0:
                raise DivisionByZero(f"Zero raised to negative power {exponent}")
            return Complex.one() if exponent == 0 else Complex.zero()
        return Complex.from_polar(r ** exponent, self.phase * exponent)

    def sqrt(self) -> "Complex":
        """Principal square root."""
        return Complex.from_polar(math.sqrt(self.magnitude), self.phase / 2.0)

    # ------------------------------------------------------------------
    # Exponential and logarithms
    # ------------------------------------------------------------------
    def exp(self) -> "Complex":
        return Complex.from_polar(math.exp(self.real), self.imag)

    def ln(self) -> "Complex":
        """Principal natural logarithm: ln r + iθ. Undefined at zero."""
        return Complex(math.log(self.magnitude), self.phase)

    def log(self, base: float) -> "Complex":
        """Logarithm in an arbitrary real base: ln(z) / ln(base)."""
        scale = math.log(base)
        return Complex(math.log(self.magnitude) / scale, self.phase / scale)

    # ------------------------------------------------------------------
    # Circular functions
    # ------------------------------------------------------------------
    def sin(self) -> "Complex":
        return Complex(math.sin(self.real) * math.cosh(self.imag),
                       math.cos(self.real) * math.sinh(self.imag))

    def cos(self) -> "Complex":
        return Complex(math.cos(self.real) * math.cosh(self.imag),
                       -math.sin(self.real) * math.sinh(self.imag))

    def tan(self) -> "Complex":
        denom = self.cos()
        if denom.is_zero():
            raise DivisionByZero(f"tan undefined at {self!r}: cos is exactly zero")
        return self.sin() / denom

    def asin(self) -> "Complex":
        # -i·ln(iz + sqrt(1 - z²))
        iz = Complex.i() * self
        root = (1.0 - self * self).sqrt()
        return -Complex.i() * (iz + root).ln()

    def acos(self) -> "Complex":
        return Complex(math.pi / 2.0) - self.asin()

    def atan(self) -> "Complex":
        # (i/2)·(ln(1 - iz) - ln(1 + iz))
        iz = Complex.i() * self
        return Complex(0.0, 0.5) * ((1.0 - iz).ln() - (1.0 + iz).ln())

    # ------------------------------------------------------------------
    # Hyperbolic functions
    # ------------------------------------------------------------------
    def sinh(self) -> "Complex":
        return Complex(math.sinh(self.real) * math.cos(self.imag),
                       math.cosh(self.real) * math.sin(self.imag))

    def cosh(self) -> "Complex":
        return Complex(math.cosh(self.real) * math.cos(self.imag),
                       math.sinh(self.real) * math.sin(self.imag))

    def tanh(self) -> "Complex":
        denom = self.cosh()
        if denom.is_zero():
            raise DivisionByZero(f"tanh undefined at {self!r}: cosh is exactly zero")
        return self.sinh() / denom

    def asinh(self) -> "Complex":
        return (self + (self * self + 1.0).sqrt()).ln()

    def acosh(self) -> "Complex":
        return (self + (self + 1.0).sqrt() * (self - 1.0).sqrt()).ln()

    def atanh(self) -> "Complex":
        return 0.5 * ((1.0 + self).ln() - (1.0 - self).ln())


def _coerce(value):
    """Promote an operand to Complex, or NotImplemented for non-numbers."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Complex):
        return Complex.from_value(value)
    return NotImplemented
