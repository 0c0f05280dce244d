"""
Error kinds raised by the complex arithmetic primitive and the transforms.
"""


class FourierError(Exception):
    """Base class for every error raised by this package."""


class InvalidLength(FourierError, ValueError):
    """Empty input sequence, or a target length that is zero or too small."""


class DimensionMismatch(FourierError, ValueError):
    """Array is not rectangular, or disagrees with the requested dimensions."""


class DivisionByZero(FourierError, ZeroDivisionError):
    """Complex division by an exact zero (also tan/tanh singularities)."""


class IncompleteFactorization(FourierError, ArithmeticError):
    """Product of the planned factors does not reproduce the target length."""
