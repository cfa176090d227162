# src/cascim/errors.py

"""
Error types raised by the influence maximization pipeline.
"""

from typing import Any


class EmptyInputError(ValueError):
    """Raised when influence is requested over an empty cascade collection."""


class InvalidParameterError(ValueError):
    """Raised for caller-side parameter errors (e.g. k <= 0)."""


def validate_k(k: Any) -> int:
    """
    Check that the seed budget k is a positive integer.

    bool is rejected even though it is an int subclass.
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidParameterError(f"k must be a positive integer, got {k!r}.")
    if k <= 0:
        raise InvalidParameterError(f"k must be a positive integer, got {k}.")
    return k
