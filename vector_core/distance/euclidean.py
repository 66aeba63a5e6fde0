"""
Euclidean (L2) distance between numeric vectors.

Both functions accept any one-dimensional sequence of numbers (lists, tuples,
NumPy arrays) and accumulate in float64.
"""

from typing import Sequence, Union

import numpy as np

VectorLike = Union[Sequence[float], np.ndarray]


class DimensionMismatchError(ValueError):
    """Raised by the strict distance when operand lengths differ."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Vector dimension mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


def _as_vector(values: VectorLike) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"Expected a one-dimensional vector, got shape {array.shape}")
    return array


def euclidean(a: VectorLike, b: VectorLike) -> float:
    """
    Compute the Euclidean distance between two vectors.

    Elements are paired by position up to the length of the shorter operand;
    any tail of the longer one is ignored. Two empty vectors are at distance 0.0.
    NaN or infinite components are not rejected and propagate into the result.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Non-negative distance (or NaN when a component is NaN)

    Example:
        >>> euclidean([0.0, 0.0], [3.0, 4.0])
        5.0
    """
    x = _as_vector(a)
    y = _as_vector(b)

    n = min(x.shape[0], y.shape[0])
    diff = x[:n] - y[:n]
    return float(np.sqrt(np.sum(diff * diff)))


def euclidean_strict(a: VectorLike, b: VectorLike) -> float:
    """
    Euclidean distance that refuses operands of different lengths.

    Raises:
        DimensionMismatchError: If ``len(a) != len(b)``
    """
    x = _as_vector(a)
    y = _as_vector(b)

    if x.shape[0] != y.shape[0]:
        raise DimensionMismatchError(x.shape[0], y.shape[0])

    return euclidean(x, y)
