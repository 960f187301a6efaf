"""Tolerance-aware matrix comparison."""

from typing import Any, Optional
import numpy as np
from numpy.typing import DTypeLike

from tilemat.core.errors import DimensionMismatchError
from tilemat.core.matrix import Matrix

FLOAT_TOLERANCE = 1e-6


def default_tolerance(dtype: DTypeLike) -> float:
    """Exact comparison for integers, a small absolute tolerance for floats."""
    if np.dtype(dtype).kind == "f":
        return FLOAT_TOLERANCE
    return 0


def max_abs_difference(a: Matrix, b: Matrix) -> Any:
    """
    Largest |a[i, j] - b[i, j]| over all elements.

    Raises:
        DimensionMismatchError: if the shapes differ
    """
    if a.shape != b.shape:
        raise DimensionMismatchError("compare", a.shape, b.shape)

    x, y = a.to_numpy(), b.to_numpy()
    if x.size == 0:
        return np.result_type(x, y).type(0)

    # Ordered subtraction stays non-negative for unsigned types
    diff = np.where(x >= y, x - y, y - x)
    return diff.max()


def matrices_equal(a: Matrix, b: Matrix, tolerance: Optional[float] = None) -> bool:
    """
    True when shapes match and every element differs by at most ``tolerance``.

    Args:
        a, b: Matrices to compare
        tolerance: Absolute tolerance (default_tolerance of a's dtype if None)
    """
    if a.shape != b.shape:
        return False
    if tolerance is None:
        tolerance = default_tolerance(a.dtype)
    return bool(max_abs_difference(a, b) <= tolerance)
