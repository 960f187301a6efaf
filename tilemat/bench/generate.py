"""Random matrix generation with bounded element ranges."""

from typing import Optional
import numpy as np
from numpy.typing import DTypeLike

from tilemat.core.matrix import Matrix


def random_matrix(
    rows: int,
    cols: int,
    low: float,
    high: float,
    dtype: DTypeLike = np.float64,
    rng: Optional[np.random.Generator] = None,
) -> Matrix:
    """
    Matrix of uniformly distributed random elements.

    Integer types draw from the closed range [low, high]; floating types
    draw from [low, high).

    Args:
        rows, cols: Shape
        low, high: Element bounds
        dtype: Integer or floating element type
        rng: Random generator (fresh, unseeded if None)

    Returns:
        New rows x cols matrix
    """
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    if rng is None:
        rng = np.random.default_rng()

    dtype = np.dtype(dtype)
    if dtype.kind in "iu":
        data = rng.integers(low, high, size=(rows, cols), dtype=dtype, endpoint=True)
    elif dtype.kind == "f":
        data = rng.uniform(low, high, size=(rows, cols)).astype(dtype)
    else:
        raise TypeError(f"cannot generate random elements of type {dtype}")

    return Matrix.from_rows(data)
