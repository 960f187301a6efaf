"""Dense row-major matrix value type."""

import math
import numbers
import operator
from typing import Any, Iterator, Optional
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from tilemat.core.errors import DimensionMismatchError, OutOfRangeError

# Distinguishes "no fill value" from a fill value of None
_NO_INITIAL = object()


class Matrix:
    """
    Dense rows x cols matrix over a numpy element type.

    The shape is fixed at construction; only element values may change.
    Every arithmetic operation and both transposes return a new instance
    and leave their operands untouched.
    """

    __hash__ = None  # element values are mutable
    __array_ufunc__ = None  # numpy scalars defer to __rmul__

    def __init__(
        self,
        rows: int,
        cols: int,
        initial: Any = _NO_INITIAL,
        dtype: DTypeLike = None,
    ):
        """
        Create a matrix filled with zeros or with ``initial``.

        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)
            initial: Fill value (None is a valid object fill); zero of the
                element type when omitted. Floating targets round as numpy
                casts; integer targets reject values they cannot hold.
            dtype: Element type; inferred from ``initial`` (float64 without one)
        """
        rows = operator.index(rows)
        cols = operator.index(cols)
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix shape must be non-negative, got {rows}x{cols}")

        if initial is _NO_INITIAL:
            self._data = np.zeros((rows, cols), dtype=np.float64 if dtype is None else dtype)
            return

        if dtype is None:
            dtype = np.asarray(initial).dtype
        dtype = np.dtype(dtype)

        # Integer targets must hold the fill value exactly; 1.5 is not an int
        if dtype.kind in "iub" and np.asarray(initial, dtype=dtype)[()] != initial:
            raise ValueError(f"initial value {initial!r} is not representable as {dtype}")

        self._data = np.full((rows, cols), initial, dtype=dtype)

    @classmethod
    def _from_array(cls, data: NDArray) -> "Matrix":
        """Internal: wrap an owned 2-D array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_rows(cls, rows: ArrayLike, dtype: DTypeLike = None) -> "Matrix":
        """
        Build a matrix from nested row sequences or a 2-D array.

        The input is copied. Ragged or non-2-D input raises ValueError.
        """
        data = np.array(rows, dtype=dtype)
        if data.ndim != 2:
            raise ValueError(f"expected 2-D data, got {data.ndim}-D")
        return cls._from_array(data)

    @classmethod
    def zeros_like(cls, other: "Matrix") -> "Matrix":
        """Zero matrix with the shape and element type of ``other``."""
        return cls(other.rows, other.cols, dtype=other.dtype)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        """Element type."""
        return self._data.dtype

    def to_numpy(self) -> NDArray:
        """Copy of the element storage."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _check_index(self, row: int, col: int) -> tuple[int, int]:
        row = operator.index(row)
        col = operator.index(col)
        # Negative indices are rejected rather than wrapped
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfRangeError(row, col, self.shape)
        return row, col

    def get(self, row: int, col: int) -> Any:
        """Element at (row, col)."""
        row, col = self._check_index(row, col)
        return self._data[row, col]

    def set(self, row: int, col: int, value: Any) -> None:
        """Assign the element at (row, col)."""
        row, col = self._check_index(row, col)
        self._data[row, col] = value

    def __getitem__(self, index: tuple[int, int]) -> Any:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("matrix index must be a (row, col) pair")
        return self.get(*index)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("matrix index must be a (row, col) pair")
        self.set(index[0], index[1], value)

    def elements(self) -> Iterator[tuple[int, int, Any]]:
        """Yield (row, col, value) for every element in row-major order."""
        for i, row in enumerate(self._data):
            for j, value in enumerate(row):
                yield i, j, value

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "Matrix") -> "Matrix":
        """Elementwise sum; shapes must match."""
        self._require_matrix(other, "add")
        if self.shape != other.shape:
            raise DimensionMismatchError("add", self.shape, other.shape)
        return Matrix._from_array(self._data + other._data)

    def subtract(self, other: "Matrix") -> "Matrix":
        """Elementwise difference; shapes must match."""
        self._require_matrix(other, "subtract")
        if self.shape != other.shape:
            raise DimensionMismatchError("subtract", self.shape, other.shape)
        return Matrix._from_array(self._data - other._data)

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self @ other.

        Each result element is accumulated from zero in increasing k,
        C[i, j] = ((0 + A[i, 0] B[0, j]) + A[i, 1] B[1, j]) + ...,
        so floating-point results do not depend on a BLAS summation order.

        Raises:
            DimensionMismatchError: if self.cols != other.rows
        """
        self._require_matrix(other, "multiply")
        if self.cols != other.rows:
            raise DimensionMismatchError("multiply", self.shape, other.shape)

        dtype = np.result_type(self._data, other._data)
        result = np.zeros((self.rows, other.cols), dtype=dtype)

        # One rank-1 update per k keeps the per-element order of the sum
        for k in range(self.cols):
            result += np.outer(self._data[:, k], other._data[k, :])

        return Matrix._from_array(result)

    def scalar_multiply(self, scalar: Any) -> "Matrix":
        """Multiply every element by ``scalar``."""
        if not isinstance(scalar, numbers.Number):
            raise TypeError(
                f"scalar_multiply expects a number, got {type(scalar).__name__}"
            )
        return Matrix._from_array(self._data * scalar)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return self.scalar_multiply(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    @staticmethod
    def _require_matrix(other: Any, operation: str) -> None:
        if not isinstance(other, Matrix):
            raise TypeError(
                f"cannot {operation} Matrix and {type(other).__name__}"
            )

    # ------------------------------------------------------------------
    # Transposition and reduction
    # ------------------------------------------------------------------

    def _transposed_shell(self) -> "Matrix":
        """Zero cols x rows matrix of the same element type."""
        return Matrix(self.cols, self.rows, dtype=self.dtype)

    def transpose(self) -> "Matrix":
        """Naive transpose, visiting the source in row-major order."""
        result = self._transposed_shell()
        src, dst = self._data, result._data

        for i in range(self.rows):
            for j in range(self.cols):
                dst[j, i] = src[i, j]

        return result

    @property
    def T(self) -> "Matrix":
        """Alias for transpose()."""
        return self.transpose()

    def blocked_transpose(self, block_rows: int = 1, block_cols: int = 1) -> "Matrix":
        """Cache-blocked transpose; see tilemat.algebra.tiling."""
        from tilemat.algebra.tiling import blocked_transpose

        return blocked_transpose(self, block_rows, block_cols)

    def frobenius_norm(self) -> Any:
        """
        sqrt of the sum of squared elements, summed in row-major order.

        Integer element types use the truncating integer square root and
        return a Python int; callers needing an exact value should use a
        floating-point type.
        """
        total = 0
        # tolist() yields Python scalars, so integer sums cannot overflow
        for row in self._data.tolist():
            for value in row:
                total = total + value * value

        kind = self.dtype.kind
        if kind in "iu":
            # Plain int: the norm can exceed the element type's range
            return math.isqrt(int(total))
        if kind == "f":
            return self.dtype.type(math.sqrt(total))
        if hasattr(total, "sqrt"):
            return total.sqrt()
        return total ** 0.5

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    def render(self, width: int = 8, precision: Optional[int] = None) -> str:
        """
        Fixed-width text, one matrix row per line.

        Args:
            width: Field width for every element
            precision: Digits after the decimal point for floating types

        Returns:
            Rendered text (empty for a matrix without rows)
        """
        use_precision = precision is not None and self.dtype.kind == "f"
        lines = []
        for row in self._data:
            if use_precision:
                cells = [f"{value:>{width}.{precision}f}" for value in row]
            else:
                cells = [str(value).rjust(width) for value in row]
            lines.append("".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"
