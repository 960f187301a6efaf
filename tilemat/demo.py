"""Walkthrough of every matrix operation on small examples."""

import sys
from typing import Optional, TextIO
import numpy as np

from tilemat.core.matrix import Matrix


def _show(title: str, matrix: Matrix, stream: TextIO) -> None:
    print(f"\n{title}:", file=stream)
    print(matrix.render(), file=stream)


def run_demo(stream: Optional[TextIO] = None) -> Matrix:
    """
    Print each operation's result and return the norm-checked difference.

    The returned matrix is naive minus blocked transpose of a 3x3 matrix,
    which is all zeros.
    """
    if stream is None:
        stream = sys.stdout

    m1 = Matrix(3, 3, dtype=np.int64)
    counter = 1
    for i in range(3):
        for j in range(3):
            m1[i, j] = counter
            counter += 1
    print("Matrix m1:", file=stream)
    print(m1.render(), file=stream)

    m2 = Matrix(3, 3, 2)
    _show("Matrix m2 (all 2s)", m2, stream)
    _show("m1 + m2", m1 + m2, stream)
    _show("m1 * 3", m1 * 3, stream)

    m5 = m1.transpose()
    _show("Transpose of m1", m5, stream)

    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]], dtype=np.float64)
    b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]], dtype=np.float64)
    _show("Matrix a (2x3)", a, stream)
    _show("Matrix b (3x2)", b, stream)
    _show("a @ b", a @ b, stream)

    m6 = m1.blocked_transpose(2, 2)
    _show("Blocked transpose of m1 (2x2 blocks)", m6, stream)

    diff = m5 - m6
    _show("Difference between naive and blocked transpose", diff, stream)
    print("\nFrobenius norm of the difference:", file=stream)
    print(diff.frobenius_norm(), file=stream)

    return diff
