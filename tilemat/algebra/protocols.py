"""Transpose strategy protocol."""

from typing import Protocol

from tilemat.core.matrix import Matrix


class Transposer(Protocol):
    """
    Anything that turns a rows x cols Matrix into its cols x rows transpose.
    The benchmark times NaiveTransposer and BlockedTransposer through it.
    """

    @property
    def name(self) -> str:
        """Short label used in reports."""
        ...

    def transpose(self, matrix: Matrix) -> Matrix:
        """
        Transpose a matrix.

        Args:
            matrix: Source matrix (rows x cols)

        Returns:
            New cols x rows matrix with result[j, i] == matrix[i, j]
        """
        ...
