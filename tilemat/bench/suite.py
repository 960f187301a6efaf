"""Naive vs blocked transpose benchmark and correctness suite."""

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence
import numpy as np
from numpy.typing import DTypeLike

from tilemat.algebra.transposers import BlockedTransposer, NaiveTransposer
from tilemat.bench.compare import default_tolerance, matrices_equal, max_abs_difference
from tilemat.bench.generate import random_matrix
from tilemat.core.matrix import Matrix

logger = logging.getLogger(__name__)

# Matrices at most this size are printed in verbose reports
VERBOSE_MAX_DIM = 10


@dataclass(frozen=True)
class BenchmarkCase:
    """One randomized transpose comparison."""

    rows: int
    cols: int
    min_value: float
    max_value: float
    block_rows: int
    block_cols: int
    dtype: DTypeLike = np.float64
    verbose: bool = False

    @property
    def label(self) -> str:
        return (
            f"{self.rows}x{self.cols} matrix with type {np.dtype(self.dtype).name} "
            f"(block size: {self.block_rows}x{self.block_cols})"
        )


@dataclass
class BenchmarkResult:
    """Timings and verdict for one case."""

    case: BenchmarkCase
    naive_seconds: float
    blocked_seconds: float
    max_difference: Any
    passed: bool
    original: Matrix
    naive_result: Matrix
    blocked_result: Matrix

    @property
    def speedup(self) -> float:
        """naive time / blocked time (inf if the blocked run was unmeasurable)."""
        if self.blocked_seconds <= 0:
            return math.inf
        return self.naive_seconds / self.blocked_seconds


# The original suite's cases, scaled down for an interpreted naive transpose
DEFAULT_CASES: tuple[BenchmarkCase, ...] = (
    BenchmarkCase(5, 5, -100, 100, 2, 2, np.int32, verbose=True),
    BenchmarkCase(10, 20, -1000, 1000, 4, 4, np.int32),
    BenchmarkCase(200, 200, -10000, 10000, 16, 16, np.int32),
    BenchmarkCase(256, 256, -10000, 10000, 32, 32, np.int32),
    BenchmarkCase(5, 5, -100.0, 100.0, 2, 2, np.float64, verbose=True),
    BenchmarkCase(512, 512, -1000.0, 1000.0, 64, 64, np.float64),
    BenchmarkCase(300, 100, -500.0, 500.0, 8, 8, np.float64),
    BenchmarkCase(100, 300, -500.0, 500.0, 8, 8, np.float64),
    BenchmarkCase(150, 150, -100.0, 100.0, 8, 8, np.float32),
    BenchmarkCase(200, 200, -100.0, 100.0, 16, 16, np.float32),
)


def _timed(transposer, matrix: Matrix) -> tuple[Matrix, float]:
    start = time.perf_counter()
    result = transposer.transpose(matrix)
    return result, time.perf_counter() - start


def run_case(
    case: BenchmarkCase,
    rng: Optional[np.random.Generator] = None,
) -> BenchmarkResult:
    """
    Generate a random matrix and compare naive and blocked transposes.

    Args:
        case: Shape, element range, block shape and dtype
        rng: Random generator (fresh, unseeded if None)

    Returns:
        Timings, maximum absolute difference and pass/fail
    """
    original = random_matrix(
        case.rows, case.cols, case.min_value, case.max_value, case.dtype, rng
    )

    naive_result, naive_seconds = _timed(NaiveTransposer(), original)
    blocked_result, blocked_seconds = _timed(
        BlockedTransposer(case.block_rows, case.block_cols), original
    )

    max_difference = max_abs_difference(naive_result, blocked_result)
    passed = matrices_equal(
        naive_result, blocked_result, default_tolerance(case.dtype)
    )

    logger.info(
        "%s: naive %.6fs, blocked %.6fs, %s",
        case.label, naive_seconds, blocked_seconds, "passed" if passed else "FAILED",
    )

    return BenchmarkResult(
        case=case,
        naive_seconds=naive_seconds,
        blocked_seconds=blocked_seconds,
        max_difference=max_difference,
        passed=passed,
        original=original,
        naive_result=naive_result,
        blocked_result=blocked_result,
    )


def run_suite(
    cases: Sequence[BenchmarkCase] = DEFAULT_CASES,
    rng: Optional[np.random.Generator] = None,
) -> list[BenchmarkResult]:
    """Run every case with a shared generator."""
    if rng is None:
        rng = np.random.default_rng()
    return [run_case(case, rng) for case in cases]


def format_result(result: BenchmarkResult) -> str:
    """Human-readable report for one case."""
    case = result.case
    lines = [
        f"Testing {case.label}",
        f"  Standard transpose time:  {result.naive_seconds * 1e6:10.0f} us",
        f"  Optimized transpose time: {result.blocked_seconds * 1e6:10.0f} us",
        f"  Speedup: {result.speedup:.2f}x",
        f"  Max absolute difference: {result.max_difference}",
        f"  Test {'PASSED' if result.passed else 'FAILED'}",
    ]

    if (
        case.verbose
        and case.rows <= VERBOSE_MAX_DIM
        and case.cols <= VERBOSE_MAX_DIM
    ):
        precision = 2 if np.dtype(case.dtype).kind == "f" else None
        sections = [
            ("Original matrix", result.original),
            ("Standard transpose", result.naive_result),
            ("Optimized transpose", result.blocked_result),
        ]
        if not result.passed:
            sections.append(
                ("Difference", result.naive_result - result.blocked_result)
            )
        for title, matrix in sections:
            lines.append("")
            lines.append(f"  {title}:")
            lines.append(matrix.render(width=10, precision=precision))

    return "\n".join(lines)


def format_summary(results: Sequence[BenchmarkResult]) -> str:
    """Pass count banner for a suite run."""
    passed = sum(1 for result in results if result.passed)
    rule = "=" * 40
    return "\n".join([
        rule,
        f"Test Summary: {passed}/{len(results)} tests passed",
        rule,
    ])
