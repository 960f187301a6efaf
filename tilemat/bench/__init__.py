"""Randomized correctness and timing harness for the transposes."""

from tilemat.bench.generate import random_matrix
from tilemat.bench.compare import default_tolerance, max_abs_difference, matrices_equal
from tilemat.bench.suite import (
    DEFAULT_CASES,
    BenchmarkCase,
    BenchmarkResult,
    format_result,
    format_summary,
    run_case,
    run_suite,
)

__all__ = [
    "random_matrix",
    "default_tolerance",
    "max_abs_difference",
    "matrices_equal",
    "DEFAULT_CASES",
    "BenchmarkCase",
    "BenchmarkResult",
    "format_result",
    "format_summary",
    "run_case",
    "run_suite",
]
