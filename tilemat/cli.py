"""Command line entry point: ``tilemat demo`` and ``tilemat bench``."""

import argparse
import logging
import sys
from typing import Optional, Sequence
import numpy as np

from tilemat.bench.suite import (
    DEFAULT_CASES,
    BenchmarkCase,
    format_result,
    format_summary,
    run_suite,
)
from tilemat.core.config import default_block_shape
from tilemat.demo import run_demo
from tilemat.utils.log import get_logger

DTYPE_CHOICES = ("int32", "int64", "float32", "float64")

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilemat", description="Dense matrices with a cache-blocked transpose"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $TILEMAT_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Walk through every matrix operation")

    bench = subparsers.add_parser(
        "bench", help="Compare naive and blocked transposes on random matrices"
    )
    bench.add_argument("--rows", type=_non_negative_int, help="Rows of a custom case")
    bench.add_argument("--cols", type=_non_negative_int, help="Columns of a custom case")
    bench.add_argument("--block-rows", type=_positive_int)
    bench.add_argument("--block-cols", type=_positive_int)
    bench.add_argument("--dtype", choices=DTYPE_CHOICES, default="float64")
    bench.add_argument("--min", dest="min_value", type=float, default=-100.0)
    bench.add_argument("--max", dest="max_value", type=float, default=100.0)
    bench.add_argument("--seed", type=int, default=None, help="Random seed")
    bench.add_argument("--verbose", action="store_true", help="Print small matrices")

    return parser


def _custom_case(args: argparse.Namespace) -> BenchmarkCase:
    dtype = np.dtype(args.dtype)
    default_rows, default_cols = default_block_shape(dtype)
    min_value, max_value = args.min_value, args.max_value
    if dtype.kind in "iu":
        min_value, max_value = int(min_value), int(max_value)

    return BenchmarkCase(
        rows=args.rows,
        cols=args.cols,
        min_value=min_value,
        max_value=max_value,
        block_rows=args.block_rows or default_rows,
        block_cols=args.block_cols or default_cols,
        dtype=dtype,
        verbose=args.verbose,
    )


def _run_bench(args: argparse.Namespace) -> int:
    if (args.rows is None) != (args.cols is None):
        print("error: --rows and --cols must be given together", file=sys.stderr)
        return 2
    if args.min_value > args.max_value:
        print("error: --min must not exceed --max", file=sys.stderr)
        return 2

    if args.rows is not None:
        cases = [_custom_case(args)]
    else:
        cases = list(DEFAULT_CASES)

    rng = np.random.default_rng(args.seed)
    results = run_suite(cases, rng)

    print("=" * 40)
    print("Matrix Transpose Test Suite")
    print("=" * 40)
    for result in results:
        print()
        print(format_result(result))
    print()
    print(format_summary(results))

    return 0 if all(result.passed for result in results) else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    get_logger("tilemat", level=args.log_level)
    logger.debug("command: %s", args.command)

    if args.command == "demo":
        run_demo()
        return 0
    if args.command == "bench":
        return _run_bench(args)

    parser.error(f"unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
