"""Tests for the command line entry point and demo."""

import numpy as np
import pytest

from tilemat import cli
from tilemat.bench import BenchmarkCase
from tilemat.demo import run_demo


def test_demo_output(capsys):
    assert cli.main(["demo"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Matrix m1:")
    assert "Transpose of m1:" in out
    assert "a @ b:" in out
    assert "58.0" in out and "154.0" in out
    assert out.rstrip().endswith("0")


def test_run_demo_returns_zero_difference():
    import io

    stream = io.StringIO()
    diff = run_demo(stream)

    assert diff.shape == (3, 3)
    assert diff.frobenius_norm() == 0
    assert "Blocked transpose of m1 (2x2 blocks):" in stream.getvalue()


def test_bench_custom_case(capsys):
    code = cli.main([
        "bench", "--rows", "6", "--cols", "5",
        "--block-rows", "4", "--block-cols", "2",
        "--dtype", "int32", "--seed", "1", "--verbose",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "Testing 6x5 matrix with type int32 (block size: 4x2)" in out
    assert "Original matrix:" in out
    assert "Test Summary: 1/1 tests passed" in out


def test_bench_deduces_block_shape(capsys):
    assert cli.main(["bench", "--rows", "3", "--cols", "9", "--seed", "0"]) == 0

    assert "(block size: 8x8)" in capsys.readouterr().out


def test_bench_default_suite(monkeypatch, capsys):
    cases = (
        BenchmarkCase(4, 6, -10, 10, 3, 4, np.int32),
        BenchmarkCase(6, 4, -1.0, 1.0, 4, 3, np.float64),
    )
    monkeypatch.setattr(cli, "DEFAULT_CASES", cases)

    assert cli.main(["bench", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "Matrix Transpose Test Suite" in out
    assert "Test Summary: 2/2 tests passed" in out


def test_bench_requires_rows_and_cols_together(capsys):
    assert cli.main(["bench", "--rows", "4"]) == 2

    assert "--rows and --cols" in capsys.readouterr().err


def test_bench_rejects_zero_block():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bench", "--rows", "2", "--cols", "2", "--block-rows", "0"])

    assert excinfo.value.code == 2


def test_log_level_flag(capsys):
    cli.main(["--log-level", "info", "bench", "--rows", "2", "--cols", "2", "--seed", "0"])

    err = capsys.readouterr().err
    assert "INFO [tilemat.bench.suite]" in err


def test_bench_rejects_inverted_range(capsys):
    code = cli.main(["bench", "--rows", "2", "--cols", "2", "--min", "5", "--max", "1"])

    assert code == 2
    assert "--min must not exceed --max" in capsys.readouterr().err
