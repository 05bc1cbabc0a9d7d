"""
Micro-benchmarks of the converters under pytest-benchmark.

Run with ``pytest tests/test_perf.py --benchmark-only`` for timings only;
a normal run also checks each result against ``format``.
"""

import pytest
from bitbench.core.converter import iterative_binary, recursive_binary


@pytest.mark.parametrize("n", [1, 1000, 1_000_000])
def test_iterative_binary(benchmark, n):
    assert benchmark(iterative_binary, n) == format(n, 'b')


@pytest.mark.parametrize("n", [1, 1000, 1_000_000])
def test_recursive_binary(benchmark, n):
    assert benchmark(recursive_binary, n) == format(n, 'b')
