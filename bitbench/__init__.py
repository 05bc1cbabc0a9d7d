"""
bitbench: Iterative vs Recursive Decimal-to-Binary Benchmark
============================================================

Measures two conversions of a non-negative integer to its binary string,
one iterative and one recursive, and reports per-call time and step
counts across a ladder of magnitudes for charting.

Core Components:
    - core.converter: the two conversions, with and without step counts
    - core.calibrator: repetition count per magnitude
    - core.timer: warm-up + batch timing with a 10 ns floor
    - core.orchestrator: one cross-checked MeasurementPoint per magnitude
    - core.dataset: chart magnitudes around a user magnitude
    - service: stateless facade and request adapter
    - report: tables, JSON export and charts

Usage:
    >>> from bitbench import BenchmarkService
    >>> service = BenchmarkService()
    >>> point = service.benchmark(10)
    >>> point.iterative_steps, point.recursive_steps
    (4, 4)
"""

__version__ = "1.0.0"

from bitbench.core import (
    BinaryResult,
    MeasurementPoint,
    InconsistencyEvent,
    iterative_with_steps,
    recursive_with_steps,
    repetitions_for,
    measure_iterative,
    measure_recursive,
    benchmark,
    generate_sizes,
)
from bitbench.errors import ErrorKind, InvalidMagnitudeError
from bitbench.service import BenchmarkService, Mode, Variant
