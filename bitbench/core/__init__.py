"""
Measurement core: converters, calibrator, timer, orchestrator and
dataset generator. Every function here is stateless and reentrant.
"""

from bitbench.core.converter import (
    BinaryResult,
    iterative_binary,
    recursive_binary,
    iterative_with_steps,
    recursive_with_steps,
)
from bitbench.core.calibrator import bit_length, repetitions_for
from bitbench.core.timer import (
    Timer,
    TIME_QUANTUM_NS,
    RECURSION_LIMIT,
    RECURSIVE_REPETITION_CAP,
    measure,
    measure_iterative,
    measure_recursive,
)
from bitbench.core.orchestrator import MeasurementPoint, InconsistencyEvent, benchmark
from bitbench.core.dataset import LADDER, generate_sizes

__all__ = [
    'BinaryResult',
    'iterative_binary',
    'recursive_binary',
    'iterative_with_steps',
    'recursive_with_steps',
    'bit_length',
    'repetitions_for',
    'Timer',
    'TIME_QUANTUM_NS',
    'RECURSION_LIMIT',
    'RECURSIVE_REPETITION_CAP',
    'measure',
    'measure_iterative',
    'measure_recursive',
    'MeasurementPoint',
    'InconsistencyEvent',
    'benchmark',
    'LADDER',
    'generate_sizes',
]
