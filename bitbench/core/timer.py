"""
Timing Harness
==============

Measures the average wall-clock cost of one conversion call.

Methodology
-----------
- Warm-up: up to ``WARMUP_CALLS`` untimed calls (never more than the
  calibrated repetition count) to settle one-time setup costs.
- Measurement: exactly ``repetitions`` calls timed as a single batch with
  ``time.perf_counter_ns()``; the garbage collector is disabled for the
  batch. The per-call average is the batch time divided by the count.
- Floor: an average of zero or less (timer coarser than the call) is
  reported as ``TIME_QUANTUM_NS``, so consumers never see a non-positive
  duration.

The recursive variant is not measured for ``n <= 0`` or for
``n > RECURSION_LIMIT``; it returns the floor instead. Its repetition count
is capped at ``RECURSIVE_REPETITION_CAP``.

Both limits are empirically chosen safety margins against excessive
recursive call volume.
"""

import gc
import time
import logging
from typing import Callable, Optional

from .calibrator import repetitions_for
from .converter import iterative_binary, recursive_binary

logger = logging.getLogger(__name__)


TIME_QUANTUM_NS = 10
WARMUP_CALLS = 1000
RECURSION_LIMIT = 1_000_000
RECURSIVE_REPETITION_CAP = 10_000


class Timer:
    """
    Wall-clock span of a ``with`` block in nanoseconds.

    ``elapsed_ns`` stays 0 until the block exits; one instance times one batch.
    """

    clock = staticmethod(time.perf_counter_ns)

    def __init__(self):
        self.start_ns = 0
        self.elapsed_ns = 0

    def __enter__(self):
        self.start_ns = self.clock()
        return self

    def __exit__(self, *exc):
        self.elapsed_ns = self.clock() - self.start_ns


def floor_duration(ns: int) -> int:
    """Replace a non-positive duration with the time quantum."""
    return ns if ns > 0 else TIME_QUANTUM_NS


def measure(
    func: Callable[[int], str],
    n: int,
    repetitions: int,
    warmup: int = WARMUP_CALLS,
) -> int:
    """Average nanoseconds per ``func(n)`` call over one timed batch."""
    if repetitions <= 0:
        return TIME_QUANTUM_NS

    for _ in range(min(warmup, repetitions)):
        func(n)

    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        with Timer() as t:
            for _ in range(repetitions):
                func(n)
    finally:
        if gc_was_enabled:
            gc.enable()

    average = t.elapsed_ns // repetitions
    logger.debug(
        f"{func.__name__}({n}): {repetitions} calls in {t.elapsed_ns} ns, "
        f"{average} ns/call"
    )
    return floor_duration(average)


def measure_iterative(
    n: int,
    repetitions: Optional[int] = None,
    warmup: int = WARMUP_CALLS,
) -> int:
    if n < 0:
        return TIME_QUANTUM_NS
    if repetitions is None:
        repetitions = repetitions_for(n)
    return measure(iterative_binary, n, repetitions, warmup)


def measure_recursive(
    n: int,
    repetitions: Optional[int] = None,
    warmup: int = WARMUP_CALLS,
    recursion_limit: int = RECURSION_LIMIT,
    repetition_cap: int = RECURSIVE_REPETITION_CAP,
) -> int:
    if n > recursion_limit or n <= 0:
        return TIME_QUANTUM_NS
    if repetitions is None:
        repetitions = repetitions_for(n)
    repetitions = min(repetitions, repetition_cap)
    return measure(recursive_binary, n, repetitions, warmup)
