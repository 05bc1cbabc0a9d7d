"""
Benchmark Orchestrator
======================

Produces one ``MeasurementPoint`` for a single magnitude:

  1. iterative ``BinaryResult`` (always)
  2. recursive ``BinaryResult``, unless ``n`` exceeds the recursion limit,
     cross-checked against the iterative one
  3. per-call durations of both variants from the timer
  4. floor enforcement on both durations

A disagreement between the converters is an internal defect. It is
reported as an ``InconsistencyEvent`` on the logger and never surfaced to
the caller; the point is still returned.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..errors import ErrorKind
from .converter import BinaryResult, iterative_with_steps, recursive_with_steps
from .timer import (
    RECURSION_LIMIT,
    RECURSIVE_REPETITION_CAP,
    WARMUP_CALLS,
    floor_duration,
    measure_iterative,
    measure_recursive,
)

logger = logging.getLogger(__name__)


def recursion_timed(n: int, recursive_steps: int) -> bool:
    """Whether the recursive duration at ``n`` is a measurement rather than the floor."""
    # 0 converts recursively but is never timed; beyond the limit neither happens.
    return n > 0 and recursive_steps > 0


@dataclass(frozen=True)
class MeasurementPoint:
    """Timings and step counts of both variants at one magnitude."""
    n: int
    iterative_ns: int
    recursive_ns: int
    iterative_steps: int
    recursive_steps: int
    # None when the recursive variant was not run
    consistent: Optional[bool] = None

    @property
    def recursion_measured(self) -> bool:
        return recursion_timed(self.n, self.recursive_steps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'timeIterative': self.iterative_ns,
            'timeRecursive': self.recursive_ns,
            'stepsIterative': self.iterative_steps,
            'stepsRecursive': self.recursive_steps,
        }


@dataclass(frozen=True)
class InconsistencyEvent:
    """Record of the two converters disagreeing on one magnitude."""
    n: int
    iterative: str
    recursive: str
    kind: ErrorKind = ErrorKind.INTERNAL_INCONSISTENCY

    def __str__(self):
        return (
            f"{self.kind.name}[n={self.n}]: iterative={self.iterative!r} "
            f"recursive={self.recursive!r}"
        )


def check_consistency(n: int, iterative: BinaryResult, recursive: BinaryResult) -> bool:
    if iterative.binary == recursive.binary:
        return True
    event = InconsistencyEvent(n, iterative.binary, recursive.binary)
    logger.warning(f"Conversion mismatch: {event}", extra={'event': event})
    return False


def benchmark(
    n: int,
    warmup: int = WARMUP_CALLS,
    recursion_limit: int = RECURSION_LIMIT,
    repetition_cap: int = RECURSIVE_REPETITION_CAP,
    iterative: Callable[[int], BinaryResult] = iterative_with_steps,
    recursive: Callable[[int], BinaryResult] = recursive_with_steps,
) -> MeasurementPoint:
    """Measure both converters at magnitude ``n``."""
    iterative_result = iterative(n)

    if n > recursion_limit:
        recursive_steps = 0
        consistent = None
    else:
        recursive_result = recursive(n)
        recursive_steps = recursive_result.steps
        consistent = check_consistency(n, iterative_result, recursive_result)

    iterative_ns = measure_iterative(n, warmup=warmup)
    recursive_ns = measure_recursive(
        n,
        warmup=warmup,
        recursion_limit=recursion_limit,
        repetition_cap=repetition_cap,
    )

    return MeasurementPoint(
        n=n,
        iterative_ns=floor_duration(iterative_ns),
        recursive_ns=floor_duration(recursive_ns),
        iterative_steps=iterative_result.steps,
        recursive_steps=recursive_steps,
        consistent=consistent,
    )
