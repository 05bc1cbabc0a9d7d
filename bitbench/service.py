"""
Benchmark Service
=================

A stateless facade over the measurement core, constructed once and
handed to whatever front end serves requests (the CLI in this package,
or a web handler).

It exposes the five core operations as methods:

  - ``convert``           binary string + step count for one variant
  - ``calibrate``         repetition count for a magnitude
  - ``measure``           floored per-call duration for one variant
  - ``benchmark``         a full ``MeasurementPoint``
  - ``generate_dataset``  chart magnitudes around a user magnitude

and ``run``, which turns a raw request (magnitude + mode) into the
response document: normalized magnitude, single-run results for the
requested modes, and chart data.

Usage:
    >>> service = BenchmarkService()
    >>> service.convert(10).binary
    '1010'
    >>> service.run("abc", "both")
    {'error': 'Input must be a number'}
"""

import re
import time
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from .core import calibrator, converter, dataset, orchestrator, timer
from .core.converter import BinaryResult
from .core.orchestrator import MeasurementPoint
from .errors import InvalidMagnitudeError

logger = logging.getLogger(__name__)


MAX_MAGNITUDE = 1_000_000_000
TOO_LARGE_SENTINEL = "TOO_LARGE_FOR_RECURSION"
RECURSION_WARNING = "Input > 1,000,000 is not recommended for recursion"
INVALID_INPUT_MESSAGE = "Input must be a number"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Variant(Enum):
    ITERATIVE = 'iterative'
    RECURSIVE = 'recursive'


class Mode(Enum):
    ITERATIVE = 'iterative'
    RECURSIVE = 'recursive'
    BOTH = 'both'

    @property
    def variants(self) -> List[Variant]:
        if self is Mode.BOTH:
            return [Variant.ITERATIVE, Variant.RECURSIVE]
        return [Variant(self.value)]

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional['Mode']:
        try:
            return cls(raw)
        except ValueError:
            return None


class BenchmarkService:
    """
    Iterative-vs-recursive benchmark service.

    Holds configuration only; every call is independent, so one instance
    may serve concurrent requests.
    """

    MAX_MAGNITUDE = MAX_MAGNITUDE
    WARMUP_CALLS = timer.WARMUP_CALLS
    RECURSION_LIMIT = timer.RECURSION_LIMIT
    RECURSIVE_REPETITION_CAP = timer.RECURSIVE_REPETITION_CAP

    def __init__(
        self,
        warmup_calls: int = timer.WARMUP_CALLS,
        recursion_limit: int = timer.RECURSION_LIMIT,
        recursive_repetition_cap: int = timer.RECURSIVE_REPETITION_CAP,
        max_magnitude: int = MAX_MAGNITUDE,
        chart_budget_s: Optional[float] = None,
    ):
        self.WARMUP_CALLS = warmup_calls
        self.RECURSION_LIMIT = recursion_limit
        self.RECURSIVE_REPETITION_CAP = recursive_repetition_cap
        self.MAX_MAGNITUDE = max_magnitude
        self.chart_budget_s = chart_budget_s

    # ---------- Core operations ----------

    def convert(self, n: int, variant: Variant = Variant.ITERATIVE) -> BinaryResult:
        if variant is Variant.RECURSIVE:
            return converter.recursive_with_steps(n)
        return converter.iterative_with_steps(n)

    def calibrate(self, n: int) -> int:
        return calibrator.repetitions_for(n)

    def measure(self, n: int, variant: Variant = Variant.ITERATIVE) -> int:
        if variant is Variant.RECURSIVE:
            return timer.measure_recursive(
                n,
                warmup=self.WARMUP_CALLS,
                recursion_limit=self.RECURSION_LIMIT,
                repetition_cap=self.RECURSIVE_REPETITION_CAP,
            )
        return timer.measure_iterative(n, warmup=self.WARMUP_CALLS)

    def benchmark(self, n: int) -> MeasurementPoint:
        return orchestrator.benchmark(
            n,
            warmup=self.WARMUP_CALLS,
            recursion_limit=self.RECURSION_LIMIT,
            repetition_cap=self.RECURSIVE_REPETITION_CAP,
        )

    def generate_dataset(self, user_n: int) -> List[int]:
        return dataset.generate_sizes(user_n)

    # ---------- Request adapter ----------

    def parse_magnitude(self, raw) -> int:
        """Parse a raw magnitude and clamp it to ``[0, MAX_MAGNITUDE]``."""
        if isinstance(raw, bool):
            raise InvalidMagnitudeError(raw)
        if isinstance(raw, int):
            n = raw
        elif isinstance(raw, str) and _INTEGER_RE.fullmatch(raw):
            negative = raw[0] == '-'
            digits = raw.lstrip('+-').lstrip('0')
            # Too long to be in range; clamp without converting.
            if len(digits) > len(str(self.MAX_MAGNITUDE)):
                return 0 if negative else self.MAX_MAGNITUDE
            n = -int(digits or '0') if negative else int(digits or '0')
        else:
            raise InvalidMagnitudeError(raw)
        return max(0, min(self.MAX_MAGNITUDE, n))

    def single_run(self, n: int, variant: Variant) -> Dict[str, Any]:
        if variant is Variant.RECURSIVE and n > self.RECURSION_LIMIT:
            return {
                'binary': TOO_LARGE_SENTINEL,
                'steps': 0,
                'time': timer.TIME_QUANTUM_NS,
                'warning': RECURSION_WARNING,
            }
        result = self.convert(n, variant)
        return {
            'binary': result.binary,
            'steps': result.steps,
            'time': timer.floor_duration(self.measure(n, variant)),
        }

    def build_chart(self, user_n: int) -> Dict[str, Any]:
        """Benchmark every generated magnitude, within the time budget if set."""
        sizes: List[int] = []
        points: List[MeasurementPoint] = []
        truncated = False
        started = time.monotonic()

        for size in self.generate_dataset(user_n):
            if size <= 0:
                continue
            if self.chart_budget_s is not None and time.monotonic() - started > self.chart_budget_s:
                truncated = True
                logger.info(
                    f"Chart for n={user_n} truncated after {len(points)} points "
                    f"(budget {self.chart_budget_s}s)"
                )
                break
            sizes.append(size)
            points.append(self.benchmark(size))

        chart: Dict[str, Any] = {
            'sizes': sizes,
            'points': [p.to_dict() for p in points],
        }
        if truncated:
            chart['truncated'] = True
        return chart

    def run(self, raw_n, mode: Optional[str] = 'both') -> Dict[str, Any]:
        """Answer one request: single runs for ``mode`` plus chart data."""
        try:
            n = self.parse_magnitude(raw_n)
        except InvalidMagnitudeError as e:
            logger.debug(f"Rejected request: {e}")
            return {'error': INVALID_INPUT_MESSAGE}

        response: Dict[str, Any] = {'n': n}

        parsed_mode = Mode.parse(mode)
        if parsed_mode is None:
            logger.debug(f"Unknown mode {mode!r}, returning chart only")
        else:
            for variant in parsed_mode.variants:
                response[variant.value] = self.single_run(n, variant)

        response['chart'] = self.build_chart(n)
        return response
