"""
Repetition Calibrator
=====================

Chooses how many times a conversion is repeated inside one timed batch.

Small magnitudes convert so fast that timer resolution and loop overhead
dominate a single call, so they get many repetitions. Large magnitudes
take longer per call and get fewer, which keeps total wall time bounded.
The quadratic term makes the falloff steeper than linear because
recursive cost grows with depth as well as with the per-call cost.

    repetitions(n) = clamp(10_000_000 // (d*d + 100), 100, 1_000_000)

where ``d`` is the bit-length of ``n``. Non-positive magnitudes get the
maximum.
"""

import logging

logger = logging.getLogger(__name__)


CALIBRATION_NUMERATOR = 10_000_000
CALIBRATION_OFFSET = 100
MIN_REPETITIONS = 100
MAX_REPETITIONS = 1_000_000


def bit_length(n: int) -> int:
    """Number of halvings needed to reduce ``n`` to zero (0 for ``n <= 0``)."""
    digits = 0
    while n > 0:
        digits += 1
        n >>= 1
    return digits


def repetitions_for(n: int) -> int:
    if n <= 0:
        return MAX_REPETITIONS

    d = bit_length(n)
    repetitions = CALIBRATION_NUMERATOR // (d * d + CALIBRATION_OFFSET)
    repetitions = max(MIN_REPETITIONS, min(MAX_REPETITIONS, repetitions))
    logger.debug(f"Calibrated n={n} (bit-length {d}) to {repetitions} repetitions")
    return repetitions
