"""
Binary Converters
=================

Two independent conversions of a non-negative integer to its binary
string:

  - iterative: repeated halving in a loop, bits prepended to the output
  - recursive: the same reduction expressed as self-reference,
    terminating at 0 or 1

Both come in two flavours. The plain functions (``iterative_binary``,
``recursive_binary``) are what the timer calls in its hot loop. The
``*_with_steps`` functions also count the bit-extraction operations,
one per halving, including the terminal case. Zero is a dedicated base
case: ``"0"`` in exactly one step.

The step-counting recursion is pure: every layer returns its partial
``(binary, steps)`` pair instead of bumping a shared counter.

Recursion depth equals the bit-length of the input. ``recursive_with_steps``
refuses inputs deeper than ``max_recursive_bits()`` with a ``ValueError``
rather than running into ``RecursionError``.
"""

import sys
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BinaryResult:
    """Binary string of a magnitude plus the steps taken to produce it."""
    binary: str
    steps: int

    def __iter__(self):
        yield self.binary
        yield self.steps


def _check_magnitude(n) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"Cannot convert negative magnitude {n}")


# Frames kept free for callers below the recursion.
STACK_HEADROOM = 200


def max_recursive_bits() -> int:
    """Largest bit-length ``recursive_with_steps`` accepts."""
    return sys.getrecursionlimit() - STACK_HEADROOM


def iterative_binary(n: int) -> str:
    """Binary string of ``n`` built by a halving loop."""
    if n == 0:
        return "0"
    binary = ""
    while n > 0:
        binary = str(n % 2) + binary
        n //= 2
    return binary


def recursive_binary(n: int) -> str:
    """Binary string of ``n`` built by recursing on ``n // 2`` (no depth check)."""
    if n == 0:
        return "0"
    if n == 1:
        return "1"
    return recursive_binary(n // 2) + str(n % 2)


def iterative_with_steps(n: int) -> BinaryResult:
    _check_magnitude(n)
    if n == 0:
        return BinaryResult("0", 1)

    binary = ""
    steps = 0
    remaining = n
    while remaining > 0:
        steps += 1
        binary = str(remaining % 2) + binary
        remaining //= 2
    return BinaryResult(binary, steps)


def _recurse(x: int) -> Tuple[str, int]:
    # Each layer is one step, the base case included.
    if x == 0:
        return "0", 1
    if x == 1:
        return "1", 1
    prefix, steps = _recurse(x // 2)
    return prefix + str(x % 2), steps + 1


def recursive_with_steps(n: int) -> BinaryResult:
    _check_magnitude(n)
    if n.bit_length() > max_recursive_bits():
        raise ValueError(
            f"Magnitude of {n.bit_length()} bits exceeds the recursion depth "
            f"limit of {max_recursive_bits()} bits"
        )
    binary, steps = _recurse(n)
    return BinaryResult(binary, steps)
