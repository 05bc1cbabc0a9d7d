"""Formatting helpers for bitbench reports."""


# (scale, unit, decimals), smallest first
_NS_UNITS = (
    (1, "ns", 0),
    (1_000, "µs", 1),
    (1_000_000, "ms", 2),
    (1_000_000_000, "s", 3),
)


def format_ns(ns: float) -> str:
    """Render a nanosecond duration in the largest unit it reaches."""
    scale, unit, decimals = _NS_UNITS[0]
    for candidate in _NS_UNITS:
        if ns < candidate[0]:
            break
        scale, unit, decimals = candidate
    return f"{ns / scale:.{decimals}f} {unit}"


def format_ratio(recursive_ns: float, iterative_ns: float) -> str:
    """Describe recursive time relative to iterative time."""
    if iterative_ns <= 0:
        return "∞x"
    ratio = recursive_ns / iterative_ns
    if ratio >= 1:
        return f"{ratio:.2f}x slower"
    else:
        return f"{1/ratio:.2f}x faster"
