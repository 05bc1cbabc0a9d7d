"""Error types and diagnostic kinds for bitbench."""

from enum import Enum, auto


class ErrorKind(Enum):
    INVALID_MAGNITUDE = auto()
    INTERNAL_INCONSISTENCY = auto()


class InvalidMagnitudeError(ValueError):
    """Raised when a magnitude cannot be parsed as a decimal integer."""

    kind = ErrorKind.INVALID_MAGNITUDE

    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Input must be a number, got {raw!r}")
