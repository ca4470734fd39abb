"""
Exception types raised by delayfx.

Copyright (c) 2026 delayfx contributors

MIT License
"""


class DelayFxError(Exception):
    """Base class for all delayfx errors."""

    pass


class ConfigurationError(DelayFxError, ValueError):
    """Raised at engine construction when a parameter invariant is violated."""

    pass


class IndexOutOfRange(DelayFxError, IndexError):
    """Raised when a delay line read or tap position falls outside the line."""

    pass


class MismatchError(DelayFxError, ValueError):
    """Raised when compared signals differ in sample rate or length."""

    pass
