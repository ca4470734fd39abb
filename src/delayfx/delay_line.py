"""
DelayLine - fixed-capacity ring buffer of the most recent samples.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations

import math

import numpy as np

from delayfx.exceptions import ConfigurationError, IndexOutOfRange


class DelayLine:
    """
    Sliding window of the most recent `capacity` samples, newest first.

    Behaves exactly like a shift array: push() prepends a sample and drops
    the oldest, read(0) is the newest sample and read(capacity - 1) the
    oldest. Internally a ring buffer, so a push is O(1).

    All slots start at 0.0, which gives the cold-start transient: until the
    line has filled, reads past the pushed history return silence.

    Args:
        capacity: Number of samples held (>= 1)

    Example:
        line = DelayLine(3)
        for s in (1.0, 2.0, 3.0):
            line.push(s)
        line.read(0)  # 3.0
        line.read(2)  # 1.0
    """

    def __init__(self, capacity: int):
        if int(capacity) != capacity or capacity < 1:
            raise ConfigurationError(
                f"DelayLine capacity must be a positive integer, got {capacity}"
            )
        self._capacity = int(capacity)
        self._buffer = np.zeros(self._capacity, dtype=np.float64)
        # Slot holding read(0); moves backwards on each push
        self._head = 0

    @property
    def capacity(self) -> int:
        """Number of samples held."""
        return self._capacity

    def __len__(self) -> int:
        return self._capacity

    def push(self, sample: float) -> None:
        """Prepend a sample, evicting the one at index capacity - 1."""
        self._head = (self._head - 1) % self._capacity
        self._buffer[self._head] = sample

    def read(self, index: int) -> float:
        """
        Return the sample `index` steps back from the newest one.

        Raises:
            IndexOutOfRange: If index < 0 or index >= capacity
        """
        if index < 0 or index >= self._capacity:
            raise IndexOutOfRange(
                f"DelayLine index {index} outside 0..{self._capacity - 1}"
            )
        return float(self._buffer[(self._head + index) % self._capacity])

    def read_interpolated(self, tap: float) -> float:
        """
        Linearly interpolated read at a fractional tap position.

        The tap uses 1-based arithmetic against this 0-based line: with
        i = floor(tap) and frac = tap - i, the result is
        read(i) * frac + read(i - 1) * (1 - frac). A tap of 1.0 therefore
        returns read(0) exactly.

        Raises:
            IndexOutOfRange: If i - 1 or i falls outside the line
        """
        i = math.floor(tap)
        frac = tap - i
        if i - 1 < 0 or i >= self._capacity:
            raise IndexOutOfRange(
                f"Tap {tap} needs indices {i - 1} and {i}, "
                f"outside 0..{self._capacity - 1}"
            )
        return self.read(i) * frac + self.read(i - 1) * (1.0 - frac)

    def snapshot(self) -> np.ndarray:
        """Contents as a new array, newest first."""
        return np.roll(self._buffer, -self._head)

    def reset(self) -> None:
        """Clear the line back to silence."""
        self._buffer[:] = 0.0
        self._head = 0

    def __repr__(self) -> str:
        return f"DelayLine(capacity={self._capacity})"
