"""
Signal class pairing a mono sample vector with its sample rate.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations
import numpy as np
from numpy.typing import ArrayLike, NDArray


def as_samples(samples: ArrayLike) -> NDArray[np.float64]:
    """
    Normalize array-like audio to a 1D float64 vector.

    A (N, 1) column is flattened. Multi-channel data is rejected: the
    engines process a single channel vector.

    Raises:
        ValueError: If samples are not 1D or a single column
    """
    data = np.asarray(samples, dtype=np.float64)
    if data.ndim == 2 and data.shape[1] == 1:
        data = data[:, 0]
    elif data.ndim != 1:
        raise ValueError(
            f"samples must be 1D or a single column, got shape {data.shape}"
        )
    return data


class Signal:
    """
    A thin wrapper around a read-only mono sample vector and its sample rate.
    
    Samples are float64 values, nominally in [-1.0, 1.0]. Nothing here
    clamps them; clipping happens when a signal is written to disk.
    """
    
    def __init__(self, samples: ArrayLike, sample_rate: int):
        """
        Create a Signal.
        
        Args:
            samples: Array-like of shape (N,) or (N, 1)
            sample_rate: Sample rate in Hz (positive integer)
        
        Raises:
            ValueError: If samples have the wrong shape or sample_rate <= 0
        """
        if int(sample_rate) != sample_rate or sample_rate <= 0:
            raise ValueError(f"sample_rate must be a positive integer, got {sample_rate}")
        
        # Copy, then freeze, so neither the caller nor an engine can mutate it
        data = np.array(as_samples(samples), dtype=np.float64, copy=True)
        data.setflags(write=False)
        
        self._samples = data
        self._sample_rate = int(sample_rate)
    
    @property
    def samples(self) -> NDArray[np.float64]:
        """The read-only sample vector."""
        return self._samples
    
    @property
    def sample_rate(self) -> int:
        """Sample rate in Hz."""
        return self._sample_rate
    
    @property
    def duration(self) -> float:
        """Length in seconds."""
        return len(self._samples) / self._sample_rate
    
    def __len__(self) -> int:
        return len(self._samples)
    
    def with_samples(self, samples: ArrayLike) -> Signal:
        """Return a new Signal with the same sample rate and new samples."""
        return Signal(samples, self._sample_rate)
    
    def __repr__(self) -> str:
        return f"Signal(length={len(self)}, sample_rate={self._sample_rate})"
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return (
            self._sample_rate == other._sample_rate
            and self._samples.shape == other._samples.shape
            and np.allclose(self._samples, other._samples)
        )
