"""
Time and sample-count conversion helpers.

Copyright (c) 2026 delayfx contributors

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike


def seconds_to_samples(seconds: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert seconds to sample count.
    
    Args:
        seconds: Duration in seconds
        sample_rate: Sample rate in Hz
    
    Returns:
        Number of samples (float, caller may want to round)
    
    Example:
        >>> seconds_to_samples(0.5, 44100)
        22050.0
    """
    seconds = np.asarray(seconds, dtype=np.float64)
    return seconds * sample_rate


def samples_to_seconds(samples: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert sample count to seconds.
    
    Example:
        >>> samples_to_seconds(22050, 44100)
        0.5
    """
    samples = np.asarray(samples, dtype=np.float64)
    return samples / sample_rate


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() sends halves to the nearest even integer, so a
    0.5 s delay at an odd sample rate would come out one sample short.
    """
    return int(np.sign(value) * np.floor(abs(value) + 0.5))


def seconds_to_delay_samples(seconds: float, sample_rate: float) -> int:
    """
    Whole number of samples for a delay of `seconds` at `sample_rate`.

    Example:
        >>> seconds_to_delay_samples(0.01, 44100)
        441
    """
    return round_half_away(float(seconds_to_samples(seconds, sample_rate)))
