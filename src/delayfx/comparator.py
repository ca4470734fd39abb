"""
Side-by-side comparison of two processed signals.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from delayfx.audio_io import PathLike, read_signal
from delayfx.exceptions import MismatchError
from delayfx.logger import get_logger
from delayfx.waveform import Signal

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Comparison:
    """
    Two aligned signals, the optional original, and a - b.

    Plotting is left to the caller; `times` gives the shared time axis.
    """
    a: Signal
    b: Signal
    difference: NDArray[np.float64]
    original: Optional[Signal] = None

    @property
    def sample_rate(self) -> int:
        return self.a.sample_rate

    @property
    def times(self) -> NDArray[np.float64]:
        """Time of each sample in seconds."""
        return np.arange(len(self.difference), dtype=np.float64) / self.sample_rate

    @property
    def max_abs_difference(self) -> float:
        if len(self.difference) == 0:
            return 0.0
        return float(np.max(np.abs(self.difference)))

    @property
    def rms_difference(self) -> float:
        if len(self.difference) == 0:
            return 0.0
        return float(np.sqrt(np.mean(self.difference ** 2)))


def _check_match(name: str, reference: Signal, other: Signal) -> None:
    if other.sample_rate != reference.sample_rate:
        raise MismatchError(
            f"Sampling rates do not match: {name} is {other.sample_rate} Hz, "
            f"expected {reference.sample_rate} Hz",
        )
    if len(other) != len(reference):
        raise MismatchError(
            f"Signal lengths do not match: {name} has {len(other)} samples, "
            f"expected {len(reference)}",
        )


def compare(a: Signal, b: Signal, original: Optional[Signal] = None) -> Comparison:
    """
    Align two processed signals (and optionally the original) and diff them.
    
    Args:
        a: First processed signal
        b: Second processed signal
        original: Unprocessed input, checked against a when given
    
    Returns:
        Comparison with difference = a - b
    
    Raises:
        MismatchError: If sample rates or lengths differ
    """
    _check_match("b", a, b)
    if original is not None:
        _check_match("original", a, original)
    difference = a.samples - b.samples
    comparison = Comparison(a=a, b=b, difference=difference, original=original)
    logger.debug(
        f"Compared {len(a)} samples: max |a - b| = {comparison.max_abs_difference:.3g}"
    )
    return comparison


def compare_files(
    a_path: PathLike,
    b_path: PathLike,
    original_path: Optional[PathLike] = None,
) -> Comparison:
    """Read the files (first channel) and compare them."""
    original = read_signal(original_path) if original_path is not None else None
    return compare(read_signal(a_path), read_signal(b_path), original)
