"""
CombFilter - feedforward (FIR) and feedback (IIR) comb filters.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numba import jit
from numpy.typing import ArrayLike, NDArray

from delayfx.config import handle_error
from delayfx.conversions import seconds_to_delay_samples
from delayfx.exceptions import ConfigurationError
from delayfx.logger import get_logger
from delayfx.waveform import as_samples

logger = get_logger(__name__)


@jit(nopython=True, cache=True)
def _comb_iir_numba(x: np.ndarray, delay: int, gain: float) -> np.ndarray:
    """
    Numba-accelerated feedback comb recurrence.

    The difference equation is:
        y[n] = x[n]                      for n < delay
        y[n] = x[n] + gain * y[n - delay] for n >= delay

    Requires delay >= 1. Each output depends on an earlier output, so the
    loop is inherently sequential.
    """
    length = x.shape[0]
    y = np.empty(length, dtype=np.float64)
    for n in range(length):
        if n < delay:
            y[n] = x[n]
        else:
            y[n] = x[n] + gain * y[n - delay]
    return y


class FilterType(Enum):
    """Comb filter topology."""
    FIR = "fir"
    IIR = "iir"


@dataclass(frozen=True, eq=False)
class CombOutputs:
    """FIR and IIR results computed from the same input."""
    fir: NDArray[np.float64]
    iir: NDArray[np.float64]


class CombFilter:
    """
    Comb filter with a fixed integer delay.

    FIR (feedforward):
        y[n] = x[n] + gain * x[n - delay]
    IIR (feedback):
        y[n] = x[n] + gain * y[n - delay]

    For n < delay there is no delayed term yet and y[n] = x[n] in both
    variants. A delay at or beyond the input length therefore returns the
    input unchanged.

    The gain is not clamped. With |gain| >= 1 the IIR output grows without
    bound; that is a characteristic of the filter, not an error, unless
    check_stability is set.

    Args:
        delay_samples: Delay in samples (int >= 0)
        gain: Feedforward/feedback coefficient (finite float)
        check_stability: If True, report |gain| >= 1 through handle_error
            (ConfigurationError in STRICT mode, a warning in LENIENT mode)

    Example:
        comb = CombFilter(delay_samples=22050, gain=0.5)
        outputs = comb.process_both(samples)
        outputs.fir, outputs.iir
    """

    def __init__(
        self,
        delay_samples: int,
        gain: float,
        check_stability: bool = False,
    ):
        if isinstance(delay_samples, float) and delay_samples.is_integer():
            delay_samples = int(delay_samples)
        if isinstance(delay_samples, bool) or not isinstance(delay_samples, (int, np.integer)):
            raise ConfigurationError(
                f"delay_samples must be an integer, got {delay_samples!r}"
            )
        if delay_samples < 0:
            raise ConfigurationError(
                f"delay_samples must be >= 0, got {delay_samples}"
            )
        if not math.isfinite(gain):
            raise ConfigurationError(f"gain must be finite, got {gain}")

        self._delay_samples = int(delay_samples)
        self._gain = float(gain)

        if check_stability and abs(self._gain) >= 1.0:
            handle_error(
                f"Comb gain {self._gain} has |gain| >= 1; "
                f"the feedback comb will not decay.",
                exception_class=ConfigurationError,
            )

        logger.debug(f"CombFilter: delay={self._delay_samples} samples, gain={self._gain}")

    @classmethod
    def from_seconds(
        cls,
        delay_seconds: float,
        sample_rate: int,
        gain: float,
        check_stability: bool = False,
    ) -> CombFilter:
        """
        Build a comb filter from a delay in seconds.

        The delay is rounded to the nearest sample, halves away from zero.
        """
        if sample_rate <= 0:
            raise ConfigurationError(f"sample_rate must be > 0, got {sample_rate}")
        if not math.isfinite(delay_seconds) or delay_seconds < 0:
            raise ConfigurationError(f"delay_seconds must be finite and >= 0, got {delay_seconds}")
        return cls(
            seconds_to_delay_samples(delay_seconds, sample_rate),
            gain,
            check_stability=check_stability,
        )

    @property
    def delay_samples(self) -> int:
        """Delay in samples."""
        return self._delay_samples

    @property
    def gain(self) -> float:
        """Feedforward/feedback coefficient."""
        return self._gain

    def process_fir(self, samples: ArrayLike) -> NDArray[np.float64]:
        """Feedforward comb: the delayed term comes from the input."""
        x = as_samples(samples)
        d = self._delay_samples
        if d == 0:
            return x * (1.0 + self._gain)
        y = np.empty_like(x)
        y[:d] = x[:d]
        y[d:] = x[d:] + self._gain * x[:-d]
        return y

    def process_iir(self, samples: ArrayLike) -> NDArray[np.float64]:
        """Feedback comb: the delayed term comes from the output."""
        x = as_samples(samples)
        d = self._delay_samples
        if d == 0:
            # y[n] - gain * y[n] has no causal reading; take the dry sample
            # as the delayed term, like the FIR variant
            return x * (1.0 + self._gain)
        return _comb_iir_numba(np.ascontiguousarray(x), d, self._gain)

    def process(
        self,
        samples: ArrayLike,
        filter_type: FilterType = FilterType.FIR,
    ) -> NDArray[np.float64]:
        """
        Apply one comb variant.

        Args:
            samples: Input samples, shape (N,) or (N, 1). Never modified.
            filter_type: FilterType.FIR or FilterType.IIR

        Returns:
            New float64 array of length N
        """
        if filter_type == FilterType.FIR:
            return self.process_fir(samples)
        elif filter_type == FilterType.IIR:
            return self.process_iir(samples)
        raise ValueError(f"Unknown filter type: {filter_type!r}")

    def process_both(self, samples: ArrayLike) -> CombOutputs:
        """Run FIR and IIR over the same input and keep both results."""
        return CombOutputs(
            fir=self.process_fir(samples),
            iir=self.process_iir(samples),
        )

    def __repr__(self) -> str:
        return f"CombFilter(delay_samples={self._delay_samples}, gain={self._gain})"
