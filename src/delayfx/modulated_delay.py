"""
ModulatedDelay - sinusoidally modulated, interpolated delay (chorus/flanger).

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from delayfx.conversions import seconds_to_delay_samples
from delayfx.delay_line import DelayLine
from delayfx.exceptions import ConfigurationError, IndexOutOfRange
from delayfx.logger import get_logger
from delayfx.waveform import as_samples

logger = get_logger(__name__)


class ModulatedDelay:
    """
    Chorus/flanger: a delay whose tap position swings sinusoidally.

    Derived sample counts:
        DELAY   = round(delay * sample_rate)
        WIDTH   = round(width * sample_rate)
        MODFREQ = mod_freq / sample_rate      (cycles per sample)
        L       = 2 + DELAY + 2 * WIDTH       (delay line capacity)

    For each output index n from 0 to N - 2:
        TAP  = 1 + DELAY + WIDTH * sin(2 * pi * MODFREQ * n)
        i    = floor(TAP), frac = TAP - i
        push x[n], then y[n] = line[i] * frac + line[i - 1] * (1 - frac)

    The output holds the wet (delayed) signal only. Two reference quirks
    are kept on purpose:
      - TAP is 1-based while the delay line is 0-based, so the blend uses
        line[i - 1] and line[i] rather than line[i] and line[i + 1].
      - The last output sample is never computed and stays 0.0.

    Args:
        width: Peak modulation excursion in seconds (> 0)
        mod_freq: Modulation rate in Hz (> 0)
        sample_rate: Sample rate in Hz (int > 0)
        delay: Base delay in seconds (default: equal to width, the
            minimum-delay chorus). Must round to at least WIDTH samples.

    Raises:
        ConfigurationError: On non-positive parameters or WIDTH > DELAY

    Example:
        chorus = ModulatedDelay(width=0.01, mod_freq=2.0, sample_rate=44100)
        wet = chorus.process(samples)
    """

    def __init__(
        self,
        width: float,
        mod_freq: float,
        sample_rate: int,
        delay: Optional[float] = None,
    ):
        if not math.isfinite(width) or not width > 0:
            raise ConfigurationError(f"width must be finite and > 0 seconds, got {width}")
        if not math.isfinite(mod_freq) or not mod_freq > 0:
            raise ConfigurationError(f"mod_freq must be finite and > 0 Hz, got {mod_freq}")
        if int(sample_rate) != sample_rate or sample_rate <= 0:
            raise ConfigurationError(
                f"sample_rate must be a positive integer, got {sample_rate}"
            )
        if delay is None:
            delay = width
        if not math.isfinite(delay) or not delay >= 0:
            raise ConfigurationError(f"delay must be finite and >= 0 seconds, got {delay}")

        self._width = float(width)
        self._delay = float(delay)
        self._mod_freq = float(mod_freq)
        self._sample_rate = int(sample_rate)

        self._delay_samples = seconds_to_delay_samples(self._delay, self._sample_rate)
        self._width_samples = seconds_to_delay_samples(self._width, self._sample_rate)
        if self._width_samples > self._delay_samples:
            raise ConfigurationError(
                f"Width greater than basic delay: WIDTH={self._width_samples} "
                f"samples > DELAY={self._delay_samples} samples"
            )
        self._mod_freq_per_sample = self._mod_freq / self._sample_rate
        self._line_length = 2 + self._delay_samples + 2 * self._width_samples

        logger.debug(
            f"ModulatedDelay: DELAY={self._delay_samples}, WIDTH={self._width_samples}, "
            f"MODFREQ={self._mod_freq_per_sample:.3g} cycles/sample, L={self._line_length}"
        )

    @property
    def width(self) -> float:
        """Modulation excursion in seconds."""
        return self._width

    @property
    def delay(self) -> float:
        """Base delay in seconds."""
        return self._delay

    @property
    def mod_freq(self) -> float:
        """Modulation rate in Hz."""
        return self._mod_freq

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def delay_samples(self) -> int:
        """DELAY: base delay in samples."""
        return self._delay_samples

    @property
    def width_samples(self) -> int:
        """WIDTH: modulation excursion in samples."""
        return self._width_samples

    @property
    def mod_freq_per_sample(self) -> float:
        """MODFREQ: modulation rate in cycles per sample."""
        return self._mod_freq_per_sample

    @property
    def line_length(self) -> int:
        """L: capacity of the delay line."""
        return self._line_length

    def tap_positions(self, length: int) -> NDArray[np.float64]:
        """
        Fractional tap positions for output indices 0 .. length - 2.

        Returns an array of length max(length - 1, 0).
        """
        n = np.arange(max(length - 1, 0), dtype=np.float64)
        mod = np.sin(2.0 * np.pi * self._mod_freq_per_sample * n)
        return 1.0 + self._delay_samples + self._width_samples * mod

    def process(self, samples: ArrayLike) -> NDArray[np.float64]:
        """
        Apply the modulated delay.

        Args:
            samples: Input samples, shape (N,) or (N, 1). Never modified.

        Returns:
            New float64 array of length N. Index N - 1 is 0.0.

        Raises:
            IndexOutOfRange: If a tap would read outside the delay line
        """
        x = as_samples(samples)
        y = np.zeros_like(x)
        taps = self.tap_positions(len(x))
        if len(taps) == 0:
            return y

        # Checked up front so a bad configuration fails before any output
        lowest = int(np.floor(taps.min())) - 1
        highest = int(np.floor(taps.max()))
        if lowest < 0 or highest >= self._line_length:
            raise IndexOutOfRange(
                f"Tap range {lowest}..{highest} outside delay line 0..{self._line_length - 1}"
            )

        line = DelayLine(self._line_length)
        for n, tap in enumerate(taps):
            line.push(x[n])
            y[n] = line.read_interpolated(tap)

        # y[N - 1] is left at 0.0 (see class docstring)
        return y

    def __repr__(self) -> str:
        return (
            f"ModulatedDelay(width={self._width}, mod_freq={self._mod_freq}, "
            f"sample_rate={self._sample_rate}, delay={self._delay})"
        )
