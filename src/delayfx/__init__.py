"""
delayfx - comb filter and modulated delay (chorus/flanger) effects.

Copyright (c) 2026 delayfx contributors

MIT License
"""

__version__ = "0.1.0"

from delayfx.config import ErrorMode, set_error_mode, get_error_mode, handle_error
from delayfx.exceptions import (
    DelayFxError,
    ConfigurationError,
    IndexOutOfRange,
    MismatchError,
)
from delayfx.waveform import Signal, as_samples
from delayfx.delay_line import DelayLine
from delayfx.comb_filter import CombFilter, CombOutputs, FilterType
from delayfx.modulated_delay import ModulatedDelay
from delayfx.comparator import Comparison, compare, compare_files
from delayfx.audio_io import read_signal, write_signal, dump_text
from delayfx.conversions import (
    seconds_to_samples,
    samples_to_seconds,
    round_half_away,
    seconds_to_delay_samples,
)
from delayfx.logger import set_global_logging, get_logger

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    # Errors
    "DelayFxError",
    "ConfigurationError",
    "IndexOutOfRange",
    "MismatchError",
    # Data
    "Signal",
    "as_samples",
    # Engines
    "DelayLine",
    "CombFilter",
    "CombOutputs",
    "FilterType",
    "ModulatedDelay",
    # Comparison
    "Comparison",
    "compare",
    "compare_files",
    # I/O
    "read_signal",
    "write_signal",
    "dump_text",
    # Conversions
    "seconds_to_samples",
    "samples_to_seconds",
    "round_half_away",
    "seconds_to_delay_samples",
    # Logging
    "set_global_logging",
    "get_logger",
]
