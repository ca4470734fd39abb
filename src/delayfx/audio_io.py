"""
Reading and writing signals with soundfile.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
import soundfile as sf

from delayfx.logger import get_logger
from delayfx.waveform import Signal

logger = get_logger(__name__)

PathLike = Union[str, Path]

# Subtypes stored as integers; samples outside [-1, 1] must be clipped first
_INTEGER_SUBTYPES = {"PCM_S8", "PCM_U8", "PCM_16", "PCM_24", "PCM_32"}


def _require_file(path: PathLike) -> None:
    if not Path(path).is_file():
        raise FileNotFoundError(f"No such audio file: {path}")


def read_signal(path: PathLike, channel: int = 0) -> Signal:
    """
    Read one channel of an audio file.
    
    Args:
        path: Path to the audio file
        channel: Channel to keep for multi-channel files (default: 0)
    
    Returns:
        Signal holding the channel's samples and the file's sample rate
    
    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If channel is out of range
        soundfile.LibsndfileError: If the file cannot be decoded
    """
    _require_file(path)
    data, sample_rate = sf.read(str(path), dtype="float64", always_2d=True)
    frames, channels = data.shape
    if channel < 0 or channel >= channels:
        raise ValueError(
            f"Channel {channel} out of range for {path} ({channels} channels)"
        )
    logger.info(
        f"Read {path}: {frames} frames, {channels} channels, {sample_rate} Hz"
    )
    return Signal(data[:, channel], sample_rate)


def write_signal(
    path: PathLike,
    signal: Signal,
    subtype: str = "PCM_16",
    clip: bool = True,
) -> None:
    """
    Write a signal to an audio file, replacing any existing file.
    
    Args:
        path: Output path; the format follows the extension
        signal: Signal to write
        subtype: soundfile subtype (default: 'PCM_16')
        clip: Clip to [-1, 1] before writing integer subtypes
    
    Common subtypes:
        'PCM_16' - 16-bit signed integer (CD quality)
        'PCM_24' - 24-bit signed integer (professional)
        'FLOAT'  - 32-bit float
        'DOUBLE' - 64-bit float
    """
    data = signal.samples
    if clip and subtype.upper() in _INTEGER_SUBTYPES:
        over = int(np.count_nonzero(np.abs(data) > 1.0))
        if over:
            logger.warning(f"Clipping {over} samples outside [-1, 1] in {path}")
            data = np.clip(data, -1.0, 1.0)
    sf.write(str(path), data, signal.sample_rate, subtype=subtype)
    logger.info(
        f"Wrote {path}: {len(signal)} frames, {signal.sample_rate} Hz, {subtype}"
    )


def dump_text(in_path: PathLike, out_path: PathLike) -> int:
    """
    Write every frame of an audio file as a line of text.
    
    Each line holds one frame, channels separated by spaces. Values are
    soundfile's float conversion, so 16-bit samples are scaled by 1/32768
    (-32768 -> -1.0, 32767 -> 0.99997). Tools that divide by 32767
    instead report values larger by a factor of 32768/32767.

    Returns:
        Number of frames written
    """
    _require_file(in_path)
    data, sample_rate = sf.read(str(in_path), dtype="float32", always_2d=True)
    np.savetxt(str(out_path), data, fmt="%.9g", delimiter=" ")
    logger.info(
        f"Dumped {in_path} ({data.shape[1]} channels, {sample_rate} Hz) "
        f"to {out_path}: {data.shape[0]} frames"
    )
    return data.shape[0]
