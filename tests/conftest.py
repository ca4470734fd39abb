import logging

import numpy as np
import pytest
import soundfile as sf

import delayfx as dfx


@pytest.fixture(autouse=True)
def _reset_delayfx_state():
    original = dfx.get_error_mode()
    dfx.set_error_mode(dfx.ErrorMode.STRICT)
    yield
    dfx.set_error_mode(original)
    logging.getLogger("delayfx").setLevel(logging.NOTSET)


@pytest.fixture
def ramp_wav(tmp_path):
    """Mono FLOAT WAV (no quantization): a ramp from -0.5 to 0.5 over 1000 samples."""
    path = tmp_path / "ramp.wav"
    data = np.linspace(-0.5, 0.5, 1000, dtype=np.float32)
    sf.write(str(path), data, 8000, subtype="FLOAT")
    return path, data.astype(np.float64)


@pytest.fixture
def stereo_wav(tmp_path):
    """Stereo FLOAT WAV: left ramps up, right ramps down."""
    path = tmp_path / "stereo.wav"
    left = np.linspace(0.0, 0.5, 500, dtype=np.float32)
    right = np.linspace(0.5, 0.0, 500, dtype=np.float32)
    data = np.column_stack([left, right])
    sf.write(str(path), data, 8000, subtype="FLOAT")
    return path, data.astype(np.float64)
