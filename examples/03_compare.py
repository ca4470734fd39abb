"""
Example 03: Compare - diff two processed files against the original

Run examples 01 first. Compares the FIR and IIR comb outputs; the
difference is zero until the second echo, where only the IIR repeats.

Copyright (c) 2026 delayfx contributors
MIT License
"""

from pathlib import Path

import numpy as np

from delayfx import compare_files

AUDIO_DIR = Path(__file__).parent / "audio"

print("=== delayfx Example 03: Compare ===", flush=True)

comparison = compare_files(
    AUDIO_DIR / "burst_iir.wav",
    AUDIO_DIR / "burst_fir.wav",
    original_path=AUDIO_DIR / "burst.wav",
)
print(f"  max |difference|: {comparison.max_abs_difference:.4f}", flush=True)
print(f"  rms difference:   {comparison.rms_difference:.6f}", flush=True)

first = int(np.argmax(np.abs(comparison.difference) > 1e-3))
print(f"  first difference at {comparison.times[first]:.3f} s", flush=True)

print("\nDone!", flush=True)
