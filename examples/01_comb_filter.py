"""
Example 01: Comb Filter - FIR and IIR echoes

Writes a short noise burst, runs it through the feedforward and feedback
comb filters with a 0.5 s delay, and writes both results side by side.

Copyright (c) 2026 delayfx contributors
MIT License
"""

from pathlib import Path

import numpy as np

from delayfx import CombFilter, Signal, set_global_logging, write_signal

SAMPLE_RATE = 44100
DURATION_SECONDS = 3
GAIN = 0.5
DELAY_SECONDS = 0.5

OUTPUT_DIR = Path(__file__).parent / "audio"

set_global_logging(level="INFO")
print("=== delayfx Example 01: Comb Filter ===", flush=True)

# 15 ms noise burst with a linear fade, then silence
rng = np.random.default_rng(0)
burst_len = int(0.015 * SAMPLE_RATE)
samples = np.zeros(DURATION_SECONDS * SAMPLE_RATE)
samples[:burst_len] = rng.uniform(-0.8, 0.8, burst_len) * np.linspace(1.0, 0.0, burst_len)
dry = Signal(samples, SAMPLE_RATE)

comb = CombFilter.from_seconds(DELAY_SECONDS, SAMPLE_RATE, GAIN)
print(f"{comb!r}", flush=True)
outputs = comb.process_both(dry.samples)

OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
write_signal(OUTPUT_DIR / "burst.wav", dry)
write_signal(OUTPUT_DIR / "burst_fir.wav", dry.with_samples(outputs.fir))
write_signal(OUTPUT_DIR / "burst_iir.wav", dry.with_samples(outputs.iir))

# FIR: a single echo. IIR: echoes every 0.5 s, halving each time.
d = comb.delay_samples
for k in range(DURATION_SECONDS * 2):
    window = slice(k * d, k * d + burst_len)
    print(
        f"  t={k * DELAY_SECONDS:.1f}s  FIR peak {np.max(np.abs(outputs.fir[window])):.3f}"
        f"  IIR peak {np.max(np.abs(outputs.iir[window])):.3f}",
        flush=True,
    )

print("\nDone!", flush=True)
