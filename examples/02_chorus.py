"""
Example 02: Chorus - modulated delay on a plucked tone

Applies the minimum-delay chorus (10 ms width, 2 Hz modulation) and a
flanger-style variant with a longer base delay.

Copyright (c) 2026 delayfx contributors
MIT License
"""

from pathlib import Path

import numpy as np

from delayfx import ModulatedDelay, Signal, write_signal

SAMPLE_RATE = 44100
DURATION_SECONDS = 2

OUTPUT_DIR = Path(__file__).parent / "audio"

print("=== delayfx Example 02: Chorus ===", flush=True)

# Decaying 220 Hz sine, like a plucked string
t = np.arange(DURATION_SECONDS * SAMPLE_RATE) / SAMPLE_RATE
pluck = Signal(0.8 * np.sin(2 * np.pi * 220.0 * t) * np.exp(-t * 2.0), SAMPLE_RATE)

OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
write_signal(OUTPUT_DIR / "pluck.wav", pluck)

# --- Part 1: minimum-delay chorus ---
chorus = ModulatedDelay(width=0.01, mod_freq=2.0, sample_rate=SAMPLE_RATE)
print(
    f"\nPart 1: {chorus!r}\n"
    f"  DELAY={chorus.delay_samples} WIDTH={chorus.width_samples} L={chorus.line_length}",
    flush=True,
)
write_signal(OUTPUT_DIR / "pluck_chorus.wav", pluck.with_samples(chorus.process(pluck.samples)))

# --- Part 2: flanger, shallow sweep around a 3 ms delay ---
flanger = ModulatedDelay(width=0.002, mod_freq=0.5, sample_rate=SAMPLE_RATE, delay=0.003)
print(f"\nPart 2: {flanger!r}", flush=True)
wet = flanger.process(pluck.samples)
write_signal(OUTPUT_DIR / "pluck_flanger.wav", pluck.with_samples(0.5 * (pluck.samples + wet)))

print("\nDone!", flush=True)
