"""
Command-line driver: read a file, run an effect, write the result.

Copyright (c) 2026 delayfx contributors

MIT License
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import soundfile as sf

from delayfx import __version__
from delayfx.audio_io import dump_text, read_signal, write_signal
from delayfx.comb_filter import CombFilter
from delayfx.comparator import compare_files
from delayfx.exceptions import DelayFxError
from delayfx.logger import get_logger, set_global_logging
from delayfx.modulated_delay import ModulatedDelay

logger = get_logger(__name__)

DEFAULT_COMB_GAIN = 0.5
DEFAULT_COMB_DELAY_SECONDS = 0.5
DEFAULT_CHORUS_WIDTH = 0.01  # seconds
DEFAULT_CHORUS_MOD_FREQ = 2.0  # Hz


def _cmd_comb(args: argparse.Namespace) -> int:
    signal = read_signal(args.input, channel=args.channel)
    if args.delay_samples is not None:
        comb = CombFilter(args.delay_samples, args.gain, check_stability=args.check_stability)
    else:
        comb = CombFilter.from_seconds(
            args.delay_seconds,
            signal.sample_rate,
            args.gain,
            check_stability=args.check_stability,
        )
    outputs = comb.process_both(signal.samples)
    write_signal(args.fir_out, signal.with_samples(outputs.fir), subtype=args.subtype)
    write_signal(args.iir_out, signal.with_samples(outputs.iir), subtype=args.subtype)
    print(f"{comb!r}: wrote {args.fir_out} and {args.iir_out}")
    return 0


def _cmd_chorus(args: argparse.Namespace) -> int:
    signal = read_signal(args.input, channel=args.channel)
    chorus = ModulatedDelay(
        width=args.width,
        mod_freq=args.mod_freq,
        sample_rate=signal.sample_rate,
        delay=args.delay,
    )
    wet = chorus.process(signal.samples)
    write_signal(args.output, signal.with_samples(wet), subtype=args.subtype)
    print(f"{chorus!r}: wrote {args.output}")
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    comparison = compare_files(args.a, args.b, args.original)
    print(f"samples:            {len(comparison.difference)}")
    print(f"sample rate:        {comparison.sample_rate} Hz")
    print(f"max |difference|:   {comparison.max_abs_difference:.6g}")
    print(f"rms difference:     {comparison.rms_difference:.6g}")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    frames = dump_text(args.input, args.output)
    print(f"Wrote {frames} frames to {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delayfx",
        description="Comb filter and chorus effects for audio files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR; default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    comb = sub.add_parser("comb", help="Apply FIR and IIR comb filters")
    comb.add_argument("input", type=Path, help="Input audio file")
    comb.add_argument("--fir-out", type=Path, required=True, help="Output file for the FIR result")
    comb.add_argument("--iir-out", type=Path, required=True, help="Output file for the IIR result")
    comb.add_argument(
        "--gain",
        type=float,
        default=DEFAULT_COMB_GAIN,
        help=f"Feedforward/feedback gain (default: {DEFAULT_COMB_GAIN})",
    )
    delay = comb.add_mutually_exclusive_group()
    delay.add_argument(
        "--delay-seconds",
        type=float,
        default=DEFAULT_COMB_DELAY_SECONDS,
        help=f"Delay in seconds (default: {DEFAULT_COMB_DELAY_SECONDS})",
    )
    delay.add_argument("--delay-samples", type=int, help="Delay in samples")
    comb.add_argument(
        "--check-stability",
        action="store_true",
        help="Reject gains with |gain| >= 1",
    )
    comb.set_defaults(func=_cmd_comb)

    chorus = sub.add_parser("chorus", help="Apply a modulated delay (chorus/flanger)")
    chorus.add_argument("input", type=Path, help="Input audio file")
    chorus.add_argument("output", type=Path, help="Output audio file")
    chorus.add_argument(
        "--width",
        type=float,
        default=DEFAULT_CHORUS_WIDTH,
        help=f"Modulation width in seconds (default: {DEFAULT_CHORUS_WIDTH})",
    )
    chorus.add_argument(
        "--mod-freq",
        type=float,
        default=DEFAULT_CHORUS_MOD_FREQ,
        help=f"Modulation frequency in Hz (default: {DEFAULT_CHORUS_MOD_FREQ})",
    )
    chorus.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Base delay in seconds (default: same as --width)",
    )
    chorus.set_defaults(func=_cmd_chorus)

    for p in (comb, chorus):
        p.add_argument("--channel", type=int, default=0, help="Channel to process (default: 0)")
        p.add_argument("--subtype", default="PCM_16", help="Output subtype (default: PCM_16)")

    cmp_parser = sub.add_parser("compare", help="Compare two processed files")
    cmp_parser.add_argument("a", type=Path, help="First processed file")
    cmp_parser.add_argument("b", type=Path, help="Second processed file")
    cmp_parser.add_argument("--original", type=Path, default=None, help="Unprocessed input file")
    cmp_parser.set_defaults(func=_cmd_compare)

    dump = sub.add_parser("dump", help="Write audio frames as text, one line per frame")
    dump.add_argument("input", type=Path, help="Input audio file")
    dump.add_argument("output", type=Path, help="Output text file")
    dump.set_defaults(func=_cmd_dump)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_global_logging(level=args.log_level)

    try:
        return args.func(args)
    except (DelayFxError, FileNotFoundError, ValueError, sf.LibsndfileError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
