"""
Tests for the command-line driver.

Copyright (c) 2026 delayfx contributors

MIT License
"""

import numpy as np
import pytest

from delayfx import CombFilter, ModulatedDelay, Signal, read_signal, write_signal
from delayfx.cli import build_parser, main


class TestParser:
    def test_comb_defaults(self):
        args = build_parser().parse_args(
            ["comb", "in.wav", "--fir-out", "f.wav", "--iir-out", "i.wav"]
        )
        assert args.gain == 0.5
        assert args.delay_seconds == 0.5
        assert args.delay_samples is None
        assert args.check_stability is False

    def test_chorus_defaults(self):
        args = build_parser().parse_args(["chorus", "in.wav", "out.wav"])
        assert args.width == 0.01
        assert args.mod_freq == 2.0
        assert args.delay is None

    def test_delay_options_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["comb", "in.wav", "--fir-out", "f.wav", "--iir-out", "i.wav",
                 "--delay-seconds", "0.1", "--delay-samples", "5"]
            )

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCombCommand:
    def test_writes_both_outputs(self, ramp_wav, tmp_path, capsys):
        path, data = ramp_wav
        fir, iir = tmp_path / "fir.wav", tmp_path / "iir.wav"
        status = main([
            "comb", str(path), "--fir-out", str(fir), "--iir-out", str(iir),
            "--delay-samples", "10", "--gain", "0.5", "--subtype", "FLOAT",
        ])
        assert status == 0
        expected = CombFilter(10, 0.5).process_both(data)
        np.testing.assert_allclose(read_signal(fir).samples, expected.fir, atol=1e-6)
        np.testing.assert_allclose(read_signal(iir).samples, expected.iir, atol=1e-6)
        assert "fir.wav" in capsys.readouterr().out

    def test_delay_seconds(self, ramp_wav, tmp_path):
        path, data = ramp_wav
        fir, iir = tmp_path / "fir.wav", tmp_path / "iir.wav"
        # 0.01 s at 8 kHz = 80 samples
        main([
            "comb", str(path), "--fir-out", str(fir), "--iir-out", str(iir),
            "--delay-seconds", "0.01", "--subtype", "FLOAT",
        ])
        out = read_signal(fir).samples
        np.testing.assert_allclose(out[:80], data[:80], atol=1e-6)
        np.testing.assert_allclose(out[80:], data[80:] + 0.5 * data[:-80], atol=1e-6)

    def test_unstable_gain_rejected(self, ramp_wav, tmp_path, capsys):
        path, _ = ramp_wav
        status = main([
            "comb", str(path), "--fir-out", str(tmp_path / "f.wav"),
            "--iir-out", str(tmp_path / "i.wav"), "--gain", "1.2", "--check-stability",
        ])
        assert status == 1
        assert "Error" in capsys.readouterr().err
        assert not (tmp_path / "f.wav").exists()

    def test_missing_input(self, tmp_path, capsys):
        status = main([
            "comb", str(tmp_path / "missing.wav"),
            "--fir-out", str(tmp_path / "f.wav"), "--iir-out", str(tmp_path / "i.wav"),
        ])
        assert status == 1
        assert "missing.wav" in capsys.readouterr().err


class TestChorusCommand:
    def test_writes_output(self, ramp_wav, tmp_path):
        path, data = ramp_wav
        out = tmp_path / "chorus.wav"
        status = main([
            "chorus", str(path), str(out), "--width", "0.002", "--mod-freq", "3",
            "--subtype", "FLOAT",
        ])
        assert status == 0
        expected = ModulatedDelay(width=0.002, mod_freq=3.0, sample_rate=8000).process(data)
        result = read_signal(out).samples
        np.testing.assert_allclose(result, expected, atol=1e-6)
        assert result[-1] == 0.0

    def test_width_greater_than_delay(self, ramp_wav, tmp_path, capsys):
        path, _ = ramp_wav
        status = main([
            "chorus", str(path), str(tmp_path / "c.wav"), "--width", "0.01", "--delay", "0.005",
        ])
        assert status == 1
        assert "Width greater than basic delay" in capsys.readouterr().err

    def test_infinite_width(self, ramp_wav, tmp_path, capsys):
        path, _ = ramp_wav
        status = main(["chorus", str(path), str(tmp_path / "c.wav"), "--width", "inf"])
        assert status == 1
        assert "width must be finite" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys):
        bad = tmp_path / "bad.wav"
        bad.write_text("not audio")
        status = main(["chorus", str(bad), str(tmp_path / "c.wav")])
        assert status == 1
        assert capsys.readouterr().err.startswith("Error:")
        assert not (tmp_path / "c.wav").exists()


class TestCompareCommand:
    def test_reports_difference(self, tmp_path, capsys):
        write_signal(tmp_path / "a.wav", Signal([0.0, 0.5, 0.0], 8000), subtype="FLOAT")
        write_signal(tmp_path / "b.wav", Signal([0.0, 0.25, 0.0], 8000), subtype="FLOAT")
        status = main(["compare", str(tmp_path / "a.wav"), str(tmp_path / "b.wav")])
        assert status == 0
        out = capsys.readouterr().out
        assert "max |difference|:   0.25" in out

    def test_mismatch(self, tmp_path, capsys):
        write_signal(tmp_path / "a.wav", Signal([0.0, 0.5, 0.0], 8000), subtype="FLOAT")
        write_signal(tmp_path / "b.wav", Signal([0.0, 0.25], 8000), subtype="FLOAT")
        status = main(["compare", str(tmp_path / "a.wav"), str(tmp_path / "b.wav")])
        assert status == 1
        assert "lengths do not match" in capsys.readouterr().err


class TestDumpCommand:
    def test_dump(self, stereo_wav, tmp_path, capsys):
        path, _ = stereo_wav
        out = tmp_path / "dump.txt"
        assert main(["dump", str(path), str(out)]) == 0
        assert len(out.read_text().splitlines()) == 500
        assert "500 frames" in capsys.readouterr().out
