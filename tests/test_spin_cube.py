"""Tests for the command-line entry point."""

import logging

import spin_cube


class TestParseArgs:
    def test_defaults(self):
        args = spin_cube.parse_args([])
        assert args.frames is None
        assert args.interval == 0.03
        assert args.rate == 0.01
        assert args.distance == 2.5
        assert not args.once and not args.curses and not args.debug

    def test_overrides(self):
        args = spin_cube.parse_args(["--frames", "5", "--rate", "0.1", "--debug"])
        assert args.frames == 5
        assert args.rate == 0.1
        assert args.debug


class TestMain:
    def test_once_prints_first_frame(self, capsys):
        assert spin_cube.main(["--once"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 40
        assert "-" * 53 in lines[6]

    def test_bounded_animation(self, capsys, monkeypatch):
        monkeypatch.setenv("TERM", "xterm")
        assert spin_cube.main(["--frames", "2", "--interval", "0"]) == 0
        assert capsys.readouterr().out.count("\x1b[40A") == 2

    def test_invalid_config_exits_with_usage_error(self, capsys):
        assert spin_cube.main(["--distance", "0"]) == 2
        assert "camera_distance" in capsys.readouterr().err

    def test_debug_sets_log_level(self):
        spin_cube.setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG
