"""Tests for the animation loop."""

import io
from unittest.mock import MagicMock

from text_cube.config import RenderConfig
from text_cube.demo import DemoApp, run_ansi
from text_cube.output import CollectingSink
from text_cube.renderer import Renderer


class TestDemoApp:
    def test_runs_requested_frames(self):
        sink = CollectingSink()
        sleep = MagicMock()
        app = DemoApp(Renderer(), sink, frames=3, sleep=sleep)
        assert app.run() == 3
        assert len(sink.frames) == 3
        # No pause after the last frame.
        assert sleep.call_count == 2
        sleep.assert_called_with(RenderConfig().frame_interval)

    def test_ticks_advance_the_rotation(self):
        sink = CollectingSink()
        cfg = RenderConfig(angular_rate=0.3)
        DemoApp(Renderer(cfg), sink, frames=2, sleep=MagicMock()).run()
        assert sink.frames[0] != sink.frames[1]

    def test_stop_ends_the_loop(self):
        class StoppingSink(CollectingSink):
            def emit(self, canvas):
                super().emit(canvas)
                app.stop()

        sink = StoppingSink()
        sleep = MagicMock()
        app = DemoApp(Renderer(), sink, sleep=sleep)
        assert app.run() == 1
        assert len(sink.frames) == 1
        sleep.assert_not_called()

    def test_single_frame_does_not_sleep(self):
        sleep = MagicMock()
        assert DemoApp(Renderer(), CollectingSink(), frames=1, sleep=sleep).run() == 1
        sleep.assert_not_called()

    def test_zero_frames(self):
        sink = CollectingSink()
        assert DemoApp(Renderer(), sink, frames=0, sleep=MagicMock()).run() == 0
        assert sink.frames == []


class TestRunAnsi:
    def test_writes_frames_and_restores_cursor(self):
        out = io.StringIO()
        cfg = RenderConfig(frame_interval=0.0, use_ansi=True)
        assert run_ansi(cfg, frames=2, stream=out) == 2
        text = out.getvalue()
        assert text.count("\x1b[40A") == 2
        assert text.endswith("\x1b[40B")
