#
# PROJECT: text-cube
# MODULE: text_cube/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import itertools
import logging
import time

from .config import RenderConfig
from .output import AnsiSink, CursesSink
from .renderer import Renderer

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Animation driver: one render per tick, handed to the sink, then a fixed
    pause. Runs until `frames` ticks have been shown, stop() is called, or
    the process is interrupted.
    """

    def __init__(self, renderer: Renderer, sink, frames=None, sleep=time.sleep):
        self.renderer = renderer
        self.sink = sink
        self.frames = frames
        self.sleep = sleep
        self.running = True

        # ── Frame counter ───────────────────────────────────────────────
        self.ticks_emitted = 0
        self.fps = 0
        self._fps_count = 0
        self._last_fps_time = time.monotonic()

    def stop(self):
        self.running = False

    def _finished(self, ticks_done) -> bool:
        if not self.running:
            return True
        return self.frames is not None and ticks_done >= self.frames

    def step(self, tick):
        """Render and emit a single tick."""
        canvas = self.renderer.render(tick)
        self.sink.emit(canvas)
        self.ticks_emitted += 1

        self._fps_count += 1
        now = time.monotonic()
        if now - self._last_fps_time >= 1.0:
            self.fps = self._fps_count
            self._fps_count = 0
            self._last_fps_time = now
            logger.debug("fps: %d", self.fps)

    def run(self):
        interval = self.renderer.config.frame_interval
        logger.info("animation started (%s)",
                    f"{self.frames} frames" if self.frames is not None else "unbounded")
        for tick in itertools.count():
            if self._finished(tick):
                break
            self.step(tick)
            # No pause after the final frame.
            if self._finished(tick + 1):
                break
            self.sleep(interval)
        logger.info("animation stopped after %d frames", self.ticks_emitted)
        return self.ticks_emitted


def run_ansi(config: RenderConfig, frames=None, stream=None):
    sink = AnsiSink(stream, cursor_up=config.use_ansi)
    app = DemoApp(Renderer(config), sink, frames)
    try:
        return app.run()
    finally:
        sink.close()


def run_curses(config: RenderConfig, frames=None):
    """Runs the animation inside curses.wrapper, which restores the terminal on exit."""
    def _main(stdscr):
        curses.curs_set(0)
        app = DemoApp(Renderer(config), CursesSink(stdscr), frames)
        return app.run()
    return curses.wrapper(_main)
