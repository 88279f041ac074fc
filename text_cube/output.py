#
# PROJECT: text-cube
# MODULE: text_cube/output.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
# Output sinks. Each accepts one finished Canvas per tick via emit().
#

import sys

from .canvas import Canvas


class AnsiSink:
    """
    Prints the frame rows, then moves the cursor back up so the next frame
    overdraws this one in place.
    """

    def __init__(self, stream=None, cursor_up: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.cursor_up = cursor_up
        self._last_height = 0

    def emit(self, canvas: Canvas):
        out = self.stream
        for row in canvas.rows():
            out.write(row + "\n")
        if self.cursor_up:
            out.write(f"\x1b[{canvas.h}A")
            self._last_height = canvas.h
        else:
            out.write("\n")
        out.flush()

    def close(self):
        """Park the cursor below the last frame."""
        if self._last_height:
            self.stream.write(f"\x1b[{self._last_height}B")
            self.stream.flush()
            self._last_height = 0


class CursesSink:
    """Draws frames onto a curses screen. Rows that do not fit are skipped."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def emit(self, canvas: Canvas):
        stdscr = self.stdscr
        th, tw = stdscr.getmaxyx()
        stdscr.erase()
        # The bottom-right cell cannot be written without curses raising,
        # so leave the last column free.
        for y, row in enumerate(canvas.rows()[:th]):
            stdscr.addstr(y, 0, row[:max(0, tw - 1)])
        stdscr.refresh()


class CollectingSink:
    """Keeps every emitted frame as text. Handy for tests and headless runs."""

    def __init__(self):
        self.frames = []

    def emit(self, canvas: Canvas):
        self.frames.append(canvas.render())
