"""Tests for the frame sinks."""

import io
from unittest.mock import MagicMock

import pytest

from text_cube.canvas import Canvas
from text_cube.output import AnsiSink, CollectingSink, CursesSink


@pytest.fixture
def small_canvas():
    canv = Canvas(3, 2)
    canv.plot(1, 0, '-')
    canv.plot(2, 1, '|')
    return canv.freeze()


class TestAnsiSink:
    def test_rows_then_cursor_up(self, small_canvas):
        out = io.StringIO()
        AnsiSink(out).emit(small_canvas)
        assert out.getvalue() == " - \n  |\n\x1b[2A"

    def test_close_moves_below_last_frame(self, small_canvas):
        out = io.StringIO()
        sink = AnsiSink(out)
        sink.emit(small_canvas)
        sink.close()
        assert out.getvalue().endswith("\x1b[2A\x1b[2B")
        sink.close()
        assert out.getvalue().count("\x1b[2B") == 1

    def test_plain_mode_separates_frames(self, small_canvas):
        out = io.StringIO()
        sink = AnsiSink(out, cursor_up=False)
        sink.emit(small_canvas)
        sink.close()
        assert out.getvalue() == " - \n  |\n\n"


class TestCursesSink:
    def test_draws_every_row_and_refreshes(self, small_canvas):
        stdscr = MagicMock()
        stdscr.getmaxyx.return_value = (24, 80)
        CursesSink(stdscr).emit(small_canvas)
        stdscr.erase.assert_called_once()
        assert [c.args for c in stdscr.addstr.call_args_list] == [
            (0, 0, " - "), (1, 0, "  |")]
        stdscr.refresh.assert_called_once()

    def test_clips_to_small_terminal(self):
        stdscr = MagicMock()
        stdscr.getmaxyx.return_value = (10, 20)
        CursesSink(stdscr).emit(Canvas(80, 40).freeze())
        assert stdscr.addstr.call_count == 10
        assert all(len(c.args[2]) == 19 for c in stdscr.addstr.call_args_list)


class TestCollectingSink:
    def test_keeps_frames_in_order(self, small_canvas):
        sink = CollectingSink()
        sink.emit(small_canvas)
        sink.emit(Canvas(3, 2).freeze())
        assert sink.frames == [" - \n  |", "   \n   "]
