#
# PROJECT: text-cube
# MODULE: text_cube/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

import numpy as np

from .canvas import Canvas

STEEP_GLYPH = '|'
SHALLOW_GLYPH = '-'


def draw_line(canvas: Canvas, start, end,
              steep_glyph: str = STEEP_GLYPH, shallow_glyph: str = SHALLOW_GLYPH):
    """
    Draws a one-cell-wide line by stepping along its major axis.

    Steep lines (|dy| > |dx|) step over rows and mark '|'; everything else
    steps over columns and marks '-'. The stepped range is the half-open
    [ceil(min), ceil(max)), so segments that share an endpoint never mark
    the same cell twice. The minor coordinate is interpolated and truncated.
    No clipping: the caller guarantees every cell lies on the canvas.
    """
    x0, y0 = np.float32(start[0]), np.float32(start[1])
    x1, y1 = np.float32(end[0]), np.float32(end[1])
    dx = x1 - x0
    dy = y1 - y0

    if abs(dy) > abs(dx):
        iymin = math.ceil(min(y0, y1))
        iymax = math.ceil(max(y0, y1))
        dxdy = dx / dy
        for iy in range(iymin, iymax):
            ix = int((np.float32(iy) - y0) * dxdy + x0)
            canvas.plot(ix, iy, steep_glyph)
    else:
        ixmin = math.ceil(min(x0, x1))
        ixmax = math.ceil(max(x0, x1))
        if ixmin >= ixmax:
            # Zero-length (or sub-cell) segment: nothing to step over.
            return
        dydx = dy / dx
        for ix in range(ixmin, ixmax):
            iy = int((np.float32(ix) - x0) * dydx + y0)
            canvas.plot(ix, iy, shallow_glyph)
