#
# PROJECT: text-cube
# MODULE: text_cube/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import numpy as np


class Canvas:
    """
    One frame: a fixed height x width grid of single-byte glyphs.

    Created blank every tick, filled by the rasterizer, frozen and handed
    to an output sink. Nothing is carried over between frames.
    """
    __slots__ = ['w', 'h', 'grid', 'background']

    def __init__(self, w: int, h: int, background: str = ' '):
        self.w, self.h = w, h
        self.background = background
        self.grid = np.full((h, w), ord(background), dtype=np.uint8)

    def plot(self, x: int, y: int, glyph: str):
        # Off-grid writes are a geometry bug, never a condition to recover from.
        # numpy would silently wrap negative indices, so check both ends.
        if not (0 <= x < self.w and 0 <= y < self.h):
            raise IndexError(f"pixel ({x}, {y}) outside {self.w}x{self.h} canvas")
        self.grid[y, x] = ord(glyph)

    def glyph_at(self, x: int, y: int) -> str:
        return chr(self.grid[y, x])

    def freeze(self) -> 'Canvas':
        self.grid.setflags(write=False)
        return self

    @property
    def frozen(self) -> bool:
        return not self.grid.flags.writeable

    def is_blank(self) -> bool:
        return bool((self.grid == ord(self.background)).all())

    def rows(self):
        """Rows top to bottom as strings."""
        return [row.tobytes().decode('ascii') for row in self.grid]

    def render(self) -> str:
        return "\n".join(self.rows())
