#
# PROJECT: text-cube
# MODULE: text_cube/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
import os
from dataclasses import dataclass, field

from .camera import Viewport

# Nearest the cube gets to the camera is distance - sqrt(2) (a vertical edge
# swinging about Y). The +-1 edge heights only project inside the grid while
# that depth stays above 1, so the distance has to exceed 1 + sqrt(2).
MIN_CAMERA_DISTANCE = 1.0 + math.sqrt(2.0)


@dataclass(frozen=True)
class RenderConfig:
    """Process-wide render constants, built once at startup."""
    width: int = 80
    height: int = 40
    angular_rate: float = 0.01     # radians per tick
    camera_distance: float = 2.5   # cube center sits at z = -camera_distance
    frame_interval: float = 0.03   # seconds between ticks
    background: str = ' '
    steep_glyph: str = '|'
    shallow_glyph: str = '-'
    use_ansi: bool = field(default=True, compare=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be non-empty, got {self.width}x{self.height}")
        if self.camera_distance <= MIN_CAMERA_DISTANCE:
            raise ValueError(
                f"camera_distance must exceed {MIN_CAMERA_DISTANCE:.3f} to keep the "
                f"cube on the grid, got {self.camera_distance}")
        if self.frame_interval < 0:
            raise ValueError(f"frame_interval must not be negative, got {self.frame_interval}")
        for name in ('background', 'steep_glyph', 'shallow_glyph'):
            glyph = getattr(self, name)
            if len(glyph) != 1 or not glyph.isascii():
                raise ValueError(f"{name} must be a single ASCII character, got {glyph!r}")

    @property
    def viewport(self) -> Viewport:
        return Viewport.for_grid(self.width, self.height)

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Default config plus a guess at whether the terminal understands
        ANSI cursor movement. Checks the TERM environment variable.
        """
        term = os.environ.get('TERM', '').lower()
        overrides.setdefault('use_ansi', term not in ('dumb', 'unknown'))
        return cls(**overrides)
