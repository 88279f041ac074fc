#
# PROJECT: text-cube
# MODULE: text_cube/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import NamedTuple

import numpy as np

from .math_utils import Mat4, Vec4

TWO_PI = 2.0 * math.pi


class ScreenPoint(NamedTuple):
    """2D position in character-grid space (column, row)."""
    x: np.float32
    y: np.float32


class Viewport(NamedTuple):
    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float

    @classmethod
    def for_grid(cls, width: int, height: int) -> 'Viewport':
        """Map normalized [-1, 1] coordinates onto a width x height grid."""
        return cls(width * 0.5, height * 0.5, width * 0.5, height * 0.5)


def project(point: Vec4, scale_x, scale_y, offset_x, offset_y) -> ScreenPoint:
    """
    Perspective-divide a camera-space point and map it into grid space.

    There is no guard for z == 0: the camera distance keeps every vertex
    well in front of the viewer, so the division never blows up for the
    fixed cube geometry.
    """
    recip_z = np.float32(1.0) / point.z
    screen_x = point.x * recip_z * np.float32(scale_x) + np.float32(offset_x)
    screen_y = point.y * recip_z * np.float32(scale_y) + np.float32(offset_y)
    return ScreenPoint(screen_x, screen_y)


class Camera:
    """
    Turns a tick value into the object-to-camera transform.

    The mesh spins about the Y axis at `angular_rate` radians per tick and
    sits `distance` units down the view axis.
    """
    __slots__ = ('angular_rate', 'distance')

    def __init__(self, angular_rate: float = 0.01, distance: float = 2.5):
        self.angular_rate = angular_rate
        self.distance = distance

    def angle(self, tick) -> float:
        """Rotation angle for a tick, reduced modulo 2*pi into [0, 2*pi]."""
        # Reducing here keeps sin/cos accurate for arbitrarily large ticks.
        # Negative ticks wrap to the non-negative range as well.
        return (tick * self.angular_rate) % TWO_PI

    def transform(self, tick) -> Mat4:
        return Mat4.rotation_y_translated(self.angle(tick), self.distance)
