#
# PROJECT: text-cube
# MODULE: text_cube/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

import numpy as np


class Vec4:
    """Homogeneous 4-component vector (x, y, z, w), single precision."""
    __slots__ = ('v',)

    def __init__(self, x, y, z, w=1.0):
        self.v = np.array([x, y, z, w], dtype=np.float32)
        self.v.setflags(write=False)

    @classmethod
    def from_array(cls, arr) -> 'Vec4':
        res = cls.__new__(cls)
        res.v = np.array(arr, dtype=np.float32).reshape(4)
        res.v.setflags(write=False)
        return res

    @property
    def x(self):
        return self.v[0]

    @property
    def y(self):
        return self.v[1]

    @property
    def z(self):
        return self.v[2]

    @property
    def w(self):
        return self.v[3]

    def __repr__(self):
        return f"Vec4({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f})"

    def __iter__(self):
        return iter(self.v.tolist())

    def __getitem__(self, index):
        return self.v[index]

    def __eq__(self, other):
        if isinstance(other, Vec4):
            return bool(np.array_equal(self.v, other.v))
        return NotImplemented


class Mat4:
    """4x4 transform stored as four rows, where each stored row is one
    COLUMN of the conceptual matrix.

    A point's components weight the stored rows: the k-th component of the
    product is the weighted sum of the k-th entries of all four rows.
    Transposing this silently mirrors the rotation.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data is not None:
            self.m = np.array(data, dtype=np.float32).reshape(4, 4)
        else:
            self.m = np.zeros((4, 4), dtype=np.float32)
        self.m.setflags(write=False)

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(np.eye(4, dtype=np.float32))

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        # The translation column is the last stored row.
        return cls([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [x,   y,   z,   1.0],
        ])

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [c,   0.0, s,   0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s,  0.0, c,   0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotation_y_translated(cls, rad: float, distance: float) -> 'Mat4':
        """Rotation about Y followed by a push of `distance` down the -Z axis."""
        return cls.translation(0.0, 0.0, -distance) @ cls.rotation_y(rad)

    def __matmul__(self, other):
        # Composition in stored layout: (self @ other) applies other first.
        if isinstance(other, Mat4):
            return Mat4(other.m @ self.m)
        if isinstance(other, Vec4):
            return transform_point(self, other)
        return NotImplemented

    def __repr__(self):
        return f"Mat4({self.m.tolist()})"


def transform_point(transform: Mat4, point: Vec4) -> Vec4:
    """Weighted sum of the transform's stored rows by the point's components."""
    return Vec4.from_array(point.v @ transform.m)
