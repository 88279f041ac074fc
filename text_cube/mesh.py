#
# PROJECT: text-cube
# MODULE: text_cube/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
#     4    +------+  6
#         /|     /|
#     5  +------+ |  7
#        | |    | |
#     0  | +----|-+  2
#        |/     |/
#     1  +------+    3
#

from .math_utils import Vec4

CUBE_VERTICES = (
    (-1.0, -1.0, -1.0),
    (-1.0, -1.0,  1.0),
    ( 1.0, -1.0, -1.0),
    ( 1.0, -1.0,  1.0),
    (-1.0,  1.0, -1.0),
    (-1.0,  1.0,  1.0),
    ( 1.0,  1.0, -1.0),
    ( 1.0,  1.0,  1.0),
)

# All faces share one winding, so a single screen-space test culls them.
CUBE_FACES = (
    (1, 5, 7, 3),  # +z
    (3, 7, 6, 2),  # +x
    (0, 4, 5, 1),  # -x
    (2, 6, 4, 0),  # -z
    (0, 1, 3, 2),  # -y
    (5, 4, 6, 7),  # +y
)


class Mesh:
    """Read-only vertex and quad-face lists in object space."""
    __slots__ = ('vertices', 'faces')

    def __init__(self, vertices, faces):
        self.vertices = tuple(Vec4(x, y, z, 1.0) for x, y, z in vertices)
        self.faces = tuple(tuple(int(i) for i in f) for f in faces)
        for f in self.faces:
            if len(f) < 3 or any(i < 0 or i >= len(self.vertices) for i in f):
                raise ValueError(f"face {f} does not index {len(self.vertices)} vertices")

    @classmethod
    def cube(cls) -> 'Mesh':
        """The 2x2x2 cube centered at the origin."""
        return cls(CUBE_VERTICES, CUBE_FACES)
