#
# PROJECT: text-cube
# MODULE: text_cube/culling.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#


def is_back_face(p0, p1, p2) -> bool:
    """
    Screen-space backface test on the first three vertices of a face.

    Compares the two halves of the 2D cross product of (p1 - p0) and
    (p2 - p1). Edge-on faces (zero cross product) are kept.
    """
    dx0, dx1 = p1[0] - p0[0], p2[0] - p1[0]
    dy0, dy1 = p1[1] - p0[1], p2[1] - p1[1]
    return bool(dx0 * dy1 > dx1 * dy0)
