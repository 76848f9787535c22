import math
import sys

from landmark_types import Point

# Stand-in slope for a vertical segment; atan() of it is effectively pi / 2.
VERTICAL_SLOPE = sys.float_info.max


def distance_2d(a: Point, b: Point) -> float:
    # x/y only; z is ignored.
    return math.hypot(a.x - b.x, a.y - b.y)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0, (a.z + b.z) / 2.0)


def mean_x(*points: Point) -> float:
    return sum(p.x for p in points) / len(points)


def asymmetry_ratio(left: float, right: float) -> float:
    """Return 0 for equal sides, approaching 1 as one side vanishes.

    Two zero measures count as symmetric.
    """
    larger = max(left, right)
    if larger == 0:
        return 0.0
    return 1.0 - min(left, right) / larger


def angle_between(a: Point, b: Point, c: Point) -> float:
    # Angle at b formed by rays b->a and b->c, folded into [0, 180].
    radians = math.atan2(c.y - b.y, c.x - b.x) - math.atan2(a.y - b.y, a.x - b.x)
    angle = abs(math.degrees(radians))
    if angle > 180.0:
        angle = 360.0 - angle
    return angle


def slope(a: Point, b: Point) -> float:
    run = b.x - a.x
    if run == 0:
        return VERTICAL_SLOPE
    return (b.y - a.y) / run


def normalize(value: float, reference_max: float) -> float:
    return min(abs(value) / reference_max, 1.0)
