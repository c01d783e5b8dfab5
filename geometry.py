import math
from typing import Optional, Tuple

import numpy as np

from pose_types import Landmark

_EPS = 1e-9


def round_tenth(value: float) -> float:
    # Halves round up (12.25 -> 12.3), not to even as round() does.
    return math.floor(value * 10 + 0.5) / 10


def vector_angle(u: Tuple[float, float], v: Tuple[float, float]) -> Optional[float]:
    # Unrounded angle in degrees between two 2D vectors, None if either is zero.
    mag_u = math.hypot(u[0], u[1])
    mag_v = math.hypot(v[0], v[1])
    if mag_u < _EPS or mag_v < _EPS:
        return None
    cos_theta = (u[0] * v[0] + u[1] * v[1]) / (mag_u * mag_v)
    return float(np.degrees(np.arccos(np.clip(cos_theta, -1.0, 1.0))))


def angle3(a: Landmark, b: Landmark, c: Landmark) -> Optional[float]:
    # Angle at b between (a - b) and (c - b), measured in the image plane only
    # (z is dropped) and rounded to one decimal.
    angle = vector_angle((a.x - b.x, a.y - b.y), (c.x - b.x, c.y - b.y))
    if angle is None:
        return None
    return round_tenth(angle)


def segment_angle(start: Landmark, end: Landmark) -> Optional[float]:
    # Angle of start->end against the +x axis, 0..180, ignoring the y sign.
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length < _EPS:
        return None
    cos_theta = max(-1.0, min(1.0, dx / length))
    return round_tenth(math.degrees(math.acos(cos_theta)))


def slope_degrees(dx: float, dy: float) -> Optional[float]:
    # atan(dy / dx) in degrees; undefined for vertical vectors.
    if abs(dx) < _EPS:
        return None
    return math.degrees(math.atan(dy / dx))
