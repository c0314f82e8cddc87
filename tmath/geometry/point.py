# tmath/geometry/point.py
# ---------------------------------------------------------------
# Точка на плоскости (x, y) – для простых запросов Rect.contains.
# ---------------------------------------------------------------

from tmath.math import scalar
from tmath.math.vec2 import Vec2


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=None):
        # Point(v) – обе координаты равны v
        self.x = float(x)
        self.y = float(x if y is None else y)

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return scalar.trunc32(self.x) ^ scalar.trunc32(self.y)

    def __str__(self):
        return f"X {self.x}, Y {self.y}"

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f})"
