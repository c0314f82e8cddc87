# tmath/geometry/rect.py
# ---------------------------------------------------------------
# Прямоугольник, выровненный по осям (x, y – левый верхний угол,
# ось Y направлена вниз):
# - рёбра и get_edge(Edge),
# - contains для Vec2 / Point / Rect,
# - intersects,
# - покомпонентная арифметика.
# ---------------------------------------------------------------

from enum import Enum

from tmath.math import scalar
from tmath.math.vec2 import Vec2
from tmath.geometry.point import Point


class Edge(Enum):
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


class Rect:
    __slots__ = ("x", "y", "width", "height")

    def __init__(self, x=0.0, y=0.0, width=0.0, height=0.0):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    @staticmethod
    def empty() -> "Rect":
        return Rect()

    # -----------------------------------------------------------
    #  Положение / размер
    # -----------------------------------------------------------
    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @position.setter
    def position(self, value: Vec2) -> None:
        self.x = value.x
        self.y = value.y

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @size.setter
    def size(self, value: Vec2) -> None:
        self.width = value.x
        self.height = value.y

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    def get_edge(self, edge: Edge) -> float:
        if edge is Edge.TOP:
            return self.top
        if edge is Edge.LEFT:
            return self.left
        if edge is Edge.BOTTOM:
            return self.bottom
        if edge is Edge.RIGHT:
            return self.right
        raise ValueError(f"[Rect] unknown edge: {edge!r}")

    # -----------------------------------------------------------
    #  Запросы
    # -----------------------------------------------------------
    def contains(self, other) -> bool:
        """
        Vec2 / Point – полуоткрыто: left <= x < right, top <= y < bottom.
        Rect – целиком внутри, правое и нижнее рёбра строго внутри.
        """
        if isinstance(other, Rect):
            return (self.left <= other.left and other.right < self.right
                    and self.top <= other.top and other.bottom < self.bottom)
        if isinstance(other, (Vec2, Point)):
            return (self.left <= other.x < self.right
                    and self.top <= other.y < self.bottom)
        raise TypeError(f"[Rect] cannot test containment of {type(other).__name__}")

    def intersects(self, other: "Rect") -> bool:
        return (other.left < self.right and self.left < other.right
                and other.top < self.bottom and self.top < other.bottom)

    # -----------------------------------------------------------
    #  Арифметика (покомпонентно, деление по IEEE)
    # -----------------------------------------------------------
    def _fields(self):
        return self.x, self.y, self.width, self.height

    def __add__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(*(a + b for a, b in zip(self._fields(), other._fields())))

    def __sub__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(*(a - b for a, b in zip(self._fields(), other._fields())))

    def __mul__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(*(a * b for a, b in zip(self._fields(), other._fields())))

    def __truediv__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(*(scalar.divide(a, b) for a, b in zip(self._fields(), other._fields())))

    def __neg__(self):
        return Rect(-self.x, -self.y, -self.width, -self.height)

    def __pos__(self):
        return Rect(*self._fields())

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return all(a == b for a, b in zip(self._fields(), other._fields()))

    def __hash__(self):
        h = 0
        for value in self._fields():
            h ^= scalar.trunc32(value)
        return h

    def __str__(self):
        return f"X {self.x}, Y {self.y}, Width {self.width}, Height {self.height}"

    def __repr__(self):
        return (f"Rect({self.x:.3f}, {self.y:.3f}, "
                f"{self.width:.3f}, {self.height:.3f})")
