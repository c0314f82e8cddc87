# tmath/math/vec2.py
"""
2‑мерный вектор (float64). Используется геометрическими помощниками
(Rect, Point) и как перенос в 2D‑аффинной Mat3.
"""

import numpy as np

from tmath.math._vector import VecBase


class Vec2(VecBase):
    """Короткий вектор‑2 (float64)."""

    __slots__ = ()

    SIZE = 2
    LABELS = ("X", "Y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float64)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    # -----------------------------------------------------------------
    # именованные константы (каждый вызов – новое значение)
    # -----------------------------------------------------------------
    @staticmethod
    def zero() -> "Vec2":
        return Vec2(0, 0)

    @staticmethod
    def one() -> "Vec2":
        return Vec2(1, 1)

    @staticmethod
    def up() -> "Vec2":
        return Vec2(0, 1)

    @staticmethod
    def down() -> "Vec2":
        return Vec2(0, -1)

    @staticmethod
    def left() -> "Vec2":
        return Vec2(-1, 0)

    @staticmethod
    def right() -> "Vec2":
        return Vec2(1, 0)
