# tmath/math/vec4.py
"""
4‑мерный вектор (float64). Однородные координаты для Mat4:
v * M применяет аффинное преобразование (W = 1 – точка, W = 0 – направление).
"""

import numpy as np

from tmath.math._vector import VecBase


class Vec4(VecBase):
    """Короткий вектор‑4 (float64)."""

    __slots__ = ()

    SIZE = 4
    LABELS = ("X", "Y", "Z", "W")

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float64)

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

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = float(value)

    # -----------------------------------------------------------------
    # константы; направления – точки (W = 1)
    # -----------------------------------------------------------------
    @staticmethod
    def zero() -> "Vec4":
        return Vec4(0, 0, 0, 0)

    @staticmethod
    def one() -> "Vec4":
        return Vec4(1, 1, 1, 1)

    @staticmethod
    def up() -> "Vec4":
        return Vec4(0, 1, 0, 1)

    @staticmethod
    def down() -> "Vec4":
        return Vec4(0, -1, 0, 1)

    @staticmethod
    def left() -> "Vec4":
        return Vec4(-1, 0, 0, 1)

    @staticmethod
    def right() -> "Vec4":
        return Vec4(1, 0, 0, 1)
