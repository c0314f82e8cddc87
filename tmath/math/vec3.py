# tmath/math/vec3.py
"""
Трёхмерный вектор (float64): покомпонентная арифметика, dot/cross
и применение матрицы 3×3 (v * M).
"""

import numpy as np

from tmath.math._vector import VecBase


class Vec3(VecBase):
    __slots__ = ()

    SIZE = 3
    LABELS = ("X", "Y", "Z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    # -------------------------------------------------
    # константы
    # -------------------------------------------------
    @staticmethod
    def zero() -> "Vec3":
        return Vec3(0, 0, 0)

    @staticmethod
    def one() -> "Vec3":
        return Vec3(1, 1, 1)

    @staticmethod
    def up() -> "Vec3":
        return Vec3(0, 1, 0)

    @staticmethod
    def down() -> "Vec3":
        return Vec3(0, -1, 0)

    @staticmethod
    def left() -> "Vec3":
        return Vec3(-1, 0, 0)

    @staticmethod
    def right() -> "Vec3":
        return Vec3(1, 0, 0)

    # -------------------------------------------------
    # векторное произведение (правая тройка)
    # -------------------------------------------------
    def cross(self, other: "Vec3") -> "Vec3":
        """a × b; вызывается и как a.cross(b), и как Vec3.cross(a, b)."""
        if not self._same_kind(other):
            raise TypeError("cross() needs two Vec3 values")
        ax, ay, az = self._v.tolist()
        bx, by, bz = other._v.tolist()
        x = ay * bz - by * az
        y = -(ax * bz - bx * az)
        z = ax * by - bx * ay
        return Vec3(x, y, z)
