# tmath/math/mat3.py
"""
Матрица 3×3 (float64, по строкам).

    | M[0, 0] M[0, 1] M[0, 2] |      | M11 M12 M13 |
    | M[1, 0] M[1, 1] M[1, 2] |  =   | M21 M22 M23 |
    | M[2, 0] M[2, 1] M[2, 2] |      | M31 M32 M33 |

Как линейное отображение 3D – поворот и масштаб. Перенос задаётся в
2D‑аффинном соглашении: Vec3(x, y, 1) * M, перенос в последней строке.
"""

import numpy as np

from tmath.math._matrix import MatBase, row_property, column_property
from tmath.math.vec2 import Vec2
from tmath.math.vec3 import Vec3


class Mat3(MatBase):
    __slots__ = ()

    SIZE = 3
    _VEC = Vec3

    first_row = row_property(0, "Первая строка матрицы")
    second_row = row_property(1, "Вторая строка матрицы")
    third_row = row_property(2, "Третья строка матрицы")

    first_column = column_property(0, "Первый столбец матрицы")
    second_column = column_property(1, "Второй столбец матрицы")
    third_column = column_property(2, "Третий столбец матрицы")

    @property
    def translation(self) -> Vec2:
        """2D‑перенос: первые две клетки последней строки."""
        return Vec2(self._m[2, 0], self._m[2, 1])

    @translation.setter
    def translation(self, vec: Vec2) -> None:
        self._m[2, 0] = vec.x
        self._m[2, 1] = vec.y

    @staticmethod
    def create_translation(position: Vec2, out=None) -> "Mat3":
        """Единичная матрица с переносом (x, y) в последней строке."""
        m = np.identity(3, dtype=np.float64)
        m[2, 0] = position.x
        m[2, 1] = position.y
        return Mat3._emit(m, out)
