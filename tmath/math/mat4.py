# tmath/math/mat4.py
import numpy as np

from tmath.math import scalar
from tmath.math._matrix import MatBase, row_property, column_property
from tmath.math.vec3 import Vec3
from tmath.math.vec4 import Vec4


def _loose_last_column():
    mask = np.zeros((4, 4), dtype=bool)
    mask[:, 3] = True
    return mask


class Mat4(MatBase):
    """
    Матрица 4×4 для аффинных преобразований в однородных координатах.
    Вектор‑строка: v' = v * M, перенос – m[3, 0..2].

    Операторы порядка (>, <, >=, <=) сравнивают последний столбец через
    >= независимо от оператора. Асимметрия сохранена как есть и, скорее
    всего, является ошибкой.
    """
    __slots__ = ()

    SIZE = 4
    _VEC = Vec4
    _LOOSE_MASK = _loose_last_column()

    first_row = row_property(0, "Первая строка матрицы")
    second_row = row_property(1, "Вторая строка матрицы")
    third_row = row_property(2, "Третья строка матрицы")
    fourth_row = row_property(3, "Четвёртая строка матрицы")

    first_column = column_property(0, "Первый столбец матрицы")
    second_column = column_property(1, "Второй столбец матрицы")
    third_column = column_property(2, "Третий столбец матрицы")
    fourth_column = column_property(3, "Четвёртый столбец матрицы")

    @property
    def translation(self) -> Vec3:
        return Vec3(self._m[3, 0], self._m[3, 1], self._m[3, 2])

    @translation.setter
    def translation(self, vec: Vec3) -> None:
        self._m[3, 0] = vec.x
        self._m[3, 1] = vec.y
        self._m[3, 2] = vec.z

    @staticmethod
    def create_translation(position: Vec3, out=None) -> "Mat4":
        m = np.identity(4, dtype=np.float64)
        m[3, 0] = position.x
        m[3, 1] = position.y
        m[3, 2] = position.z
        return Mat4._emit(m, out)

    @staticmethod
    def create_orthographic(right: float, left: float, top: float,
                            bottom: float, far: float, near: float,
                            out=None) -> "Mat4":
        """Ортографическая проекция в стиле OpenGL (объём l..r, b..t, n..f)."""
        m = np.zeros((4, 4), dtype=np.float64)
        m[0, 0] = scalar.divide(2, right - left)
        m[1, 1] = scalar.divide(2, top - bottom)
        m[2, 2] = scalar.divide(-2, far - near)
        m[3, 0] = scalar.divide(-(right + left), right - left)
        m[3, 1] = scalar.divide(-(top + bottom), top - bottom)
        m[3, 2] = scalar.divide(-(far + near), far - near)
        m[3, 3] = 1.0
        return Mat4._emit(m, out)

    @staticmethod
    def create_orthographic_centered(width: float, height: float,
                                     far: float, near: float,
                                     out=None) -> "Mat4":
        """Ортографическая проекция с центром в начале координат, z в [0, 1]."""
        m = np.zeros((4, 4), dtype=np.float64)
        m[0, 0] = scalar.divide(2, width)
        m[1, 1] = scalar.divide(2, height)
        m[2, 2] = scalar.divide(1, far - near)
        m[3, 2] = scalar.divide(-near, far - near)
        m[3, 3] = 1.0
        return Mat4._emit(m, out)
