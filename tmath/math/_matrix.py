# tmath/math/_matrix.py
"""
Общая часть Mat3/Mat4: квадратная сетка float64 с хранением по строкам
(m[row, col]), поэлементная арифметика, произведение матриц, транспонирование,
сравнения (поэлементная конъюнкция) и конструкторы поворота/масштаба.

Соглашение – вектор‑строка: v' = v * M, перенос лежит в последней строке.
"""

import operator
from functools import reduce

import numpy as np

from tmath.math import scalar
from tmath.utils.logger import report_index_miss


def row_property(index: int, doc: str) -> property:
    """Строка матрицы как вектор (чтение – новый вектор, запись – копирование)."""
    def getter(self):
        return self._VEC(*self._m[index])

    def setter(self, vec):
        self._m[index, :] = vec.to_tuple()

    return property(getter, setter, doc=doc)


def column_property(index: int, doc: str) -> property:
    """Столбец матрицы как вектор."""
    def getter(self):
        return self._VEC(*self._m[:, index])

    def setter(self, vec):
        self._m[:, index] = vec.to_tuple()

    return property(getter, setter, doc=doc)


def _trig(radians: float, rounding: bool):
    c = scalar.cos(radians)
    s = scalar.sin(radians)
    if rounding:
        c = scalar.snap_negative_zero(c)
        s = scalar.snap_negative_zero(s)
    return c, s


class MatBase:
    """Квадратная матрица SIZE×SIZE (значимый тип)."""

    __slots__ = ("_m",)

    SIZE = 0
    __array_ufunc__ = None
    _VEC = None
    # клетки, которые во всех операторах порядка сравниваются через >=
    _LOOSE_MASK = None

    def __init__(self, array=None):
        if array is None:
            self._m = np.identity(self.SIZE, dtype=np.float64)
        else:
            if isinstance(array, MatBase):
                array = array._m
            self._m = np.array(array, dtype=np.float64).reshape((self.SIZE, self.SIZE))

    @classmethod
    def identity(cls):
        return cls(np.identity(cls.SIZE, dtype=np.float64))

    @classmethod
    def from_rows(cls, *rows):
        """Собрать матрицу из SIZE векторов‑строк."""
        return cls([row.to_tuple() for row in rows])

    @classmethod
    def from_values(cls, *values: float):
        """Собрать матрицу из SIZE*SIZE чисел (по строкам)."""
        return cls(values)

    @classmethod
    def _emit(cls, grid: np.ndarray, out=None):
        # форма с out= пишет в готовую матрицу, без out= – создаёт новую
        if out is None:
            return cls(grid)
        if not isinstance(out, cls):
            raise TypeError(f"out must be a {cls.__name__}, got {type(out).__name__}")
        out._m[...] = grid
        return out

    def copy(self):
        return type(self)(self._m)

    # -----------------------------------------------------------------
    # индексация m[i, j]
    # -----------------------------------------------------------------
    def _cell(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"{type(self).__name__} indices must be a (row, col) pair")
        i, j = operator.index(key[0]), operator.index(key[1])
        inside = 0 <= i < self.SIZE and 0 <= j < self.SIZE
        return i, j, inside

    def __getitem__(self, key) -> float:
        i, j, inside = self._cell(key)
        if inside:
            return float(self._m[i, j])
        report_index_miss(type(self).__name__, (i, j))
        return 0.0

    def __setitem__(self, key, value: float) -> None:
        i, j, inside = self._cell(key)
        if inside:
            self._m[i, j] = float(value)
        else:
            report_index_miss(type(self).__name__, (i, j), "write ignored")

    def rows(self) -> list:
        return [self._VEC(*row) for row in self._m]

    def __iter__(self):
        return iter(self.rows())

    @property
    def scale(self):
        """Масштаб – диагональ (0,0), (1,1), (2,2)."""
        from tmath.math.vec3 import Vec3
        return Vec3(self._m[0, 0], self._m[1, 1], self._m[2, 2])

    @scale.setter
    def scale(self, vec) -> None:
        self._m[0, 0] = vec.x
        self._m[1, 1] = vec.y
        self._m[2, 2] = vec.z

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)(self._m + other._m)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)(self._m - other._m)

    def __neg__(self):
        return type(self)(-self._m)

    def __pos__(self):
        return self.copy()

    def __truediv__(self, other):
        """Поэлементное частное – НЕ умножение на обратную матрицу."""
        if not isinstance(other, type(self)):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)(self._m / other._m)

    def __mul__(self, other):
        """Произведение матриц: r[i,j] = Σk a[i,k]·b[k,j], k по возрастанию."""
        if not isinstance(other, type(self)):
            return NotImplemented
        a = self._m.tolist()
        b = other._m.tolist()
        n = self.SIZE
        res = [[0.0] * n for _ in range(n)]
        for i in range(n):
            for j in range(n):
                val = 0.0
                for k in range(n):
                    val += a[i][k] * b[k][j]
                res[i][j] = val
        return type(self)(res)

    __matmul__ = __mul__

    def add(self, other):
        return operator.add(self, other)

    def subtract(self, other):
        return operator.sub(self, other)

    def multiply(self, other):
        return operator.mul(self, other)

    def divide(self, other):
        return operator.truediv(self, other)

    def negate(self):
        return -self

    def transpose(self):
        """
        Транспонированная копия; работает и как m.transpose(),
        и как MatN.transpose(m).
        """
        return type(self)(self._m.T)

    # -----------------------------------------------------------------
    # сравнения
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.all(self._m == other._m))

    def _order(self, other, op):
        if not isinstance(other, type(self)):
            return NotImplemented
        cells = op(self._m, other._m)
        if self._LOOSE_MASK is not None:
            loose = self._m >= other._m
            cells = np.where(self._LOOSE_MASK, loose, cells)
        return bool(np.all(cells))

    def __gt__(self, other):
        return self._order(other, operator.gt)

    def __lt__(self, other):
        return self._order(other, operator.lt)

    def __ge__(self, other):
        return self._order(other, operator.ge)

    def __le__(self, other):
        return self._order(other, operator.le)

    def __hash__(self):
        """
        XOR усечённых клеток. Матрица изменяема (m[i, j] = ..., сеттеры
        строк, out=): как ключ годится только та, что после вставки не меняется.
        """
        return reduce(operator.xor, (scalar.trunc32(c) for c in self._m.flat))

    # -----------------------------------------------------------------
    # конструкторы преобразований
    # -----------------------------------------------------------------
    @classmethod
    def create_rotation_x(cls, radians: float, rounding: bool = True, out=None):
        """Поворот вокруг X (блок Y/Z)."""
        c, s = _trig(radians, rounding)
        grid = np.identity(cls.SIZE, dtype=np.float64)
        grid[1, 1] = c
        grid[1, 2] = -s
        grid[2, 1] = s
        grid[2, 2] = c
        return cls._emit(grid, out)

    @classmethod
    def create_rotation_y(cls, radians: float, rounding: bool = True, out=None):
        """Поворот вокруг Y (блок X/Z, знак синуса зеркален относительно X)."""
        c, s = _trig(radians, rounding)
        grid = np.identity(cls.SIZE, dtype=np.float64)
        grid[0, 0] = c
        grid[0, 2] = s
        grid[2, 0] = -s
        grid[2, 2] = c
        return cls._emit(grid, out)

    @classmethod
    def create_rotation_z(cls, radians: float, rounding: bool = True, out=None):
        """Поворот вокруг Z (блок X/Y)."""
        c, s = _trig(radians, rounding)
        grid = np.identity(cls.SIZE, dtype=np.float64)
        grid[0, 0] = c
        grid[0, 1] = s
        grid[1, 0] = -s
        grid[1, 1] = c
        return cls._emit(grid, out)

    @classmethod
    def create_rotation(cls, radians, rounding: bool = True, out=None):
        """
        Поворот по всем осям: Rx(radians.x) * Ry(radians.y) * Rz(radians.z).
        Порядок фиксирован – композиция поворотов некоммутативна.
        """
        mat = (cls.create_rotation_x(radians.x, rounding)
               * cls.create_rotation_y(radians.y, rounding)
               * cls.create_rotation_z(radians.z, rounding))
        return cls._emit(mat._m, out)

    @classmethod
    def create_rotation_uniform(cls, radians: float, rounding: bool = True, out=None):
        """
        Один и тот же угол по всем трём осям (та же композиция X*Y*Z).
        Удобство, а не эталон: результат редко совпадает с ожидаемым
        поворотом, для реальных задач используйте create_rotation(Vec3).
        """
        mat = (cls.create_rotation_x(radians, rounding)
               * cls.create_rotation_y(radians, rounding)
               * cls.create_rotation_z(radians, rounding))
        return cls._emit(mat._m, out)

    @classmethod
    def create_scale(cls, scale, out=None):
        """Единичная матрица с диагональю (scale.x, scale.y, scale.z)."""
        grid = np.identity(cls.SIZE, dtype=np.float64)
        grid[0, 0] = scale.x
        grid[1, 1] = scale.y
        grid[2, 2] = scale.z
        return cls._emit(grid, out)

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return ", \n".join(
            ", ".join(f"M{i + 1}{j + 1}: {value}" for j, value in enumerate(row))
            for i, row in enumerate(self._m.tolist())
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._m.tolist()})"

    def to_np(self) -> np.ndarray:
        return self._m.copy()
