# tmath/math/_vector.py
"""
Общая часть Vec2/Vec3/Vec4: хранение (numpy float64), индексация,
покомпонентная арифметика, сравнение, хэш и применение матрицы к вектору.
"""

import numbers
import operator
from functools import reduce

import numpy as np

from tmath.math import scalar
from tmath.math._matrix import MatBase
from tmath.utils.logger import report_index_miss


class VecBase:
    """Вектор фиксированной длины SIZE (значимый тип)."""

    __slots__ = ("_v",)

    SIZE = 0
    LABELS = ()
    # numpy‑скаляры слева (np.float32(2) * v) отдают операцию нашему __rmul__
    __array_ufunc__ = None

    # -----------------------------------------------------------------
    # служебное
    # -----------------------------------------------------------------
    def _new(self, values) -> "VecBase":
        return type(self)(*values)

    def _same_kind(self, other) -> bool:
        return isinstance(other, type(self)) and isinstance(self, type(other))

    # -----------------------------------------------------------------
    # индексация (за пределами 0..SIZE-1: чтение → 0.0, запись игнорируется)
    # -----------------------------------------------------------------
    def __getitem__(self, index) -> float:
        i = operator.index(index)
        if 0 <= i < self.SIZE:
            return float(self._v[i])
        report_index_miss(type(self).__name__, i)
        return 0.0

    def __setitem__(self, index, value: float) -> None:
        i = operator.index(index)
        if 0 <= i < self.SIZE:
            self._v[i] = float(value)
        else:
            report_index_miss(type(self).__name__, i, "write ignored")

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self):
        for value in self._v.tolist():
            yield value

    def set(self, *components: float) -> None:
        """Присвоить все компоненты на месте."""
        if len(components) != self.SIZE:
            raise TypeError(f"{type(self).__name__}.set() takes {self.SIZE} components, "
                            f"got {len(components)}")
        self._v[:] = components

    def copy(self) -> "VecBase":
        return self._new(self._v)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        with np.errstate(all="ignore"):
            return self._new(self._v + other._v)

    def __sub__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        with np.errstate(all="ignore"):
            return self._new(self._v - other._v)

    def __mul__(self, other):
        if self._same_kind(other):
            with np.errstate(all="ignore"):
                return self._new(self._v * other._v)
        if isinstance(other, MatBase) and other.SIZE == self.SIZE:
            return self._transform(other)
        if isinstance(other, numbers.Real):
            with np.errstate(all="ignore"):
                return self._new(self._v * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            with np.errstate(all="ignore"):
                return self._new(float(other) * self._v)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, MatBase) and other.SIZE == self.SIZE:
            return self._transform(other)
        return NotImplemented

    def __truediv__(self, other):
        if self._same_kind(other):
            divisor = other._v
        elif isinstance(other, numbers.Real):
            divisor = float(other)
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            return self._new(self._v / divisor)

    def __neg__(self):
        return self._new(-self._v)

    def __pos__(self):
        return self.copy()

    # именованные формы – вызываются и как методы, и как Vec3.add(a, b)
    def add(self, other):
        return operator.add(self, other)

    def subtract(self, other):
        return operator.sub(self, other)

    def multiply(self, other):
        """Покомпонентно (вектор), растяжение (число) или v × M (матрица)."""
        return operator.mul(self, other)

    def divide(self, other):
        return operator.truediv(self, other)

    def negate(self):
        return -self

    def _transform(self, mat: MatBase):
        # Цепочка FMA от последней строки матрицы к первой:
        # out[j] = fma(m[0,j], v0, fma(m[1,j], v1, ... m[n-1,j] * v[n-1]))
        m = mat._m.tolist()
        v = self._v.tolist()
        last = self.SIZE - 1
        out = []
        for j in range(self.SIZE):
            acc = m[last][j] * v[last]
            for k in range(last - 1, -1, -1):
                acc = scalar.fma(m[k][j], v[k], acc)
            out.append(acc)
        return self._new(out)

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other) -> float:
        """Скалярное произведение (суммирование слева направо)."""
        if not self._same_kind(other):
            raise TypeError(f"dot() needs two {type(self).__name__} values")
        a = self._v.tolist()
        b = other._v.tolist()
        total = a[0] * b[0]
        for i in range(1, self.SIZE):
            total = total + a[i] * b[i]
        return total

    @property
    def magnitude(self) -> float:
        """Евклидова длина, считается при каждом обращении."""
        values = self._v.tolist()
        total = values[0] * values[0]
        for value in values[1:]:
            total = total + value * value
        return scalar.sqrt(total)

    # -----------------------------------------------------------------
    # сравнение и хэш
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        return bool(np.all(self._v == other._v))

    def __hash__(self):
        """
        XOR усечённых компонент. Вектор изменяем (сеттеры, set, v[i] = ...):
        ключом словаря или элементом множества может быть только значение,
        которое после вставки больше не меняется.
        """
        return reduce(operator.xor, (scalar.trunc32(c) for c in self._v.tolist()))

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return ", ".join(f"{label} {value}" for label, value in zip(self.LABELS, self))

    def __repr__(self) -> str:
        body = ", ".join(f"{value:.3f}" for value in self)
        return f"{type(self).__name__}({body})"

    def as_np(self) -> np.ndarray:
        """Копия ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> tuple:
        return tuple(self._v.tolist())
