# tmath/math/scalar.py
# ---------------------------------------------------------------
# Скалярный фасад: элементарные функции двойной точности
# (sqrt, sin, cos, fma, min/max, градусы ↔ радианы) и общая
# числовая политика библиотеки:
#   - ни одна функция не бросает исключение на краевых значениях,
#     результат – IEEE‑754 (Inf/NaN);
#   - «-0.0» в тригонометрии заменяется на «+0.0» (snap_negative_zero);
#   - усечение к int32 для хэшей (trunc32).
# ---------------------------------------------------------------

import math

import numpy as np

PI = math.pi

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def to_radians(degrees: float) -> float:
    """Градусы → радианы (deg * PI / 180)."""
    return degrees * PI / 180


def to_degrees(radians: float) -> float:
    """Радианы → градусы (rad * 180 / PI)."""
    return radians * 180 / PI


def sqrt(x: float) -> float:
    try:
        return math.sqrt(x)
    except ValueError:
        return math.nan


def sin(x: float) -> float:
    try:
        return math.sin(x)
    except ValueError:
        return math.nan


def cos(x: float) -> float:
    try:
        return math.cos(x)
    except ValueError:
        return math.nan


def fma(x: float, y: float, z: float) -> float:
    """
    x * y + z с одним округлением.
    math.fma бросает ValueError/OverflowError там, где IEEE даёт NaN/±Inf –
    в этих случаях возвращаем результат IEEE‑арифметики numpy.
    """
    try:
        return math.fma(x, y, z)
    except (ValueError, OverflowError):
        with np.errstate(all="ignore"):
            return float(np.float64(x) * np.float64(y) + np.float64(z))


def divide(a: float, b: float) -> float:
    """Частное по IEEE‑754: 1/0 → inf, 0/0 → nan, без ZeroDivisionError."""
    with np.errstate(all="ignore"):
        return float(np.float64(a) / np.float64(b))


def maximum(a, b):
    """Максимум с распространением NaN; maximum(-0.0, 0.0) == +0.0."""
    if a != a:
        return a
    if b != b:
        return b
    if a == b == 0 and isinstance(a, float) and isinstance(b, float):
        return b if math.copysign(1.0, a) < 0 else a
    return a if a > b else b


def minimum(a, b):
    """Минимум с распространением NaN; minimum(-0.0, 0.0) == -0.0."""
    if a != a:
        return a
    if b != b:
        return b
    if a == b == 0 and isinstance(a, float) and isinstance(b, float):
        return a if math.copysign(1.0, a) < 0 else b
    return a if a < b else b


def snap_negative_zero(x: float) -> float:
    """Политика округления: любой ноль (в т.ч. -0.0) хранится как +0.0."""
    return 0.0 if x == 0 else x


def trunc32(x) -> int:
    """
    Усечение к нулю с насыщением в диапазон int32 (NaN → 0).
    Используется в __hash__ векторов, матриц и прямоугольников.
    """
    if x != x:
        return 0
    if x >= INT32_MAX:
        return INT32_MAX
    if x <= INT32_MIN:
        return INT32_MIN
    return int(x)
