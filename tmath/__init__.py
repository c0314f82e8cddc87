"""
TMath – примитивы линейной алгебры для графики и симуляций:
векторы 2/3/4, матрицы 3×3/4×4, конструкторы преобразований
(поворот, масштаб, перенос, ортографическая проекция).
"""

from tmath.utils import logger, Config
from tmath.math import scalar, Vec2, Vec3, Vec4, Mat3, Mat4
from tmath.geometry import Point, Rect, Edge

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "scalar",
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat3",
    "Mat4",
    "Point",
    "Rect",
    "Edge",
]
