"""
Пакет geometry – 2D‑помощники: точка и прямоугольник, выровненный по осям.
"""

from tmath.geometry.point import Point
from tmath.geometry.rect import Rect, Edge

__all__ = ["Point", "Rect", "Edge"]
