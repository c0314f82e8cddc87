"""
Математический суб‑пакет: скалярный фасад, Vec2, Vec3, Vec4, Mat3, Mat4.
"""

from tmath.math import scalar
from tmath.math.vec2 import Vec2
from tmath.math.vec3 import Vec3
from tmath.math.vec4 import Vec4
from tmath.math.mat3 import Mat3
from tmath.math.mat4 import Mat4

__all__ = ["scalar", "Vec2", "Vec3", "Vec4", "Mat3", "Mat4"]
