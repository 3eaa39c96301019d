"""
Математический суб‑пакет: Vec2, Vec3, Point, Normal, Mat4.
"""

from objweld.math.vec3 import Vec2, Vec3
from objweld.math.point import Point, Normal
from objweld.math.mat4 import Mat4

__all__ = ["Vec2", "Vec3", "Point", "Normal", "Mat4"]
