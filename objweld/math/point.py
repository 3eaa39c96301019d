# -*- coding: utf-8 -*-
"""
Точка и нормаль – тонкие обёртки над Vec3.

Разные типы нужны только для того, чтобы `Mat4 * x` знал, как применять
преобразование: точка получает перенос, нормаль – только линейную часть.
"""
import numpy as np
from objweld.math.vec3 import Vec3


class Point:
    __slots__ = ("v",)

    def __init__(self, v: Vec3):
        self.v = v

    def as_np(self) -> np.ndarray:
        return self.v.as_np()

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.v == other.v

    def __repr__(self):
        return f"Point({self.v.x:.3f}, {self.v.y:.3f}, {self.v.z:.3f})"


class Normal:
    __slots__ = ("v",)

    def __init__(self, v: Vec3):
        self.v = v

    def as_np(self) -> np.ndarray:
        return self.v.as_np()

    def __eq__(self, other):
        if not isinstance(other, Normal):
            return NotImplemented
        return self.v == other.v

    def __repr__(self):
        return f"Normal({self.v.x:.3f}, {self.v.y:.3f}, {self.v.z:.3f})"
