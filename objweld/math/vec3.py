# -*- coding: utf-8 -*-
"""
Двух- и трёхмерные векторы на базе NumPy (float32).
"""
import numpy as np


class Vec2:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0):
        self._v = np.array([x, y], dtype=np.float32)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def as_np(self) -> np.ndarray:
        """Копия 2‑элементного массива float32."""
        return self._v.copy()

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @staticmethod
    def from_np(arr) -> "Vec3":
        return Vec3(*np.asarray(arr, dtype=np.float32)[:3])

    # -------------------------------------------------
    # свойства
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
