# objweld/math/mat4.py
import numpy as np
from math import radians, sin, cos

from objweld.math.vec3 import Vec3
from objweld.math.point import Point, Normal


class Mat4:
    """
    Аффинное преобразование 4×4 (float32, строки = оси, перенос в 4‑м столбце).

    `Mat4 * Point` применяет матрицу целиком (с переносом),
    `Mat4 * Normal` – только линейную часть 3×3, без обращения и транспонирования.
    Для корректного преобразования нормалей при неравномерном масштабе
    есть `normal_matrix()`.
    """
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate_x(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle_deg: float):
        a = radians(angle_deg)
        c, s = cos(a), sin(a)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def from_euler(pitch: float, yaw: float, roll: float):
        Rx = Mat4.rotate_x(pitch)
        Ry = Mat4.rotate_y(yaw)
        Rz = Mat4.rotate_z(roll)
        return Ry @ Rx @ Rz

    @staticmethod
    def rigid(axis, angle_deg: float, translation=(0.0, 0.0, 0.0)) -> "Mat4":
        """
        Жёсткое преобразование: поворот на angle_deg вокруг оси axis,
        затем перенос. Матрица собирается из единичного кватерниона (x, y, z, w).
        """
        ax = np.asarray(axis, dtype=np.float64)
        norm = np.linalg.norm(ax)
        if norm == 0.0:
            raise ValueError("rotation axis must be non-zero")
        half = radians(angle_deg) / 2.0
        x, y, z = ax / norm * sin(half)
        w = cos(half)

        m = np.identity(4, dtype=np.float32)
        m[0, 0] = 1 - 2*(y*y + z*z)
        m[0, 1] = 2*(x*y - w*z)
        m[0, 2] = 2*(x*z + w*y)
        m[1, 0] = 2*(x*y + w*z)
        m[1, 1] = 1 - 2*(x*x + z*z)
        m[1, 2] = 2*(y*z - w*x)
        m[2, 0] = 2*(x*z - w*y)
        m[2, 1] = 2*(y*z + w*x)
        m[2, 2] = 1 - 2*(x*x + y*y)
        m[0:3, 3] = np.asarray(translation, dtype=np.float32)
        return Mat4(m)

    def normal_matrix(self) -> "Mat4":
        """Обратная транспонированная линейная часть (перенос обнулён)."""
        m = np.identity(4, dtype=np.float32)
        m[0:3, 0:3] = np.linalg.inv(self.m[0:3, 0:3]).T
        return Mat4(m)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def __mul__(self, other):
        if isinstance(other, Point):
            res = self.m[0:3, 0:3] @ other.as_np() + self.m[0:3, 3]
            return Point(Vec3.from_np(res))
        if isinstance(other, Normal):
            return Normal(Vec3.from_np(self.m[0:3, 0:3] @ other.as_np()))
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()
