"""
objweld – загрузчик Wavefront OBJ в компактный индексированный меш.

Читает позиции, нормали и текстурные координаты, сваривает одинаковые
комбинации атрибутов в одну вершину и разбивает четырёхугольники на
треугольники.
"""

from objweld.utils import logger, LoaderConfig
from objweld.math import Vec2, Vec3, Point, Normal, Mat4
from objweld.mesh import MeshData
from objweld.loader import ObjLoader, load_obj, loads, load_from_file
from objweld.errors import (
    ObjError,
    IoOpenError,
    IoReadError,
    MissingScalarError,
    MalformedScalarError,
    MissingPositionIndexError,
    UnsupportedFaceArityError,
    InvalidIndexError,
    InconsistentAttributesError,
)

__version__ = "1.0.0"

__all__ = [
    "LoaderConfig",
    "Vec2",
    "Vec3",
    "Point",
    "Normal",
    "Mat4",
    "MeshData",
    "ObjLoader",
    "load_obj",
    "loads",
    "load_from_file",
    "ObjError",
    "IoOpenError",
    "IoReadError",
    "MissingScalarError",
    "MalformedScalarError",
    "MissingPositionIndexError",
    "UnsupportedFaceArityError",
    "InvalidIndexError",
    "InconsistentAttributesError",
]
