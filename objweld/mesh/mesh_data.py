# objweld/mesh/mesh_data.py
"""
Результат загрузки: сваренные вершины в виде параллельных массивов.
"""

import numpy as np


class MeshData:
    """
    positions – (N, 3) float32.
    normals   – (N, 3) float32 или (0, 3), если нормалей в файле нет.
    texcoords – (N, 2) float32 или (0, 2), если UV в файле нет.
    """

    __slots__ = ("positions", "normals", "texcoords")

    def __init__(self, positions: np.ndarray,
                 normals: np.ndarray = None,
                 texcoords: np.ndarray = None):
        self.positions = positions.astype(np.float32)
        self.normals = (normals.astype(np.float32) if normals is not None
                        else np.zeros((0, 3), dtype=np.float32))
        self.texcoords = (texcoords.astype(np.float32) if texcoords is not None
                          else np.zeros((0, 2), dtype=np.float32))

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def has_normals(self) -> bool:
        return len(self.normals) > 0

    @property
    def has_texcoords(self) -> bool:
        return len(self.texcoords) > 0

    def bounds(self):
        """(min, max) по осям; None для пустого меша."""
        if self.vertex_count == 0:
            return None
        return self.positions.min(axis=0), self.positions.max(axis=0)

    @property
    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """(центр, радиус) – центр как среднее позиций."""
        if self.vertex_count == 0:
            return np.zeros(3, dtype=np.float32), 0.0
        centre = self.positions.mean(axis=0).astype(np.float32)
        radius = np.linalg.norm(self.positions - centre, axis=1).max()
        return centre, float(radius)

    def interleaved(self) -> np.ndarray:
        """Плоский буфер pos[+normal][+uv] на вершину, готовый для VBO."""
        components = [self.positions]
        if self.has_normals:
            components.append(self.normals)
        if self.has_texcoords:
            components.append(self.texcoords)
        return np.column_stack(components).astype(np.float32).ravel()

    def to_dict(self) -> dict:
        return {
            "positions": self.positions.tolist(),
            "normals": self.normals.tolist(),
            "texcoords": self.texcoords.tolist(),
        }

    def __repr__(self):
        return (f"MeshData(vertices={self.vertex_count}, "
                f"normals={self.has_normals}, texcoords={self.has_texcoords})")
