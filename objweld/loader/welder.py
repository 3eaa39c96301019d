# objweld/loader/welder.py
"""
Сварка вершин и сборка треугольников.

Одинаковые тройки (p, t, n) всегда получают один и тот же индекс выходной
вершины. Индексы выдаются подряд с нуля: новый индекс = len(таблицы).
"""

import numpy as np

from objweld.errors import InconsistentAttributesError, UnsupportedFaceArityError
from objweld.loader.indices import parse_corner
from objweld.loader.ingest import stack
from objweld.mesh.mesh_data import MeshData

SUPPORTED_ARITIES = (3, 4)


def check_arity(count: int):
    if count not in SUPPORTED_ARITIES:
        raise UnsupportedFaceArityError(count)


def triangulate(corners):
    """Треугольник как есть; четырёхугольник – веером от первой вершины."""
    check_arity(len(corners))
    if len(corners) == 3:
        return [(corners[0], corners[1], corners[2])]
    return [(corners[0], corners[1], corners[2]),
            (corners[0], corners[2], corners[3])]


class WeldingTable:
    """VertexKey → индекс выходной вершины."""

    def __init__(self):
        self._map = {}

    def get(self, key):
        return self._map.get(key)

    def insert(self, key) -> int:
        index = len(self._map)
        self._map[key] = index
        return index

    def __contains__(self, key):
        return key in self._map

    def __len__(self):
        return len(self._map)


class Welder:
    """Собирает сваренные вершины и список треугольников за один проход."""

    def __init__(self, pools):
        self.pools = pools
        self.table = WeldingTable()
        self.positions = []
        # None там, где у вершины нет атрибута
        self.normals = []
        self.texcoords = []
        self.triangles = []

    def weld(self, key) -> int:
        index = self.table.get(key)
        if index is not None:
            return index

        self.positions.append(self.pools.positions[key.p])
        self.texcoords.append(self.pools.texcoords[key.t] if key.has_texcoord else None)
        self.normals.append(self.pools.normals[key.n] if key.has_normal else None)
        return self.table.insert(key)

    def add_face(self, tokens):
        """
        Разобрать все углы грани и добавить её треугольники.

        Арность и ссылки проверяются до изменения таблицы, поэтому грань
        с ошибкой не оставляет после себя ни вершин, ни треугольников.
        """
        check_arity(len(tokens))
        keys = [parse_corner(token, self.pools) for token in tokens]
        corners = [self.weld(key) for key in keys]
        self.triangles.extend(triangulate(corners))

    # -----------------------------------------------------------------
    # финализация
    # -----------------------------------------------------------------
    def _align(self, name, rows, width, pad, policy) -> np.ndarray:
        present = sum(1 for row in rows if row is not None)
        if present == 0:
            return stack([], width)
        if present < len(rows):
            if policy == "strict":
                raise InconsistentAttributesError(name, present, len(rows))
            pad = np.asarray(pad, dtype=np.float32)
            rows = [row if row is not None else pad for row in rows]
        return stack(rows, width)

    def finish(self, config):
        """Вернуть (MeshData, triangles (M, 3) uint32)."""
        policy = config["attribute_policy"]
        mesh = MeshData(
            positions=stack(self.positions, 3),
            normals=self._align("normals", self.normals, 3,
                                config["pad_normal"], policy),
            texcoords=self._align("texcoords", self.texcoords, 2,
                                  config["pad_texcoord"], policy),
        )
        faces = np.array(self.triangles, dtype=np.uint32).reshape((-1, 3))
        return mesh, faces
