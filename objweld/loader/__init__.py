"""
Загрузчик OBJ: токенизация, пулы атрибутов, разбор индексов, сварка вершин.
"""

from objweld.loader.obj_loader import ObjLoader, LoadStats, load_obj, loads, load_from_file
from objweld.loader.indices import VertexKey, ABSENT
from objweld.loader.welder import WeldingTable, triangulate

__all__ = [
    "ObjLoader",
    "LoadStats",
    "load_obj",
    "loads",
    "load_from_file",
    "VertexKey",
    "ABSENT",
    "WeldingTable",
    "triangulate",
]
