# objweld/loader/ingest.py
"""
Сырые пулы атрибутов: позиции, нормали и текстурные координаты
в порядке появления в файле.
"""

import re

import numpy as np

from objweld.errors import MissingScalarError, MalformedScalarError
from objweld.math import Vec2, Vec3, Point, Normal

# только ASCII‑запись числа, без "_"
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE)


def parse_scalar(tokens, field: str) -> float:
    """Взять следующий токен из итератора и разобрать его как float."""
    token = next(tokens, None)
    if token is None:
        raise MissingScalarError(field)
    if not _FLOAT_RE.fullmatch(token):
        raise MalformedScalarError(field, token)
    return float(token)


def parse_f3(tokens, kind: str) -> Vec3:
    it = iter(tokens)
    return Vec3(parse_scalar(it, f"{kind}.x"),
                parse_scalar(it, f"{kind}.y"),
                parse_scalar(it, f"{kind}.z"))


def parse_f2(tokens, kind: str) -> Vec2:
    it = iter(tokens)
    return Vec2(parse_scalar(it, f"{kind}.u"),
                parse_scalar(it, f"{kind}.v"))


class AttributePools:
    """
    Три независимых пула. Позиции и нормали хранятся уже в мировых
    координатах (после `to_world`), UV – как в файле.
    Лишние токены в записи игнорируются (например, w у `v` и `vt`).
    """

    def __init__(self, to_world, normal_transform=None):
        self.to_world = to_world
        self.normal_transform = normal_transform if normal_transform is not None else to_world
        self.positions = []
        self.normals = []
        self.texcoords = []

    def add_point(self, tokens):
        p = self.to_world * Point(parse_f3(tokens, "v"))
        self.positions.append(p.as_np())

    def add_uv(self, tokens):
        self.texcoords.append(parse_f2(tokens, "vt").as_np())

    def add_normal(self, tokens):
        n = self.normal_transform * Normal(parse_f3(tokens, "vn"))
        self.normals.append(n.as_np())

    def sizes(self):
        return len(self.positions), len(self.texcoords), len(self.normals)

    def __repr__(self):
        p, t, n = self.sizes()
        return f"AttributePools(positions={p}, texcoords={t}, normals={n})"


def stack(rows, width: int) -> np.ndarray:
    """Список векторов → массив (N, width) float32; пустой список → (0, width)."""
    if not rows:
        return np.zeros((0, width), dtype=np.float32)
    return np.stack(rows).astype(np.float32)
