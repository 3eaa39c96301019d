# objweld/loader/indices.py
"""
Разбор ссылок на вершины в записи `f`: `p`, `p/t`, `p/t/n`, `p//n`.

Индексы в файле 1‑based; отрицательные считаются от конца пула на момент
чтения строки (-1 – последний добавленный элемент). Отсутствующие t/n
заменяются на ABSENT.
"""

import re
from typing import NamedTuple

from objweld.errors import (
    InvalidIndexError,
    MalformedScalarError,
    MissingPositionIndexError,
)

ABSENT = -1

# только ASCII‑цифры, без "_"
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class VertexKey(NamedTuple):
    p: int
    t: int = ABSENT
    n: int = ABSENT

    @property
    def has_texcoord(self) -> bool:
        return self.t != ABSENT

    @property
    def has_normal(self) -> bool:
        return self.n != ABSENT


def resolve_index(token: str, field: str, pool_size: int) -> int:
    """Перевести ссылку из файла в 0‑based индекс пула размером pool_size."""
    if not _INDEX_RE.fullmatch(token):
        raise MalformedScalarError(field, token)
    value = int(token)

    if value == 0:
        raise InvalidIndexError(field, value, pool_size)
    index = value - 1 if value > 0 else value + pool_size
    if not 0 <= index < pool_size:
        raise InvalidIndexError(field, value, pool_size)
    return index


def parse_corner(token: str, pools) -> VertexKey:
    parts = token.split("/")
    if not parts[0]:
        raise MissingPositionIndexError(token)
    p = resolve_index(parts[0], "position", len(pools.positions))

    t = n = ABSENT
    if len(parts) > 1 and parts[1]:
        t = resolve_index(parts[1], "texcoord", len(pools.texcoords))
    if len(parts) > 2 and parts[2]:
        n = resolve_index(parts[2], "normal", len(pools.normals))
    return VertexKey(p, t, n)
