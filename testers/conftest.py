# -*- coding: utf-8 -*-
"""
conftest.py – общие OBJ‑фикстуры для тестов загрузчика.
"""

import pytest

from objweld.utils.config import LoaderConfig


SQUARE_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3 4
"""

# квадрат из двух треугольников с общими углами и полным набором атрибутов
TEXTURED_OBJ = """\
# textured quad split by hand
o quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
s off
usemtl default
f 1/1/1 2/2/1 3/3/1
f 1/1/1 3/3/1 4/4/1
"""


@pytest.fixture
def square_obj() -> str:
    return SQUARE_OBJ


@pytest.fixture
def textured_obj() -> str:
    return TEXTURED_OBJ


@pytest.fixture
def strict_config() -> LoaderConfig:
    return LoaderConfig(attribute_policy="strict")


@pytest.fixture
def write_obj(tmp_path):
    """Фабрика: записать текст OBJ во временный файл и вернуть путь."""
    def _write(text: str, name: str = "mesh.obj"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
