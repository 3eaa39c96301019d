# objweld/loader/obj_loader.py
"""
Однопроходный загрузчик Wavefront OBJ → индексированный треугольный меш.

Поддерживаются только записи v / vt / vn / f. Грани – треугольники
и четырёхугольники (веер от первой вершины). Любая ошибка прерывает
загрузку целиком, частичный результат не возвращается.
"""

import io
from collections import Counter
from pathlib import Path

import numpy as np

from objweld.errors import ObjError, IoOpenError, IoReadError
from objweld.loader import tokenizer
from objweld.loader.ingest import AttributePools
from objweld.loader.welder import Welder
from objweld.math import Mat4
from objweld.utils.config import LoaderConfig
from objweld.utils.logger import logger
from objweld.utils.profiler import Profiler


class LoadStats:
    """Счётчики записей одной загрузки."""

    def __init__(self):
        self.lines = 0
        self.records = Counter()
        self.ignored = Counter()

    def __repr__(self):
        return (f"LoadStats(lines={self.lines}, records={dict(self.records)}, "
                f"ignored={dict(self.ignored)})")


class ObjLoader:
    """
    Владеет всем состоянием одной загрузки: сырыми пулами, таблицей сварки
    и выходными массивами. Экземпляр одноразовый.
    """

    def __init__(self, to_world: Mat4 = None, config: LoaderConfig = None, name: str = "<stream>"):
        self.to_world = to_world if to_world is not None else Mat4.identity()
        self.config = config if config is not None else LoaderConfig()
        self.name = name

        if self.config["normal_mode"] == "inverse_transpose":
            try:
                normal_transform = self.to_world.normal_matrix()
            except np.linalg.LinAlgError as exc:
                logger.error(f"[ObjLoader] {name}: transform is not invertible")
                raise ValueError(
                    "to_world is not invertible, normal_mode 'inverse_transpose' "
                    "needs an invertible linear part") from exc
        else:
            normal_transform = self.to_world

        self.pools = AttributePools(self.to_world, normal_transform)
        self.welder = Welder(self.pools)
        self.stats = LoadStats()
        self._handlers = {
            tokenizer.POSITION: self.pools.add_point,
            tokenizer.TEXCOORD: self.pools.add_uv,
            tokenizer.NORMAL: self.pools.add_normal,
            tokenizer.FACE: self.welder.add_face,
        }
        self._used = False

    def _read_lines(self, source):
        it = iter(source)
        while True:
            try:
                line = next(it)
                if isinstance(line, bytes):
                    line = line.decode("utf-8")
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as exc:
                raise IoReadError(str(exc), self.stats.lines + 1) from exc
            self.stats.lines += 1
            yield line

    def _dispatch(self, line: str):
        kind, args = tokenizer.tokenize(line)
        if kind is None:
            return
        if not tokenizer.is_record(kind):
            self.stats.ignored[kind] += 1
            return
        self._handlers[kind](args)
        self.stats.records[kind] += 1

    def load(self, source):
        """Прочитать все строки `source` и вернуть (MeshData, triangles)."""
        if self._used:
            raise RuntimeError("ObjLoader.load() can only be called once")
        self._used = True

        try:
            with Profiler(f"load {self.name}"):
                for line in self._read_lines(source):
                    try:
                        self._dispatch(line)
                    except ObjError as exc:
                        if exc.line_no is None:
                            exc.line_no = self.stats.lines
                        raise
                mesh, faces = self.welder.finish(self.config)
        except ObjError as exc:
            logger.error(f"[ObjLoader] {self.name}: {exc}")
            raise

        logger.debug(f"[ObjLoader] {self.name}: {self.stats}")
        logger.info(f"[ObjLoader] Loaded {self.name}: "
                    f"{mesh.vertex_count} vertices, {len(faces)} triangles")
        return mesh, faces


def load_obj(source, to_world: Mat4 = None, config: LoaderConfig = None, name: str = None):
    """
    Загрузить OBJ из любого итерируемого источника строк
    (открытый файл, io.StringIO, список строк).
    """
    if name is None:
        name = getattr(source, "name", "<stream>")
    return ObjLoader(to_world, config, name=str(name)).load(source)


def loads(text: str, to_world: Mat4 = None, config: LoaderConfig = None):
    """Загрузить OBJ из строки."""
    return load_obj(io.StringIO(text), to_world, config, name="<string>")


def load_from_file(path, to_world: Mat4 = None, config: LoaderConfig = None):
    """Открыть файл OBJ и загрузить его. Ошибка открытия → IoOpenError."""
    p = Path(path).expanduser()
    try:
        f = p.open("r", encoding="utf-8")
    except OSError as exc:
        raise IoOpenError(path) from exc
    with f:
        return load_obj(f, to_world, config, name=str(p))
