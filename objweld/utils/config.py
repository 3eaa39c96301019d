"""
Настройки загрузчика в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import copy
import json
from pathlib import Path

import numpy as np

from objweld.utils.logger import logger

ATTRIBUTE_POLICIES = ("pad", "strict")
NORMAL_MODES = ("point", "inverse_transpose")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG = {
    # что делать, если часть вершин несёт нормаль/UV, а часть – нет
    "attribute_policy": "pad",
    "pad_normal": [0.0, 0.0, 1.0],
    "pad_texcoord": [0.0, 0.0],
    # "point" – нормали преобразуются той же матрицей, что и точки
    "normal_mode": "point",
    "log_level": "INFO",
}


def _as_vector(value, name: str, width: int) -> list:
    """Проверить, что value – ровно width чисел, и вернуть их списком float."""
    try:
        arr = np.asarray(value, dtype=np.float32)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be {width} numbers, got {value!r}") from None
    if arr.shape != (width,):
        raise ValueError(f"{name} must be {width} numbers, got {value!r}")
    return [float(x) for x in arr]


class LoaderConfig:
    """Конфигурация загрузчика: значения из файла поверх DEFAULT_CONFIG."""

    def __init__(self, path: str = None, **overrides):
        self.path = Path(path) if path is not None else None
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path is not None:
            self._load()
        self.data.update(overrides)
        self.validate()

    def _load(self):
        if not self.path.is_file():
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] Expected a JSON object in {self.path}")
            return
        self.data.update(loaded)
        logger.info("[Config] Loaded configuration.")

    def validate(self):
        if self.data["attribute_policy"] not in ATTRIBUTE_POLICIES:
            raise ValueError(
                f"attribute_policy must be one of {ATTRIBUTE_POLICIES}, "
                f"got {self.data['attribute_policy']!r}")
        if self.data["normal_mode"] not in NORMAL_MODES:
            raise ValueError(
                f"normal_mode must be one of {NORMAL_MODES}, "
                f"got {self.data['normal_mode']!r}")
        level = self.data["log_level"]
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {level!r}")
        self.data["pad_normal"] = _as_vector(self.data["pad_normal"], "pad_normal", 3)
        self.data["pad_texcoord"] = _as_vector(self.data["pad_texcoord"], "pad_texcoord", 2)

    def save(self, path: str = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path to save the configuration to")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def get(self, key, default=None):
        return self.data.get(key, default)
