# objweld/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * set_log_level – смена уровня логгера пакета
    * LoaderConfig  – настройки загрузчика
    * Profiler      – замер времени блока кода
"""

from .logger import logger, set_log_level
from .config import LoaderConfig, DEFAULT_CONFIG
from .profiler import Profiler

__all__ = ["logger", "set_log_level", "LoaderConfig", "DEFAULT_CONFIG", "Profiler"]
