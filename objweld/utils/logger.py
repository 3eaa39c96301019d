# objweld/utils/logger.py
# ---------------------------------------------------------------
# Общий логгер пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objweld")


logger = init_logger()


def set_log_level(level):
    """Принимает имя уровня ("DEBUG", "info", ...) или число из logging."""
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = value
    logger.setLevel(level)
