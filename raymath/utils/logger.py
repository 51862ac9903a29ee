# raymath/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Математика в горячем цикле ничего не пишет,
# логируются только конфиг и генераторы случайных чисел.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("RayMath")


logger = init_logger()


def set_level(level) -> None:
    """Поменять уровень логгера (int или имя уровня, например "DEBUG")."""
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
