# raymath/math/sampling.py
"""
Источник случайных чисел для Vec3.random_in_unit_*.

Каждый поток получает собственный numpy.random.Generator, общий
генератор между потоками не разделяется.  Вызывающий код может
передать свой генератор явно через параметр `rng`.
"""

import threading
from typing import Optional

import numpy as np

from raymath.utils.logger import logger

_local = threading.local()


def thread_rng() -> np.random.Generator:
    """Генератор текущего потока (создаётся при первом обращении)."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
        logger.debug(f"[Sampling] New generator for thread {threading.current_thread().name}")
    return rng


def seed_thread_rng(seed: Optional[int]) -> np.random.Generator:
    """Пересоздать генератор текущего потока с заданным seed."""
    _local.rng = np.random.default_rng(seed)
    logger.debug(f"[Sampling] Thread {threading.current_thread().name} reseeded with {seed}")
    return _local.rng


def resolve(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return thread_rng() if rng is None else rng
