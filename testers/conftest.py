# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов математики.
"""

import numpy as np
import pytest

from raymath.math.vec3 import Vec3
from raymath.math import sampling


# ----------------------------------------------------------------------
# Детерминированный генератор для rejection‑sampling тестов
# ----------------------------------------------------------------------
@pytest.fixture
def rng() -> np.random.Generator:
    """Новый генератор с фиксированным seed для каждого теста."""
    return np.random.default_rng(1234)


@pytest.fixture
def reset_thread_rng():
    """Сбросить генератор потока до и после теста."""
    sampling._local.__dict__.pop("rng", None)
    yield
    sampling._local.__dict__.pop("rng", None)


# ----------------------------------------------------------------------
# Набор случайных векторов для проверок свойств (cross, длина и т.п.)
# ----------------------------------------------------------------------
@pytest.fixture
def random_vectors(rng) -> list:
    pts = rng.uniform(-10.0, 10.0, size=(32, 3)).astype(np.float32)
    return [Vec3(*p) for p in pts]


@pytest.fixture
def config_path(tmp_path):
    """Путь к ещё не существующему конфиг‑файлу во временной папке."""
    return tmp_path / "raymath.json"
