"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import json
import math
from pathlib import Path

import numpy as np

from raymath.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "random_seed": None,
    "perspective_pi": "legacy",
}


class Config:
    """Настройки пакета: уровень логов, seed генератора, константа π."""

    def __init__(self, path: str = "raymath.json"):
        self.path = Path(path)
        self._load()

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                if not isinstance(self.data, dict):
                    raise ValueError(f"expected a JSON object, got {type(self.data).__name__}")
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = DEFAULT_CONFIG.copy()
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------
    #  Применение настроек
    # -----------------------------------------------------------
    def apply_logging(self) -> None:
        set_level(self["log_level"])

    @property
    def perspective_pi(self) -> float:
        """π для Mat4.perspective: "legacy" → 3.14159, "full" → math.pi."""
        from raymath.math.mat4 import LEGACY_PI

        mode = self["perspective_pi"]
        if mode == "legacy":
            return LEGACY_PI
        if mode == "full":
            return math.pi
        raise ValueError(f"Unknown perspective_pi mode: {mode!r}")

    def make_rng(self) -> np.random.Generator:
        """Новый генератор, засеянный `random_seed` (None → энтропия ОС)."""
        return np.random.default_rng(self["random_seed"])

    def __repr__(self):
        return f"Config({str(self.path)!r}, {self.data})"
