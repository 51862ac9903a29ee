# -*- coding: utf-8 -*-
import json
import logging
import math

import pytest

from raymath.math.mat4 import LEGACY_PI
from raymath.utils import logger
from raymath.utils.config import Config, DEFAULT_CONFIG


def test_config_creates_default_file(config_path):
    cfg = Config(config_path)
    assert config_path.is_file()
    assert json.loads(config_path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert cfg["perspective_pi"] == "legacy"


def test_config_loads_existing(config_path):
    config_path.write_text(json.dumps({"random_seed": 7}), encoding="utf-8")
    cfg = Config(config_path)
    assert cfg["random_seed"] == 7
    # отсутствующий ключ берётся из значений по‑умолчанию
    assert cfg["log_level"] == "INFO"
    assert cfg.get("log_level") is None


def test_config_broken_json_falls_back(config_path, caplog):
    config_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="RayMath"):
        cfg = Config(config_path)
    assert cfg.data == DEFAULT_CONFIG
    assert "Failed to read config" in caplog.text
    assert json.loads(config_path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_config_setitem_saves(config_path):
    cfg = Config(config_path)
    cfg["random_seed"] = 42
    assert json.loads(config_path.read_text(encoding="utf-8"))["random_seed"] == 42
    assert Config(config_path)["random_seed"] == 42


def test_config_perspective_pi(config_path):
    cfg = Config(config_path)
    assert cfg.perspective_pi == LEGACY_PI
    cfg["perspective_pi"] = "full"
    assert cfg.perspective_pi == math.pi
    cfg["perspective_pi"] = "tau"
    with pytest.raises(ValueError):
        cfg.perspective_pi


def test_config_make_rng_is_seeded(config_path):
    cfg = Config(config_path)
    cfg["random_seed"] = 99
    a = cfg.make_rng().random(4)
    b = cfg.make_rng().random(4)
    assert a.tolist() == b.tolist()


def test_config_apply_logging(config_path):
    previous = logger.level
    cfg = Config(config_path)
    cfg["log_level"] = "debug"
    try:
        cfg.apply_logging()
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_config_non_object_json_falls_back(config_path, caplog):
    config_path.write_text("[]", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="RayMath"):
        cfg = Config(config_path)
    assert cfg.data == DEFAULT_CONFIG
    assert cfg["log_level"] == "INFO"
    assert "Failed to read config" in caplog.text
