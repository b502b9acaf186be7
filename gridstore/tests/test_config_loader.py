import json
import logging
import sys
from pathlib import Path

import pytest

from gridstore.src.core.errors import CapacityOverflow
from gridstore.src.core.geometry import Size
from gridstore.src.core.grid import GridStore
from gridstore.src.utils import config_loader
from gridstore.src.utils.logger import get_logger


def test_load_config_yaml_and_json(tmp_path):
    yaml_path = tmp_path / "cfg.yaml"
    yaml_path.write_text("log_level: info\nmax_capacity: 64\n")
    assert config_loader.load_config(str(yaml_path)) == {"log_level": "info", "max_capacity": 64}

    json_path = tmp_path / "cfg.json"
    json_path.write_text(json.dumps({"deep_copy_fill": False}))
    assert config_loader.load_config(str(json_path)) == {"deep_copy_fill": False}

    empty = tmp_path / "empty.yml"
    empty.write_text("")
    assert config_loader.load_config(str(empty)) == {}


def test_load_config_unsupported(tmp_path):
    path = tmp_path / "cfg.toml"
    path.write_text("a = 1")
    with pytest.raises(ValueError):
        config_loader.load_config(str(path))


def test_packaged_meta_config_defaults():
    meta = config_loader.load_meta_config()
    assert meta["deep_copy_fill"] is True
    assert meta["max_capacity"] is None
    assert config_loader.load_meta_config(Path("/nonexistent/meta.yaml")) == {}


def test_max_capacity_limits_reserve(monkeypatch):
    monkeypatch.setattr(config_loader, "MAX_CAPACITY", 10)
    grid = GridStore.with_capacity((4, 4))
    grid.reserve((6, 6))
    assert grid.capacity() == Size(10, 10)
    with pytest.raises(CapacityOverflow):
        grid.reserve((1, 0))
    with pytest.raises(CapacityOverflow):
        grid.reserve((0, 1))
    assert grid.capacity() == Size(10, 10)


def test_set_max_capacity_none_restores_platform_limit():
    original = config_loader.META_CONFIG.get("max_capacity")
    try:
        config_loader.set_max_capacity(5)
        assert config_loader.MAX_CAPACITY == 5
        config_loader.set_max_capacity(None)
        assert config_loader.MAX_CAPACITY == sys.maxsize
    finally:
        config_loader.set_max_capacity(original)


def test_reserve_overflow_at_platform_limit():
    grid = GridStore.with_capacity((1, 0))
    with pytest.raises(CapacityOverflow):
        grid.reserve((sys.maxsize, 0))


def test_deep_copy_fill_toggle(monkeypatch):
    monkeypatch.setattr(config_loader, "DEEP_COPY_FILL", False)
    shared = GridStore.with_size((2, 1), [])
    shared.value((0, 0)).append(1)
    assert shared.value((1, 0)) == [1]

    monkeypatch.setattr(config_loader, "DEEP_COPY_FILL", True)
    cloned = GridStore.with_size((2, 1), [])
    cloned.value((0, 0)).append(1)
    assert cloned.value((1, 0)) == []


def test_apply_config(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FILE", "DEEP_COPY_FILL", "MAX_CAPACITY"):
        monkeypatch.setattr(config_loader, name, getattr(config_loader, name))
    monkeypatch.setattr(config_loader, "META_CONFIG", dict(config_loader.META_CONFIG))

    original_level = config_loader.LOG_LEVEL
    try:
        config_loader.apply_config({"log_level": "debug", "deep_copy_fill": 0, "max_capacity": 32})
        assert config_loader.LOG_LEVEL == "DEBUG"
        assert config_loader.DEEP_COPY_FILL is False
        assert config_loader.MAX_CAPACITY == 32
        assert config_loader.META_CONFIG["max_capacity"] == 32
    finally:
        config_loader.set_log_level(original_level)


def test_set_log_level_reaches_store_logger(caplog):
    original_level = config_loader.LOG_LEVEL
    try:
        config_loader.set_log_level("DEBUG")
        assert logging.getLogger("gridstore.src.core.grid").isEnabledFor(logging.DEBUG)
        grid = GridStore.empty()
        grid.resize((2, 2), 0)
    finally:
        config_loader.set_log_level(original_level)

    assert any(
        r.levelno == logging.DEBUG and r.getMessage().startswith("resize")
        for r in caplog.records
    )
    assert not logging.getLogger("gridstore.src.core.grid").isEnabledFor(logging.DEBUG)


def test_print_runtime_config(capsys):
    config_loader.print_runtime_config()
    out = capsys.readouterr().out
    assert "Runtime configuration:" in out
    assert "deep_copy_fill" in out
    assert "max_capacity" in out


def test_get_logger_file_handler(tmp_path):
    log_path = tmp_path / "logs" / "grid.log"
    logger = get_logger("gridstore.tests.file_logger", str(log_path))
    logger.warning("capacity exhausted")
    for handler in logger.handlers:
        handler.flush()
    assert log_path.exists()
    assert "capacity exhausted" in log_path.read_text()
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_get_logger_follows_log_level(monkeypatch):
    monkeypatch.setattr(config_loader, "LOG_LEVEL", "ERROR")
    assert get_logger("gridstore.tests.level").level == logging.ERROR
    monkeypatch.setattr(config_loader, "LOG_LEVEL", "DEBUG")
    assert get_logger("gridstore.tests.level").level == logging.DEBUG
