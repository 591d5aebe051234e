import importlib
from pathlib import Path

import pytest

MODULE = "leaguetable.config.settings"


def reload_settings():
    return importlib.reload(importlib.import_module(MODULE))


def test_defaults(monkeypatch):
    monkeypatch.delenv("LEAGUETABLE_DB", raising=False)
    monkeypatch.delenv("LEAGUETABLE_LOG_FILE", raising=False)
    monkeypatch.delenv("LEAGUETABLE_LOG_LEVEL", raising=False)
    module = reload_settings()
    assert module.settings.db_path == module.DEFAULT_DB_PATH
    assert module.settings.log_file == module.DEFAULT_LOG_FILE
    assert module.settings.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("LEAGUETABLE_DB", str(tmp_path / "l.db"))
    monkeypatch.setenv("LEAGUETABLE_LOG_FILE", str(tmp_path / "x.log"))
    monkeypatch.setenv("LEAGUETABLE_LOG_LEVEL", "debug")
    module = reload_settings()
    assert module.settings.db_path == Path(tmp_path / "l.db")
    assert module.settings.log_file == Path(tmp_path / "x.log")
    assert module.settings.log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LEAGUETABLE_LOG_LEVEL", "LOUD")
    module = importlib.import_module(MODULE)
    with pytest.raises(RuntimeError, match="not a valid logging level"):
        module._build_settings()


def test_settings_are_frozen():
    module = importlib.import_module(MODULE)
    with pytest.raises(ValueError):
        module.settings.db_path = Path("other.db")
