from __future__ import annotations

from dbflavor.config import DBFlavorConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("DBFLAVOR_BASEDIR", raising=False)
    monkeypatch.delenv("DBFLAVOR_LOG_LEVEL", raising=False)
    cfg = DBFlavorConfig.from_env()
    assert cfg.basedir is None
    assert cfg.log_level == "WARNING"
    assert cfg.unknown_flavor == "unknown"


def test_from_env(monkeypatch):
    monkeypatch.setenv("DBFLAVOR_BASEDIR", "/opt/mysql/8.0.21")
    monkeypatch.setenv("DBFLAVOR_LOG_LEVEL", "debug")
    cfg = DBFlavorConfig.from_env()
    assert cfg.basedir == "/opt/mysql/8.0.21"
    assert cfg.log_level == "DEBUG"
