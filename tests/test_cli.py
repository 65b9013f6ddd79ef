from __future__ import annotations

import json

import pytest

from dbflavor.cli import main


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_detect_prints_flavor(make_tree, capsys, monkeypatch):
    monkeypatch.delenv("DBFLAVOR_BASEDIR", raising=False)
    root = make_tree("bin/mysqld")
    assert _run(["detect", str(root)]) == 0
    assert capsys.readouterr().out.strip() == "mysql"


def test_detect_uses_env_basedir(make_tree, capsys, monkeypatch):
    root = make_tree("bin/tidb-server")
    monkeypatch.setenv("DBFLAVOR_BASEDIR", str(root))
    assert _run(["detect"]) == 0
    assert capsys.readouterr().out.strip() == "tidb"


def test_detect_unknown_exits_1(tmp_path, capsys):
    assert _run(["detect", str(tmp_path)]) == 1
    assert capsys.readouterr().out.strip() == "unknown"


def test_detect_without_path(monkeypatch):
    monkeypatch.delenv("DBFLAVOR_BASEDIR", raising=False)
    code = _run(["detect"])
    assert "DBFLAVOR_BASEDIR" in str(code)


def test_has(capsys):
    assert _run(["has", "mysql", "roles", "8.0.21"]) == 0
    assert capsys.readouterr().out.strip() == "yes"
    assert _run(["has", "mysql", "roles", "5.7.9"]) == 1
    assert capsys.readouterr().out.strip() == "no"


def test_has_bad_version(capsys):
    assert _run(["has", "mysql", "roles", "eight"]) == 2
    assert "eight" in capsys.readouterr().err


def test_features(capsys):
    assert _run(["features", "mariadb", "10.4.3"]) == 0
    assert capsys.readouterr().out.split() == ["dynVars", "installdb", "rootAuth", "semiSync"]


def test_capabilities_json(capsys):
    assert _run(["--log-level", "debug", "capabilities", "pxc"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["flavor"] == "pxc"
    assert data["features"]["xtradbCluster"]["since"] == [5, 7, 14]

    assert _run(["capabilities"]) == 0
    assert set(json.loads(capsys.readouterr().out)) == {"mysql", "percona", "mariadb", "ndb", "pxc", "tidb"}

    assert _run(["capabilities", "oracle"]) == 1
