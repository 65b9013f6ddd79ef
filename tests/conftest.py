from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def make_tree(tmp_path):
    """Build a fake installation root containing the given ``dir/file`` entries."""

    def _make(*entries: str) -> Path:
        for entry in entries:
            p = tmp_path / entry
            p.parent.mkdir(parents=True, exist_ok=True)
            p.touch()
        return tmp_path

    return _make
