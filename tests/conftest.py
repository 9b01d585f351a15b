# tests/conftest.py
from __future__ import annotations

import pytest

from regnum.runtime import reset


@pytest.fixture(autouse=True)
def clean_runtime(tmp_path, monkeypatch):
    """Every test starts without a profile applied and with an empty workspace."""
    monkeypatch.setenv("REGNUM_HOME", str(tmp_path / "workspace"))
    rt = reset()
    yield rt
    reset()
