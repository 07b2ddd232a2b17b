"""Pytest configuration for test isolation.

The planning store writes JSON under ``./.budget`` by default and the CLI
reads ``BA_CURRENCY`` from the environment. Both would leak state between
tests (and into the working tree), so every test gets its own data root and a
clean currency setting via an autouse fixture.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``BA_DATA_DIR`` at the test's own temporary directory."""

    data_root = tmp_path / "budget"
    data_root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("BA_DATA_DIR", os.fspath(data_root))
    monkeypatch.delenv("BA_CURRENCY", raising=False)
    return data_root
