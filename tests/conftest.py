"""Shared fixtures: isolated settings and a temporary properties directory."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest

from ac4y.config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Every test reads settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def properties_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default search path at an empty temporary directory."""
    monkeypatch.setenv("AC4Y_PROPERTIES_PATH", str(tmp_path))
    get_settings.cache_clear()
    return tmp_path


@pytest.fixture
def write_properties(properties_dir: Path) -> Callable[[str, str], Path]:
    def _write(module: str, content: str) -> Path:
        path = properties_dir / f"{module}.properties"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
