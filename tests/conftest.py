# tests/conftest.py
import importlib
from pathlib import Path

import pytest


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yaml"


@pytest.fixture
def main_module(monkeypatch, settings_path: Path):
    """
    Import the CLI module with SETTINGS_PATH redirected to a temporary file
    so tests never touch the real settings.yaml.
    """
    main = importlib.import_module("main")
    monkeypatch.setattr(main, "SETTINGS_PATH", str(settings_path), raising=False)
    return main


@pytest.fixture
def korean_texts() -> list[str]:
    """Korean sample texts."""
    return [
        "이",
        "안녕하세요",
        "좋은 아침",
        "hi 이 there",
        "김민지",
    ]
