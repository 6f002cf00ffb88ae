"""
pytest configuration for the Developer Tools discovery service.
Puts src/ on the import path, isolates the config directory and provides shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.absolute()
sys.path.insert(0, str(project_root / "src"))

from config.settings import Settings, CONFIG_DIR_ENV
from api.storage import MemoryStorage
from discovery import Catalog, Category, Tool, load_default_catalog

# 2023-11-14T22:13:20Z, a fixed "now" for store tests
FIXED_NOW_MS = 1_700_000_000_000


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, now: int = FIXED_NOW_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Never touch the real ~/.config/dev-tools from tests."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    return config_dir


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture(scope="session")
def default_catalog():
    return load_default_catalog()


@pytest.fixture
def settings(tmp_path):
    return Settings(storage_dir=str(tmp_path / "storage"))


def make_tool(name, path, category="Encoders", popularity=3, description="", tags=(), keywords=(),
              complexity="Easy", icon="🔧"):
    return Tool(name=name, path=path, icon=icon, category=category, description=description,
                tags=tuple(tags), keywords=tuple(keywords), popularity=popularity, complexity=complexity)


@pytest.fixture
def base_catalog():
    """Two near-identical base encoders, the less popular one declared first, plus an unrelated tool."""
    encoders = Category(
        title="Encoders",
        description="Binary-to-text encoders",
        tools=(
            make_tool("Base32 Encoder", "/base32", popularity=2),
            make_tool("Base64 Encoder/Decoder", "/base64", popularity=5),
        ),
    )
    design = Category(
        title="Design",
        description="Visual utilities",
        tools=(
            make_tool("Color Picker", "/color", category="Design", popularity=4,
                      description="Pick colors", tags=("design",), keywords=("rgb",)),
        ),
    )
    return Catalog([encoders, design])
