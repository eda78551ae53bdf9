"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
import sys

from rich.color import Color
from rich.style import Style

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from termfx import config as fx_config
from termfx.Utils.cell_buffer import Cell, CellBuffer


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="termfx_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    # Ensure cleanup even if test fails
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def temp_file(isolated_temp_dir):
    """Create a temporary file within an isolated directory."""
    def _create_temp_file(name="test_file", suffix=".txt", content=""):
        file_path = isolated_temp_dir / f"{name}{suffix}"
        file_path.write_text(content)
        return file_path
    return _create_temp_file


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(isolated_temp_dir, monkeypatch):
    """Point the user config at an empty location so a developer's own settings never leak into tests."""
    monkeypatch.setenv(fx_config.CONFIG_PATH_ENV_VAR, str(isolated_temp_dir / "missing_config.toml"))
    fx_config.load_settings(force_reload=True)
    yield
    fx_config._SETTINGS_CACHE = None


@pytest.fixture
def user_config(isolated_temp_dir, monkeypatch):
    """Write a user config file and make it the active one."""
    def _write(content: str):
        path = isolated_temp_dir / "config.toml"
        path.write_text(content)
        monkeypatch.setenv(fx_config.CONFIG_PATH_ENV_VAR, str(path))
        return fx_config.load_settings(force_reload=True)
    return _write


# ========== Buffer Fixtures ==========

BLACK = Color.from_rgb(0, 0, 0)
WHITE = Color.from_rgb(255, 255, 255)
RED = Color.from_rgb(255, 0, 0)
BLUE = Color.from_rgb(0, 0, 255)


@pytest.fixture
def black_text_buffer():
    """A 10x3 buffer of 'x' characters, black on black."""
    return CellBuffer(10, 3, fill=Cell("x", Style(color=BLACK, bgcolor=BLACK)))


@pytest.fixture
def text_buffer():
    """A small buffer with text on some rows and blanks elsewhere."""
    return CellBuffer.from_lines(
        ["hello     ", "          ", "   world  "],
        Style(color=WHITE, bgcolor=BLUE),
    )


# ========== Cleanup and Isolation Fixtures ==========

@pytest.fixture(autouse=True)
def restore_sys_path():
    """Automatically restore sys.path after each test."""
    original_path = sys.path.copy()
    yield
    sys.path[:] = original_path
