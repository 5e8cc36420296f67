"""
Pytest configuration and shared fixtures for segmerkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_tree = _common.make_tree
make_buffer = _common.make_buffer
RecordingHashFactory = _common.RecordingHashFactory


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def default_tree():
    """Tree over the default fixture buffer with segment size 4."""
    return make_tree()


@pytest.fixture
def recording_factory():
    """Hash factory that records every context and update."""
    return RecordingHashFactory()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all SEGMERKLE_* variables from the environment."""
    import os
    for key in list(os.environ):
        if key.startswith("SEGMERKLE_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_default_config():
    """Keep the module-level default config from leaking between tests."""
    from segmerkle.config.runtime import set_default_config
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
