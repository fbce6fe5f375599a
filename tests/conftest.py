"""
Shared pytest fixtures for nonempty tests.

This module provides:
- Isolation of the process-wide random source and the settings cache
- A few ready-made sequences used across the operation tests
"""

import sys
from pathlib import Path

import pytest

# Ensure nonempty package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nonempty.core.random_source import reset_default_source
from nonempty.core.settings import clear_settings_cache
from nonempty.sequence import NonEmpty, new, single


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_ambient_state(monkeypatch):
    """Fresh settings and default random source for every test."""
    monkeypatch.delenv("NONEMPTY_SHUFFLE_SEED", raising=False)
    monkeypatch.delenv("NONEMPTY_LOG_LEVEL", raising=False)
    clear_settings_cache()
    reset_default_source()
    yield
    clear_settings_cache()
    reset_default_source()


# =============================================================================
# Sample sequences
# =============================================================================


@pytest.fixture
def one_to_four() -> NonEmpty[int]:
    return new(1, [2, 3, 4])


@pytest.fixture
def singleton() -> NonEmpty[str]:
    return single("only")
