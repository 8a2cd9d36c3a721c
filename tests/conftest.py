"""
Pytest configuration and shared fixtures for allowlist Merkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides tree-directory fixtures built through the real builder
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

make_address = _common.make_address
make_addresses = _common.make_addresses
make_tree = _common.make_tree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep ALLOWLIST_* variables and config files from leaking into tests."""
    import os

    for key in list(os.environ):
        if key.startswith("ALLOWLIST_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def three_address_db(tmp_path):
    """Tree over 0x0101..01, 0x0202..02, 0x0303..03."""
    db_dir = tmp_path / "three"
    make_tree(db_dir, [make_address(3), make_address(1), make_address(2)])
    return db_dir


@pytest.fixture
def single_address_db(tmp_path):
    """Tree over a single address 0x0505..05."""
    db_dir = tmp_path / "single"
    make_tree(db_dir, [make_address(5)])
    return db_dir


@pytest.fixture
def random_db(tmp_path):
    """Tree over 37 pseudo-random addresses; returns (db_dir, sorted addresses)."""
    addresses = make_addresses(37)
    db_dir = tmp_path / "random"
    make_tree(db_dir, addresses)
    return db_dir, sorted(addresses)
