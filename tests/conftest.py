"""
Pytest configuration and shared fixtures for ledger tests.

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

make_transaction = _common.make_transaction
make_transactions = _common.make_transactions
write_public_key = _common.write_public_key


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def transactions():
    """Four distinct transactions."""
    return make_transactions(4)


@pytest.fixture
def staking_key_path(tmp_path):
    """DER-encoded staking wallet public key written to a temp file."""
    return write_public_key(tmp_path / "staking_wallet.der")


@pytest.fixture
def clean_ledger_env(monkeypatch):
    """Remove LEDGER_* variables so config tests start from defaults."""
    for name in (
        "LEDGER_STAKING_WALLET_PATH",
        "LEDGER_MESSAGE_CACHE_CAPACITY",
        "LEDGER_LOG_LEVEL",
        "LEDGER_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


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
