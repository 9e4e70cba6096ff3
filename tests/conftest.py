"""Shared pytest fixtures for walletkit tests.

This module provides fixtures for:
- Environment isolation for settings
- Fake clipboard hosts (see tests/fixtures/clipboard_mock.py)
- Common test values (addresses, timestamps)

Usage:
    @pytest.mark.unit
    def test_something(sample_btc_address):
        assert shorten_address(sample_btc_address)
"""

import os
from collections.abc import Generator
from datetime import datetime

import pytest

from tests.fixtures.clipboard_mock import FakeDocument, FakeNativeClipboard
from walletkit.config.settings import get_settings

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_settings() -> Generator[None, None, None]:
    """Clear WALLETKIT_* env vars and the settings cache around each test."""
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("WALLETKIT_"):
            del os.environ[key]
    get_settings.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()


# =============================================================================
# Clipboard Host Fakes
# =============================================================================


@pytest.fixture
def fake_document() -> FakeDocument:
    """Document whose copy command succeeds."""
    return FakeDocument()


@pytest.fixture
def failing_document() -> FakeDocument:
    """Document whose copy command reports failure."""
    return FakeDocument(copy_result=False)


@pytest.fixture
def fake_native_clipboard() -> FakeNativeClipboard:
    """Native clipboard writer that always succeeds."""
    return FakeNativeClipboard()


# =============================================================================
# Time Fixtures
# =============================================================================


@pytest.fixture
def frozen_time() -> datetime:
    """Provide a fixed datetime for deterministic tests."""
    return datetime(2025, 1, 15, 12, 0, 0)


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def sample_btc_address() -> str:
    """Provide a bech32 Bitcoin address."""
    return "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"


@pytest.fixture
def sample_evm_address() -> str:
    """Provide an EIP-55 checksummed EVM address."""
    return "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


# =============================================================================
# Markers for Test Selection
# =============================================================================

# Usage:
# pytest -m unit          # Run only unit tests
# pytest -m integration   # Run only integration tests
