"""
Shared fixtures for the autotrader tests.

Runtimes are built around a freshly generated wallet key, and ledger RPC
connections are mocked so no test talks to a real node.
"""
from unittest.mock import AsyncMock, MagicMock

import base58
import pytest
from solders.keypair import Keypair

from solana_autotrader.interfaces.providers.rpc import LedgerRpcProvider
from solana_autotrader.runtime import SettingsRuntime


@pytest.fixture
def keypair():
    """Return a freshly generated wallet keypair."""
    return Keypair()


@pytest.fixture
def secret(keypair):
    """Return the keypair encoded the way WALLET_PRIVATE_KEY stores it."""
    return base58.b58encode(bytes(keypair)).decode()


@pytest.fixture
def settings(secret):
    """Sample runtime settings for testing."""
    return {
        "WALLET_PRIVATE_KEY": secret,
        "RPC_URL": "https://rpc.test.invalid",
    }


@pytest.fixture
def runtime(settings):
    """Return a runtime configured with the test wallet."""
    return SettingsRuntime(settings, use_env=False)


@pytest.fixture
def empty_runtime():
    """Return a runtime without any settings."""
    return SettingsRuntime({}, use_env=False)


@pytest.fixture
def mock_rpc():
    """Return a mocked ledger RPC connection."""
    rpc = MagicMock(spec=LedgerRpcProvider)
    rpc.get_native_balance = AsyncMock(return_value=2_500_000_000)
    rpc.get_token_balance = AsyncMock(return_value=5_000_000_000_000_000_000)
    rpc.close = AsyncMock()
    return rpc
