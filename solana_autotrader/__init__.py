"""
Solana Autotrader - an autotrading plugin bundle for agent runtimes.

This package provides a wallet provider for Solana balances, a polling
client that reports the wallet balance, and a plugin declaration exposing
trading and wallet actions to a host plugin manager.
"""

from solana_autotrader.client.autotrading import (
    AutoTradingClient,
    AutoTradingClientInterface,
    auto_trading_client,
)
from solana_autotrader.config import AutotraderSettings
from solana_autotrader.domains.wallet import Balance, BalanceResult, Chain, TradeParams
from solana_autotrader.exceptions import (
    AutotraderError,
    ConfigurationError,
    DecodeError,
    NotSupportedError,
    RemoteCallError,
)
from solana_autotrader.plugins.autotrader import AutotraderPlugin
from solana_autotrader.plugins.manager import PluginManager
from solana_autotrader.plugins.registry import ActionRegistry
from solana_autotrader.runtime import SettingsRuntime
from solana_autotrader.services.wallet import (
    WalletProvider,
    get_wallet_balance,
    resolve_keypair,
)

__all__ = [
    # Client
    "AutoTradingClient",
    "AutoTradingClientInterface",
    "auto_trading_client",
    # Wallet
    "WalletProvider",
    "get_wallet_balance",
    "resolve_keypair",
    "Balance",
    "BalanceResult",
    "Chain",
    "TradeParams",
    # Plugins
    "AutotraderPlugin",
    "PluginManager",
    "ActionRegistry",
    # Configuration
    "AutotraderSettings",
    "SettingsRuntime",
    # Errors
    "AutotraderError",
    "ConfigurationError",
    "DecodeError",
    "NotSupportedError",
    "RemoteCallError",
]
