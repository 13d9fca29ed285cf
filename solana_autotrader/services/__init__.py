"""
Service implementations for the Solana Autotrader plugin.

These services implement the wallet interfaces defined in
solana_autotrader.interfaces.providers.
"""

from solana_autotrader.services.wallet import (
    WalletProvider,
    get_connection,
    get_wallet_balance,
    resolve_keypair,
)
