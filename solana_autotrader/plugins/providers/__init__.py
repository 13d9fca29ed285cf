"""
Providers for the Solana Autotrader plugin.
"""

from solana_autotrader.plugins.providers.wallet import WalletContextProvider
