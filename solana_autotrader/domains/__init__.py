"""
Domain models for the Solana Autotrader plugin.

This package contains the value types shared by the wallet provider,
the polling client and the plugin actions.
"""

from solana_autotrader.domains.wallet import *
from solana_autotrader.domains.plugins import *
