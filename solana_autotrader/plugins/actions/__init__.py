"""
Actions for the Solana Autotrader plugin.

This package contains the BaseAction class and the autotrader actions.
"""

from solana_autotrader.plugins.actions.base import BaseAction
from solana_autotrader.plugins.actions.analyze_trade import AnalyzeTradeAction
from solana_autotrader.plugins.actions.wallet import (
    GetMaxBuyAmountAction,
    GetWalletBalanceAction,
)
