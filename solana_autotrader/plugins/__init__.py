"""
Plugin system for the Solana Autotrader.

This package provides the autotrader plugin, its actions and providers,
and the plugin management and action registration used to host them.
"""
