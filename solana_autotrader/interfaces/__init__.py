"""
Abstract interfaces for the Solana Autotrader plugin.

These interfaces define the contracts that concrete implementations
must adhere to.

This package contains:
- The host runtime interface that exposes settings
- Provider interfaces for the wallet and the ledger RPC adapter
- Plugin system interfaces shared with the host
- The client interface started and stopped by the host
"""
