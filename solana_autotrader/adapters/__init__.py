"""
Adapters for external systems and services.

These adapters implement the interfaces defined in solana_autotrader.interfaces
and provide concrete implementations for talking to remote ledger nodes.
"""
