"""
Exception types for the Solana Autotrader plugin.

Construction-time errors (configuration and key decoding) propagate to the
caller. Remote call errors are raised by the RPC adapter and captured by the
wallet provider as failed balance results.
"""


class AutotraderError(Exception):
    """Base class for all autotrader errors."""


class ConfigurationError(AutotraderError):
    """A required runtime setting is missing or invalid."""


class DecodeError(AutotraderError):
    """The configured wallet secret could not be decoded into a keypair."""


class RemoteCallError(AutotraderError):
    """A call to the remote ledger node failed."""


class NotSupportedError(AutotraderError, NotImplementedError):
    """The requested wallet or trading operation is not implemented."""
