from abc import ABC, abstractmethod

from solders.pubkey import Pubkey


class LedgerRpcProvider(ABC):
    """Interface for remote ledger node adapters."""

    @abstractmethod
    async def get_native_balance(self, owner: Pubkey) -> int:
        """Get the native balance of an address in the smallest unit."""
        pass

    @abstractmethod
    async def get_token_balance(self, owner: Pubkey, mint: str) -> int:
        """Get the associated token account balance of (owner, mint)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        pass
