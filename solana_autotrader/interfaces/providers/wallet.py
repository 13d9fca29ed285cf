from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from solana_autotrader.domains.wallet import Balance, BalanceResult, Chain, TradeParams


class WalletClient(ABC):
    """Interface for wallet providers exposed to the host."""

    @abstractmethod
    def get_chain(self) -> Dict[str, Any]:
        """Get the chain descriptor of the wallet."""
        pass

    @abstractmethod
    def get_address(self) -> str:
        """Get the public address of the wallet."""
        pass

    @abstractmethod
    async def sign_message(self, message: str) -> str:
        """Sign a message with the wallet key."""
        pass

    @abstractmethod
    async def fetch_balance(
        self, token_address: Optional[str] = None, chain: Optional[Chain] = None
    ) -> BalanceResult:
        """Look up a balance, reporting failures in the result."""
        pass

    @abstractmethod
    async def get_balance(
        self, token_address: Optional[str] = None, chain: Optional[Chain] = None
    ) -> Balance:
        """Get a balance, falling back to zero when the lookup fails."""
        pass

    @abstractmethod
    async def get_max_buy_amount(
        self, token_address: str, chain: Optional[Chain] = None
    ) -> float:
        """Get the largest amount the wallet may spend on a buy."""
        pass

    @abstractmethod
    async def execute_trade(self, params: TradeParams) -> Dict[str, Any]:
        """Execute a swap."""
        pass

    @abstractmethod
    async def get_formatted_portfolio(self) -> str:
        """Get a human readable summary of the wallet."""
        pass
