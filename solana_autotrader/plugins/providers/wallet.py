"""
Wallet context provider.

Adds the wallet address and SOL balance to the agent state.
"""
import logging
from typing import Any, Dict, Optional

from solana_autotrader.interfaces.plugins.plugins import Provider
from solana_autotrader.interfaces.runtime import AgentRuntime
from solana_autotrader.services.wallet import WalletProvider

# Setup logger for this module
logger = logging.getLogger(__name__)


class WalletContextProvider(Provider):
    """Adds the wallet portfolio to the agent state."""

    @property
    def name(self) -> str:
        return "wallet"

    async def get(
        self,
        runtime: AgentRuntime,
        message: Optional[Dict[str, Any]] = None,
        state: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        try:
            async with WalletProvider(runtime) as wallet:
                return await wallet.get_formatted_portfolio()
        except Exception as e:
            logger.error(f"Error in wallet provider: {e}")
            return None
