"""
Solana RPC adapter for the Solana Autotrader plugin.

This adapter implements the LedgerRpcProvider interface on top of the
solana-py async client. Every failure is raised as RemoteCallError; a
wallet without a token account for a mint holds zero of that token.
"""
import logging

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.core import RPCException
from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from solana_autotrader.config import (
    DEFAULT_COMMITMENT,
    DEFAULT_RPC_TIMEOUT,
    DEFAULT_RPC_URL,
)
from solana_autotrader.exceptions import RemoteCallError
from solana_autotrader.interfaces.providers.rpc import LedgerRpcProvider

# Setup logger for this module
logger = logging.getLogger(__name__)

# Node error for an account that was never created
ACCOUNT_NOT_FOUND = "could not find account"


class SolanaRpcAdapter(LedgerRpcProvider):
    """solana-py implementation of LedgerRpcProvider."""

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        commitment: str = DEFAULT_COMMITMENT,
        timeout: float = DEFAULT_RPC_TIMEOUT,
    ):
        self.rpc_url = rpc_url
        self.client = AsyncClient(rpc_url, commitment=Commitment(commitment), timeout=timeout)

    async def get_native_balance(self, owner: Pubkey) -> int:
        try:
            resp = await self.client.get_balance(owner)
        except Exception as e:
            raise RemoteCallError(f"Failed to get balance for {owner}: {e}") from e
        value = getattr(resp, "value", None)
        if value is None:
            raise RemoteCallError(f"Unexpected getBalance response for {owner}: {resp}")
        return int(value)

    async def get_token_balance(self, owner: Pubkey, mint: str) -> int:
        try:
            mint_key = Pubkey.from_string(mint)
        except Exception as e:
            raise RemoteCallError(f"Invalid token mint address {mint}: {e}") from e

        token_account = get_associated_token_address(owner, mint_key)
        try:
            resp = await self.client.get_token_account_balance(token_account)
        except RPCException as e:
            if ACCOUNT_NOT_FOUND in str(e):
                logger.info(f"No token account {token_account} for token: {mint}")
                return 0
            raise RemoteCallError(
                f"Error retrieving balance for token: {mint}: {e}"
            ) from e
        except Exception as e:
            raise RemoteCallError(
                f"Error retrieving balance for token: {mint}: {e}"
            ) from e
        value = getattr(resp, "value", None)
        if value is None:
            raise RemoteCallError(
                f"Unexpected getTokenAccountBalance response for token: {mint}: {resp}"
            )
        return int(value.amount)

    async def close(self) -> None:
        try:
            await self.client.close()
        except Exception as e:
            logger.warning(f"Error closing RPC client for {self.rpc_url}: {e}")
