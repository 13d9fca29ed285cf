"""
Wallet provider for the Solana Autotrader plugin.

This module derives the wallet keypair from the runtime settings and
exposes balance lookups against a remote ledger node.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Optional, Union

import base58
from solders.keypair import Keypair

from solana_autotrader.adapters.solana_rpc_adapter import SolanaRpcAdapter
from solana_autotrader.config import AutotraderSettings
from solana_autotrader.domains.wallet import (
    Balance,
    BalanceResult,
    Chain,
    TradeParams,
)
from solana_autotrader.exceptions import (
    ConfigurationError,
    DecodeError,
    NotSupportedError,
)
from solana_autotrader.interfaces.providers.rpc import LedgerRpcProvider
from solana_autotrader.interfaces.providers.wallet import WalletClient
from solana_autotrader.interfaces.runtime import AgentRuntime

# Setup logger for this module
logger = logging.getLogger(__name__)

# Share of the balance a single buy may spend
MAX_BUY_RATIO = Decimal("0.9")


def resolve_keypair(runtime: Optional[AgentRuntime]) -> Keypair:
    """Get the wallet keypair from the runtime settings.

    Args:
        runtime: Agent runtime exposing WALLET_PRIVATE_KEY

    Returns:
        Solana keypair for the configured wallet

    Raises:
        ConfigurationError: If the private key is not configured
        DecodeError: If the private key is not a valid base58 secret key
    """
    secret = runtime.get_setting("WALLET_PRIVATE_KEY") if runtime is not None else None
    if not secret:
        raise ConfigurationError(
            "No wallet private key configured. Ensure WALLET_PRIVATE_KEY is filled in your .env"
        )

    try:
        secret_bytes = base58.b58decode(secret)
        return Keypair.from_bytes(secret_bytes)
    except Exception as e:
        logger.error(f"Failed to create wallet keypair: {e}")
        raise DecodeError(f"WALLET_PRIVATE_KEY is not a valid secret key: {e}") from e


def get_connection(runtime: AgentRuntime) -> SolanaRpcAdapter:
    """Open an RPC connection using the runtime settings."""
    settings = AutotraderSettings.from_runtime(runtime)
    return SolanaRpcAdapter(
        rpc_url=settings.rpc_url,
        commitment=settings.rpc_commitment,
        timeout=settings.rpc_timeout,
    )


async def get_wallet_balance(
    runtime: AgentRuntime, rpc: Optional[LedgerRpcProvider] = None
) -> float:
    """Get the current SOL balance of the configured wallet.

    Any failure is logged and reported as a zero balance.

    Args:
        runtime: Agent runtime environment
        rpc: Optional connection to reuse; a temporary one is opened otherwise

    Returns:
        Balance in SOL
    """
    try:
        pubkey = resolve_keypair(runtime).pubkey()
        connection = rpc or get_connection(runtime)
        try:
            lamports = await connection.get_native_balance(pubkey)
        finally:
            if rpc is None:
                await connection.close()

        sol_balance = float(Balance.for_chain(Chain.SOLANA, lamports).amount)
        logger.info(
            f"Fetched Solana wallet balance: address={pubkey} lamports={lamports} sol={sol_balance}"
        )
        return sol_balance
    except Exception as e:
        logger.error(f"Failed to get wallet balance: {e}")
        return 0.0


def _resolve_chain(token_address: str, chain: Optional[Union[Chain, str]]) -> Chain:
    if chain is None:
        return Chain.from_address(token_address)
    return Chain(chain)


class WalletProvider(WalletClient):
    """Solana wallet exposing balance and trade operations to the host."""

    def __init__(
        self,
        runtime: AgentRuntime,
        rpc: Optional[LedgerRpcProvider] = None,
    ):
        """Derive the keypair and open the RPC connection.

        Args:
            runtime: Agent runtime exposing the wallet settings
            rpc: Optional connection; one is opened from RPC_URL otherwise

        Raises:
            ConfigurationError: If the wallet key is missing or settings are invalid
            DecodeError: If the wallet key cannot be decoded
        """
        self.runtime = runtime
        self.keypair = resolve_keypair(runtime)
        self._owns_connection = rpc is None
        self.connection = rpc or get_connection(runtime)

    def get_chain(self) -> Dict[str, Any]:
        return {"type": "solana"}

    def get_address(self) -> str:
        return str(self.keypair.pubkey())

    async def sign_message(self, message: str) -> str:
        raise NotSupportedError("Message signing not implemented for Solana wallet")

    async def fetch_balance(
        self,
        token_address: Optional[str] = None,
        chain: Optional[Union[Chain, str]] = None,
    ) -> BalanceResult:
        """Look up a balance of the wallet.

        Without a token address the native SOL balance is returned. With one,
        the associated token account balance is returned, labelled for
        ``chain`` or, when no chain is given, the chain the address shape
        suggests.

        Args:
            token_address: Optional token mint address
            chain: Optional explicit chain of the token

        Returns:
            BalanceResult carrying the error when the lookup failed
        """
        owner = self.keypair.pubkey()

        if not token_address:
            try:
                lamports = await self.connection.get_native_balance(owner)
            except Exception as e:
                logger.error(f"Error retrieving native balance for {owner}: {e}")
                return BalanceResult.failure(Chain.SOLANA, str(e))
            return BalanceResult.success(Chain.SOLANA, lamports)

        token_chain = _resolve_chain(token_address, chain)
        try:
            amount = await self.connection.get_token_balance(owner, token_address)
        except Exception as e:
            logger.error(f"Error retrieving balance for token: {token_address}: {e}")
            return BalanceResult.failure(token_chain, str(e))
        return BalanceResult.success(token_chain, amount)

    async def get_balance(
        self,
        token_address: Optional[str] = None,
        chain: Optional[Union[Chain, str]] = None,
    ) -> Balance:
        """Get a balance of the wallet, or a zero balance if the lookup fails.

        The zero balance keeps the decimals, symbol and name the successful
        lookup would have reported. Use ``fetch_balance`` to tell an empty
        wallet apart from a failed lookup.
        """
        result = await self.fetch_balance(token_address, chain)
        return result.unwrap_or_zero()

    async def get_max_buy_amount(
        self,
        token_address: str,
        chain: Optional[Union[Chain, str]] = None,
    ) -> float:
        """Get 90% of the spendable balance for a buy of ``token_address``.

        Base tokens are sized from their token balance, Solana tokens from
        the wallet's native SOL balance.

        Returns:
            Amount in whole units, or 0 if the balance lookup fails
        """
        logger.info(f"Getting max buy amount for {token_address}")
        token_chain = _resolve_chain(token_address, chain)
        owner = self.keypair.pubkey()

        try:
            if token_chain is Chain.BASE:
                raw = await self.connection.get_token_balance(owner, token_address)
            else:
                raw = await self.connection.get_native_balance(owner)
        except Exception as e:
            logger.error(f"Failed to get max buy amount for {token_address}: {e}")
            return 0.0

        return float(Decimal(raw) * MAX_BUY_RATIO / (Decimal(10) ** token_chain.decimals))

    async def execute_trade(
        self, params: Union[TradeParams, Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Execute a swap.

        Raises:
            NotSupportedError: Always; no on-chain action is taken
        """
        if not isinstance(params, TradeParams):
            params = TradeParams(**params)
        raise NotSupportedError(
            f"Trade execution is not implemented: {params.amount_in} "
            f"{params.token_in} -> {params.token_out} was not submitted"
        )

    async def get_formatted_portfolio(self) -> str:
        result = await self.fetch_balance()
        lines = [f"Wallet Address: {self.get_address()}"]
        if result.ok:
            balance = result.balance
            lines.append(f"{balance.name} Balance: {balance.formatted} {balance.symbol}")
        else:
            lines.append("Balance: unavailable")
        return "\n".join(lines)

    async def close(self) -> None:
        """Close the RPC connection if this provider opened it."""
        if self._owns_connection:
            await self.connection.close()

    async def __aenter__(self) -> "WalletProvider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
