"""
Wallet actions exposing the wallet provider to the host.
"""
import logging
from typing import Any, Dict, Optional

from solana_autotrader.domains.plugins import ActionResult
from solana_autotrader.domains.wallet import Chain
from solana_autotrader.interfaces.runtime import AgentRuntime
from solana_autotrader.plugins.actions.base import BaseAction
from solana_autotrader.services.wallet import WalletProvider

# Setup logger for this module
logger = logging.getLogger(__name__)

CHAIN_PARAMETER = {
    "type": "string",
    "enum": [chain.value for chain in Chain],
    "description": "Chain of the token; inferred from the address when omitted",
}


def _valid_chain(chain: Optional[str]) -> bool:
    return chain is None or chain in {c.value for c in Chain}


class GetWalletBalanceAction(BaseAction):
    """GET_WALLET_BALANCE: report a balance of the configured wallet."""

    def __init__(self, registry=None):
        super().__init__(
            name="GET_WALLET_BALANCE",
            description="Get the SOL balance of the wallet or its balance of a token",
            similes=["WALLET_BALANCE", "BALANCE", "CHECK_BALANCE"],
            registry=registry,
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "token_address": {
                    "type": "string",
                    "description": "Token mint address; omit for the SOL balance",
                },
                "chain": CHAIN_PARAMETER,
            },
        }

    async def validate(self, **params) -> bool:
        return _valid_chain(params.get("chain"))

    async def execute(
        self,
        token_address: Optional[str] = None,
        chain: Optional[str] = None,
        runtime: Optional[AgentRuntime] = None,
        **params,
    ) -> Dict[str, Any]:
        async with WalletProvider(self.runtime_for(runtime)) as wallet:
            result = await wallet.fetch_balance(token_address, chain)
            address = wallet.get_address()

        payload = {"address": address, **result.balance.model_dump()}
        if not result.ok:
            return ActionResult(status="error", result=payload, message=result.error).model_dump()
        return ActionResult(result=payload).model_dump()


class GetMaxBuyAmountAction(BaseAction):
    """GET_MAX_BUY_AMOUNT: report how much the wallet may spend on a buy."""

    def __init__(self, registry=None):
        super().__init__(
            name="GET_MAX_BUY_AMOUNT",
            description="Get the largest amount the wallet may spend buying a token",
            similes=["MAX_BUY", "MAX_BUY_AMOUNT"],
            registry=registry,
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "token_address": {
                    "type": "string",
                    "description": "Mint address of the token to buy",
                },
                "chain": CHAIN_PARAMETER,
            },
            "required": ["token_address"],
        }

    async def validate(self, **params) -> bool:
        return bool(params.get("token_address")) and _valid_chain(params.get("chain"))

    async def execute(
        self,
        token_address: str,
        chain: Optional[str] = None,
        runtime: Optional[AgentRuntime] = None,
        **params,
    ) -> Dict[str, Any]:
        async with WalletProvider(self.runtime_for(runtime)) as wallet:
            amount = await wallet.get_max_buy_amount(token_address, chain)

        logger.info(f"Max buy amount for {token_address}: {amount}")
        return ActionResult(
            result={"token_address": token_address, "max_buy_amount": amount}
        ).model_dump()
