"""
Trade analysis action.

The action is declared so the host can route trading requests to it, but
no analysis strategy exists yet and execution always fails explicitly.
"""
from typing import Any, Dict

from solana_autotrader.exceptions import NotSupportedError
from solana_autotrader.plugins.actions.base import BaseAction


class AnalyzeTradeAction(BaseAction):
    """ANALYZE_TRADE: analyze a token for trading opportunities."""

    def __init__(self, registry=None):
        super().__init__(
            name="ANALYZE_TRADE",
            description="Analyze a token for trading opportunities",
            similes=[
                "ANALYZE",
                "ANALYZE_TOKEN",
                "TRADE",
                "ANALYZE_TRADE",
                "EVALUATE",
                "ASSESS",
            ],
            registry=registry,
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "token_address": {
                    "type": "string",
                    "description": "Mint address of the token to analyze",
                }
            },
            "required": ["token_address"],
        }

    async def execute(self, **params) -> Dict[str, Any]:
        raise NotSupportedError("Trade analysis is not implemented")
