"""
Tests for the ANALYZE_TRADE action.
"""
import pytest

from solana_autotrader.exceptions import NotSupportedError
from solana_autotrader.plugins.actions.analyze_trade import AnalyzeTradeAction
from solana_autotrader.plugins.manager import PluginManager


class TestAnalyzeTradeAction:
    """Test suite for AnalyzeTradeAction."""

    def test_declaration(self):
        action = AnalyzeTradeAction()

        assert action.name == "ANALYZE_TRADE"
        assert action.description == "Analyze a token for trading opportunities"
        assert action.similes == [
            "ANALYZE",
            "ANALYZE_TOKEN",
            "TRADE",
            "ANALYZE_TRADE",
            "EVALUATE",
            "ASSESS",
        ]
        assert action.get_schema()["required"] == ["token_address"]

    @pytest.mark.asyncio
    async def test_validate_accepts_any_request(self):
        assert await AnalyzeTradeAction().validate() is True

    @pytest.mark.asyncio
    async def test_execute_is_explicitly_unimplemented(self):
        with pytest.raises(NotSupportedError, match="not implemented"):
            await AnalyzeTradeAction().execute(token_address="So11111111111111111111111111111111111111112")

    @pytest.mark.asyncio
    async def test_manager_reports_error(self):
        manager = PluginManager()
        manager.action_registry.register_action(AnalyzeTradeAction())

        result = await manager.execute_action("ASSESS", token_address="abc")

        assert result["status"] == "error"
        assert "not implemented" in result["message"]
