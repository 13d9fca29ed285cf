"""
Autotrader plugin declaration.

Bundles the trading and wallet actions with the wallet context provider
so a host plugin manager can load them through the
``solana_autotrader.plugins`` entry point.
"""
import logging
from typing import Any, Dict, List

from solana_autotrader.interfaces.plugins.plugins import (
    Action,
    ActionRegistry,
    Plugin,
    Provider,
)
from solana_autotrader.plugins.actions import (
    AnalyzeTradeAction,
    GetMaxBuyAmountAction,
    GetWalletBalanceAction,
)
from solana_autotrader.plugins.providers import WalletContextProvider

# Setup logger for this module
logger = logging.getLogger(__name__)


class AutotraderPlugin(Plugin):
    """Onchain trading actions with Solana integration."""

    def __init__(self):
        self._actions: List[Action] = [
            AnalyzeTradeAction(),
            GetWalletBalanceAction(),
            GetMaxBuyAmountAction(),
        ]
        self._providers: List[Provider] = [WalletContextProvider()]
        self._config: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return "[AutoTrader] Onchain Actions with Solana Integration"

    @property
    def description(self) -> str:
        return "Autonomous trading integration with AI analysis"

    @property
    def actions(self) -> List[Action]:
        return list(self._actions)

    @property
    def providers(self) -> List[Provider]:
        return list(self._providers)

    @property
    def evaluators(self) -> List[Any]:
        return []

    @property
    def services(self) -> List[Any]:
        return []

    def initialize(self, action_registry: ActionRegistry) -> bool:
        """Register every action of the plugin.

        Raises:
            RuntimeError: If an action could not be registered
        """
        for action in self._actions:
            if not action_registry.register_action(action):
                raise RuntimeError(f"Failed to register action {action.name}")
        logger.info(f"Registered {len(self._actions)} autotrader actions")
        return True

    def configure(self, config: Dict[str, Any]) -> None:
        self._config = config
        for action in self._actions:
            action.configure(config)


def get_plugin() -> AutotraderPlugin:
    """Entry point factory for the autotrader plugin."""
    return AutotraderPlugin()
