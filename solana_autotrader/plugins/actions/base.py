"""
BaseAction implementation for the Solana Autotrader.

This module provides the BaseAction class that implements the Action
interface and is extended by the autotrader actions.
"""
from typing import Any, Dict, List, Optional

from solana_autotrader.interfaces.plugins.plugins import Action
from solana_autotrader.interfaces.runtime import AgentRuntime
from solana_autotrader.runtime import SettingsRuntime


class BaseAction(Action):
    """Base class for actions that register with a registry."""

    def __init__(
        self,
        name: str,
        description: str,
        similes: Optional[List[str]] = None,
        registry=None,
    ):
        """Initialize the action with name, description and similes."""
        self._name = name
        self._description = description
        self._similes = list(similes or [])
        self._config = {}

        # Register with the provided registry if given
        if registry is not None:
            registry.register_action(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def similes(self) -> List[str]:
        return self._similes

    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the action with settings from config."""
        if config is None:
            raise TypeError("Config cannot be None")
        self._config = config

    def runtime_for(self, runtime: Optional[AgentRuntime] = None) -> AgentRuntime:
        """Use the host runtime when given, the configured settings otherwise."""
        if runtime is not None:
            return runtime
        return SettingsRuntime(self._config)

    def get_schema(self) -> Dict[str, Any]:
        """Return the JSON schema for this action's parameters."""
        # Override in subclasses
        return {}

    async def validate(self, **params) -> bool:
        return True

    async def execute(self, **params) -> Dict[str, Any]:
        """Execute the action with the provided parameters."""
        # Override in subclasses
        raise NotImplementedError("Action must implement execute method")
