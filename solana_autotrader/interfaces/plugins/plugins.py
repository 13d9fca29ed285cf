"""
Plugin system interfaces.

These interfaces define the contracts between the autotrader plugin and the
host: actions the agent can run, providers that add wallet context to the
agent state, and the plugins that bundle them.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from solana_autotrader.interfaces.runtime import AgentRuntime


class Action(ABC):
    """Interface for actions that can be run by an agent."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the action."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the description of the action."""
        pass

    @property
    @abstractmethod
    def similes(self) -> List[str]:
        """Get alternative names the agent may use for the action."""
        pass

    @abstractmethod
    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the action with global configuration."""
        pass

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Get the schema for the action parameters."""
        pass

    @abstractmethod
    async def validate(self, **params) -> bool:
        """Check whether the action can run with the given parameters."""
        pass

    @abstractmethod
    async def execute(self, **params) -> Dict[str, Any]:
        """Execute the action with the given parameters."""
        pass


class Provider(ABC):
    """Interface for providers that inject context into the agent state."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the provider."""
        pass

    @abstractmethod
    async def get(
        self,
        runtime: AgentRuntime,
        message: Optional[Dict[str, Any]] = None,
        state: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """Get the provider context, or None when it is unavailable."""
        pass


class ActionRegistry(ABC):
    """Interface for the action registry."""

    @abstractmethod
    def register_action(self, action: Action) -> bool:
        """Register an action in the registry."""
        pass

    @abstractmethod
    def get_action(self, action_name: str) -> Optional[Action]:
        """Get an action by name or simile."""
        pass

    @abstractmethod
    def list_all_actions(self) -> List[str]:
        """List all registered actions."""
        pass

    @abstractmethod
    def configure_all_actions(self, config: Dict[str, Any]) -> None:
        """Configure all registered actions with the same config."""
        pass


class Plugin(ABC):
    """Interface for plugins that can be loaded by the host."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the plugin."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the description of the plugin."""
        pass

    @property
    @abstractmethod
    def actions(self) -> List[Action]:
        """Get the actions contributed by the plugin."""
        pass

    @property
    @abstractmethod
    def providers(self) -> List[Provider]:
        """Get the providers contributed by the plugin."""
        pass

    @property
    @abstractmethod
    def evaluators(self) -> List[Any]:
        """Get the evaluators contributed by the plugin."""
        pass

    @property
    @abstractmethod
    def services(self) -> List[Any]:
        """Get the services contributed by the plugin."""
        pass

    @abstractmethod
    def initialize(self, action_registry: ActionRegistry) -> bool:
        """Initialize the plugin and register its actions."""
        pass

    @abstractmethod
    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the plugin."""
        pass


class PluginManager(ABC):
    """Interface for the plugin manager."""

    @abstractmethod
    def register_plugin(self, plugin: Plugin) -> bool:
        """Register a plugin in the manager."""
        pass

    @abstractmethod
    def load_plugins(self) -> List[str]:
        """Load all plugins exposed through entry points."""
        pass

    @abstractmethod
    def get_plugin(self, name: str) -> Optional[Plugin]:
        """Get a plugin by name."""
        pass

    @abstractmethod
    def list_plugins(self) -> List[Dict[str, Any]]:
        """List all registered plugins with their details."""
        pass

    @abstractmethod
    async def execute_action(self, action_name: str, **kwargs) -> Dict[str, Any]:
        """Execute an action with the given parameters."""
        pass

    @abstractmethod
    async def get_provider_context(self, runtime: AgentRuntime) -> List[str]:
        """Collect the context of every registered provider."""
        pass

    @abstractmethod
    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the plugin manager and all plugins."""
        pass
