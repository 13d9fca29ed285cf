"""
Plugin manager for the Solana Autotrader.

This module implements the concrete PluginManager that discovers,
loads, and manages plugins and runs their actions and providers.
"""

import logging
from typing import Dict, List, Any, Optional
import importlib.metadata

from solana_autotrader.interfaces.plugins.plugins import (
    PluginManager as PluginManagerInterface,
)
from solana_autotrader.interfaces.plugins.plugins import Plugin
from solana_autotrader.interfaces.runtime import AgentRuntime
from solana_autotrader.plugins.registry import ActionRegistry

# Setup logger for this module
logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "solana_autotrader.plugins"


class PluginManager(PluginManagerInterface):
    """Manager for discovering and loading plugins."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        action_registry: Optional[ActionRegistry] = None,
    ):
        """Initialize with optional configuration and action registry."""
        self.config = config or {}
        self.action_registry = action_registry or ActionRegistry()
        self._plugins = {}
        self._loaded_entry_points = set()

    def register_plugin(self, plugin: Plugin) -> bool:
        """Register a plugin in the manager.

        Args:
            plugin: The plugin to register

        Returns:
            True if registration succeeded, False otherwise
        """
        try:
            # Initialize the plugin with the action registry first
            plugin.initialize(self.action_registry)

            # Then configure the plugin
            plugin.configure(self.config)

            # Only store plugin if both initialize and configure succeed
            self._plugins[plugin.name] = plugin
            logger.info(f"Successfully registered plugin {plugin.name}")
            return True

        except Exception as e:
            logger.error(f"Error registering plugin {plugin.name}: {e}")
            self._plugins.pop(plugin.name, None)
            return False

    def load_plugins(self) -> List[str]:
        """Load all plugins using entry points and apply configuration.

        Returns:
            List of loaded plugin names
        """
        loaded_plugins = []

        for entry_point in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            # Skip if this entry point has already been loaded
            entry_point_id = f"{entry_point.name}:{entry_point.value}"
            if entry_point_id in self._loaded_entry_points:
                logger.info(f"Skipping already loaded plugin: {entry_point.name}")
                continue

            try:
                logger.info(f"Found plugin entry point: {entry_point.name}")
                self._loaded_entry_points.add(entry_point_id)
                plugin_factory = entry_point.load()
                plugin = plugin_factory()

                if self.register_plugin(plugin):
                    loaded_plugins.append(entry_point.name)

            except Exception as e:
                logger.error(f"Error loading plugin {entry_point.name}: {e}")

        return loaded_plugins

    def get_plugin(self, name: str) -> Optional[Plugin]:
        """Get a plugin by name.

        Args:
            name: Name of the plugin to retrieve

        Returns:
            Plugin instance or None if not found
        """
        return self._plugins.get(name)

    def list_plugins(self) -> List[Dict[str, Any]]:
        """List all registered plugins with their details.

        Returns:
            List of plugin details dictionaries
        """
        return [
            {
                "name": plugin.name,
                "description": plugin.description,
                "actions": [action.name for action in plugin.actions],
                "providers": [provider.name for provider in plugin.providers],
            }
            for plugin in self._plugins.values()
        ]

    async def execute_action(self, action_name: str, **kwargs) -> Dict[str, Any]:
        """Execute an action with the given parameters.

        Args:
            action_name: Name or simile of the action to execute
            **kwargs: Parameters to pass to the action

        Returns:
            Dictionary with execution results
        """
        action = self.action_registry.get_action(action_name)
        if not action:
            return {"status": "error", "message": f"Action {action_name} not found"}

        try:
            if not await action.validate(**kwargs):
                return {
                    "status": "error",
                    "message": f"Invalid parameters for action {action.name}",
                }
            return await action.execute(**kwargs)
        except Exception as e:
            logger.error(f"Error executing action {action.name}: {e}")
            return {"status": "error", "message": str(e)}

    async def get_provider_context(self, runtime: AgentRuntime) -> List[str]:
        """Collect the context of every provider of every plugin.

        Providers that fail or have nothing to report are skipped.
        """
        context = []
        for plugin in self._plugins.values():
            for provider in plugin.providers:
                try:
                    value = await provider.get(runtime)
                except Exception as e:
                    logger.error(f"Error in provider {provider.name}: {e}")
                    continue
                if value:
                    context.append(value)
        return context

    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the plugin manager and all plugins.

        Args:
            config: Configuration dictionary
        """
        self.config.update(config)
        self.action_registry.configure_all_actions(config)
        logger.info("Configuring all plugins with updated config")
        for name, plugin in self._plugins.items():
            try:
                logger.info(f"Configuring plugin: {name}")
                plugin.configure(self.config)
            except Exception as e:
                logger.error(f"Error configuring plugin {name}: {e}")
