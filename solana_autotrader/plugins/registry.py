"""
Action registry for the Solana Autotrader.

This module implements the concrete ActionRegistry that manages actions
and resolves them by name or simile.
"""

import logging
from typing import Dict, List, Any, Optional

from solana_autotrader.interfaces.plugins.plugins import (
    ActionRegistry as ActionRegistryInterface,
)
from solana_autotrader.interfaces.plugins.plugins import Action

# Setup logger for this module
logger = logging.getLogger(__name__)


class ActionRegistry(ActionRegistryInterface):
    """Instance-based registry that manages actions."""

    def __init__(self, config: Dict[str, Any] = None):
        """Initialize an empty action registry."""
        self._actions = {}  # name -> action instance
        self._config = config or {}

    def register_action(self, action: Action) -> bool:
        """Register an action with this registry."""
        try:
            action.configure(self._config)

            self._actions[action.name] = action
            logger.info(f"Successfully registered and configured action: {action.name}")
            return True
        except Exception as e:
            logger.error(f"Error registering action: {str(e)}")
            return False

    def get_action(self, action_name: str) -> Optional[Action]:
        """Get an action by name, falling back to its similes."""
        action = self._actions.get(action_name)
        if action is not None:
            return action

        wanted = action_name.upper()
        for candidate in self._actions.values():
            if wanted in (simile.upper() for simile in candidate.similes):
                return candidate
        return None

    def list_all_actions(self) -> List[str]:
        """List all registered actions."""
        return list(self._actions.keys())

    def get_action_schemas(self) -> List[Dict[str, Any]]:
        """Describe every registered action for the host."""
        return [
            {
                "name": action.name,
                "description": action.description,
                "similes": action.similes,
                "parameters": action.get_schema(),
            }
            for action in self._actions.values()
        ]

    def configure_all_actions(self, config: Dict[str, Any]) -> None:
        """Configure all registered actions with new configuration.

        Args:
            config: Configuration dictionary to apply
        """
        self._config.update(config)
        configure_errors = []

        for name, action in self._actions.items():
            try:
                logger.info(f"Configuring action: {name}")
                action.configure(self._config)
            except Exception as e:
                logger.error(f"Error configuring action {name}: {e}")
                configure_errors.append((name, str(e)))

        if configure_errors:
            logger.error("The following actions failed to configure:")
            for name, error in configure_errors:
                logger.error(f"- {name}: {error}")
