"""
Settings-backed runtime for running the autotrader outside a host agent.
"""
import json
import os
from typing import Any, Dict, Optional

from solana_autotrader.interfaces.runtime import AgentRuntime


class SettingsRuntime(AgentRuntime):
    """Runtime that serves settings from a dictionary and the environment."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None, use_env: bool = True):
        self.settings = dict(settings or {})
        self.use_env = use_env

    @classmethod
    def from_file(cls, config_path: str, use_env: bool = True) -> "SettingsRuntime":
        """Load settings from a JSON file."""
        with open(config_path, "r") as f:
            return cls(json.load(f), use_env=use_env)

    def get_setting(self, key: str) -> Optional[str]:
        value = self.settings.get(key)
        if value is None and self.use_env:
            value = os.environ.get(key)
        if value is None:
            return None
        return str(value)
