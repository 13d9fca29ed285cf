from abc import ABC, abstractmethod
from typing import Optional


class AgentRuntime(ABC):
    """Interface for the host agent runtime."""

    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value by key, or None when it is not set."""
        pass
