from abc import ABC, abstractmethod
from typing import Any

from solana_autotrader.interfaces.runtime import AgentRuntime


class Client(ABC):
    """Interface for clients the host starts and stops with an agent."""

    @abstractmethod
    async def start(self, runtime: AgentRuntime) -> Any:
        """Start the client for a runtime."""
        pass

    @abstractmethod
    async def stop(self, runtime: AgentRuntime) -> None:
        """Stop the client started for a runtime."""
        pass
