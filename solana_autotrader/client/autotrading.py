"""
Auto trading client for the Solana Autotrader plugin.

The client polls the wallet's SOL balance on a fixed interval and logs it.
It owns its polling task and RPC connection and releases both on stop.
"""
import asyncio
import contextlib
import logging
from typing import Dict, Optional

from solana_autotrader.config import AutotraderSettings
from solana_autotrader.interfaces.client.client import Client
from solana_autotrader.interfaces.providers.rpc import LedgerRpcProvider
from solana_autotrader.interfaces.runtime import AgentRuntime
from solana_autotrader.services.wallet import (
    get_connection,
    get_wallet_balance,
    resolve_keypair,
)

# Setup logger for this module
logger = logging.getLogger(__name__)


class AutoTradingClient:
    """Polling loop that reports the wallet balance."""

    def __init__(
        self,
        runtime: AgentRuntime,
        interval: Optional[float] = None,
        rpc: Optional[LedgerRpcProvider] = None,
    ):
        """Initialize the client.

        Args:
            runtime: Agent runtime exposing the wallet settings
            interval: Seconds between polls, AUTOTRADER_POLL_INTERVAL otherwise
            rpc: Optional connection; one is opened on start otherwise
        """
        self.runtime = runtime
        self.settings = AutotraderSettings.from_runtime(runtime)
        self.interval = interval if interval is not None else self.settings.poll_interval
        if self.interval <= 0:
            raise ValueError("Polling interval must be positive")
        self.rpc = rpc
        self._owns_rpc = rpc is None
        self._task: Optional[asyncio.Task] = None
        self.last_balance: Optional[float] = None

        logger.info("Initialising auto trading system...")

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start polling.

        Raises:
            ConfigurationError: If the wallet key is missing
            DecodeError: If the wallet key cannot be decoded
        """
        if self.running:
            logger.warning("Auto trading system is already running")
            return

        resolve_keypair(self.runtime)
        if self.rpc is None:
            self.rpc = get_connection(self.runtime)
        self._task = asyncio.create_task(self._run())
        logger.info(f"Auto trading system polling every {self.interval}s")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self.analyze()

    async def analyze(self) -> float:
        """Run one polling tick; never raises."""
        try:
            balance = await asyncio.wait_for(
                get_wallet_balance(self.runtime, rpc=self.rpc),
                timeout=self.settings.rpc_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Wallet balance lookup timed out after {self.settings.rpc_timeout}s"
            )
            balance = 0.0

        self.last_balance = balance
        logger.info(f"Wallet balance: {balance}")
        return balance

    async def wait(self) -> None:
        """Wait until the polling task ends."""
        if self._task is not None:
            await self._task

    async def stop(self) -> None:
        """Cancel polling and close the connection opened by the client."""
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        if self.rpc is not None and self._owns_rpc:
            await self.rpc.close()
            self.rpc = None

        logger.info("Auto trading system stopped")


class AutoTradingClientInterface(Client):
    """Host-facing client declaration tracking one client per runtime."""

    def __init__(self):
        self._clients: Dict[int, AutoTradingClient] = {}

    async def start(self, runtime: AgentRuntime) -> AutoTradingClient:
        key = id(runtime)
        existing = self._clients.get(key)
        if existing is not None and existing.running:
            return existing

        client = AutoTradingClient(runtime)
        await client.start()
        self._clients[key] = client
        return client

    async def stop(self, runtime: AgentRuntime) -> None:
        client = self._clients.pop(id(runtime), None)
        if client is None:
            logger.warning("No auto trading client is running for this runtime")
            return
        await client.stop()


auto_trading_client = AutoTradingClientInterface()
