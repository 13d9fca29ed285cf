"""
Settings for the Solana Autotrader plugin.

Settings are read through the host runtime and validated here so the
wallet provider and the polling client see typed values.
"""
import logging
from typing import Optional

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from solana_autotrader.exceptions import ConfigurationError
from solana_autotrader.interfaces.runtime import AgentRuntime

# Setup logger for this module
logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_POLL_INTERVAL = 10.0
DEFAULT_RPC_TIMEOUT = 30.0
DEFAULT_COMMITMENT = "confirmed"

# runtime key -> settings field
SETTING_KEYS = {
    "WALLET_PRIVATE_KEY": "wallet_private_key",
    "RPC_URL": "rpc_url",
    "AUTOTRADER_POLL_INTERVAL": "poll_interval",
    "RPC_TIMEOUT": "rpc_timeout",
    "RPC_COMMITMENT": "rpc_commitment",
}


class AutotraderSettings(BaseModel):
    """Validated runtime settings."""
    wallet_private_key: Optional[SecretStr] = Field(
        None, description="Base58 encoded wallet secret key"
    )
    rpc_url: str = Field(DEFAULT_RPC_URL, description="Solana JSON-RPC endpoint")
    poll_interval: float = Field(
        DEFAULT_POLL_INTERVAL, gt=0, description="Seconds between balance polls"
    )
    rpc_timeout: float = Field(
        DEFAULT_RPC_TIMEOUT, gt=0, description="Seconds before an RPC call is abandoned"
    )
    rpc_commitment: str = Field(DEFAULT_COMMITMENT)

    @field_validator("rpc_commitment")
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        if v not in ("processed", "confirmed", "finalized"):
            raise ValueError(f"Unsupported commitment level: {v}")
        return v

    @classmethod
    def from_runtime(cls, runtime: AgentRuntime) -> "AutotraderSettings":
        """Read and validate every known setting from the runtime.

        Raises:
            ConfigurationError: If a setting has an invalid value
        """
        values = {}
        for key, field_name in SETTING_KEYS.items():
            value = runtime.get_setting(key) if runtime is not None else None
            # Empty strings count as unset
            if value not in (None, ""):
                values[field_name] = value
        try:
            return cls(**values)
        except ValidationError as e:
            logger.error(f"Invalid autotrader settings: {e}")
            raise ConfigurationError(f"Invalid autotrader settings: {e}") from e
