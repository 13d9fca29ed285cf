"""
Wallet domain models.

These models describe balances and the chains they are denominated on.
"""
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

__all__ = [
    "Chain",
    "Balance",
    "BalanceResult",
    "TradeParams",
    "format_units",
]


class Chain(str, Enum):
    """Chains a token address can be denominated on."""

    SOLANA = "solana"
    BASE = "base"

    @property
    def decimals(self) -> int:
        return 18 if self is Chain.BASE else 9

    @property
    def symbol(self) -> str:
        return "ETH" if self is Chain.BASE else "SOL"

    @property
    def display_name(self) -> str:
        return "Base" if self is Chain.BASE else "Solana"

    @classmethod
    def from_address(cls, address: str) -> "Chain":
        """Infer the chain from the shape of an address.

        Hex-prefixed addresses are treated as Base, everything else as Solana.
        """
        if address.startswith("0x"):
            return cls.BASE
        return cls.SOLANA


def format_units(value: int, decimals: int) -> str:
    """Render a smallest-unit amount as a plain decimal string.

    ``format_units(2_500_000_000, 9)`` returns ``"2.5"``.
    """
    if value == 0:
        return "0"
    amount = (Decimal(value) / (Decimal(10) ** decimals)).normalize()
    return format(amount, "f")


class Balance(BaseModel):
    """A token balance in smallest units plus its display metadata."""
    value: int = Field(..., ge=0, description="Amount in the smallest unit")
    decimals: int = Field(..., ge=0, description="Decimal exponent")
    formatted: str = Field(..., description="Human readable amount")
    symbol: str
    name: str

    @classmethod
    def for_chain(cls, chain: Chain, value: int = 0) -> "Balance":
        """Build a balance for ``chain`` from a raw smallest-unit value."""
        return cls(
            value=value,
            decimals=chain.decimals,
            formatted=format_units(value, chain.decimals),
            symbol=chain.symbol,
            name=chain.display_name,
        )

    @property
    def amount(self) -> Decimal:
        return Decimal(self.value) / (Decimal(10) ** self.decimals)


class BalanceResult(BaseModel):
    """Outcome of a balance lookup.

    A failed lookup still carries a zero balance labelled for the requested
    chain, so callers that accept zero as a fallback can use it directly.
    """
    balance: Balance
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, chain: Chain, value: int) -> "BalanceResult":
        return cls(balance=Balance.for_chain(chain, value))

    @classmethod
    def failure(cls, chain: Chain, error: str) -> "BalanceResult":
        return cls(balance=Balance.for_chain(chain, 0), error=error)

    def unwrap_or_zero(self) -> Balance:
        """Return the balance; a failed lookup yields the zero balance."""
        return self.balance


class TradeParams(BaseModel):
    """Parameters for a swap between two tokens."""
    token_in: str = Field(..., description="Mint or address of the token sold")
    token_out: str = Field(..., description="Mint or address of the token bought")
    amount_in: float = Field(..., gt=0)
    slippage: float = Field(..., ge=0, le=100, description="Slippage percent")
