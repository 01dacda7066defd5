"""
Ledger entries: immutable records of executed trades.

The price is captured from the Market at execution time and never follows
later price changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Side(Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class LedgerEntry:
    """One executed trade. Point-in-time snapshot."""

    symbol: str
    quantity: int
    side: Side
    price: Decimal
    timestamp: datetime

    @property
    def notional(self) -> Decimal:
        return self.price * self.quantity

    @property
    def signed_quantity(self) -> int:
        """Quantity with sign applied (positive = buy)."""
        return self.quantity if self.side is Side.BUY else -self.quantity

    def describe(self) -> str:
        return (
            f"{self.side.name} {self.quantity} shares of {self.symbol} "
            f"at ${self.price:,.2f} on {self.timestamp.isoformat(sep=' ', timespec='seconds')}"
        )
