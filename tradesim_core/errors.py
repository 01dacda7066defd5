"""
Error taxonomy and trade outcomes.

Market operations raise TradingError subclasses. Portfolio.buy/sell report
rejections as a TradeResult instead of raising; call raise_for_status() to
turn a rejection into the matching exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tradesim_core.ledger import LedgerEntry


class TradingError(Exception):
    """Base class for recoverable, caller-visible trading errors."""


class NotFound(TradingError, KeyError):
    """Symbol is not registered in the Market."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Stock not found: {self.symbol}"


class InvalidQuantity(TradingError, ValueError):
    """Quantity is not a positive whole number of shares."""


class InsufficientShares(TradingError):
    """Sell quantity exceeds current holdings."""


class InvalidPrice(TradingError, ValueError):
    """Price is negative or not a finite number."""


class DuplicateSymbol(TradingError, ValueError):
    """Symbol is already registered in the Market."""


class LedgerInconsistency(TradingError):
    """Holdings disagree with the transaction log."""


class RejectReason(Enum):
    """Why a buy or sell was refused."""

    INVALID_QUANTITY = "invalid_quantity"
    INSUFFICIENT_SHARES = "insufficient_shares"

    @property
    def exception_type(self) -> type[TradingError]:
        return _EXCEPTIONS[self]


_EXCEPTIONS: dict[RejectReason, type[TradingError]] = {
    RejectReason.INVALID_QUANTITY: InvalidQuantity,
    RejectReason.INSUFFICIENT_SHARES: InsufficientShares,
}


class TradeStatus(Enum):
    FILLED = "filled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class TradeResult:
    """Outcome of a buy or sell. Immutable."""

    status: TradeStatus
    entry: LedgerEntry | None = None
    reason: RejectReason | None = None
    message: str | None = None

    @classmethod
    def filled(cls, entry: LedgerEntry) -> TradeResult:
        return cls(status=TradeStatus.FILLED, entry=entry)

    @classmethod
    def rejected(cls, reason: RejectReason, message: str) -> TradeResult:
        return cls(status=TradeStatus.REJECTED, reason=reason, message=message)

    @property
    def ok(self) -> bool:
        return self.status is TradeStatus.FILLED

    def raise_for_status(self) -> None:
        """Raise the exception matching the reject reason. No-op when filled."""
        if self.ok:
            return
        if self.reason is None:
            raise TradingError(self.message or "trade rejected")
        raise self.reason.exception_type(self.message)
