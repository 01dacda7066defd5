"""
Portfolio: holdings and the append-only transaction log.

Holds no Instruments; valuation looks prices up through a Market at call time,
so a price change in the Market shows up in the next valuation without
touching Portfolio state. Every buy/sell validates fully before mutating.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING

from tradesim_core.errors import LedgerInconsistency, RejectReason, TradeResult
from tradesim_core.instrument import normalize_symbol
from tradesim_core.ledger import LedgerEntry, Side

if TYPE_CHECKING:
    from tradesim_core.instrument import Instrument
    from tradesim_core.market import Market

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class Valuation:
    """One holdings line valued at the current market price."""

    symbol: str
    quantity: int
    price: Decimal
    value: Decimal


def _is_share_count(quantity: object) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity > 0


class Portfolio:
    """
    Holdings (symbol -> shares) and trade history for one account.

    Zero-quantity holdings are kept after a full sell. The clock supplies
    ledger timestamps; pass a fixed clock for deterministic tests.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or datetime.now
        self._holdings: dict[str, int] = {}
        self._log: list[LedgerEntry] = []

    def position(self, symbol: str) -> int:
        """Shares held in symbol. 0 if not present."""
        return self._holdings.get(normalize_symbol(symbol), 0)

    def buy(self, instrument: Instrument, quantity: int) -> TradeResult:
        """Buy quantity shares at the instrument's current price."""
        if not _is_share_count(quantity):
            return self._reject(
                RejectReason.INVALID_QUANTITY,
                f"Invalid quantity: {quantity!r}",
                Side.BUY,
                instrument,
            )
        return self._fill(instrument, quantity, Side.BUY)

    def sell(self, instrument: Instrument, quantity: int) -> TradeResult:
        """Sell quantity shares at the instrument's current price."""
        if not _is_share_count(quantity):
            return self._reject(
                RejectReason.INVALID_QUANTITY,
                f"Invalid quantity: {quantity!r}",
                Side.SELL,
                instrument,
            )
        owned = self._holdings.get(instrument.symbol, 0)
        if quantity > owned:
            return self._reject(
                RejectReason.INSUFFICIENT_SHARES,
                f"Not enough shares to sell: {instrument.symbol} holds {owned}, requested {quantity}",
                Side.SELL,
                instrument,
            )
        return self._fill(instrument, quantity, Side.SELL)

    def _fill(self, instrument: Instrument, quantity: int, side: Side) -> TradeResult:
        entry = LedgerEntry(
            symbol=instrument.symbol,
            quantity=quantity,
            side=side,
            price=instrument.price,
            timestamp=self._clock(),
        )
        self._holdings[entry.symbol] = self._holdings.get(entry.symbol, 0) + entry.signed_quantity
        self._log.append(entry)
        logger.info(
            "Fill: %s %s %s @ %s",
            side.name,
            quantity,
            entry.symbol,
            entry.price,
        )
        return TradeResult.filled(entry)

    def _reject(
        self,
        reason: RejectReason,
        message: str,
        side: Side,
        instrument: Instrument,
    ) -> TradeResult:
        logger.info("Order rejected (%s %s): %s", side.name, instrument.symbol, message)
        return TradeResult.rejected(reason, message)

    def holdings_snapshot(self) -> Mapping[str, int]:
        """Read-only copy of holdings. Zero entries included."""
        return MappingProxyType(dict(self._holdings))

    def transaction_log(self) -> Sequence[LedgerEntry]:
        """Full chronological history."""
        return tuple(self._log)

    def total_value(self, market: Market) -> Decimal:
        """
        Sum of quantity x current price over all holdings.
        NotFound propagates if a held symbol is missing from market.
        """
        return sum((v.value for v in self.valuations(market)), Decimal("0"))

    def valuations(self, market: Market) -> list[Valuation]:
        """Per-symbol value at current market prices, in holdings order."""
        out: list[Valuation] = []
        for symbol, quantity in self._holdings.items():
            price = market.lookup(symbol).price
            out.append(Valuation(symbol=symbol, quantity=quantity, price=price, value=price * quantity))
        return out

    def check_consistency(self) -> None:
        """Raise LedgerInconsistency if holdings disagree with the log."""
        expected: dict[str, int] = {}
        for entry in self._log:
            expected[entry.symbol] = expected.get(entry.symbol, 0) + entry.signed_quantity
        for symbol in set(expected) | set(self._holdings):
            held = self._holdings.get(symbol, 0)
            if held < 0 or held != expected.get(symbol, 0):
                raise LedgerInconsistency(
                    f"{symbol}: holdings {held} != log net {expected.get(symbol, 0)}"
                )
