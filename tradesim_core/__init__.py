"""
tradesim-core: in-memory single-user stock trading ledger.

No pricing feed, no persistence, no cash. A Market owns instruments and prices;
a Portfolio owns holdings and the transaction log.
"""

__version__ = "0.1.0"

from tradesim_core.instrument import Instrument
from tradesim_core.ledger import LedgerEntry, Side
from tradesim_core.errors import (
    InsufficientShares,
    InvalidPrice,
    InvalidQuantity,
    NotFound,
    RejectReason,
    TradeResult,
    TradeStatus,
    TradingError,
)
from tradesim_core.market import Market, default_market
from tradesim_core.portfolio import Portfolio, Valuation
from tradesim_core.account import Account

__all__ = [
    "Instrument",
    "LedgerEntry",
    "Side",
    "TradingError",
    "NotFound",
    "InvalidQuantity",
    "InsufficientShares",
    "InvalidPrice",
    "RejectReason",
    "TradeResult",
    "TradeStatus",
    "Market",
    "default_market",
    "Portfolio",
    "Valuation",
    "Account",
]
