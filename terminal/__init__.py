"""
Terminal shell for tradesim-core: menu loop, input parsing, text reports.

Thin I/O around the core. Parses raw text into typed values before calling
Market/Portfolio; translates failures into messages and keeps looping.
"""

from terminal.app import TradingSession, main
from terminal.catalog_loader import load_catalog_csv, load_catalog_frame, market_frame
from terminal.config import Settings
from terminal.report import holdings_frame, transactions_frame

__all__ = [
    "TradingSession",
    "main",
    "Settings",
    "load_catalog_csv",
    "load_catalog_frame",
    "market_frame",
    "holdings_frame",
    "transactions_frame",
]
