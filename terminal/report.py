"""
Text rendering for the terminal: market, holdings, transactions, value.

Tabular views are built as DataFrames first so they can also be used
programmatically (e.g. exported or inspected in a notebook).
"""

from __future__ import annotations

from decimal import Decimal

import pandas as pd

from tradesim_core.market import Market
from tradesim_core.portfolio import Portfolio


def money(value: Decimal) -> str:
    return f"${value:,.2f}"


def holdings_frame(portfolio: Portfolio, market: Market) -> pd.DataFrame:
    """One row per held symbol (zero holdings included) valued at current prices."""
    rows = [
        {"symbol": v.symbol, "quantity": v.quantity, "price": v.price, "value": v.value}
        for v in portfolio.valuations(market)
    ]
    return pd.DataFrame(rows, columns=["symbol", "quantity", "price", "value"])


def transactions_frame(portfolio: Portfolio) -> pd.DataFrame:
    """Transaction log in chronological order."""
    rows = [
        {
            "timestamp": e.timestamp,
            "side": e.side.name,
            "symbol": e.symbol,
            "quantity": e.quantity,
            "price": e.price,
            "notional": e.notional,
        }
        for e in portfolio.transaction_log()
    ]
    return pd.DataFrame(rows, columns=["timestamp", "side", "symbol", "quantity", "price", "notional"])


def format_market(market: Market) -> str:
    lines = ["Current Market:"]
    lines.extend(str(instrument) for instrument in market.list_all())
    return "\n".join(lines)


def format_holdings(portfolio: Portfolio, market: Market) -> str:
    df = holdings_frame(portfolio, market)
    lines = ["Your Holdings:"]
    if df.empty:
        lines.append("None.")
        return "\n".join(lines)
    for row in df.itertuples(index=False):
        lines.append(f"{row.symbol}: {row.quantity} shares (Value: {money(row.value)})")
    return "\n".join(lines)


def format_transactions(portfolio: Portfolio) -> str:
    lines = ["Transaction History:"]
    log = portfolio.transaction_log()
    if not log:
        lines.append("No transactions.")
        return "\n".join(lines)
    lines.extend(entry.describe() for entry in log)
    return "\n".join(lines)


def format_value(portfolio: Portfolio, market: Market) -> str:
    return f"Portfolio Value: {money(portfolio.total_value(market))}"
