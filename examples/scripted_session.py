"""
Scripted session: buy, oversell, sell, reprice, value.

Shows: Market, Account/Portfolio, TradeResult handling, ledger snapshots and
the pandas report frames. Same calls the terminal menu makes.
"""

from __future__ import annotations

import logging

from tradesim_core import Account, default_market
from terminal.report import format_transactions, format_value, holdings_frame


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    market = default_market()
    account = Account.create("demo")
    portfolio = account.portfolio

    aapl = market.lookup("aapl")
    print("--- Buy 10 AAPL ---")
    print(portfolio.buy(aapl, 10))

    print("\n--- Sell 15 AAPL (more than held) ---")
    result = portfolio.sell(aapl, 15)
    print(f"status={result.status.value}, reason={result.reason.value}, message={result.message}")

    print("\n--- Sell 4 AAPL ---")
    portfolio.sell(aapl, 4)
    print(dict(portfolio.holdings_snapshot()))

    print("\n--- Reprice AAPL to 200.00 ---")
    market.set_price("AAPL", "200.00")
    print(holdings_frame(portfolio, market).to_string(index=False))
    print(format_value(portfolio, market))

    print()
    print(format_transactions(portfolio))


if __name__ == "__main__":
    main()
