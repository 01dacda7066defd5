"""
Terminal session: the menu loop around an Account and a Market.

Flow per iteration: show menu -> read choice -> parse -> call core -> print.
Parse errors and TradingError are reported and the loop continues; only
"0" (or end of input) ends the session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from tradesim_core import Account, Market, default_market
from tradesim_core.errors import TradingError
from tradesim_core.ledger import Side

from terminal.catalog_loader import load_catalog_csv
from terminal.commands import MENU_LABELS, CommandError, MenuChoice, parse_menu_choice, parse_quantity, parse_symbol
from terminal.config import Settings
from terminal.report import format_holdings, format_market, format_transactions, format_value

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class _EndOfInput(Exception):
    pass


class TradingSession:
    """
    One user's interactive session. input_fn/output_fn default to input/print;
    tests pass scripted callables instead.
    """

    def __init__(
        self,
        account: Account,
        market: Market,
        *,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.account = account
        self.market = market
        self._input = input_fn
        self._output = output_fn

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise _EndOfInput from None

    def menu_text(self) -> str:
        lines = ["", "Stock Trading Platform"]
        for choice in sorted(MENU_LABELS, key=lambda c: (c == MenuChoice.EXIT, c.value)):
            lines.append(f"{choice.value}. {MENU_LABELS[choice]}")
        return "\n".join(lines)

    def run(self) -> None:
        """Loop until EXIT or end of input, then say goodbye."""
        try:
            while True:
                self._output(self.menu_text())
                try:
                    choice = parse_menu_choice(self._ask("Select an option: "))
                except CommandError as exc:
                    self._output(str(exc))
                    continue
                if choice == MenuChoice.EXIT:
                    break
                self.handle(choice)
        except _EndOfInput:
            logger.debug("Input closed; ending session")
        self._output(f"Goodbye, {self.account.identifier}! Thanks for trading.")

    def handle(self, choice: MenuChoice) -> None:
        """Run one menu action. Recoverable errors are printed, never raised."""
        portfolio = self.account.portfolio
        try:
            if choice == MenuChoice.VIEW_MARKET:
                self._output(format_market(self.market))
            elif choice == MenuChoice.BUY:
                self._trade(Side.BUY)
            elif choice == MenuChoice.SELL:
                self._trade(Side.SELL)
            elif choice == MenuChoice.VIEW_PORTFOLIO:
                self._output(format_holdings(portfolio, self.market))
            elif choice == MenuChoice.VIEW_TRANSACTIONS:
                self._output(format_transactions(portfolio))
            elif choice == MenuChoice.VIEW_VALUE:
                self._output(format_value(portfolio, self.market))
        except CommandError as exc:
            self._output(str(exc))
        except TradingError as exc:
            logger.info("Action %s failed: %s", choice.name, exc)
            self._output(str(exc))

    def _trade(self, side: Side) -> None:
        symbol = parse_symbol(self._ask(f"Enter stock symbol to {side.name}: "))
        instrument = self.market.get(symbol)
        if instrument is None:
            self._output("Stock not found.")
            return
        verb = "buy" if side is Side.BUY else "sell"
        quantity = parse_quantity(self._ask(f"Enter quantity to {verb}: "))
        portfolio = self.account.portfolio
        result = portfolio.buy(instrument, quantity) if side is Side.BUY else portfolio.sell(instrument, quantity)
        if result.ok:
            past = "Bought" if side is Side.BUY else "Sold"
            self._output(f"{past} {quantity} shares of {instrument.symbol}")
        else:
            self._output(result.message or "Order rejected.")


def build_market(settings: Settings) -> Market:
    if settings.catalog_path is not None:
        logger.info("Loading catalog from %s", settings.catalog_path)
        return load_catalog_csv(settings.catalog_path)
    return default_market()


def main(
    settings: Settings | None = None,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    market = build_market(settings)
    username = settings.username
    while not username:
        try:
            username = input_fn("Enter your username: ").strip()
        except EOFError:
            return
    session = TradingSession(Account.create(username), market, input_fn=input_fn, output_fn=output_fn)
    session.run()
