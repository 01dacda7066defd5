"""
Parse raw terminal input into typed values.

The core never sees raw text: menu selections become MenuChoice, quantities
become positive ints. Bad input raises CommandError with the message to show.
"""

from __future__ import annotations

from enum import IntEnum


class CommandError(ValueError):
    """Input could not be parsed. str(exc) is the user-facing message."""


class MenuChoice(IntEnum):
    EXIT = 0
    VIEW_MARKET = 1
    BUY = 2
    SELL = 3
    VIEW_PORTFOLIO = 4
    VIEW_TRANSACTIONS = 5
    VIEW_VALUE = 6


MENU_LABELS: dict[MenuChoice, str] = {
    MenuChoice.VIEW_MARKET: "View Market",
    MenuChoice.BUY: "Buy Stock",
    MenuChoice.SELL: "Sell Stock",
    MenuChoice.VIEW_PORTFOLIO: "View Portfolio",
    MenuChoice.VIEW_TRANSACTIONS: "View Transactions",
    MenuChoice.VIEW_VALUE: "View Portfolio Value",
    MenuChoice.EXIT: "Exit",
}


def _parse_int(text: str) -> int:
    """Optional sign plus ASCII digits only; no underscores or other scripts."""
    digits = text.strip()
    if digits[:1] in ("+", "-"):
        digits = digits[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an integer: {text!r}")
    return int(text.strip())


def parse_menu_choice(text: str) -> MenuChoice:
    try:
        number = _parse_int(text)
    except ValueError:
        raise CommandError("Please enter a valid number.") from None
    try:
        return MenuChoice(number)
    except ValueError:
        raise CommandError("Invalid choice. Try again.") from None


def parse_symbol(text: str) -> str:
    symbol = text.strip().upper()
    if not symbol:
        raise CommandError("Please enter a stock symbol.")
    return symbol


def parse_quantity(text: str) -> int:
    """Whole number of shares > 0."""
    try:
        quantity = _parse_int(text)
    except ValueError:
        raise CommandError("Invalid quantity.") from None
    if quantity <= 0:
        raise CommandError("Invalid quantity.")
    return quantity
