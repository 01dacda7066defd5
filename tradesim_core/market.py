"""
Market: the catalog of instruments and the single source of price truth.

Symbols are normalized (stripped, upper-cased) inside every operation, so
callers may pass raw user input. Instruments are never removed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from decimal import Decimal

from tradesim_core.errors import DuplicateSymbol, NotFound
from tradesim_core.instrument import Instrument, normalize_symbol, validate_price

logger = logging.getLogger(__name__)

# Seed catalog: (symbol, name, price)
DEFAULT_CATALOG: tuple[tuple[str, str, str], ...] = (
    ("AAPL", "Apple Inc.", "180.12"),
    ("GOOGL", "Alphabet Inc.", "2750.65"),
    ("AMZN", "Amazon.com Inc.", "3400.25"),
    ("TSLA", "Tesla Inc.", "850.50"),
)


class _CatalogView:
    """Restartable view over the catalog; every iter() starts from the top."""

    def __init__(self, catalog: dict[str, Instrument]) -> None:
        self._catalog = catalog

    def __iter__(self) -> Iterator[Instrument]:
        return iter(self._catalog.values())

    def __len__(self) -> int:
        return len(self._catalog)


class Market:
    """
    Mapping from symbol to Instrument, in registration order.
    Constructed explicitly and passed to whatever needs prices.
    """

    def __init__(self, instruments: Iterable[Instrument] = ()) -> None:
        self._catalog: dict[str, Instrument] = {}
        for instrument in instruments:
            self.add(instrument)

    def add(self, instrument: Instrument) -> Instrument:
        """Register an instrument. Symbols are unique."""
        if instrument.symbol in self._catalog:
            raise DuplicateSymbol(f"symbol already listed: {instrument.symbol}")
        self._catalog[instrument.symbol] = instrument
        return instrument

    def lookup(self, symbol: str) -> Instrument:
        """Return the instrument for symbol, or raise NotFound."""
        key = normalize_symbol(symbol)
        try:
            return self._catalog[key]
        except KeyError:
            raise NotFound(key) from None

    def get(self, symbol: str) -> Instrument | None:
        """Non-raising lookup."""
        return self._catalog.get(normalize_symbol(symbol))

    def price_of(self, symbol: str) -> Decimal:
        return self.lookup(symbol).price

    def set_price(self, symbol: str, price: Decimal | float | int | str) -> Instrument:
        """
        Set the current price of symbol in place.

        Raises NotFound for an unknown symbol and InvalidPrice for a negative or
        non-finite price. Nothing changes when either is raised.
        """
        instrument = self.lookup(symbol)
        new_price = validate_price(price)
        old_price = instrument.price
        instrument.price = new_price
        logger.info("Price update: %s %s -> %s", instrument.symbol, old_price, new_price)
        return instrument

    def list_all(self) -> _CatalogView:
        """All instruments in catalog order. Iterable more than once."""
        return _CatalogView(self._catalog)

    def symbols(self) -> list[str]:
        return list(self._catalog)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and normalize_symbol(symbol) in self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def __repr__(self) -> str:
        return f"Market(symbols={self.symbols()!r})"


def default_market() -> Market:
    """A fresh Market seeded with the built-in catalog."""
    return Market(Instrument(symbol, name, price) for symbol, name, price in DEFAULT_CATALOG)
