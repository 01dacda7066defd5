"""
Instrument: a tradable symbol with a name and a current price.

Symbol and name are fixed at construction. The price is mutable but owned by
the Market; change it through Market.set_price. Any assignment is validated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from tradesim_core.errors import InvalidPrice


def to_price(value: Decimal | float | int | str) -> Decimal:
    """Convert to Decimal via str() so 180.12 stays Decimal('180.12')."""
    if isinstance(value, bool):
        raise TypeError("price must be a number, not bool")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"not a price: {value!r}") from exc


def validate_price(value: Decimal | float | int | str) -> Decimal:
    """to_price plus the finite, non-negative rule. Raises InvalidPrice."""
    try:
        price = to_price(value)
    except (TypeError, ValueError) as exc:
        raise InvalidPrice(str(exc)) from exc
    if not price.is_finite() or price < 0:
        raise InvalidPrice(f"price must be a finite number >= 0, got {value!r}")
    return price


def normalize_symbol(symbol: str) -> str:
    return symbol.strip().upper()


@dataclass(eq=False)
class Instrument:
    """Identity (symbol, name) plus current price. Every price assignment is validated."""

    symbol: str
    name: str
    price: Decimal = field(default=Decimal("0"))

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbol", normalize_symbol(self.symbol))
        if not self.symbol:
            raise ValueError("symbol must be non-empty")

    def __setattr__(self, key: str, value: object) -> None:
        if key in ("symbol", "name") and key in self.__dict__:
            raise AttributeError(f"Instrument.{key} is immutable")
        if key == "price":
            value = validate_price(value)
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return f"{self.symbol} - {self.name}: ${self.price:,.2f}"
