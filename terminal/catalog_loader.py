"""
Seed a Market from tabular data (CSV file or DataFrame).

Expects symbol, name and price columns. Column names are normalized and a few
common aliases are accepted.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from tradesim_core.errors import InvalidPrice
from tradesim_core.instrument import Instrument, validate_price
from tradesim_core.market import Market

CATALOG_COLUMNS = ("symbol", "name", "price")


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase and strip column names; map aliases to symbol/name/price."""
    out = df.copy()
    out.columns = [str(c).lower().strip() for c in out.columns]
    renames = {
        "ticker": "symbol",
        "description": "name",
        "company": "name",
        "last": "price",
        "close": "price",
    }
    out = out.rename(columns={k: v for k, v in renames.items() if k in out.columns and v not in out.columns})
    return out


def load_catalog_frame(df: pd.DataFrame) -> Market:
    """
    Build a Market from a DataFrame, one instrument per row in row order.

    Parameters
    ----------
    df : pd.DataFrame
        Rows of symbol, name, price (columns may be mixed case or aliased).

    Returns
    -------
    Market
        A new Market. Duplicate symbols raise DuplicateSymbol; negative or
        unparsable prices raise InvalidPrice.
    """
    out = _normalize_columns(df)
    missing = [c for c in CATALOG_COLUMNS if c not in out.columns]
    if missing:
        raise ValueError(f"catalog is missing columns: {', '.join(missing)}")
    market = Market()
    for row in out[list(CATALOG_COLUMNS)].itertuples(index=False):
        try:
            price = validate_price(row.price)
        except InvalidPrice as exc:
            raise InvalidPrice(f"{row.symbol}: {exc}") from exc
        market.add(Instrument(symbol=str(row.symbol), name=str(row.name).strip(), price=price))
    return market


def load_catalog_csv(path: str | Path) -> Market:
    """Load a catalog CSV. Prices are read as text so Decimal keeps the digits written."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    return load_catalog_frame(df)


def market_frame(market: Market) -> pd.DataFrame:
    """Catalog as a DataFrame indexed by symbol."""
    rows = [{"symbol": i.symbol, "name": i.name, "price": i.price} for i in market.list_all()]
    df = pd.DataFrame(rows, columns=list(CATALOG_COLUMNS))
    return df.set_index("symbol")
