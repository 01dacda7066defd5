"""
Account: binds a user identifier to exactly one Portfolio.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tradesim_core.portfolio import Clock, Portfolio


@dataclass(frozen=True)
class Account:
    """Named holder of a Portfolio. One per session; nothing is persisted."""

    identifier: str
    portfolio: Portfolio = field(default_factory=Portfolio, compare=False)

    @classmethod
    def create(cls, identifier: str, *, clock: Clock | None = None) -> Account:
        """New account with a fresh, empty Portfolio."""
        name = identifier.strip()
        if not name:
            raise ValueError("account identifier must be non-empty")
        return cls(identifier=name, portfolio=Portfolio(clock=clock))
