"""
Session settings from environment variables.

TRADESIM_LOG_LEVEL  logging level name (default WARNING)
TRADESIM_CATALOG    optional CSV path (symbol,name,price) to seed the Market
TRADESIM_USERNAME   optional account name; skips the username prompt
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LOG_LEVEL_ENV = "TRADESIM_LOG_LEVEL"
CATALOG_ENV = "TRADESIM_CATALOG"
USERNAME_ENV = "TRADESIM_USERNAME"


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    catalog_path: Path | None = None
    username: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        level_name = env.get(LOG_LEVEL_ENV, "").strip().upper()
        level = logging.getLevelName(level_name) if level_name else logging.WARNING
        if not isinstance(level, int):
            raise ValueError(f"{LOG_LEVEL_ENV}: unknown logging level {level_name!r}")
        catalog = env.get(CATALOG_ENV, "").strip()
        username = env.get(USERNAME_ENV, "").strip()
        return cls(
            log_level=level,
            catalog_path=Path(catalog) if catalog else None,
            username=username or None,
        )
