"""
Tests for the terminal shell: command parsing, reports, TradingSession, config.
"""

import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from tradesim_core import Account, default_market
from terminal.app import TradingSession, build_market, main
from terminal.commands import CommandError, MenuChoice, parse_menu_choice, parse_quantity, parse_symbol
from terminal.config import Settings
from terminal.report import (
    format_holdings,
    format_market,
    format_transactions,
    format_value,
    holdings_frame,
    transactions_frame,
)


def _scripted(lines):
    """input() replacement: returns lines in order, then raises EOFError."""
    it = iter(lines)

    def _input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


def _run_session(lines, account=None, market=None):
    out: list[str] = []
    account = account or Account.create("alice", clock=lambda: datetime(2024, 1, 15, 10, 0, 0))
    market = market or default_market()
    session = TradingSession(account, market, input_fn=_scripted(lines), output_fn=out.append)
    session.run()
    return out, account, market


# --- commands ---


def test_parse_menu_choice():
    assert parse_menu_choice(" 2 ") == MenuChoice.BUY
    assert parse_menu_choice("0") == MenuChoice.EXIT


def test_parse_menu_choice_errors():
    with pytest.raises(CommandError, match="valid number"):
        parse_menu_choice("buy")
    with pytest.raises(CommandError, match="Invalid choice"):
        parse_menu_choice("9")


def test_parse_symbol():
    assert parse_symbol(" aapl\n") == "AAPL"
    with pytest.raises(CommandError):
        parse_symbol("   ")


@pytest.mark.parametrize("text", ["ten", "", "0", "-4", "1.5", "1_000", "\u0663", "+"])
def test_parse_quantity_rejects(text):
    with pytest.raises(CommandError, match="Invalid quantity"):
        parse_quantity(text)


def test_parse_quantity_ok():
    assert parse_quantity(" 12 ") == 12
    assert parse_quantity("+5") == 5


def test_parse_menu_choice_ascii_digits_only():
    for text in ("0_1", "\u0662", "1.0"):
        with pytest.raises(CommandError, match="valid number"):
            parse_menu_choice(text)


# --- report ---


def test_reports_empty_portfolio():
    account = Account.create("bob")
    market = default_market()
    assert format_holdings(account.portfolio, market).endswith("None.")
    assert format_transactions(account.portfolio).endswith("No transactions.")
    assert format_value(account.portfolio, market) == "Portfolio Value: $0.00"
    assert holdings_frame(account.portfolio, market).empty
    assert transactions_frame(account.portfolio).empty


def test_format_market_lists_catalog_in_order():
    text = format_market(default_market())
    lines = text.splitlines()
    assert lines[0] == "Current Market:"
    assert lines[1] == "AAPL - Apple Inc.: $180.12"
    assert lines[2] == "GOOGL - Alphabet Inc.: $2,750.65"
    assert len(lines) == 5


def test_holdings_and_transactions_frames():
    account = Account.create("bob")
    market = default_market()
    account.portfolio.buy(market.lookup("AAPL"), 10)
    account.portfolio.sell(market.lookup("AAPL"), 4)
    hf = holdings_frame(account.portfolio, market)
    assert list(hf["symbol"]) == ["AAPL"]
    assert hf.iloc[0]["quantity"] == 6
    assert hf.iloc[0]["value"] == Decimal("1080.72")
    tf = transactions_frame(account.portfolio)
    assert list(tf["side"]) == ["BUY", "SELL"]
    assert list(tf["quantity"]) == [10, 4]
    assert "AAPL: 6 shares (Value: $1,080.72)" in format_holdings(account.portfolio, market)


# --- TradingSession ---


def test_session_exit_immediately():
    out, _, _ = _run_session(["0"])
    assert out[-1] == "Goodbye, alice! Thanks for trading."


def test_session_menu_lists_exit_last():
    out, _, _ = _run_session(["0"])
    menu = out[0].splitlines()
    assert menu[1] == "Stock Trading Platform"
    assert menu[2] == "1. View Market"
    assert menu[-1] == "0. Exit"


def test_session_scenario():
    lines = [
        "2", "aapl", "10",
        "3", "AAPL", "15",
        "3", "AAPL", "4",
        "6",
        "0",
    ]
    out, account, market = _run_session(lines)
    assert "Bought 10 shares of AAPL" in out
    assert any(o.startswith("Not enough shares to sell") for o in out)
    assert "Sold 4 shares of AAPL" in out
    assert "Portfolio Value: $1,080.72" in out
    assert dict(account.portfolio.holdings_snapshot()) == {"AAPL": 6}
    assert len(account.portfolio.transaction_log()) == 2


def test_session_bad_inputs_keep_looping():
    lines = [
        "abc",
        "42",
        "2", "ZZZZ",
        "2", "AAPL", "ten",
        "3", "AAPL", "-1",
        "0",
    ]
    out, account, _ = _run_session(lines)
    assert "Please enter a valid number." in out
    assert "Invalid choice. Try again." in out
    assert "Stock not found." in out
    assert out.count("Invalid quantity.") == 2
    assert account.portfolio.transaction_log() == ()
    assert out[-1].startswith("Goodbye")


def test_session_views():
    out, _, _ = _run_session(["1", "2", "TSLA", "2", "4", "5", "0"])
    assert any(o.startswith("Current Market:") for o in out)
    assert any("TSLA: 2 shares (Value: $1,701.00)" in o for o in out)
    assert any("BUY 2 shares of TSLA at $850.50 on 2024-01-15 10:00:00" in o for o in out)


def test_session_end_of_input_says_goodbye():
    out, _, _ = _run_session(["2", "AAPL"])
    assert out[-1] == "Goodbye, alice! Thanks for trading."


# --- config / main ---


def test_settings_defaults():
    s = Settings.from_env({})
    assert s.log_level == logging.WARNING
    assert s.catalog_path is None
    assert s.username is None


def test_settings_from_env():
    s = Settings.from_env(
        {"TRADESIM_LOG_LEVEL": "debug", "TRADESIM_CATALOG": "cat.csv", "TRADESIM_USERNAME": " carol "}
    )
    assert s.log_level == logging.DEBUG
    assert s.catalog_path == Path("cat.csv")
    assert s.username == "carol"


def test_settings_bad_log_level():
    with pytest.raises(ValueError):
        Settings.from_env({"TRADESIM_LOG_LEVEL": "chatty"})


def test_build_market_from_csv(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text("symbol,name,price\nMSFT,Microsoft Corp.,410.50\n")
    market = build_market(Settings(catalog_path=path))
    assert market.symbols() == ["MSFT"]
    assert build_market(Settings()).symbols() == ["AAPL", "GOOGL", "AMZN", "TSLA"]


def test_main_prompts_for_username():
    out: list[str] = []
    main(Settings(), input_fn=_scripted(["", "dave", "0"]), output_fn=out.append)
    assert out[-1] == "Goodbye, dave! Thanks for trading."


def test_main_uses_configured_username():
    out: list[str] = []
    main(Settings(username="erin"), input_fn=_scripted(["0"]), output_fn=out.append)
    assert out[-1] == "Goodbye, erin! Thanks for trading."
