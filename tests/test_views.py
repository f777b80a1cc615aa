import io
import pytest

from currency_converter.menu.views import (
    MenuView, format_amount, format_exchange_rate, format_table_row,
)


def test_format_amount_groups_thousands():
    assert format_amount(1234.56) == "1,234.56"
    assert format_amount(1234567.891) == "1,234,567.89"
    assert format_amount(93) == "93.00"
    assert format_amount(0) == "0.00"


def test_format_exchange_rate_six_decimals():
    assert format_exchange_rate(0.93) == "0.930000"
    assert format_exchange_rate(151.5) == "151.500000"


def test_format_table_row_fixed_width():
    assert format_table_row("USD", "US Dollar", 1.0) == "USD \tUS Dollar           \t1.0000    "


def test_read_int_reprompts_until_in_range(view_factory, capsys):
    view = view_factory("abc", "5", "0", "3")
    assert view.read_int("Choice: ", 1, 4) == 3
    out = capsys.readouterr().out
    assert out.count("Choice: ") == 4
    assert "Invalid input. Please enter an integer." in out
    assert out.count("Please enter a number between 1 and 4") == 2


def test_read_non_negative_float(view_factory, capsys):
    view = view_factory("ten", "nan", "-1", "0")
    assert view.read_non_negative_float("Amount: ") == 0.0
    out = capsys.readouterr().out
    assert out.count("Invalid input. Please enter a number.") == 2
    assert "Please enter a positive number" in out


def test_read_currency_uppercases_and_lists_codes(view_factory, capsys):
    view = view_factory("xyz", " eur ")
    assert view.read_currency("Code: ", ["USD", "EUR"]) == "EUR"
    out = capsys.readouterr().out
    assert "Invalid currency code. Supported codes are: USD, EUR" in out


def test_read_line_raises_eof_when_exhausted(view_factory):
    view = view_factory()
    with pytest.raises(EOFError):
        view.read_line("> ")


def test_read_line_uses_input_without_stream(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "  gbp ")
    view = MenuView(use_color=False)
    assert view.read_currency("Code: ", ["GBP"]) == "GBP"


def test_colorize_respects_flag():
    assert MenuView(use_color=False).colorize("hi", "\x1b[31m") == "hi"
    colored = MenuView(use_color=True).colorize("hi", "\x1b[31m")
    assert colored.startswith("\x1b[31mhi")


def test_close_releases_owned_stream():
    stream = io.StringIO("1\n")
    view = MenuView(stream=stream, use_color=False)
    view.close()
    assert stream.closed
    assert view.closed
