import io

import pytest

from ninetools.bitcoin_exchange import (
    BitcoinExchange,
    ExchangeError,
    InvalidFileError,
    NoDatabaseError,
    check_value,
    is_valid_date,
    main,
)

DB = (
    "date,exchange_rate\n"
    "2009-01-02,0\n"
    "2011-01-03,1\n"
    "2011-01-05,\n"
    "2011-01-09,0.5\n"
    "2012-01-11,1\n"
)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(DB)
    return path


@pytest.fixture
def exchange(db_path):
    return BitcoinExchange(db_path)


@pytest.mark.parametrize(
    "date,expected",
    [
        ("2012-02-29", True),
        ("2011-02-29", False),
        ("2000-02-29", False),
        ("2008-12-31", False),
        ("2009-01-01", True),
        ("2009-13-01", False),
        ("2009-00-10", False),
        ("2009-04-31", False),
        ("2009-04-30", True),
        ("", False),
        ("2001-42-42", False),
    ],
)
def test_is_valid_date(date, expected):
    assert is_valid_date(date) is expected


def test_check_value_accepts_bounds():
    assert check_value(0) == 0
    assert check_value(1000) == 1000


def test_check_value_negative():
    with pytest.raises(ValueError, match="Error: not a positive number"):
        check_value(-1)


def test_check_value_too_large():
    with pytest.raises(ValueError, match="Error: too large a number"):
        check_value(1000.5)


def test_rate_exact_date(exchange):
    assert exchange.rate_for("2011-01-09") == pytest.approx(0.5)


def test_rate_uses_previous_date(exchange):
    assert exchange.rate_for("2011-01-10") == exchange.rate_for("2011-01-09")
    assert exchange.rate_for("2011-01-06") == exchange.rate_for("2011-01-03")


def test_rate_after_last_date(exchange):
    assert exchange.rate_for("2030-01-01") == exchange.rate_for("2012-01-11")


def test_rate_before_first_date_uses_first(exchange):
    assert exchange.rate_for("2009-01-01") == exchange.rate_for("2009-01-02")


def test_empty_database_lookup(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("date,exchange_rate\n")
    with pytest.raises(LookupError):
        BitcoinExchange(path).rate_for("2011-01-03")


def test_rates_success(exchange):
    assert list(exchange.rates(["2011-01-03 | 3"])) == ["2011-01-03 => 3 = 3"]


def test_rates_errors(exchange):
    lines = ["2001-42-42", "2012-01-11 | -1", "2012-01-11 | 2147483648"]
    assert list(exchange.rates(lines)) == [
        "Error: bad input => 2001-42-42",
        "Error: not a positive number",
        "Error: too large a number",
    ]


def test_rates_date_is_first_ten_characters(exchange):
    out = list(exchange.rates(["2012-01-11xyz | 7"]))
    assert out == ["2012-01-11 => 7 = 7"]


def test_show_rates_skips_header(exchange, tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("date | value\n2011-01-03 | 3\n2001-42-42\n")
    out = io.StringIO()
    exchange.show_rates(path, out)
    assert out.getvalue().splitlines() == [
        "2011-01-03 => 3 = 3",
        "Error: bad input => 2001-42-42",
    ]


def test_show_rates_missing_file(exchange, tmp_path):
    with pytest.raises(InvalidFileError, match="could not open file"):
        exchange.show_rates(tmp_path / "missing.txt", io.StringIO())


def test_missing_database(tmp_path):
    with pytest.raises(NoDatabaseError):
        BitcoinExchange(tmp_path / "nope.csv")


def test_errors_share_base(exchange, tmp_path):
    with pytest.raises(ExchangeError):
        BitcoinExchange(tmp_path / "nope.csv")
    with pytest.raises(ExchangeError):
        exchange.show_rates(tmp_path / "missing.txt", io.StringIO())


def test_main_no_args(capsys):
    assert main([]) == 2
    assert capsys.readouterr().out == "Error: could not open file.\n"


def test_main_too_many(capsys):
    assert main(["a", "b"]) == 1
    assert "Too many files" in capsys.readouterr().out


def test_main_missing_database(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["input.txt"]) == 3
    assert "database" in capsys.readouterr().err


def test_main_success(db_path, monkeypatch, capsys):
    monkeypatch.chdir(db_path.parent)
    (db_path.parent / "input.txt").write_text("date | value\n2011-01-03 | 3\n")
    assert main(["input.txt"]) == 0
    assert capsys.readouterr().out == "2011-01-03 => 3 = 3\n"